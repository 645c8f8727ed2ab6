#!/usr/bin/env python3

# Copyright (C) 2023 The ecproj developers
#
# This file is part of ecproj. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecproj including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecproj package."

import logging

name = "ecproj"
__version__ = "2023.6.1"
__author__ = "The ecproj developers"
__author_email__ = "devs@ecproj.org"
__copyright__ = "Copyright (C) 2023 The ecproj developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())
