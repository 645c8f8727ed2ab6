#!/usr/bin/env python3

# Copyright (C) 2023 The ecproj developers
#
# This file is part of ecproj. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecproj including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# hex-string or bytes representation of an int
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "DEADBEEF 00000000"
# "0xdeadbeef"
#
# use ecproj.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates.
# The infinity point has no affine representation.
Point = Tuple[int, int]

