#!/usr/bin/env python3

# Copyright (C) 2023 The ecproj developers
#
# This file is part of ecproj. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecproj including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecproj from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and ZeroDivisionError
from which the ecproj versions are derived.
"""


class ECProjValueError(ValueError):
    pass


class ECProjTypeError(TypeError):
    pass


class DivisionByZero(ECProjValueError, ZeroDivisionError):
    "No modular inverse exists: the divisor is zero in the field."


class PointAtInfinity(ECProjValueError):
    "The identity element has no affine coordinates."
