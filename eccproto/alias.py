#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable

from ecpy.curves import Curve as _EcpyCurve
from ecpy.curves import Point as _EcpyPoint

# Hash digest constructor, e.g. hashlib.sha512:
# hf() must return an object exposing update() and digest()
HashF = Callable[[], Any]

# Source of cryptographically secure random bytes,
# e.g. secrets.token_bytes: randbytes(size) returns size bytes
RandBytes = Callable[[int], bytes]

# Elliptic curve as provided by ecpy, i.e. an object exposing
# name, size (bit length), field, order, generator, and is_on_curve()
Curve = _EcpyCurve

# Elliptic curve point as provided by ecpy.
# The infinity point is ecpy.curves.Point.infinity(),
# it can be checked with 'Q.is_infinity' and it has no coordinates.
Point = _EcpyPoint
