#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curves.

Curve parameters and point arithmetic are provided by ecpy:
this module only looks up the named curves.
NIST P-256 (secp256r1) is the default curve.
"""

from typing import List

from ecpy.curves import Curve as _EcpyCurve
from ecpy.curves import WeierstrassCurve

from eccproto.alias import Curve
from eccproto.exceptions import EccValueError


def curve_names() -> List[str]:
    """Return the names of the supported curves.

    Only short Weierstrass curves are supported:
    Edwards and Montgomery curves provided by ecpy are excluded.
    """

    return [
        name
        for name in _EcpyCurve.get_curve_names()
        if isinstance(_EcpyCurve.get_curve(name), WeierstrassCurve)
    ]


def get_curve(name: str) -> Curve:
    """Return the named curve.

    An Error is raised if the curve is unknown
    or if it is not a short Weierstrass curve.
    """

    ec = _EcpyCurve.get_curve(name)
    if ec is None:
        raise EccValueError(f"unknown curve: {name}")
    if not isinstance(ec, WeierstrassCurve):
        raise EccValueError(f"not a short Weierstrass curve: {name}")
    return ec


secp256r1 = get_curve("secp256r1")
secp256k1 = get_curve("secp256k1")

DEFAULT_CURVE = secp256r1
