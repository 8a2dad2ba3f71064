#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve private/public keys.

A private key q is an integer in the range 1..n-1 (n being the curve order),
the associated public key is the curve point Q = q*G.
"""

import secrets
from typing import Optional, Tuple

from eccproto.alias import Curve, Point, RandBytes
from eccproto.curves import DEFAULT_CURVE
from eccproto.exceptions import EccTypeError, EccValueError
from eccproto.scalars import random_scalar
from eccproto.utils import int_repr


def int_from_prv_key(prv_key: int, ec: Curve = DEFAULT_CURVE) -> int:
    "Return a verified-as-valid private key integer."

    if not 0 < prv_key < ec.order:
        raise EccValueError(f"private key not in 1..n-1: {int_repr(prv_key)}")
    return prv_key


def assert_valid_pub_key(Q: Optional[Point], ec: Curve = DEFAULT_CURVE) -> None:
    """Require the public key to be a point of the ec group of order n.

    An Error is raised if not.
    """

    if Q is None:
        raise EccTypeError("missing public key")
    if Q.is_infinity:
        raise EccValueError("not a valid public key: INF")
    if Q.curve is None or Q.curve.name != ec.name:
        raise EccValueError("not a valid public key: point on another curve")
    if not ec.is_on_curve(Q):
        raise EccValueError("not a valid public key: point not on curve")
    # ecpy reduces scalars mod n, so n*Q would always be INF:
    # check (n-1)*Q + Q instead
    if not ((ec.order - 1) * Q + Q).is_infinity:
        raise EccValueError("not a valid public key: order is not n")


def gen_keys(
    prv_key: Optional[int] = None,
    ec: Curve = DEFAULT_CURVE,
    randbytes: RandBytes = secrets.token_bytes,
) -> Tuple[int, Point]:
    """Return a private/public (int, Point) key-pair.

    If the private key is not provided, it is randomly sampled.
    """

    if prv_key is None:
        # q in the range [1, ec.n-1]
        q = random_scalar(ec.order, randbytes)
    else:
        q = int_from_prv_key(prv_key, ec)

    Q = q * ec.generator
    return q, Q
