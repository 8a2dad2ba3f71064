#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Diffie-Hellman elliptic curve key agreement scheme.

Implementation of the Diffie-Hellman key agreement scheme using
elliptic curve cryptography. A key agreement scheme is used
by two entities to establish shared keying data, which will be
later utilized e.g. in symmetric cryptographic scheme.

The two entities must agree on the elliptic curve to use:
as scalar multiplication is commutative, q_U*Q_V = q_U*q_V*G = q_V*Q_U
and both entities obtain the same shared secret point.
"""

from typing import Optional

from eccproto.alias import Curve, Point
from eccproto.curves import DEFAULT_CURVE
from eccproto.ecc.keys import assert_valid_pub_key, int_from_prv_key
from eccproto.exceptions import EccRuntimeError


def diffie_hellman(
    prv_key: int, peer_pub_key: Optional[Point], ec: Curve = DEFAULT_CURVE
) -> Point:
    """Diffie-Hellman elliptic curve key agreement scheme.

    Return the shared secret point prv_key*peer_pub_key.

    http://www.secg.org/sec1-v2.pdf, section 3.3.1
    """

    q = int_from_prv_key(prv_key, ec)
    # None is rejected here too
    assert_valid_pub_key(peer_pub_key, ec)

    shared_secret_point = q * peer_pub_key
    # edge case that cannot be reproduced in the test suite
    if shared_secret_point.is_infinity:
        err_msg = "invalid (INF) shared secret"  # pragma: no cover
        raise EccRuntimeError(err_msg)  # pragma: no cover
    return shared_secret_point
