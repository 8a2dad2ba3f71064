#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Schnorr Signature Algorithm (ECSSA).

Textbook Schnorr signature over an elliptic curve, see
https://web.stanford.edu/class/cs259c/lectures/schnorr.pdf

Signing:

* sample the ephemeral key (nonce) k in [1, n-1], K = k*G
* challenge e = |hf(msg || x_K || y_K)|
* s = k + q*e (mod n)

the signature is the pair (K, s), with the full commitment point K.

Verification checks K + e*Q == s*G.

Differently from BIP340-Schnorr, public keys and commitments
are full curve points (no x-only encoding)
and the challenge does not include the public key.
"""

import logging
import secrets
from dataclasses import dataclass
from hashlib import sha512
from typing import Optional, Tuple, Union

from eccproto.alias import Curve, HashF, Point, RandBytes
from eccproto.curves import DEFAULT_CURVE
from eccproto.ecc.keys import assert_valid_pub_key, int_from_prv_key
from eccproto.exceptions import EccRuntimeError, EccTypeError, EccValueError
from eccproto.hashes import schnorr_challenge
from eccproto.scalars import random_scalar
from eccproto.utils import int_repr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sig:
    """EC-Schnorr signature.

    - R is the commitment curve point
    - s is a scalar, 0 <= s < ec.n (it can be zero)
    """

    R: Point
    s: int

    def assert_valid(self, ec: Curve = DEFAULT_CURVE) -> None:
        # R must be a finite point of the curve
        if self.R.is_infinity:
            raise EccValueError("INF commitment point")
        if self.R.curve is None or self.R.curve.name != ec.name:
            raise EccValueError("commitment point on another curve")
        if not ec.is_on_curve(self.R):
            raise EccValueError("commitment point not on curve")

        # s is a scalar, fail if s is not in [0, n-1]
        if not 0 <= self.s < ec.order:
            raise EccValueError(f"scalar s not in 0..n-1: {int_repr(self.s)}")


def _sig_from(sig: Union[Sig, Tuple[Point, int]]) -> Sig:
    return sig if isinstance(sig, Sig) else Sig(*sig)


def challenge(msg: int, R: Point, hf: HashF = sha512) -> int:
    "Return the challenge binding msg to the commitment point R."
    return schnorr_challenge(msg, R.x, R.y, hf=hf)


def _sign_(e: int, q: int, nonce: int, R: Point, ec: Curve) -> Sig:
    # Private function for testing purposes: it allows to explore all
    # possible value of the challenge e.
    # It assume that q and nonce are in [1, n-1]
    s = (nonce + q * e) % ec.order
    return Sig(R, s)


def sign(
    msg: int,
    prv_key: int,
    nonce: Optional[int] = None,
    ec: Curve = DEFAULT_CURVE,
    hf: HashF = sha512,
    randbytes: RandBytes = secrets.token_bytes,
) -> Sig:
    """EC-Schnorr signature of the integer message msg.

    A given nonce is only meant for testing purposes:
    a nonce must never be reused.
    """

    q = int_from_prv_key(prv_key, ec)

    if nonce is None:
        nonce = random_scalar(ec.order, randbytes)
    elif not 0 < nonce < ec.order:
        raise EccValueError(f"nonce not in 1..n-1: {int_repr(nonce)}")

    R = nonce * ec.generator
    e = challenge(msg, R, hf)
    return _sign_(e, q, nonce, R, ec)


def _assert_as_valid_(e: int, Q: Point, R: Point, s: int, ec: Curve) -> None:
    # Private function for test/dev purposes

    # ecpy reduces e mod n
    K = R + e * Q
    S = s * ec.generator
    if K != S:
        raise EccRuntimeError("signature verification failed")


def assert_as_valid(
    msg: int,
    pub_key: Point,
    sig: Union[Sig, Tuple[Point, int]],
    ec: Curve = DEFAULT_CURVE,
    hf: HashF = sha512,
) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while verify should always return True or False

    assert_valid_pub_key(pub_key, ec)
    sig = _sig_from(sig)
    sig.assert_valid(ec)

    e = challenge(msg, sig.R, hf)
    # second part delegated to helper function
    _assert_as_valid_(e, pub_key, sig.R, sig.s, ec)


def verify(
    msg: int,
    pub_key: Point,
    sig: Union[Sig, Tuple[Point, int]],
    ec: Curve = DEFAULT_CURVE,
    hf: HashF = sha512,
) -> bool:
    """EC-Schnorr signature verification.

    Missing curve or hash function are the only Errors raised.
    """

    if ec is None:
        raise EccTypeError("missing curve")
    if hf is None:
        raise EccTypeError("missing hash function")

    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(msg, pub_key, sig, ec, hf)
    except Exception as e:  # pylint: disable=broad-except
        logger.debug("invalid EC-Schnorr signature: %s", e)
        return False

    return True
