#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Implementation according to SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

Messages are integers, hashed as little-endian two's complement octets;
the digest is truncated (not reduced) to the bit length of the curve order
(see eccproto.hashes.challenge_).

The ephemeral key (nonce) is randomly sampled for each signature.
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
from eccproto.hashes import challenge_
from eccproto.number_theory import mod_inv
from eccproto.scalars import MAX_ATTEMPTS, random_scalar
from eccproto.utils import int_repr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sig:
    """ECDSA signature.

    Validity is not checked at construction:
    it is checked at verification time against the verifier curve.
    """

    # scalar, 0 < r < ec.n (ec.n is the curve order)
    r: int
    # scalar, 0 < s < ec.n (ec.n is the curve order)
    s: int

    def assert_valid(self, ec: Curve = DEFAULT_CURVE) -> None:
        # r is a scalar, fail if r is not in [1, n-1]
        if not 0 < self.r < ec.order:
            raise EccValueError(f"scalar r not in 1..n-1: {int_repr(self.r)}")

        # s is a scalar, fail if s is not in [1, n-1]
        if not 0 < self.s < ec.order:
            raise EccValueError(f"scalar s not in 1..n-1: {int_repr(self.s)}")


def _sig_from(sig: Union[Sig, Tuple[int, int]]) -> Sig:
    return sig if isinstance(sig, Sig) else Sig(*sig)


def _sign_(c: int, q: int, nonce: int, ec: Curve) -> Sig:
    # Private function for testing purposes: it allows to explore all
    # possible value of the challenge c.
    # It assume that q and nonce are in [1, n-1]
    # Steps numbering follows SEC 1 v.2 section 4.1.3
    K = nonce * ec.generator  # 1

    # mod n makes the affine x_K-coordinate a scalar
    r = K.x % ec.order  # 2, 3
    if r == 0:  # r≠0 required as it multiplies the public key
        raise EccRuntimeError("failed to sign: r = 0")

    s = mod_inv(nonce, ec.order) * (c + r * q) % ec.order  # 6
    if s == 0:  # s≠0 required as verify will need the inverse of s
        raise EccRuntimeError("failed to sign: s = 0")

    return Sig(r, s)


def sign(
    msg: int,
    prv_key: int,
    nonce: Optional[int] = None,
    ec: Curve = DEFAULT_CURVE,
    hf: HashF = sha512,
    randbytes: RandBytes = secrets.token_bytes,
) -> Sig:
    """ECDSA signature of the integer message msg.

    A fresh random nonce is sampled for each attempt,
    until both r and s are not zero.
    A given nonce is only meant for testing purposes:
    in that case no resampling is possible.
    """

    # the secret key q: an integer in the range 1..n-1.
    q = int_from_prv_key(prv_key, ec)

    # the challenge
    c = challenge_(msg, ec.order, hf)  # 4, 5

    if nonce is not None:
        if not 0 < nonce < ec.order:
            raise EccValueError(f"nonce not in 1..n-1: {int_repr(nonce)}")
        return _sign_(c, q, nonce, ec)

    for _ in range(MAX_ATTEMPTS):
        # nonce: an integer in the range 1..n-1.
        nonce = random_scalar(ec.order, randbytes)  # 1
        try:
            return _sign_(c, q, nonce, ec)
        except EccRuntimeError as e:
            logger.debug("ECDSA nonce rejected: %s", e)

    raise EccRuntimeError(f"failed to sign after {MAX_ATTEMPTS} nonces")


def _assert_as_valid_(c: int, Q: Point, r: int, s: int, ec: Curve) -> None:
    # Private function for test/dev purposes
    # Steps numbering follows SEC 1 v.2 section 4.1.4

    w = mod_inv(s, ec.order)
    u = c * w % ec.order
    v = r * w % ec.order  # 4
    # Let K = u*G + v*Q.
    K = u * ec.generator + v * Q  # 5

    # Fail if infinite(K).
    if K.is_infinity:  # 5
        raise EccRuntimeError("invalid (INF) key")

    # Fail if r ≠ x_K %n.
    if r != K.x % ec.order:  # 6, 7, 8
        raise EccRuntimeError("signature verification failed")


def assert_as_valid(
    msg: int,
    pub_key: Point,
    sig: Union[Sig, Tuple[int, int]],
    ec: Curve = DEFAULT_CURVE,
    hf: HashF = sha512,
) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while verify should always return True or False

    assert_valid_pub_key(pub_key, ec)  # 1
    sig = _sig_from(sig)
    sig.assert_valid(ec)  # 1

    c = challenge_(msg, ec.order, hf)  # 2, 3
    # second part delegated to helper function
    _assert_as_valid_(c, pub_key, sig.r, sig.s, ec)


def verify(
    msg: int,
    pub_key: Point,
    sig: Union[Sig, Tuple[int, int]],
    ec: Curve = DEFAULT_CURVE,
    hf: HashF = sha512,
) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4).

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
        logger.debug("invalid ECDSA signature: %s", e)
        return False

    return True
