#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Classic Schnorr signature over a prime order subgroup of Z_p^*.

Key generation:

* private key w in [1, q-1]
* public key v = g^(q-w) mod p, i.e. v = g^-w

Signing:

* sample the ephemeral r in [1, q-1], x = g^r mod p
* challenge e = |hf(msg || x)|
* response y = r + w*e (mod q)

the signature is the pair (e, y).

Verification recomputes x' = g^y * v^e mod p, which is equal to
g^(r + w*e - w*e) = x for a valid signature,
and checks that e == |hf(msg || x')|.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from eccproto.alias import RandBytes
from eccproto.exceptions import EccRuntimeError, EccTypeError, EccValueError
from eccproto.scalars import random_scalar
from eccproto.schnorr.scheme import DEFAULT_SCHEME, SchnorrScheme
from eccproto.utils import int_repr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sig:
    """Classic Schnorr signature.

    - e is the (non-negative) challenge
    - y is the response, 0 <= y < scheme.q
    """

    e: int
    y: int

    def assert_valid(self, scheme: SchnorrScheme = DEFAULT_SCHEME) -> None:
        if self.e < 0:
            raise EccValueError(f"negative challenge: {self.e}")
        if not 0 <= self.y < scheme.q:
            raise EccValueError(f"response y not in 0..q-1: {int_repr(self.y)}")


def _sig_from(sig: Union[Sig, Tuple[int, int]]) -> Sig:
    return sig if isinstance(sig, Sig) else Sig(*sig)


def int_from_prv_key(prv_key: int, scheme: SchnorrScheme = DEFAULT_SCHEME) -> int:
    "Return a verified-as-valid private key integer."

    if not 0 < prv_key < scheme.q:
        raise EccValueError(f"private key not in 1..q-1: {int_repr(prv_key)}")
    return prv_key


def assert_valid_pub_key(pub_key: int, scheme: SchnorrScheme = DEFAULT_SCHEME) -> None:
    """Require the public key to be an element of the subgroup of order q.

    An Error is raised if not.
    """

    if not 0 < pub_key < scheme.p:
        raise EccValueError(f"public key not in 1..p-1: {int_repr(pub_key)}")
    if pow(pub_key, scheme.q, scheme.p) != 1:
        raise EccValueError("public key not in the subgroup of order q")


def gen_keys(
    prv_key: Optional[int] = None,
    scheme: SchnorrScheme = DEFAULT_SCHEME,
    randbytes: RandBytes = secrets.token_bytes,
) -> Tuple[int, int]:
    """Return a private/public (int, int) key-pair.

    If the private key is not provided, it is randomly sampled.
    """

    if prv_key is None:
        w = random_scalar(scheme.q, randbytes)
    else:
        w = int_from_prv_key(prv_key, scheme)

    v = pow(scheme.g, scheme.q - w, scheme.p)
    return w, v


def sign(
    msg: int,
    prv_key: int,
    nonce: Optional[int] = None,
    scheme: SchnorrScheme = DEFAULT_SCHEME,
    randbytes: RandBytes = secrets.token_bytes,
) -> Sig:
    """Classic Schnorr signature of the integer message msg.

    A given nonce is only meant for testing purposes:
    a nonce must never be reused.
    """

    w = int_from_prv_key(prv_key, scheme)

    if nonce is None:
        r = random_scalar(scheme.q, randbytes)
    elif 0 < nonce < scheme.q:
        r = nonce
    else:
        raise EccValueError(f"nonce not in 1..q-1: {int_repr(nonce)}")

    x = pow(scheme.g, r, scheme.p)
    e = scheme.challenge(msg, x)
    y = (r + e * w) % scheme.q
    return Sig(e, y)


def assert_as_valid(
    msg: int,
    pub_key: int,
    sig: Union[Sig, Tuple[int, int]],
    scheme: SchnorrScheme = DEFAULT_SCHEME,
) -> None:
    # Private function for test/dev purposes
    # It raises Errors, while verify should always return True or False

    assert_valid_pub_key(pub_key, scheme)
    sig = _sig_from(sig)
    sig.assert_valid(scheme)

    x = pow(scheme.g, sig.y, scheme.p) * pow(pub_key, sig.e, scheme.p) % scheme.p
    if scheme.challenge(msg, x) != sig.e:
        raise EccRuntimeError("signature verification failed")


def verify(
    msg: int,
    pub_key: int,
    sig: Union[Sig, Tuple[int, int]],
    scheme: SchnorrScheme = DEFAULT_SCHEME,
) -> bool:
    """Classic Schnorr signature verification.

    Besides the challenge equation, public keys outside the subgroup
    of order q and responses y outside 0..q-1 are rejected.
    A missing scheme is the only Error raised.
    """

    if scheme is None:
        raise EccTypeError("missing scheme")

    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(msg, pub_key, sig, scheme)
    except Exception as e:  # pylint: disable=broad-except
        logger.debug("invalid Schnorr signature: %s", e)
        return False

    return True


class SchnorrParty:
    """Participant of the classic Schnorr signature scheme.

    The key pair is generated once: to get a new key pair
    a new party must be created.
    """

    def __init__(
        self,
        scheme: SchnorrScheme = DEFAULT_SCHEME,
        randbytes: RandBytes = secrets.token_bytes,
    ) -> None:

        if scheme is None:
            raise EccTypeError("missing scheme")
        if randbytes is None:
            raise EccTypeError("missing random source")

        self._scheme = scheme
        self._randbytes = randbytes
        self._prv_key: Optional[int] = None
        self._pub_key: Optional[int] = None

    def __repr__(self) -> str:
        # the private key is never shown
        pub_key = "None" if self._pub_key is None else int_repr(self._pub_key)
        return f"SchnorrParty(pub_key={pub_key})"

    @property
    def scheme(self) -> SchnorrScheme:
        return self._scheme

    @property
    def has_keys(self) -> bool:
        return self._prv_key is not None

    @property
    def pub_key(self) -> int:
        if self._pub_key is None:
            raise EccRuntimeError("keys not generated yet")
        return self._pub_key

    def gen_keys(self, prv_key: Optional[int] = None) -> int:
        """Generate the key pair and return the public key.

        The private key is randomly sampled, unless provided.
        Keys can be generated only once.
        """

        if self._prv_key is not None:
            raise EccRuntimeError("keys already generated")
        self._prv_key, self._pub_key = gen_keys(prv_key, self._scheme, self._randbytes)
        return self._pub_key

    def sign_message(self, msg: int) -> Sig:
        if self._prv_key is None:
            raise EccRuntimeError("private key not generated yet")
        return sign(
            msg, self._prv_key, scheme=self._scheme, randbytes=self._randbytes
        )

    def verify_signature(
        self,
        scheme: SchnorrScheme,
        msg: int,
        sig: Union[Sig, Tuple[int, int]],
        pub_key: int,
    ) -> bool:
        "Verify the signature of msg by pub_key within the scheme."
        return verify(msg, pub_key, sig, scheme)
