#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve party.

A party owns its key material on a given curve
and uses it for ECDH key agreement, ECDSA, and EC-Schnorr signatures.

The key pair is generated once: to get a new key pair
a new party must be created.
The ECDH shared secret is returned to the caller and
it is not stored by the party.
"""

import secrets
from hashlib import sha512
from typing import Optional, Tuple, Union

from eccproto.alias import Curve, HashF, Point, RandBytes
from eccproto.curves import DEFAULT_CURVE
from eccproto.ecc import dsa, ssa
from eccproto.ecc.dh import diffie_hellman
from eccproto.ecc.keys import gen_keys
from eccproto.exceptions import EccRuntimeError, EccTypeError


class ECParty:
    "Participant of elliptic curve key agreement and signature schemes."

    def __init__(
        self,
        ec: Curve = DEFAULT_CURVE,
        hf: HashF = sha512,
        randbytes: RandBytes = secrets.token_bytes,
    ) -> None:

        if ec is None:
            raise EccTypeError("missing curve")
        if hf is None:
            raise EccTypeError("missing hash function")
        if randbytes is None:
            raise EccTypeError("missing random source")

        self._ec = ec
        self._hf = hf
        self._randbytes = randbytes
        self._prv_key: Optional[int] = None
        self._pub_key: Optional[Point] = None

    @classmethod
    def generate(
        cls,
        ec: Curve = DEFAULT_CURVE,
        hf: HashF = sha512,
        randbytes: RandBytes = secrets.token_bytes,
        prv_key: Optional[int] = None,
    ) -> "ECParty":
        "Return a new party with its key pair already generated."
        party = cls(ec, hf, randbytes)
        party.gen_key_pair(prv_key)
        return party

    def __repr__(self) -> str:
        # the private key is never shown
        pub_key = "None" if self._pub_key is None else str(self._pub_key)
        return f"ECParty(ec={self._ec.name}, pub_key={pub_key})"

    @property
    def ec(self) -> Curve:
        return self._ec

    @property
    def hf(self) -> HashF:
        return self._hf

    @property
    def base_point(self) -> Point:
        return self._ec.generator

    @property
    def has_keys(self) -> bool:
        return self._prv_key is not None

    @property
    def pub_key(self) -> Point:
        if self._pub_key is None:
            raise EccRuntimeError("key pair not generated yet")
        return self._pub_key

    def gen_key_pair(self, prv_key: Optional[int] = None) -> Point:
        """Generate the key pair and return the public key.

        The private key is randomly sampled, unless provided.
        Keys can be generated only once.
        """

        if self._prv_key is not None:
            raise EccRuntimeError("key pair already generated")
        self._prv_key, self._pub_key = gen_keys(prv_key, self._ec, self._randbytes)
        return self._pub_key

    def _require_prv_key(self) -> int:
        if self._prv_key is None:
            raise EccRuntimeError("private key not generated yet")
        return self._prv_key

    def derive_shared_secret(self, peer_pub_key: Optional[Point]) -> Point:
        "Return the ECDH shared secret point for the peer public key."

        if peer_pub_key is None:
            raise EccTypeError("missing peer public key")
        return diffie_hellman(self._require_prv_key(), peer_pub_key, self._ec)

    def sign_ecdsa(self, msg: int) -> dsa.Sig:
        return dsa.sign(
            msg,
            self._require_prv_key(),
            ec=self._ec,
            hf=self._hf,
            randbytes=self._randbytes,
        )

    def verify_ecdsa(
        self,
        sig: Union[dsa.Sig, Tuple[int, int]],
        ec: Curve,
        pub_key: Point,
        msg: int,
    ) -> bool:
        "Verify the ECDSA signature of msg by pub_key on the curve ec."
        return dsa.verify(msg, pub_key, sig, ec, self._hf)

    def sign_schnorr(self, msg: int) -> ssa.Sig:
        return ssa.sign(
            msg,
            self._require_prv_key(),
            ec=self._ec,
            hf=self._hf,
            randbytes=self._randbytes,
        )

    def verify_schnorr(
        self,
        sig: Union[ssa.Sig, Tuple[Point, int]],
        ec: Curve,
        pub_key: Point,
        msg: int,
    ) -> bool:
        "Verify the EC-Schnorr signature of msg by pub_key on the curve ec."
        return ssa.verify(msg, pub_key, sig, ec, self._hf)
