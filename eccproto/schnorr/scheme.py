#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Schnorr scheme domain parameters.

The classic Schnorr signature works in the subgroup of order q
of the multiplicative group of integers modulo the prime p,
with q a prime divisor of p-1, generated by g: g^q = 1 (mod p).

The default domain parameters are the 1024-bit MODP group
with 160-bit prime order subgroup of RFC 5114, section 2.1:

https://tools.ietf.org/html/rfc5114#section-2.1
"""

from dataclasses import dataclass
from hashlib import sha512

from eccproto.alias import HashF
from eccproto.exceptions import EccRuntimeError, EccTypeError, EccValueError
from eccproto.hashes import schnorr_challenge
from eccproto.utils import int_repr

RFC5114_P = int(
    "B10B8F96A080E01DDE92DE5EAE5D54EC52C99FBCFB06A3C69A6A9DCA52D23B61"
    "6073E28675A23D189838EF1E2EE652C013ECB4AEA906112324975C3CD49B83BF"
    "ACCBDD7D90C4BD7098488E9C219A73724EFFD6FAE5644738FAA31A4FF55BCCC0"
    "A151AF5F0DC8B4BD45BF37DF365C1A65E68CFDA76D4DA708DF1FB2BC2E4A4371",
    16,
)
RFC5114_Q = int("F518AA8781A8DF278ABA4E7D64B7CB9D49462353", 16)
RFC5114_G = int(
    "A4D1CBD5C3FD34126765A442EFB99905F8104DD258AC507FD6406CFF14266D31"
    "266FEA1E5C41564B777E690F5504F213160217B4B01B886A5E91547F9E2749F4"
    "D7FBD7D3B9A92EE1909D0D2263F80A76A6A24C087A091F531DBF0A0169B6A28A"
    "D662A4D18E73AFA32D779D5918D08BC8858F4DCEF97C2A24855E6EEB22B3B2E5",
    16,
)


@dataclass(frozen=True)
class SchnorrScheme:
    """Schnorr scheme domain parameters and hash function.

    Domain parameters are checked at construction,
    then the scheme is immutable and can be shared among parties.
    Primality of p and q is not checked.
    """

    p: int = RFC5114_P
    q: int = RFC5114_Q
    g: int = RFC5114_G
    hf: HashF = sha512

    def __post_init__(self) -> None:
        if self.hf is None:
            raise EccTypeError("missing hash function")

        if self.p < 2:
            raise EccValueError(f"p not in 2..: {int_repr(self.p)}")
        if self.q < 2:
            raise EccValueError(f"q not in 2..: {int_repr(self.q)}")

        if not 1 <= self.g <= self.p:
            raise EccValueError(f"g not in 1..p: {int_repr(self.g)}")

        if pow(self.g, self.q, self.p) != 1:
            raise EccRuntimeError("g^q != 1 mod p")

    def __str__(self) -> str:
        result = "SchnorrScheme"
        result += f"\n p = {int_repr(self.p)}"
        result += f"\n q = {int_repr(self.q)}"
        result += f"\n g = {int_repr(self.g)}"
        return result

    def challenge(self, msg: int, x: int) -> int:
        "Return the challenge binding msg to the group element x."
        return schnorr_challenge(msg, x, hf=self.hf)


DEFAULT_SCHEME = SchnorrScheme()
