#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eccproto.hashes` module."

from hashlib import sha256, sha512

from eccproto.curves import secp256r1
from eccproto.hashes import (
    challenge_,
    concatenate_digits,
    hash_int,
    schnorr_challenge,
)
from eccproto.utils import bit_length


class FixedDigest:
    "Hash function constructor always returning the same digest."

    def __init__(self, digest: bytes) -> None:
        self._digest = digest

    def __call__(self) -> "FixedDigest":
        return self

    def update(self, data: bytes) -> None:
        pass

    def digest(self) -> bytes:
        return self._digest


def test_hash_int() -> None:
    # 12345 is hashed as b'\x39\x30'
    digest = sha512(b"\x39\x30").digest()
    assert hash_int(12345) == int.from_bytes(digest, "little", signed=True)

    digest = sha256(b"\x00").digest()
    assert hash_int(0, sha256) == int.from_bytes(digest, "little", signed=True)


def test_challenge_truncation() -> None:
    # 2^510: 511 bits
    hf = FixedDigest(b"\x00" * 63 + b"\x40")
    assert challenge_(1, 2 ** 255 + 1, hf) == 2 ** 255
    assert challenge_(1, secp256r1.order, hf) == 2 ** 255
    # no truncation when the order is larger than the digest
    assert challenge_(1, 2 ** 600, hf) == 2 ** 510
    # right shift, not reduction mod n
    assert challenge_(1, 2 ** 511 - 1, hf) == 2 ** 510

    # -2^511: negative digest, 511 bits plus sign
    hf = FixedDigest(b"\x00" * 63 + b"\x80")
    assert challenge_(1, 2 ** 255 + 1, hf) == -(2 ** 256)


def test_challenge_bit_length() -> None:
    n = secp256r1.order
    for msg in (0, 1, -1, 12345, 28475637484, 9996664442221111):
        e = hash_int(msg)
        z = challenge_(msg, n)
        assert bit_length(z) == bit_length(n)
        assert z == e >> (bit_length(e) - bit_length(n))


def test_concatenate_digits() -> None:
    assert concatenate_digits(12, 34, 56) == 123456
    assert concatenate_digits(-12, 34) == -1234
    assert concatenate_digits(0, 7) == 7


def test_schnorr_challenge() -> None:
    assert schnorr_challenge(12, 34, 56) == abs(hash_int(123456))
    assert schnorr_challenge(12, 3456, hf=sha256) == abs(hash_int(123456, sha256))

    for msg in range(-20, 20):
        assert schnorr_challenge(msg, 1, 2) >= 0

    # no truncation: full digest size
    hf = FixedDigest(b"\x00" * 63 + b"\x80")
    assert schnorr_challenge(1, 2, 3, hf=hf) == 2 ** 511
