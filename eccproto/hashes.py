#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

Messages are integers: they are hashed as
little-endian two's complement octets (see eccproto.utils)
and the resulting digest is read back as a signed little-endian integer.
"""

from hashlib import sha512

from eccproto.alias import HashF
from eccproto.utils import bit_length, bytes_from_int, int_from_bytes


def hash_int(i: int, hf: HashF = sha512) -> int:
    "Return the (signed) integer value of the hf digest of i."

    h = hf()
    h.update(bytes_from_int(i))
    return int_from_bytes(h.digest())


def challenge_(msg: int, n: int, hf: HashF = sha512) -> int:
    """Return the ECDSA challenge z for the message msg.

    The message digest is truncated to the bit length of the
    group order n: exceeding bits are discarded by right shift,
    no modular reduction is performed.
    Steps numbering follows SEC 1 v.2 section 4.1.3
    """

    e = hash_int(msg, hf)  # 4

    # leftmost bits of e
    e_len, n_len = bit_length(e), bit_length(n)
    return e if e_len < n_len else e >> (e_len - n_len)  # 5


def concatenate_digits(*values: int) -> int:
    "Return the integer whose decimal string is the concatenation of values."

    return int("".join(str(value) for value in values))


def schnorr_challenge(msg: int, *values: int, hf: HashF = sha512) -> int:
    """Return the Schnorr challenge binding msg to the commitment values.

    The decimal representations of the message and of the commitment
    (x and y of a curve point, or a group element) are concatenated,
    then hashed: the challenge is the absolute value of the digest.
    """

    return abs(hash_int(concatenate_digits(msg, *values), hf))
