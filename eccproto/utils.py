#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Integers are serialized as little-endian two's complement
octet sequences of minimal size,
i.e. the most significant bit of the last byte is the sign bit:

* 0 is b'\\x00'
* 127 is b'\\x7f'
* 128 is b'\\x80\\x00'
* -1 is b'\\xff'

This is the octet convention used when hashing integers
(messages, challenges, group elements) throughout eccproto.
"""

from eccproto.exceptions import EccValueError

HEX_THRESHOLD = 0xFFFFFFFF


def hex_string(i: int) -> str:
    """Return a hex-string from a positive integer.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    if i < 0:
        raise EccValueError(f"negative integer: {i}")
    a_str = hex(i)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, j - 8) : j]) for j in indx]
    result = " ".join(lresult)
    return result.upper()


def int_repr(i: int) -> str:
    "Return i as decimal string, or as quoted hex-string if it is large."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


def bit_length(i: int) -> int:
    """Return the two's complement bit length, sign bit excluded.

    For non-negative integers it is the same as int.bit_length(),
    while e.g. bit_length(-1) == 0 and bit_length(-128) == 7.
    """

    return i.bit_length() if i >= 0 else (~i).bit_length()


def bytes_from_int(i: int) -> bytes:
    "Return the minimal little-endian two's complement octets of i."

    # bit_length bits, plus a sign bit
    size = bit_length(i) // 8 + 1
    return i.to_bytes(size, byteorder="little", signed=True)


def int_from_bytes(octets: bytes) -> int:
    "Return the int of little-endian two's complement octets."

    return int.from_bytes(octets, byteorder="little", signed=True)
