#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Random scalar sampling.

Private keys, ephemeral nonces, and group exponents are
sampled in [1, n-1] by rejection sampling:
ceil(n.bit_length() / 8) random bytes are taken
as a big-endian non-negative integer and reduced mod n,
until the result is not zero.

As the number of bytes is sized to the bound n
(and not oversampled), the result is slightly biased
toward small values when n is not close to a power of 256.
"""

import logging
import secrets
from math import ceil

from eccproto.alias import RandBytes
from eccproto.exceptions import EccRuntimeError, EccValueError
from eccproto.utils import int_repr

logger = logging.getLogger(__name__)

# with n >= 2 the probability of a zero draw is at most 1/2:
# reaching this limit means a broken random source
MAX_ATTEMPTS = 256


def random_scalar(n: int, randbytes: RandBytes = secrets.token_bytes) -> int:
    """Return a random integer in [1, n-1].

    Exceptions raised by randbytes are not caught.
    """

    if n < 2:
        raise EccValueError(f"n not in 2..: {int_repr(n)}")

    size = ceil(n.bit_length() / 8)
    for attempt in range(MAX_ATTEMPTS):
        octets = randbytes(size)
        if len(octets) != size:
            err_msg = f"random source returned {len(octets)} bytes"
            err_msg += f" instead of {size}"
            raise EccRuntimeError(err_msg)
        scalar = int.from_bytes(octets, byteorder="big", signed=False) % n
        if scalar != 0:
            return scalar
        logger.debug("zero scalar drawn (attempt %d), resampling", attempt + 1)

    raise EccRuntimeError(f"no valid scalar after {MAX_ATTEMPTS} attempts")
