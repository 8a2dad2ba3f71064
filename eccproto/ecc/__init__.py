#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module eccproto.ecc."""

from eccproto.ecc.dh import diffie_hellman
from eccproto.ecc.keys import assert_valid_pub_key, gen_keys, int_from_prv_key
from eccproto.ecc.party import ECParty
from eccproto.ecc.protocols import ECDHResult, ecdh

__all__ = [
    "diffie_hellman",
    "assert_valid_pub_key",
    "gen_keys",
    "int_from_prv_key",
    "ECParty",
    "ECDHResult",
    "ecdh",
]
