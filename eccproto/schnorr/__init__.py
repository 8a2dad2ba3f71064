#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module eccproto.schnorr."""

from eccproto.schnorr.party import SchnorrParty, Sig, gen_keys, sign, verify
from eccproto.schnorr.scheme import DEFAULT_SCHEME, SchnorrScheme

__all__ = [
    "SchnorrParty",
    "Sig",
    "gen_keys",
    "sign",
    "verify",
    "DEFAULT_SCHEME",
    "SchnorrScheme",
]
