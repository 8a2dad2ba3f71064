#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Complete runs of elliptic curve protocols between two parties."

import secrets
from dataclasses import dataclass
from hashlib import sha512

from eccproto.alias import Curve, HashF, Point, RandBytes
from eccproto.curves import DEFAULT_CURVE
from eccproto.ecc.party import ECParty


@dataclass(frozen=True)
class ECDHResult:
    alice: ECParty
    bob: ECParty
    alice_secret: Point
    bob_secret: Point


def ecdh(
    ec: Curve = DEFAULT_CURVE,
    hf: HashF = sha512,
    randbytes: RandBytes = secrets.token_bytes,
) -> ECDHResult:
    """Run the ECDH key agreement between two new parties, Alice and Bob.

    Both parties generate their key pair, exchange the public keys,
    and derive the shared secret: the two secrets are the same point.
    """

    alice = ECParty(ec, hf, randbytes)
    bob = ECParty(ec, hf, randbytes)

    alice_pub_key = alice.gen_key_pair()
    bob_pub_key = bob.gen_key_pair()

    alice_secret = alice.derive_shared_secret(bob_pub_key)
    bob_secret = bob.derive_shared_secret(alice_pub_key)
    return ECDHResult(alice, bob, alice_secret, bob_secret)
