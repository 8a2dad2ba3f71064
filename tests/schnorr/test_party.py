#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eccproto.schnorr.party` module."

from hashlib import sha256

import pytest

from eccproto.exceptions import EccRuntimeError, EccTypeError, EccValueError
from eccproto.schnorr import DEFAULT_SCHEME, SchnorrParty, SchnorrScheme
from eccproto.schnorr.party import (
    Sig,
    assert_as_valid,
    assert_valid_pub_key,
    gen_keys,
    int_from_prv_key,
    sign,
    verify,
)
from tests.fake_random import randbytes_from

small_scheme = SchnorrScheme(48731, 443, 11444)


def test_gen_keys() -> None:
    for scheme in (DEFAULT_SCHEME, small_scheme):
        w, v = gen_keys(scheme=scheme)
        assert 0 < w < scheme.q
        assert pow(scheme.g, w, scheme.p) * v % scheme.p == 1
        assert_valid_pub_key(v, scheme)

    w, v = gen_keys(1, small_scheme)
    assert v == pow(small_scheme.g, small_scheme.q - 1, small_scheme.p)

    w, v = gen_keys(scheme=small_scheme, randbytes=randbytes_from(0, 443, 5))
    assert w == 5

    err_msg = "private key not in 1..q-1: "
    for prv_key in (0, small_scheme.q):
        with pytest.raises(EccValueError, match=err_msg):
            int_from_prv_key(prv_key, small_scheme)
        with pytest.raises(EccValueError, match=err_msg):
            gen_keys(prv_key, small_scheme)


def test_invalid_pub_key() -> None:
    scheme = small_scheme
    for pub_key in (0, scheme.p, scheme.p + 1):
        with pytest.raises(EccValueError, match="public key not in 1..p-1: "):
            assert_valid_pub_key(pub_key, scheme)

    # p-1 has order 2
    err_msg = "public key not in the subgroup of order q"
    with pytest.raises(EccValueError, match=err_msg):
        assert_valid_pub_key(scheme.p - 1, scheme)


def test_signature() -> None:
    for scheme in (DEFAULT_SCHEME, small_scheme):
        w, v = gen_keys(scheme=scheme)
        for msg in (123456789, 987654321):
            sig = sign(msg, w, scheme=scheme)
            assert sig.e >= 0
            assert 0 <= sig.y < scheme.q
            assert verify(msg, v, sig, scheme)
            assert_as_valid(msg, v, sig, scheme)
            assert verify(msg, v, (sig.e, sig.y), scheme)

            # wrong message
            assert not verify(msg + 1, v, sig, scheme)
            err_msg = "signature verification failed"
            with pytest.raises(EccRuntimeError, match=err_msg):
                assert_as_valid(msg + 1, v, sig, scheme)

            # tampered signature
            assert not verify(msg, v, Sig(sig.e + 1, sig.y), scheme)
            assert not verify(msg, v, Sig(sig.e, (sig.y + 1) % scheme.q), scheme)


def test_given_nonce() -> None:
    scheme = small_scheme
    w, v = gen_keys(7, scheme)
    msg = 12345

    sig = sign(msg, w, 11, scheme)
    x = pow(scheme.g, 11, scheme.p)
    e = scheme.challenge(msg, x)
    assert sig == Sig(e, (11 + e * w) % scheme.q)
    assert verify(msg, v, sig, scheme)

    assert sign(msg, w, scheme=scheme, randbytes=randbytes_from(11)) == sig

    for nonce in (-1, 0, scheme.q):
        with pytest.raises(EccValueError, match="nonce not in 1..q-1: "):
            sign(msg, w, nonce, scheme)


def test_invalid_signatures() -> None:
    scheme = small_scheme
    w, v = gen_keys(scheme=scheme)
    msg = 12345
    sig = sign(msg, w, scheme=scheme)

    invalid_sig = Sig(-sig.e, sig.y)
    assert not verify(msg, v, invalid_sig, scheme)
    with pytest.raises(EccValueError, match="negative challenge: "):
        invalid_sig.assert_valid(scheme)

    for y in (-1, scheme.q):
        invalid_sig = Sig(sig.e, y)
        assert not verify(msg, v, invalid_sig, scheme)
        with pytest.raises(EccValueError, match="response y not in 0..q-1: "):
            assert_as_valid(msg, v, invalid_sig, scheme)

    # invalid public keys
    assert not verify(msg, 0, sig, scheme)
    assert not verify(msg, scheme.p - 1, sig, scheme)
    assert not verify(msg, None, sig, scheme)

    # different scheme
    assert not verify(msg, v, sig, DEFAULT_SCHEME)
    other_hf = SchnorrScheme(scheme.p, scheme.q, scheme.g, sha256)
    assert not verify(msg, v, sig, other_hf)

    with pytest.raises(EccTypeError, match="missing scheme"):
        verify(msg, v, sig, None)


def test_party() -> None:
    alice = SchnorrParty()
    assert alice.scheme is DEFAULT_SCHEME
    assert not alice.has_keys
    assert repr(alice) == "SchnorrParty(pub_key=None)"

    with pytest.raises(EccRuntimeError, match="keys not generated yet"):
        alice.pub_key
    with pytest.raises(EccRuntimeError, match="private key not generated yet"):
        alice.sign_message(12345)

    v = alice.gen_keys()
    assert alice.has_keys
    assert alice.pub_key == v
    assert "pub_key=" in repr(alice)

    with pytest.raises(EccRuntimeError, match="keys already generated"):
        alice.gen_keys()

    bob = SchnorrParty()
    for msg in (12345, 28475637484, 9996664442221111):
        sig = alice.sign_message(msg)
        assert bob.verify_signature(alice.scheme, msg, sig, alice.pub_key)
        assert not bob.verify_signature(alice.scheme, msg + 1, sig, alice.pub_key)

    # signatures are bound to the signer key
    carol = SchnorrParty()
    carol.gen_keys()
    sig = alice.sign_message(12345)
    assert not bob.verify_signature(alice.scheme, 12345, sig, carol.pub_key)


def test_party_small_scheme() -> None:
    alice = SchnorrParty(small_scheme, randbytes_from(5, 7))
    v = alice.gen_keys()
    assert v == gen_keys(5, small_scheme)[1]
    assert repr(alice) == f"SchnorrParty(pub_key={v})"

    sig = alice.sign_message(12345)
    assert sig == sign(12345, 5, 7, small_scheme)

    bob = SchnorrParty(small_scheme)
    assert bob.verify_signature(small_scheme, 12345, sig, alice.pub_key)


def test_party_missing_arguments() -> None:
    with pytest.raises(EccTypeError, match="missing scheme"):
        SchnorrParty(None)
    with pytest.raises(EccTypeError, match="missing random source"):
        SchnorrParty(randbytes=None)

    with pytest.raises(EccTypeError, match="missing scheme"):
        SchnorrParty().verify_signature(None, 12345, Sig(1, 1), 1)
