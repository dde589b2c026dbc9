# MIT License
# Copyright (c) 2025 Hashborn

"""
Tower Preimage Tests

Layout, padding and rejection rules of the 1024 byte genesis preimage.
"""

import struct

import pytest

from protocol.config.params import VDF_PARAMS, VdfParams
from protocol.types.common import (
    FieldTooLong,
    InvalidHexAuthKey,
    NamedChain,
    PreimageError,
    ValidationError,
)
from protocol.types.profile import ProfileConfig
from tower.padding import pad
from tower.preimage import (
    PREIMAGE_BYTES,
    PREIMAGE_LAYOUT,
    PreimageEncoder,
    genesis_preimage,
    preimage_hash,
    split_preimage,
)

AUTH_KEY = "4b2e1f" * 10 + "a0b1"     # 32 bytes
PARAMS = VdfParams(iterations=100, security_param=350)


@pytest.fixture
def profile():
    return ProfileConfig(auth_key=AUTH_KEY, chain_id=NamedChain.TESTING, statement="hello")


# --- Padding ---

def test_pad_shorter_left_pads():
    assert pad(b"abc", 6) == b"\x00\x00\x00abc"


def test_pad_exact_width_unchanged():
    assert pad(b"abcdef", 6) == b"abcdef"


def test_pad_empty():
    assert pad(b"", 4) == bytes(4)


def test_pad_too_long():
    with pytest.raises(FieldTooLong) as exc:
        pad(b"abcdefg", 6, field="demo")

    assert exc.value.field == "demo"
    assert exc.value.length == 7
    assert exc.value.limit == 6
    assert "6 bytes" in str(exc.value) and "7 bytes" in str(exc.value)


# --- Layout ---

def test_layout_is_contiguous():
    offset = 0
    for field in PREIMAGE_LAYOUT:
        assert field.offset == offset
        offset = field.end
    assert offset == PREIMAGE_BYTES == 1024
    assert [f.name for f in PREIMAGE_LAYOUT] == [
        "auth_key", "chain_id", "iterations", "security_param",
        "scheme_id", "tower_link", "statement",
    ]


# --- Encoding ---

def test_preimage_fields(profile):
    preimage = genesis_preimage(profile, PARAMS)
    fields = split_preimage(preimage)

    assert len(preimage) == 1024
    assert fields["auth_key"] == bytes.fromhex(AUTH_KEY)
    assert fields["chain_id"] == bytes(15) + b"4"
    assert fields["iterations"] == struct.pack("<Q", 100)
    assert fields["security_param"] == struct.pack("<Q", 350)
    assert fields["scheme_id"] == b"\x01"
    assert fields["tower_link"] == bytes(64)
    assert fields["statement"] == bytes(890) + b"hello"


def test_short_auth_key_is_left_padded():
    profile = ProfileConfig(auth_key="0a0b", chain_id=1, statement="")
    fields = split_preimage(genesis_preimage(profile, PARAMS))
    assert fields["auth_key"] == bytes(30) + b"\x0a\x0b"


def test_three_byte_statement():
    profile = ProfileConfig(auth_key=AUTH_KEY, chain_id=1, statement="abc")
    preimage = genesis_preimage(profile, PARAMS)

    statement = preimage[-895:]
    assert statement[:892] == bytes(892)
    assert statement[892:] == b"abc"


def test_full_width_statement_verbatim():
    text = "x" * 895
    profile = ProfileConfig(auth_key=AUTH_KEY, chain_id=1, statement=text)

    preimage = genesis_preimage(profile, PARAMS)

    assert len(preimage) == 1024
    assert preimage[-895:] == text.encode()


@pytest.mark.parametrize("statement", ["", "a", "ünïcödé ✓", "y" * 894])
def test_length_is_always_1024(statement):
    profile = ProfileConfig(auth_key=AUTH_KEY, chain_id=NamedChain.MAINNET, statement=statement)
    assert len(genesis_preimage(profile, PARAMS)) == PREIMAGE_BYTES


def test_statement_too_long():
    profile = ProfileConfig(auth_key=AUTH_KEY, chain_id=1, statement="z" * 896)

    with pytest.raises(FieldTooLong) as exc:
        genesis_preimage(profile, PARAMS)

    assert exc.value.field == "statement"
    assert exc.value.length == 896
    assert exc.value.limit == 895


def test_statement_limit_is_in_bytes_not_chars():
    # 448 two-byte characters = 896 bytes
    profile = ProfileConfig(auth_key=AUTH_KEY, chain_id=1, statement="é" * 448)
    with pytest.raises(FieldTooLong):
        genesis_preimage(profile, PARAMS)


def test_auth_key_too_long():
    profile = ProfileConfig(auth_key="ab" * 33, chain_id=1, statement="")

    with pytest.raises(FieldTooLong) as exc:
        genesis_preimage(profile, PARAMS)

    assert exc.value.field == "auth_key"


def test_chain_id_too_long():
    profile = ProfileConfig(auth_key=AUTH_KEY, chain_id=10**16, statement="")
    with pytest.raises(FieldTooLong):
        genesis_preimage(profile, PARAMS)


@pytest.mark.parametrize("auth_key", ["not-hex", "abc", "0x" + "ab" * 4, "zz" * 16])
def test_invalid_hex_auth_key(auth_key):
    profile = ProfileConfig(auth_key=auth_key, chain_id=1, statement="")

    with pytest.raises(InvalidHexAuthKey):
        genesis_preimage(profile, PARAMS)


def test_error_hierarchy():
    assert issubclass(FieldTooLong, PreimageError)
    assert issubclass(FieldTooLong, ValidationError)
    assert issubclass(InvalidHexAuthKey, ValidationError)


def test_deterministic(profile):
    first = genesis_preimage(profile, PARAMS)
    second = PreimageEncoder(PARAMS).encode(profile.model_copy())
    assert first == second
    assert preimage_hash(first) == preimage_hash(second)


def test_binding_changes_output(profile):
    """Any change of identity, chain, difficulty or statement changes the preimage."""
    base = genesis_preimage(profile, PARAMS)

    variants = [
        genesis_preimage(profile.model_copy(update={"chain_id": 1}), PARAMS),
        genesis_preimage(profile.model_copy(update={"statement": "hellp"}), PARAMS),
        genesis_preimage(profile.model_copy(update={"auth_key": "00" + AUTH_KEY[2:]}), PARAMS),
        genesis_preimage(profile, VdfParams(iterations=101, security_param=350)),
    ]
    for variant in variants:
        assert variant != base


def test_default_constants_used(profile, monkeypatch):
    monkeypatch.setattr("tower.preimage.CURRENT_VDF_PARAMS", VDF_PARAMS["test"])

    fields = split_preimage(PreimageEncoder().encode(profile))

    assert fields["iterations"] == struct.pack("<Q", VDF_PARAMS["test"].iterations)


def test_split_rejects_wrong_length():
    with pytest.raises(ValidationError):
        split_preimage(bytes(1023))
