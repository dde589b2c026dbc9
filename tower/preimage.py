# MIT License
# Copyright (c) 2025 Hashborn

"""
Tower Genesis Preimage

Formats the profile into a fixed byte structure that becomes the input of
the first delay-function proof of a tower. The layout is fixed so it can be
parsed field by field in Move or any other language.

Layout (1024 bytes):
    auth_key         32   hex-decoded, left zero padded
    chain_id         16   decimal ASCII, left zero padded
    iterations        8   u64 little-endian
    security_param    8   u64 little-endian
    scheme_id         1   PIETRZAK = 1, WESOLOWSKI = 2
    tower_link       64   deprecated: hash of the last proof of an existing tower
    statement       895   UTF-8, left zero padded (remainder)
"""

import binascii
import logging
import struct
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from protocol.config.params import CURRENT_VDF_PARAMS, VdfParams
from protocol.crypto.hash import sha256_hex
from protocol.types.common import InvalidHexAuthKey, LengthInvariantViolation, ValidationError
from protocol.types.profile import ProfileConfig
from .padding import pad

logger = logging.getLogger(__name__)

PREIMAGE_BYTES = 1024


@dataclass(frozen=True)
class PreimageField:
    name: str
    offset: int
    width: int

    @property
    def end(self) -> int:
        return self.offset + self.width


def _build_layout(widths: List[Tuple[str, int]]) -> Tuple[PreimageField, ...]:
    fields = []
    offset = 0
    for name, width in widths:
        fields.append(PreimageField(name=name, offset=offset, width=width))
        offset += width
    return tuple(fields)


PREIMAGE_LAYOUT = _build_layout([
    ("auth_key", 32),
    ("chain_id", 16),
    ("iterations", 8),
    ("security_param", 8),
    ("scheme_id", 1),
    ("tower_link", 64),
    ("statement", 895),
])

if PREIMAGE_LAYOUT[-1].end != PREIMAGE_BYTES:
    raise LengthInvariantViolation(
        f"Preimage layout spans {PREIMAGE_LAYOUT[-1].end} bytes, expected {PREIMAGE_BYTES}"
    )


def preimage_hash(preimage: bytes) -> str:
    """SHA256 fingerprint of a preimage (hex)."""
    return sha256_hex(preimage)


class PreimageEncoder:
    """Builds the canonical genesis preimage for a profile."""

    def __init__(self, constants: Optional[VdfParams] = None):
        self.constants = constants if constants is not None else CURRENT_VDF_PARAMS

    def field_values(self, profile: ProfileConfig) -> Dict[str, bytes]:
        """Raw (unpadded) bytes for every layout field."""
        try:
            key_bytes = binascii.unhexlify(profile.auth_key)
        except (binascii.Error, ValueError) as e:
            raise InvalidHexAuthKey(f"Invalid auth key '{profile.auth_key}': {e}")

        return {
            "auth_key": key_bytes,
            "chain_id": str(int(profile.chain_id)).encode("ascii"),
            "iterations": struct.pack("<Q", self.constants.iterations),
            "security_param": struct.pack("<Q", self.constants.security_param),
            "scheme_id": bytes([self.constants.scheme_id]),
            "tower_link": b"",
            "statement": profile.statement.encode("utf-8"),
        }

    def encode(self, profile: ProfileConfig) -> bytes:
        """
        Assemble the 1024 byte preimage.

        Raises:
            InvalidHexAuthKey: auth_key is not valid hex
            FieldTooLong: a field does not fit its column
            LengthInvariantViolation: assembled length is wrong (internal defect)
        """
        values = self.field_values(profile)

        preimage = bytearray()
        for field in PREIMAGE_LAYOUT:
            preimage += pad(values[field.name], field.width, field=field.name)

        if len(preimage) != PREIMAGE_BYTES:
            raise LengthInvariantViolation(
                f"Preimage is the incorrect byte length: {len(preimage)} != {PREIMAGE_BYTES}"
            )

        preimage = bytes(preimage)
        logger.info(
            f"Encoded genesis preimage for chain {int(profile.chain_id)} "
            f"(iterations={self.constants.iterations}): sha256={preimage_hash(preimage)}"
        )
        return preimage


def genesis_preimage(profile: ProfileConfig, constants: Optional[VdfParams] = None) -> bytes:
    """Shortcut for PreimageEncoder(constants).encode(profile)."""
    return PreimageEncoder(constants).encode(profile)


def split_preimage(preimage: bytes) -> Dict[str, bytes]:
    """Slice a preimage back into its (still padded) named fields."""
    if len(preimage) != PREIMAGE_BYTES:
        raise ValidationError(f"Preimage must be {PREIMAGE_BYTES} bytes, got {len(preimage)}")
    return {f.name: bytes(preimage[f.offset:f.end]) for f in PREIMAGE_LAYOUT}
