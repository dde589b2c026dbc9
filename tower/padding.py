# MIT License
# Copyright (c) 2025 Hashborn

from protocol.types.common import FieldTooLong

def pad(data: bytes, width: int, field: str = "field") -> bytes:
    """
    Left-pads data with zero bytes to exactly `width` bytes.

    The content ends up right-aligned in the field. Data already `width`
    bytes long is returned unchanged; longer data raises FieldTooLong.
    """
    if len(data) > width:
        raise FieldTooLong(field, len(data), width)
    if len(data) == width:
        return bytes(data)
    return bytes(width - len(data)) + bytes(data)
