# MIT License
# Copyright (c) 2025 Hashborn

"""
Tower Proof Preparation

Builds the input of the delay-function proof. Computing and verifying the
proof itself happens elsewhere.
"""

from .padding import pad
from .preimage import (
    PREIMAGE_BYTES,
    PREIMAGE_LAYOUT,
    PreimageEncoder,
    genesis_preimage,
    preimage_hash,
    split_preimage,
)

__all__ = [
    "pad",
    "PREIMAGE_BYTES",
    "PREIMAGE_LAYOUT",
    "PreimageEncoder",
    "genesis_preimage",
    "preimage_hash",
    "split_preimage",
]
