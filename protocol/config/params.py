# MIT License
# Copyright (c) 2025 Hashborn

import os
from dataclasses import dataclass
from typing import Dict
from ..types.common import VdfScheme

# Global Constants
U64_MAX = 2**64 - 1
LEGACY_ADDRESS_LENGTH = 16          # bytes; 32 hex chars

# Proofs anchored at genesis always use the Pietrzak construction
VDF_SCHEME_ID = VdfScheme.PIETRZAK


@dataclass(frozen=True)
class VdfParams:
    """Delay function difficulty for the genesis proof."""
    iterations: int          # sequential squarings
    security_param: int      # RSA group size in bits

    def __post_init__(self):
        for name in ("iterations", "security_param"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= U64_MAX:
                raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value!r}")

    @property
    def scheme_id(self) -> int:
        return int(VDF_SCHEME_ID)


VDF_PARAMS: Dict[str, VdfParams] = {
    "mainnet": VdfParams(
        iterations=3_000_000_000,
        security_param=350,
    ),
    # Fast proofs for local tooling and CI
    "test": VdfParams(
        iterations=100,
        security_param=350,
    ),
}


def get_vdf_params() -> VdfParams:
    """Selects the parameter set from NODE_ENV ("test" -> test, else mainnet)."""
    if os.environ.get("NODE_ENV", "").lower() == "test":
        return VDF_PARAMS["test"]
    return VDF_PARAMS["mainnet"]


# Resolved once at import
CURRENT_VDF_PARAMS = get_vdf_params()
