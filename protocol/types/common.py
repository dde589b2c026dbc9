# MIT License
# Copyright (c) 2025 Hashborn

from enum import IntEnum

class NamedChain(IntEnum):
    MAINNET = 1
    TESTNET = 2
    DEVNET = 3
    TESTING = 4

class VdfScheme(IntEnum):
    PIETRZAK = 1
    WESOLOWSKI = 2

class ProtocolError(Exception):
    pass

class ValidationError(ProtocolError):
    pass

# --- Supply (genesis) ---

class SupplyError(ProtocolError):
    pass

class MissingRegistryRecord(SupplyError):
    """No record in the snapshot carries the community wallet registry."""
    pass

class MissingDonorDirectedList(SupplyError):
    """The registry record exists but its address list could not be read."""
    pass

class ArithmeticOverflow(SupplyError):
    def __init__(self, counter: str, current: int, amount: int):
        self.counter = counter
        self.current = current
        self.amount = amount
        super().__init__(
            f"u64 overflow on '{counter}': {current} + {amount} exceeds the 64-bit range"
        )

# --- Preimage (tower) ---

class PreimageError(ProtocolError):
    pass

class InvalidHexAuthKey(PreimageError, ValidationError):
    pass

class FieldTooLong(PreimageError, ValidationError):
    def __init__(self, field: str, length: int, limit: int):
        self.field = field
        self.length = length
        self.limit = limit
        super().__init__(
            f"Field '{field}' is longer than {limit} bytes. Got {length} bytes"
        )

class LengthInvariantViolation(PreimageError):
    """Assembled preimage does not match the fixed layout. Internal defect."""
    pass
