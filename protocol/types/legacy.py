# MIT License
# Copyright (c) 2025 Hashborn

from pydantic import BaseModel, Field, field_validator
from typing import Any, Iterable, List, Mapping, Optional, Union
from ..config.params import U64_MAX
from ..crypto.addresses import normalize_legacy_address

class SlowWalletInfo(BaseModel):
    """Unlock schedule state of a slow wallet."""
    unlocked_amount: int = Field(default=0, ge=0, le=U64_MAX)  # running unlocked threshold

class CommunityWalletList(BaseModel):
    """Registry resource listing donor-directed (community) wallets."""
    addresses: Optional[List[str]] = None    # None = resource present but unreadable

    @field_validator("addresses")
    @classmethod
    def _normalize(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return None
        return [normalize_legacy_address(a) for a in v]

class AccountRecord(BaseModel):
    """One account entry of a legacy chain snapshot."""
    address: str                                                   # legacy hex address
    balance_amount: Optional[int] = Field(default=None, ge=0, le=U64_MAX)
    slow_wallet_info: Optional[SlowWalletInfo] = None
    validator_config_present: bool = False
    community_wallet_list: Optional[CommunityWalletList] = None   # only on the registry record

    @field_validator("address")
    @classmethod
    def _normalize_address(cls, v: str) -> str:
        return normalize_legacy_address(v)

    @property
    def amount(self) -> int:
        """Balance with absence treated as zero."""
        return self.balance_amount or 0

def to_records(records: Iterable[Union[AccountRecord, Mapping[str, Any]]]) -> List[AccountRecord]:
    """Materializes a snapshot, validating plain mappings into AccountRecord."""
    return [
        r if isinstance(r, AccountRecord) else AccountRecord.model_validate(r)
        for r in records
    ]
