# MIT License
# Copyright (c) 2025 Hashborn

"""
Legacy Supply Classification

Folds a legacy snapshot into supply categories in a single pass.

Partition (every record lands in exactly one):
    total = normal + slow_total + donor_directed

Overlay (already counted inside slow_total / slow_locked):
    validator, validator_locked

Note: this is the sum of account balances only. Coins held elsewhere
(e.g. escrowed in contracts) are not part of it.
"""

import logging
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Union

from pydantic import BaseModel, ConfigDict

from protocol.config.params import U64_MAX
from protocol.types.common import ArithmeticOverflow, SupplyError
from protocol.types.legacy import AccountRecord, to_records
from .registry import donor_directed_set

logger = logging.getLogger(__name__)


class Supply(BaseModel):
    """Aggregate supply counters of a snapshot. Immutable once computed."""
    model_config = ConfigDict(frozen=True)

    total: int = 0
    normal: int = 0
    validator: int = 0              # overlaps with slow wallets
    validator_locked: int = 0
    slow_total: int = 0
    slow_locked: int = 0
    slow_unlocked: int = 0
    donor_directed: int = 0

    def _share(self, part: int) -> float:
        if self.total == 0:
            return 0.0
        return part / self.total

    @property
    def pct_slow(self) -> float:
        return self._share(self.slow_total)

    @property
    def pct_donor_directed(self) -> float:
        return self._share(self.donor_directed)

    @property
    def pct_validator_locked(self) -> float:
        return self._share(self.validator_locked)

    def as_dict(self) -> Dict[str, int]:
        return self.model_dump()

    def check_invariants(self) -> None:
        """
        Raises SupplyError if the partition or bound invariants are broken.

        Checked:
        - total == normal + slow_total + donor_directed
        - slow_locked <= slow_total, slow_unlocked <= slow_total
        - validator_locked <= slow_locked, validator <= slow_total
        """
        partition = self.normal + self.slow_total + self.donor_directed
        if partition != self.total:
            raise SupplyError(
                f"Partition mismatch: total={self.total}, "
                f"normal+slow_total+donor_directed={partition}"
            )

        bounds = [
            ("slow_locked", "slow_total"),
            ("slow_unlocked", "slow_total"),
            ("validator_locked", "slow_locked"),
            ("validator", "slow_total"),
        ]
        for lower, upper in bounds:
            if getattr(self, lower) > getattr(self, upper):
                raise SupplyError(
                    f"{lower}={getattr(self, lower)} exceeds {upper}={getattr(self, upper)}"
                )


SUPPLY_COUNTERS = tuple(Supply.model_fields)


def checked_add(acc: Dict[str, int], counter: str, amount: int) -> None:
    """acc[counter] += amount, refusing to leave the u64 range."""
    current = acc[counter]
    if amount > U64_MAX - current:
        raise ArithmeticOverflow(counter, current, amount)
    acc[counter] = current + amount


class SupplyClassifier:
    """Sorts every snapshot balance into its liquidity category."""

    def compute(self, records: Iterable[Union[AccountRecord, Mapping[str, Any]]]) -> Supply:
        """
        Fold all records into a Supply.

        Args:
            records: Snapshot records, or mappings validated into AccountRecord

        Returns:
            Supply with every counter populated

        Raises:
            MissingRegistryRecord / MissingDonorDirectedList: registry problems
            ArithmeticOverflow: a counter left the u64 range (no partial result)
        """
        records = to_records(records)
        dd_wallets = donor_directed_set(records)

        acc = dict.fromkeys(SUPPLY_COUNTERS, 0)
        for record in records:
            self.inc_supply(acc, record, dd_wallets)

        supply = Supply(**acc)
        logger.info(
            f"Supply over {len(records)} records: total={supply.total} "
            f"normal={supply.normal} slow={supply.slow_total} "
            f"donor_directed={supply.donor_directed} validator_locked={supply.validator_locked}"
        )
        return supply

    def inc_supply(self, acc: Dict[str, int], record: AccountRecord, dd_wallets: FrozenSet[str]) -> None:
        amount = record.amount
        checked_add(acc, "total", amount)

        # Donor-directed takes priority over slow wallet state
        if record.address in dd_wallets:
            checked_add(acc, "donor_directed", amount)
            return

        slow = record.slow_wallet_info
        if slow is None:
            checked_add(acc, "normal", amount)
            return

        checked_add(acc, "slow_total", amount)
        # unlocked == 0 counts toward slow_total only
        if slow.unlocked_amount > 0:
            checked_add(acc, "slow_unlocked", amount)
            # Balance can sit below the unlocked threshold after transfers out
            if amount > slow.unlocked_amount:
                locked = amount - slow.unlocked_amount
                checked_add(acc, "slow_locked", locked)
                # Validator account holding a slow locked balance
                if record.validator_config_present:
                    checked_add(acc, "validator", amount)
                    checked_add(acc, "validator_locked", locked)


def compute_supply(records: Iterable[Union[AccountRecord, Mapping[str, Any]]]) -> Supply:
    """Shortcut for SupplyClassifier().compute(records)."""
    return SupplyClassifier().compute(records)
