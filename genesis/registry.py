# MIT License
# Copyright (c) 2025 Hashborn

"""
Donor-Directed Registry

Exactly one snapshot record (the 0x0 state) carries the community wallet
registry. Its address list marks which accounts are donor-directed.
"""

import logging
from typing import Any, FrozenSet, Iterable, Mapping, Union

from protocol.types.common import MissingRegistryRecord, MissingDonorDirectedList
from protocol.types.legacy import AccountRecord, to_records

logger = logging.getLogger(__name__)


def donor_directed_set(records: Iterable[Union[AccountRecord, Mapping[str, Any]]]) -> FrozenSet[str]:
    """
    Extract the donor-directed address set from the registry record.

    Args:
        records: Snapshot records, or mappings validated into AccountRecord

    Returns:
        Normalized legacy addresses of all donor-directed wallets

    Raises:
        MissingRegistryRecord: No record carries community_wallet_list
        MissingDonorDirectedList: The registry record has no readable list
    """
    registry = [r for r in to_records(records) if r.community_wallet_list is not None]
    if not registry:
        raise MissingRegistryRecord("Could not find the community wallet registry (0x0 state) in snapshot")

    if len(registry) > 1:
        logger.warning(
            f"Found {len(registry)} registry records, using the first at {registry[0].address}"
        )

    wallets = registry[0].community_wallet_list.addresses
    if wallets is None:
        raise MissingDonorDirectedList(
            f"Could not read list of community wallets from registry record {registry[0].address}"
        )

    logger.debug(f"Loaded {len(wallets)} donor-directed wallets from {registry[0].address}")
    return frozenset(wallets)
