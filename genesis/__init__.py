# MIT License
# Copyright (c) 2025 Hashborn

"""
Genesis Migration Tooling

Supply accounting over a legacy chain snapshot.
"""

from .registry import donor_directed_set
from .supply import Supply, SupplyClassifier, compute_supply

__all__ = ["Supply", "SupplyClassifier", "compute_supply", "donor_directed_set"]
