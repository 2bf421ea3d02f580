# launcher/registry/reconcile.py
from __future__ import annotations
from collections.abc import Iterable

from .models import PackageRecord

__all__ = ["shouldReplace", "foldRecords", "reconcilePackages"]



def shouldReplace(existing: PackageRecord | None, candidate: PackageRecord) -> bool:
    """
    Tie-break for two records with the same install path.

    A record without a timestamp counts as older than any record that has one.
    When both carry a timestamp the existing record survives only if it is
    strictly later, so equal timestamps let the candidate through.
    """
    if existing is None or existing.lastUpdated is None:
        return True
    if candidate.lastUpdated is None:
        return False
    return not existing.lastUpdated > candidate.lastUpdated



def foldRecords(
    into: dict[str, PackageRecord],
    records: Iterable[PackageRecord],
) -> dict[str, PackageRecord]:
    for record in records:
        if shouldReplace(into.get(record.installPath), record):
            into[record.installPath] = record
    return into



def reconcilePackages(
    legacyRecords: Iterable[PackageRecord],
    currentRecords: Iterable[PackageRecord],
) -> dict[str, PackageRecord]:
    """
    Merge both installer generations into one mapping keyed by install path.

    Legacy records go in first; current-generation records are folded over
    them in listing order. The inputs are not mutated.
    """
    merged: dict[str, PackageRecord] = {}
    foldRecords(merged, legacyRecords)
    foldRecords(merged, currentRecords)
    return merged
