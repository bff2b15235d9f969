"""Bucketing of image records by fingerprint."""

from typing import Iterable, Iterator, List

from image_dedup.core.models import DuplicateGroups, ImageRecord


def group_by_fingerprint(records: Iterable[ImageRecord]) -> DuplicateGroups:
    """
    Group records sharing a fingerprint, preserving input order.

    Args:
        records: Hashed images in scan order

    Returns:
        Mapping of fingerprint to the records carrying it
    """
    groups: DuplicateGroups = {}
    for record in records:
        groups.setdefault(record.fingerprint, []).append(record)
    return groups


def duplicate_sets(groups: DuplicateGroups) -> Iterator[List[ImageRecord]]:
    """Yield the groups holding two or more records."""
    for members in groups.values():
        if len(members) > 1:
            yield members
