"""Eligibility index keyed by normalized member ID."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from ..connectors.healthcare.eligibility import EligibilityRecord, normalize_eligibility
from ..utils.identifiers import normalize_member_id

logger = logging.getLogger(__name__)


class EligibilityIndex:
    """Read-only grouping of eligibility records by normalized member ID.

    Candidates keep the order of the source file: the matcher takes the
    first candidate that passes, so row order breaks ties.
    """

    def __init__(self, groups: Mapping[str, Iterable[EligibilityRecord]] | None = None) -> None:
        self._groups: dict[str, tuple[EligibilityRecord, ...]] = {
            key: tuple(records) for key, records in (groups or {}).items()
        }

    def candidates(self, member_id: Any) -> tuple[EligibilityRecord, ...]:
        """Return the records for a raw (un-normalized) member ID."""
        return self._groups.get(normalize_member_id(member_id), ())

    def member_ids(self) -> list[str]:
        return list(self._groups)

    @property
    def record_count(self) -> int:
        return sum(len(records) for records in self._groups.values())

    def __contains__(self, member_id: object) -> bool:
        return normalize_member_id(member_id) in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)


def build_eligibility_index(
    rows: Iterable[Mapping[str, Any] | EligibilityRecord | None],
) -> EligibilityIndex:
    """Build an index from raw eligibility rows or normalized records.

    Rows without any recognizable member ID are dropped.

    Args:
        rows: Raw rows (header -> cell) and/or EligibilityRecord instances

    Returns:
        EligibilityIndex
    """
    groups: dict[str, list[EligibilityRecord]] = {}
    dropped = 0

    for row in rows:
        if row is None:
            dropped += 1
            continue
        record = row if isinstance(row, EligibilityRecord) else normalize_eligibility(row)
        if record is None:
            dropped += 1
            continue

        key = normalize_member_id(record.member_id_raw)
        if not key:
            # An all-zero ID normalizes to nothing and cannot be looked up
            dropped += 1
            continue
        groups.setdefault(key, []).append(record)

    index = EligibilityIndex(groups)
    if dropped:
        logger.debug(f"Dropped {dropped} eligibility row(s) without a member ID")
    logger.info(
        f"Indexed {index.record_count} eligibility record(s) for {len(index)} member(s)"
    )
    return index
