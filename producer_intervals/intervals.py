"""
Consecutive-win interval analysis.

Groups winning records by normalized producer name, computes the gap
between each pair of adjacent wins and keeps every interval tied at the
global minimum and maximum.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .models import AnalysisResult, IntervalRecord, WinningRecord
from .normalize import split_producers
from .rules import TRIM_CHARS

logger = logging.getLogger(__name__)


def group_wins_by_producer(records: Iterable[WinningRecord]) -> Dict[str, List[int]]:
    """Map each producer to its win years, sorted ascending.

    Producers keep the order in which they first appear in ``records``.
    """
    producer_wins: Dict[str, List[int]] = {}

    for record in records:
        if record.raw_producers is None or not record.raw_producers.strip(TRIM_CHARS):
            logger.debug("Skipping %s winner without producers", record.year)
            continue

        # a name listed twice on one record is still one win
        for producer in dict.fromkeys(split_producers(record.raw_producers)):
            producer_wins.setdefault(producer, []).append(record.year)

    for years in producer_wins.values():
        years.sort()

    logger.info("Extracted %d unique producers from winning records", len(producer_wins))
    return producer_wins


def compute_intervals(producer_wins: Dict[str, List[int]]) -> List[IntervalRecord]:
    intervals: List[IntervalRecord] = []

    for producer, years in producer_wins.items():
        if len(years) < 2:
            continue

        for previous_win, following_win in zip(years, years[1:]):
            intervals.append(
                IntervalRecord(
                    producer=producer,
                    interval=following_win - previous_win,
                    previous_win=previous_win,
                    following_win=following_win,
                )
            )

    logger.info("Calculated %d producer intervals", len(intervals))
    return intervals


def select_extremes(intervals: List[IntervalRecord]) -> AnalysisResult:
    """
    Keep every interval equal to the global minimum and every interval
    equal to the global maximum, in their original order.

    A lone interval (or a set of equal ones) lands in both lists.
    """
    if not intervals:
        return AnalysisResult(min=[], max=[])

    min_interval = min(record.interval for record in intervals)
    max_interval = max(record.interval for record in intervals)

    min_records = [record for record in intervals if record.interval == min_interval]
    max_records = [record for record in intervals if record.interval == max_interval]

    logger.info(
        "Found %d producers with minimum interval (%d years) and %d producers with maximum interval (%d years)",
        len(min_records),
        min_interval,
        len(max_records),
        max_interval,
    )
    return AnalysisResult(min=min_records, max=max_records)


def analyze(winning_records: Optional[Iterable[WinningRecord]]) -> AnalysisResult:
    """
    Compute the tie-inclusive min/max consecutive-win intervals.

    ``winning_records`` should already be filtered to winners. Input order
    only affects the order of ties in the result; each producer's years
    are sorted before intervals are taken.
    """
    logger.info("Calculating producer award intervals")
    if winning_records is None:
        return AnalysisResult(min=[], max=[])

    producer_wins = group_wins_by_producer(winning_records)
    intervals = compute_intervals(producer_wins)
    if not intervals:
        logger.info("No producers found with multiple wins")
    return select_extremes(intervals)
