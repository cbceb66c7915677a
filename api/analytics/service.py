"""
Analytic queries over reports.
"""

from __future__ import annotations

import logging

from core.errors import operation
from reports import repository as report_repository
from reports.service import to_report

from . import wordfreq

logger = logging.getLogger(__name__)


async def reports_with_repeated_word(*, min_count: int = wordfreq.DEFAULT_MIN_REPEATS) -> dict:
    """
    Full scan of `reports`, filtered in memory.
    """
    with operation("Failed to retrieve reports"):
        rows = await report_repository.list_reports()
    matches = wordfreq.filter_repeated(rows, min_count=min_count)
    logger.debug("repeated_word_scan scanned=%s matched=%s min_count=%s", len(rows), len(matches), min_count)
    return {
        "message": "Reports retrieved successfully.",
        "data": [to_report(row) for row in matches],
    }
