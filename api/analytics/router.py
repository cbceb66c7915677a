"""
Analytic endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from auth import dependencies as auth_dependencies

from . import service, wordfreq

router = APIRouter()


@router.get("/w3/getreport")
async def reports_with_repeated_word(
    min_count: int = Query(default=wordfreq.DEFAULT_MIN_REPEATS, ge=1),
    _: None = Depends(auth_dependencies.require_api_token),
) -> dict:
    """
    Reports in which some word appears at least `min_count` times.
    """
    return await service.reports_with_repeated_word(min_count=min_count)
