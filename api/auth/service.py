"""
Static bearer-token check.
"""

from __future__ import annotations

import logging
import secrets

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


def tokens_match(presented: str, expected: str) -> bool:
    return secrets.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))


def check_api_token(presented: str, expected: str) -> None:
    if not tokens_match(presented, expected):
        logger.warning("api_token_rejected")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid API token.",
        )
