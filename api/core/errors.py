"""
Error model shared by all resource handlers.

Services raise `HTTPException` for expected outcomes (400/404). Everything
else that goes wrong while an operation runs is wrapped into
`OperationFailed`, which `main` renders as a 500 with the operation's
message and the underlying error text.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException


class OperationFailed(RuntimeError):
    def __init__(self, message: str, error: str) -> None:
        super().__init__(f"{message}: {error}")
        self.message = message
        self.error = error


@contextmanager
def operation(message: str) -> Iterator[None]:
    """
    Convert unexpected failures inside the block into `OperationFailed`.

    `HTTPException` passes through untouched.
    """
    try:
        yield
    except HTTPException:
        raise
    except Exception as exc:
        raise OperationFailed(message, str(exc) or exc.__class__.__name__) from exc
