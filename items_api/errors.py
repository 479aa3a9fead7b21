"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """Referenced item does not exist."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class MismatchError(AppError):
    """Body id disagrees with the id in the path."""

    def __init__(self, message: str = "Id mismatch", details: Any | None = None) -> None:
        super().__init__(code="id_mismatch", message=message, status_code=400, details=details)


class ValidationError(AppError):
    """Body cannot be parsed into an item."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)

