"""Shared error types.

Controllers raise these at their boundaries so the UI can tell bad input
from a missing prerequisite or a broken environment.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AppError(Exception):
    """Base error for application-level failures."""

    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} (cause: {self.cause})"


class DomainError(AppError):
    """Operation not possible in the current state (missing model, untrained, ...)."""


class ValidationError(AppError):
    """Invalid user input or data shape."""


class InfrastructureError(AppError):
    """IO/OS failures and lifecycle misuse."""
