"""Shared domain utilities.

This package provides common building blocks used across domain modules:

- Result monad for explicit error handling
- Base domain event infrastructure
"""

from nexus.domain.shared.events import DomainEvent, WorkspaceReset
from nexus.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_err,
    is_ok,
)

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    # Domain events
    "DomainEvent",
    "WorkspaceReset",
]
