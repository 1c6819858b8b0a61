"""
Repository errors.

Every failure the store surfaces to callers is a ``RepositoryError`` tagged
with an ``ErrorCode``. Callers that only care about the kind can match on
``err.code``; callers that want a specific kind can catch the subclass.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Kinds of repository failure."""
    NOT_FOUND = "not_found"                     # single-item read of an absent key
    INVALID_RECORD = "invalid_record"           # stored value failed to decode
    INSUFFICIENT_FUNDS = "insufficient_funds"   # coin reservation could not cover amount


class RepositoryError(Exception):
    """Base error for all repository operations."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.value!r}, message={self.message!r})"


class NotFoundError(RepositoryError):
    """Raised when a single-item read targets a key absent from the store."""

    def __init__(self, key: str):
        super().__init__(ErrorCode.NOT_FOUND, f"Key not found in db: {key}")
        self.key = key


class CodecError(RepositoryError):
    """Raised when a stored value cannot be decoded into a record."""

    def __init__(self, message: str):
        super().__init__(ErrorCode.INVALID_RECORD, message)


class InsufficientFundsError(RepositoryError):
    """Raised when unreserved UTXOs cannot cover a requested amount."""

    def __init__(self, requested: int, available: int):
        super().__init__(
            ErrorCode.INSUFFICIENT_FUNDS,
            f"Insufficient funds: requested {requested}, available {available}",
        )
        self.requested = requested
        self.available = available
