"""Uniform outcome type returned by fallible operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OpStatus(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PERMISSION_DENIED = "permission_denied"
    INVALID_INPUT = "invalid_input"
    NOT_LOGGED_IN = "not_logged_in"


@dataclass(slots=True, frozen=True)
class OperationResult:
    """Status, human readable message and an optional identifier."""

    status: OpStatus
    message: str = ""
    id: int | None = None

    def is_success(self) -> bool:
        return self.status is OpStatus.SUCCESS

    @classmethod
    def ok(cls, message: str = "", id: int | None = None) -> OperationResult:
        return cls(OpStatus.SUCCESS, message, id)

    @classmethod
    def not_found(cls, message: str) -> OperationResult:
        return cls(OpStatus.NOT_FOUND, message)

    @classmethod
    def already_exists(cls, message: str) -> OperationResult:
        return cls(OpStatus.ALREADY_EXISTS, message)

    @classmethod
    def permission_denied(cls, message: str = "Permission denied") -> OperationResult:
        return cls(OpStatus.PERMISSION_DENIED, message)

    @classmethod
    def invalid_input(cls, message: str) -> OperationResult:
        return cls(OpStatus.INVALID_INPUT, message)

    @classmethod
    def not_logged_in(cls, message: str = "Login required") -> OperationResult:
        return cls(OpStatus.NOT_LOGGED_IN, message)
