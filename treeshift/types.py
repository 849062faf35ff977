"""Boundary status codes and result types."""

from __future__ import annotations

import enum
from typing import Literal

from pydantic import BaseModel


class Status(enum.IntEnum):
    OK = 0
    NULL_POINTER = -1
    INVALID_TEXT = -2
    OPERATION_FAILED = -3


class TransferResult(BaseModel):
    operation: Literal["copy", "move"]
    source: str
    destination: str
    status: int
    ok: bool
    error: str | None = None
