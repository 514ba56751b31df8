# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Response envelopes shared by every versioned endpoint."""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """Wraps a payload so the top-level JSON is always an object."""
    data: T


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None
