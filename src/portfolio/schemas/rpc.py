"""Envelope schemas for the procedure API."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class RpcResult(BaseModel, Generic[T]):
    """Payload wrapper of a successful call."""

    data: T


class RpcResponse(BaseModel, Generic[T]):
    """Successful procedure response: ``{"result": {"data": ...}}``."""

    result: RpcResult[T]


class RpcErrorData(BaseModel):
    """Machine-readable error details."""

    code: str
    httpStatus: int
    path: str
    fieldErrors: dict[str, list[str]] = Field(default_factory=dict)


class RpcErrorBody(BaseModel):
    """Error description returned to the caller."""

    message: str
    code: str
    data: RpcErrorData


class RpcErrorResponse(BaseModel):
    """Failed procedure response: ``{"error": {...}}``."""

    error: RpcErrorBody


class HealthStatus(BaseModel):
    """Healthcheck payload."""

    status: str
    timestamp: datetime
