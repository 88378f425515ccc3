from pydantic import BaseModel
from typing import Any, Dict, Optional, Generic, TypeVar

T = TypeVar('T')


class Envelope(BaseModel, Generic[T]):
    status: str
    data: Optional[T] = None
    error: Optional[str] = None


class ErrorEnvelope(BaseModel):
    status: str = "error"
    data: None = None
    error: str
    message: str
    details: Optional[Dict[str, Any]] = None
    request_id: str
