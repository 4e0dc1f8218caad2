"""Response envelopes returned to relay callers"""
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field


class RelaySuccess(BaseModel):
    """Message accepted by NGL"""
    status: Literal["success"] = "success"
    message: str
    username: str
    data: str
    http_status: int = Field(default=200, exclude=True)


class RelayFailure(BaseModel):
    """Relay rejected the request or NGL refused it"""
    status: Literal["error"] = "error"
    message: str
    details: Optional[str] = None
    error: Optional[str] = None
    http_status: int = Field(default=500, exclude=True)


RelayResult = Union[RelaySuccess, RelayFailure]


def to_body(result: RelayResult) -> Dict[str, Any]:
    """Serialize a result, leaving out fields that were never set"""
    return result.model_dump(exclude_none=True)
