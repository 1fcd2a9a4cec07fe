from typing import Literal, Optional, Union
from pydantic import BaseModel

Language = Literal["en", "zh"]


class ChatRequest(BaseModel):
    message: Optional[str] = None
    language: Optional[str] = None


class ChatResult(BaseModel):
    success: bool
    response: str
    language: Language
    error: Optional[str] = None
    model: Optional[str] = None


class UpstreamReply(BaseModel):
    """A usable completion returned by the upstream API."""
    content: str
    model: Optional[str] = None


class UpstreamFailure(BaseModel):
    """The upstream call failed or returned nothing usable."""
    error: str


UpstreamOutcome = Union[UpstreamReply, UpstreamFailure]
