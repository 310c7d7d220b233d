# nft_relay/models/envelope.py
from pydantic import BaseModel
from typing import Any, Literal


class SuccessEnvelope(BaseModel):
    success: Literal[True] = True
    data: Any = None


class FailureEnvelope(BaseModel):
    success: Literal[False] = False
    message: str
    error: Any = None
