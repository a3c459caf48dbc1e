from pydantic import BaseModel
from typing import Optional

class ListOptions(BaseModel):
    limit: int = 10
    startingAfter: Optional[str] = None

class ErrorEnvelope(BaseModel):
    error: str

class HealthResponse(BaseModel):
    status: str
    stripeConfigured: bool
