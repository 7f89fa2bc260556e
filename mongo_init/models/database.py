"""Database-related data models."""

from pydantic import BaseModel
from typing import Optional


class ConnectionStatus(BaseModel):
    """Connection status model."""

    database: str
    connected: bool
    latency_ms: Optional[float] = None
    error: Optional[str] = None
