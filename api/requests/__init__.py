from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ResolveRequest(BaseModel):
    model: str = Field(min_length=1)
    env: Dict[str, Any] = Field(default_factory=dict)


class PlanRequest(BaseModel):
    model: str = Field(min_length=1)
    env: Dict[str, Any] = Field(default_factory=dict)
    series_length: Optional[int] = None
    series: Optional[List[float]] = None
    penalties: List[float] = Field(default_factory=list, max_length=2)
    algorithm: Optional[str] = None
