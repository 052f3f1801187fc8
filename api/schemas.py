from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field


class ViewParamsModel(BaseModel):
    top_n: int = 15
    metric: Literal["nominations", "wins"] = "nominations"
    category: Optional[str] = None
    decade_range: Optional[Tuple[int, int]] = None
    stack_mode: Literal["counts", "percent"] = "counts"
    stream_top_n: int = 8
    network_top_n: int = 15
    leaderboard_top_n: int = 10
    bubble_top_n: int = 20


class MetaListResponse(BaseModel):
    values: List[str] = Field(default_factory=list)


class MetaDecadesResponse(BaseModel):
    decades: List[int] = Field(default_factory=list)
