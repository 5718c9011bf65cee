from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    title: str
    studios: Optional[str] = None
    producers: str
    winner: bool = False


class WinningRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    raw_producers: Optional[str] = None


class IntervalRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    producer: str
    interval: int
    previous_win: int = Field(alias="previousWin")
    following_win: int = Field(alias="followingWin")


class AnalysisResult(BaseModel):
    min: List[IntervalRecord] = Field(default_factory=list)
    max: List[IntervalRecord] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
    movies: int = 0
    winners: int = 0


class InfoResponse(BaseModel):
    name: str
    version: str
    description: str
