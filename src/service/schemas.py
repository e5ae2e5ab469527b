"""Pydantic schemas for the profile-matching API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ItemIn(BaseModel):
    name: str = Field(..., min_length=1, description="Catalog item (game) name.")
    hours: int = Field(..., ge=0, description="Playtime in whole hours.")


class HourlyIn(BaseModel):
    hour: int = Field(..., ge=0, le=23, description="Hour of day (0..23).")
    minutes: int = Field(..., ge=0, description="Minutes played during that hour.")


class CreateProfileRequest(BaseModel):
    """Payload for `POST /profiles`."""

    name: str = Field(..., min_length=1, description="Unique player name.")
    items: list[ItemIn] = Field(default_factory=list)
    hourly: list[HourlyIn] = Field(default_factory=list)
    is_target: bool = Field(False, description="Make this profile the matching target.")


class ItemOut(BaseModel):
    name: str
    minutes: int


class HourlyOut(BaseModel):
    hour: int
    minutes: int


class ProfileOut(BaseModel):
    name: str
    total_minutes: int
    total_hours: int
    items: list[ItemOut]
    hourly: list[HourlyOut]
    peak_hours: list[int]


class ProfilesResponse(BaseModel):
    target: Optional[str] = None
    results: list[ProfileOut]


class SimilarRequest(BaseModel):
    """Request for `POST /similar`; `k` defaults to the configured value."""

    k: Optional[int] = Field(None, ge=0, le=1000, description="Number of suggestions to return.")


class SimilarItem(BaseModel):
    name: str
    similarity: float
    similarity_pct: float
    profile: ProfileOut


class SimilarResponse(BaseModel):
    target: str
    k: int
    results: list[SimilarItem]
