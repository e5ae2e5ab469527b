"""FastAPI service entrypoint for the profile-matching API."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from threading import Lock

from fastapi import FastAPI, HTTPException

from ..data import MINUTES_PER_HOUR, load_profiles
from ..features import profile_view
from ..paths import get_repo_root
from ..profiles.model import Profile
from ..settings import AppConfig, load_config
from ..store.registry import ProfileRegistry
from ..utils import setup_logging, to_percentage
from .schemas import (
    CreateProfileRequest,
    ProfileOut,
    ProfilesResponse,
    SimilarRequest,
    SimilarResponse,
)

logger = logging.getLogger(__name__)


def _get_env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or str(raw).strip() == "":
        return None
    p = Path(str(raw))
    return p if p.is_absolute() else (get_repo_root() / p).resolve()


@asynccontextmanager
async def lifespan(app: FastAPI):
    cfg = load_config(_get_env_path("CONFIG_PATH"))
    setup_logging(os.getenv("LOG_LEVEL", cfg.log_level))

    registry = ProfileRegistry()
    preload_dir = _get_env_path("PRELOAD_PROFILES_DIR")
    if preload_dir is not None:
        logger.info("Preloading profiles from %s", preload_dir)
        for profile in load_profiles(preload_dir):
            registry.add(profile)
    else:
        logger.info("Starting with an empty profile registry")

    app.state.config = cfg
    app.state.registry = registry
    app.state.registry_lock = Lock()
    yield


app = FastAPI(title="Friend-Finder Similarity Service", lifespan=lifespan)


def _registry(app_: FastAPI) -> ProfileRegistry:
    reg = getattr(app_.state, "registry", None)
    if reg is None:
        raise HTTPException(status_code=503, detail="Profile registry not initialized")
    return reg


def _config(app_: FastAPI) -> AppConfig:
    cfg = getattr(app_.state, "config", None)
    if cfg is None:
        raise HTTPException(status_code=503, detail="Config not loaded")
    return cfg


def _build_profile(req: CreateProfileRequest) -> Profile:
    profile = Profile(req.name)
    for item in req.items:
        profile.add_item(item.name, int(item.hours) * MINUTES_PER_HOUR)
    for entry in req.hourly:
        profile.add_hourly_minutes(int(entry.hour), int(entry.minutes))
    return profile


@app.post("/profiles", response_model=ProfileOut, status_code=201)
def create_profile(req: CreateProfileRequest) -> dict:
    """Create a target or comparison profile."""
    reg = _registry(app)
    try:
        profile = _build_profile(req)
        with app.state.registry_lock:
            reg.add(profile, as_target=bool(req.is_target))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return profile_view(profile)


@app.get("/profiles", response_model=ProfilesResponse)
def list_profiles() -> dict:
    reg = _registry(app)
    with app.state.registry_lock:
        target = reg.target
        views = [profile_view(p) for p in reg]
    return {"target": (target.name if target is not None else None), "results": views}


@app.get("/profiles/{name}", response_model=ProfileOut)
def get_profile(name: str) -> dict:
    reg = _registry(app)
    try:
        with app.state.registry_lock:
            return profile_view(reg.get(name))
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.put("/target/{name}", response_model=ProfileOut)
def set_target(name: str) -> dict:
    """Select an existing profile as the matching target."""
    reg = _registry(app)
    try:
        with app.state.registry_lock:
            return profile_view(reg.set_target(name))
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.post("/similar", response_model=SimilarResponse)
def similar(req: SimilarRequest) -> dict:
    """Return the profiles most similar to the current target, best first."""
    reg = _registry(app)
    k = int(req.k) if req.k is not None else _config(app).default_k

    with app.state.registry_lock:
        if not reg.can_match():
            raise HTTPException(status_code=400, detail="Need at least a target user and one comparison user.")
        target = reg.target
        try:
            matches = reg.similar_to_target(k)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        results = [
            {
                "name": name,
                "similarity": float(score),
                "similarity_pct": to_percentage(score),
                "profile": profile_view(reg.get(name)),
            }
            for name, score in matches
        ]

    return {"target": target.name, "k": k, "results": results}
