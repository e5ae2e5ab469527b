"""Load `config.yaml` into a typed, read-only settings object."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .paths import ProjectPaths, get_repo_root


@dataclass(frozen=True)
class AppConfig:
    raw_dir: Path
    default_k: int = 5
    log_level: str = "INFO"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    obj = yaml.safe_load(path.read_text())
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        raise ValueError(f"Expected YAML mapping at {path}, got {type(obj)}")
    return obj


def _section(cfg: dict[str, Any], name: str) -> dict[str, Any]:
    return cfg.get(name, {}) if isinstance(cfg.get(name), dict) else {}


def load_config(config_path: Path | None = None, *, repo_root: Path | None = None) -> AppConfig:
    """Read settings from YAML; missing sections and keys fall back to defaults."""
    repo_root = repo_root if repo_root is not None else get_repo_root()
    config_path = Path(config_path) if config_path is not None else (repo_root / "config.yaml")
    if not config_path.is_absolute():
        config_path = (repo_root / config_path).resolve()

    cfg = _load_yaml(config_path)
    dataset_cfg = _section(cfg, "dataset")
    matching_cfg = _section(cfg, "matching")
    logging_cfg = _section(cfg, "logging")

    paths = ProjectPaths.from_repo_root(repo_root, raw_dir=str(dataset_cfg.get("raw_dir", "data/raw")))

    default_k = int(matching_cfg.get("default_k", 5))
    if default_k < 0:
        raise ValueError(f"config.yaml matching.default_k must be >= 0, got {default_k}")

    return AppConfig(
        raw_dir=paths.raw_dir,
        default_k=default_k,
        log_level=str(logging_cfg.get("level", "INFO")),
    )
