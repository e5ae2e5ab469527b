"""Find the players whose behavior is most similar to a target player.

Profiles are read from `items.csv` / `hourly.csv` under the configured raw data
directory, ranked against `--target`, and printed either as formatted profiles
or as a table.
"""
from __future__ import annotations

import argparse
from pathlib import Path

from .data import load_profiles
from .exceptions import ProfileNotFoundError
from .features import format_matches, format_profile, matches_frame
from .paths import get_repo_root, resolve_path
from .settings import load_config
from .store.registry import ProfileRegistry
from .utils import setup_logging


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Friend-Finder: players with similar play behavior")
    p.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: <repo>/config.yaml)")
    p.add_argument("--raw-dir", type=Path, default=None, help="Directory holding items.csv and hourly.csv")
    p.add_argument("--target", type=str, required=True, help="Name of the player to find matches for")
    p.add_argument("--k", type=int, default=None, help="How many suggestions to return (default from config)")
    p.add_argument("--show-profiles", action="store_true", help="Print every loaded profile first")
    p.add_argument("--table", action="store_true", help="Print matches as a table instead of full profiles")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    setup_logging(cfg.log_level)

    raw_dir = resolve_path(get_repo_root(), args.raw_dir) if args.raw_dir is not None else cfg.raw_dir
    k = int(args.k) if args.k is not None else cfg.default_k
    if k < 0:
        parser.error(f"--k must be >= 0, got {k}")

    registry = ProfileRegistry(load_profiles(raw_dir))
    try:
        registry.set_target(args.target)
    except ProfileNotFoundError:
        parser.error(f"unknown target {args.target!r}; known: {sorted(p.name for p in registry)}")

    if args.show_profiles:
        print("\n=== All User Profiles ===")
        for profile in registry:
            print()
            print(format_profile(profile))

    if not registry.can_match():
        print("Need at least a target user and one comparison user.")
        return

    matches = registry.similar_to_target(k)

    print()
    if args.table:
        df = matches_frame(matches)
        print(df.to_string(index=False) if not df.empty else "No similar users found.")
    else:
        print(format_matches(matches, {p.name: p for p in registry}))


if __name__ == "__main__":
    main()
