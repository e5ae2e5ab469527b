from __future__ import annotations

import pytest

from src.exceptions import DuplicateProfileError, InvalidArgumentError, ProfileNotFoundError
from src.profiles.model import Profile
from src.store.registry import ProfileRegistry


def _profile(name: str, game: str, minutes: int) -> Profile:
    p = Profile(name)
    p.add_item(game, minutes)
    p.add_hourly_minutes(20, minutes)
    return p


def test_registry_preserves_order_and_looks_up_by_name() -> None:
    reg = ProfileRegistry([_profile("a", "Chess", 60), _profile("b", "Go", 30)])

    assert [p.name for p in reg] == ["a", "b"]
    assert len(reg) == 2
    assert "a" in reg
    assert reg.get("b").total_minutes == 30


def test_duplicate_names_are_rejected() -> None:
    reg = ProfileRegistry([_profile("a", "Chess", 60)])
    with pytest.raises(DuplicateProfileError):
        reg.add(_profile("a", "Go", 10))
    assert len(reg) == 1


def test_unknown_name_raises_key_error() -> None:
    reg = ProfileRegistry()
    with pytest.raises(ProfileNotFoundError):
        reg.get("nobody")
    with pytest.raises(KeyError):
        reg.set_target("nobody")


def test_can_match_needs_target_and_another_profile() -> None:
    reg = ProfileRegistry()
    assert not reg.can_match()

    reg.add(_profile("a", "Chess", 60), as_target=True)
    assert reg.target is not None and reg.target.name == "a"
    assert not reg.can_match()

    reg.add(_profile("b", "Chess", 60))
    assert reg.can_match()


def test_similar_to_target_excludes_target() -> None:
    reg = ProfileRegistry()
    reg.add(_profile("a", "Chess", 60), as_target=True)
    reg.add(_profile("b", "Chess", 60))
    reg.add(_profile("c", "Go", 600))

    matches = reg.similar_to_target(5)

    assert [n for n, _ in matches] == ["b", "c"]
    assert matches[0][1] == pytest.approx(1.0)


def test_similar_to_target_requires_target() -> None:
    reg = ProfileRegistry([_profile("a", "Chess", 60)])
    with pytest.raises(ValueError):
        reg.similar_to_target(1)


def test_similar_to_target_rejects_negative_k() -> None:
    reg = ProfileRegistry()
    reg.add(_profile("a", "Chess", 60), as_target=True)
    with pytest.raises(InvalidArgumentError):
        reg.similar_to_target(-1)


def test_set_target_switches_target() -> None:
    reg = ProfileRegistry([_profile("a", "Chess", 60), _profile("b", "Go", 60)])
    reg.set_target("b")
    assert [n for n, _ in reg.similar_to_target(3)] == ["a"]
