"""Tests for wren.routing.params — placeholder type registry."""

import re

import pytest

from wren.errors import ConfigurationError
from wren.routing.params import BUILTIN_PATTERNS, PatternRegistry


class TestBuiltinPatterns:
    def test_all_types_registered(self) -> None:
        assert set(BUILTIN_PATTERNS) == {"id", "slug", "any"}

    def test_each_has_one_capturing_group(self) -> None:
        for fragment in BUILTIN_PATTERNS.values():
            assert re.compile(fragment).groups == 1

    def test_id_matches_digits_only(self) -> None:
        pattern = re.compile(BUILTIN_PATTERNS["id"])
        assert pattern.fullmatch("42")
        assert pattern.fullmatch("4a") is None

    def test_slug_allows_hyphens(self) -> None:
        pattern = re.compile(BUILTIN_PATTERNS["slug"])
        assert pattern.fullmatch("hello-router-2")
        assert pattern.fullmatch("with_underscore") is None

    def test_any_stops_at_slash(self) -> None:
        pattern = re.compile(BUILTIN_PATTERNS["any"])
        assert pattern.fullmatch("hello world.txt")
        assert pattern.fullmatch("a/b") is None

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            BUILTIN_PATTERNS["uuid"] = "(.+)"  # type: ignore[index]


class TestPatternRegistry:
    def test_resolve_builtin(self) -> None:
        registry = PatternRegistry()
        assert registry.resolve("id") == r"([0-9]+)"

    def test_unknown_falls_back_to_any(self) -> None:
        registry = PatternRegistry()
        assert registry.resolve("user_name") == BUILTIN_PATTERNS["any"]

    def test_extra_type(self) -> None:
        registry = PatternRegistry({"year": r"([0-9]{4})"})
        assert registry.resolve("year") == r"([0-9]{4})"
        assert "year" in registry
        assert registry.types == {"id", "slug", "any", "year"}

    def test_override_builtin(self) -> None:
        registry = PatternRegistry({"id": r"([1-9][0-9]*)"})
        assert registry.resolve("id") == r"([1-9][0-9]*)"

    def test_rejects_invalid_regex(self) -> None:
        with pytest.raises(ConfigurationError, match="not a valid regex"):
            PatternRegistry({"broken": r"([0-9]+"})

    def test_rejects_missing_group(self) -> None:
        with pytest.raises(ConfigurationError, match="exactly one"):
            PatternRegistry({"year": r"[0-9]{4}"})

    def test_rejects_extra_groups(self) -> None:
        with pytest.raises(ConfigurationError, match="found 2"):
            PatternRegistry({"pair": r"([a-z]+)-([a-z]+)"})

    def test_non_capturing_groups_allowed(self) -> None:
        registry = PatternRegistry({"version": r"((?:[0-9]+\.)*[0-9]+)"})
        assert registry.resolve("version") == r"((?:[0-9]+\.)*[0-9]+)"
