"""
Tests for FieldPath and FieldErrors.
"""

from dataclasses import dataclass

import pytest

from forma import FieldErrors, FieldPath


class TestFieldPath:
    def test_render(self):
        assert FieldPath.of("a", "b", "c").render() == "a.b.c"
        assert FieldPath.of("name").render() == "name"
        assert FieldPath().render() == ""

    def test_extend_does_not_mutate(self):
        base = FieldPath.of("player")
        extended = base.extend("gold")

        assert base == FieldPath.of("player")
        assert extended == FieldPath.of("player", "gold")
        assert str(extended) == "player.gold"

    def test_root(self):
        assert FieldPath().is_root
        assert not FieldPath.of("x").is_root
        assert len(FieldPath.of("x", "y")) == 2


class TestFieldErrors:
    def test_singleton(self):
        errors = FieldErrors.singleton(FieldPath.of("username"), "Too short")
        assert errors.to_dict() == {"username": "Too short"}
        assert errors[FieldPath.of("username")] == "Too short"

    def test_singleton_rejects_empty_path(self):
        with pytest.raises(ValueError):
            FieldErrors.singleton(FieldPath(), "oops")

    def test_cannot_be_empty(self):
        with pytest.raises(ValueError):
            FieldErrors({})

    def test_payload_converted_to_json(self):
        @dataclass
        class Problem:
            code: str
            limit: int

        errors = FieldErrors.singleton(FieldPath.of("age"), Problem("too_low", 18))
        assert errors.to_dict() == {"age": {"code": "too_low", "limit": 18}}

    def test_merge_disjoint(self):
        a = FieldErrors.singleton(FieldPath.of("a"), 1)
        b = FieldErrors.singleton(FieldPath.of("b", "c"), 2)

        merged = a.merge(b)

        assert len(merged) == 2
        assert merged.to_dict() == {"a": 1, "b.c": 2}
        assert a + b == merged

    def test_merge_collision_keeps_left(self):
        left = FieldErrors.singleton(FieldPath.of("a"), "left")
        right = FieldErrors.singleton(FieldPath.of("a"), "right")

        assert (left + right).to_dict() == {"a": "left"}
        assert (right + left).to_dict() == {"a": "right"}

    def test_merge_does_not_mutate(self):
        a = FieldErrors.singleton(FieldPath.of("a"), 1)
        a.merge(FieldErrors.singleton(FieldPath.of("b"), 2))
        assert len(a) == 1

    def test_add_rejects_other_types(self):
        a = FieldErrors.singleton(FieldPath.of("a"), 1)
        with pytest.raises(TypeError):
            a + {"b": 2}

    def test_to_dict_sorted_by_path(self):
        errors = (
            FieldErrors.singleton(FieldPath.of("username"), 1)
            + FieldErrors.singleton(FieldPath.of("player", "name"), 2)
            + FieldErrors.singleton(FieldPath.of("password"), 3)
            + FieldErrors.singleton(FieldPath.of("player"), 4)
        )

        assert list(errors.to_dict()) == ["password", "player", "player.name", "username"]
