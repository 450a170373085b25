"""Tests for Property — mapping, defaulting, and absence handling."""

from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError
from enum import StrEnum

import pytest

from propguard.config.sources import MappingPropertySource
from propguard.domain.converters import to_bool, to_enum, to_int, to_list
from propguard.domain.property import NoSuchPropertyError, Property

PROPERTY_LOGGER = "propguard.domain.property"


class Color(StrEnum):
    RED = "red"
    GREEN = "green"


def _boom(_value: object) -> object:
    raise ValueError("bad input")


class TestConstruction:
    def test_present(self) -> None:
        prop = Property("port", "8080")
        assert prop.key == "port"
        assert prop.is_present
        assert prop.get() == "8080"

    def test_empty(self) -> None:
        prop = Property.empty("port")
        assert prop.key == "port"
        assert not prop.is_present

    def test_of_optional_none_is_absent(self) -> None:
        assert not Property.of_optional("k", None).is_present

    def test_of_optional_value_is_present(self) -> None:
        assert Property.of_optional("k", 0).get() == 0

    def test_present_none_is_a_value(self) -> None:
        prop = Property("k", None)
        assert prop.is_present
        assert prop.get() is None
        assert prop.or_else("default") is None

    def test_absent_cannot_hold_value(self) -> None:
        with pytest.raises(ValueError, match="cannot hold a value"):
            Property("k", "v", present=False)

    def test_frozen(self) -> None:
        prop = Property("k", "v")
        with pytest.raises(FrozenInstanceError):
            prop.value = "other"  # type: ignore[misc]

    def test_parameterized_construction(self) -> None:
        prop = Property[int]("k", 1)
        assert prop.get() == 1
        assert prop.map(lambda v: v + 1).get() == 2
        assert Property[str].empty("k").or_else("d") == "d"

    def test_bool_mirrors_presence(self) -> None:
        assert Property("k", 0)
        assert not Property.empty("k")

    def test_repr(self) -> None:
        assert repr(Property("k", 1)) == "Property('k', 1)"
        assert repr(Property.empty("k")) == "Property('k', <absent>)"

    def test_equality(self) -> None:
        assert Property("k", 1) == Property("k", 1)
        assert Property("k", 1) != Property("j", 1)
        assert Property.empty("k") == Property.empty("k")
        assert Property.empty("k") != Property("k", None)


class TestGet:
    def test_absent_raises_with_key(self) -> None:
        with pytest.raises(NoSuchPropertyError) as excinfo:
            Property.empty("db.url").get()
        assert excinfo.value.key == "db.url"
        assert str(excinfo.value) == "No value present for configuration property db.url"

    def test_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            Property.empty("k").get()

    def test_repeated_calls_are_stable(self) -> None:
        prop = Property("k", [1, 2])
        assert prop.get() is prop.get()
        absent = Property.empty("k")
        for _ in range(3):
            with pytest.raises(NoSuchPropertyError):
                absent.get()


class TestOrElse:
    def test_present_ignores_default(self) -> None:
        assert Property("k", "v").or_else("d") == "v"

    @pytest.mark.parametrize("default", ["d", 0, None, [1], object()])
    def test_absent_returns_default_unchanged(self, default: object) -> None:
        assert Property.empty("k").or_else(default) is default

    def test_repeated_calls_are_stable(self) -> None:
        prop = Property.empty("k")
        assert prop.or_else(1) == prop.or_else(1) == 1

    def test_or_else_get_lazy(self) -> None:
        calls: list[int] = []

        def supplier() -> int:
            calls.append(1)
            return 42

        assert Property("k", 7).or_else_get(supplier) == 7
        assert calls == []
        assert Property.empty("k").or_else_get(supplier) == 42
        assert calls == [1]


class TestMap:
    def test_present_applies_transform(self) -> None:
        prop = Property("port", "8080")
        assert prop.map(int).get() == int(prop.get())

    def test_returns_new_instance_with_same_key(self) -> None:
        prop = Property("port", "8080")
        mapped = prop.map(int)
        assert mapped is not prop
        assert mapped.key == "port"
        assert prop.get() == "8080"

    def test_absent_never_calls_transform(self) -> None:
        calls: list[object] = []

        def record(value: object) -> object:
            calls.append(value)
            return value

        result = Property.empty("k").map(record).map(record).map(record)
        assert calls == []
        assert not result.is_present
        assert result.key == "k"
        assert result.or_else("d") == "d"

    def test_absent_map_returns_fresh_instance(self) -> None:
        absent = Property.empty("k")
        assert absent.map(str) is not absent

    def test_failing_transform_yields_absent(self) -> None:
        result = Property("k", "v").map(_boom)
        assert not result.is_present
        assert result.key == "k"

    def test_failing_transform_logs_warning_with_key(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger=PROPERTY_LOGGER)
        Property("retry.count", "three").map(int)
        records = [r for r in caplog.records if r.name == PROPERTY_LOGGER]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert "retry.count" in records[0].getMessage()
        assert "ValueError" in records[0].getMessage()

    def test_success_logs_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger=PROPERTY_LOGGER)
        Property("k", "1").map(int)
        assert [r for r in caplog.records if r.name == PROPERTY_LOGGER] == []

    def test_failure_stops_the_chain(self) -> None:
        calls: list[object] = []
        result = Property("k", "x").map(int).map(calls.append)
        assert calls == []
        assert result.or_else(5) == 5

    def test_transform_returning_none_is_present(self) -> None:
        result = Property("k", "v").map(lambda _: None)
        assert result.is_present
        assert result.get() is None

    def test_base_exceptions_propagate(self) -> None:
        def interrupt(_value: object) -> object:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            Property("k", "v").map(interrupt)

    def test_enum_conversion(self) -> None:
        assert Property("color", "GREEN").map(to_enum(Color)).get() is Color.GREEN
        assert Property("color", "blue").map(to_enum(Color)).or_else(Color.RED) is Color.RED


class TestFilter:
    def test_keeps_matching_value(self) -> None:
        assert Property("k", 5).filter(lambda v: v > 0).get() == 5

    def test_drops_non_matching_value(self) -> None:
        result = Property("k", -1).filter(lambda v: v > 0)
        assert not result.is_present
        assert result.key == "k"

    def test_absent_skips_predicate(self) -> None:
        calls: list[object] = []
        Property.empty("k").filter(lambda v: calls.append(v) or True)
        assert calls == []

    def test_failing_predicate_yields_absent_and_warns(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger=PROPERTY_LOGGER)
        result = Property("limit", "abc").filter(lambda v: v > 0)
        assert not result.is_present
        assert any("limit" in r.getMessage() for r in caplog.records)


class TestSourceLookups:
    def test_missing_key_defaults(self) -> None:
        source = MappingPropertySource({})
        assert source.get_property("missing").or_else("d") == "d"
        with pytest.raises(NoSuchPropertyError):
            source.get_property("missing").get()

    def test_typical_chain(self, app_source: MappingPropertySource) -> None:
        source = app_source
        assert source.get_property("port").map(to_int).or_else(80) == 9000
        assert source.get_property("timeout").map(to_int).or_else(30) == 30
        assert source.get_property("workers").map(to_int).or_else(4) == 4

    def test_flags_and_lists(self, app_source: MappingPropertySource) -> None:
        assert app_source.get_property("debug").map(to_bool).or_else(False) is True
        assert app_source.get_property("hosts").map(to_list()).get() == ["a.example", "b.example"]
