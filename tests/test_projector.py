# ==============================================
# Tests for record fields and the Field Projector
# ==============================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, NamedTuple, Optional

import pytest

from prefstore.diagnostics import DiagnosticKind
from prefstore.errors import RecordTypeError
from prefstore.format.parser import parse_document
from prefstore.format.tables import Table
from prefstore.mapping.fields import FieldType, classify_annotation, record_fields
from prefstore.mapping.projector import ValueCoercer, project_from, project_into


@dataclass
class PlayerData:
    name: str = "Unnamed"
    level: int = 1
    experience: int = 0


@dataclass
class WorldData:
    time: float = 0.0
    is_raining: bool = False


@dataclass(frozen=True)
class Limits:
    max_players: int = 4
    difficulty: str = "normal"


@dataclass
class Inventory:
    gold: int = 0
    items: tuple = ()


@dataclass
class Optionals:
    nickname: Optional[str] = None
    score: Optional[int] = None


class Settings:
    volume: float = 0.5
    muted: bool = False
    VERSION: ClassVar[int] = 2


class Point(NamedTuple):
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Stamped:
    revision: int = 1
    created: int = field(default=0, init=False)


class Locked:
    level: int = 0

    def __setattr__(self, name, value):
        raise AttributeError(f"{name} is read-only")


def table_of(text, name):
    return parse_document(f":{name}\n{text}", "save", lambda d: None)[name]


class TestRecordFields:

    def test_dataclass_declaration_order(self):
        specs = record_fields(PlayerData())
        assert [(s.name, s.field_type) for s in specs] == [
            ("name", FieldType.TEXT),
            ("level", FieldType.INT),
            ("experience", FieldType.INT),
        ]

    def test_plain_class_ignores_class_vars(self):
        specs = record_fields(Settings())
        assert [s.name for s in specs] == ["volume", "muted"]

    def test_optional_is_unwrapped(self):
        specs = record_fields(Optionals())
        assert [s.field_type for s in specs] == [FieldType.TEXT, FieldType.INT]

    def test_bool_is_not_int(self):
        assert classify_annotation(bool) is FieldType.BOOL
        assert classify_annotation(int) is FieldType.INT

    def test_unsupported_annotation(self):
        assert classify_annotation(tuple) is FieldType.UNSUPPORTED

    def test_not_a_record(self):
        with pytest.raises(RecordTypeError):
            record_fields(42)


class TestValueCoercer:

    @pytest.mark.parametrize("raw, expected", [("42", 42), ("-7", -7), ("+3", 3)])
    def test_int(self, raw, expected):
        assert ValueCoercer.parse(FieldType.INT, raw) == (expected, True)

    @pytest.mark.parametrize("raw", ["abc", "4.2", "1_000", "12abc"])
    def test_int_rejects(self, raw):
        assert ValueCoercer.parse(FieldType.INT, raw)[1] is False

    @pytest.mark.parametrize("raw, expected", [("3.14", 3.14), ("1e-3", 0.001), (".5", 0.5), ("-2", -2.0)])
    def test_float(self, raw, expected):
        value, success = ValueCoercer.parse(FieldType.FLOAT, raw)
        assert success
        assert value == pytest.approx(expected)

    def test_float_rejects(self):
        assert ValueCoercer.parse(FieldType.FLOAT, "fast")[1] is False

    @pytest.mark.parametrize("raw, expected", [
        ("true", True), ("T", True), ("false", False), ("f", False), ("Tomato", True),
    ])
    def test_bool_first_letter(self, raw, expected):
        assert ValueCoercer.parse(FieldType.BOOL, raw) == (expected, True)

    @pytest.mark.parametrize("raw", ["yes", "1", ""])
    def test_bool_rejects(self, raw):
        assert ValueCoercer.parse(FieldType.BOOL, raw)[1] is False

    def test_text_verbatim(self):
        assert ValueCoercer.parse(FieldType.TEXT, "hello world") == ("hello world", True)

    def test_render(self):
        assert ValueCoercer.render(FieldType.BOOL, True) == "True"
        assert ValueCoercer.render(FieldType.BOOL, False) == "False"
        assert ValueCoercer.render(FieldType.INT, 12) == "12"
        assert ValueCoercer.render(FieldType.FLOAT, 12.5) == "12.5"
        assert ValueCoercer.render(FieldType.TEXT, "a b") == "a b"

    def test_rendered_float_reads_back(self):
        for value in (0.1, 1e16, -2.5e-8, float("inf")):
            text = ValueCoercer.render(FieldType.FLOAT, value)
            assert ValueCoercer.parse(FieldType.FLOAT, text) == (value, True)


class TestProjectInto:

    def test_populates_fields(self, collector):
        player = PlayerData()
        result = project_into(player, table_of("name Bob\nlevel 12\nexperience 340\n", "PlayerData"), collector)

        assert result is player
        assert player == PlayerData(name="Bob", level=12, experience=340)
        assert len(collector) == 0

    def test_float_and_bool(self, collector):
        world = project_into(WorldData(), table_of("time 3.14\nis_raining T\n", "W"), collector)

        assert world.time == pytest.approx(3.14)
        assert world.is_raining is True

    def test_missing_pair_keeps_default(self, collector):
        player = project_into(PlayerData(), table_of("level 5\n", "P"), collector)

        assert player.name == "Unnamed"
        assert player.level == 5

    def test_malformed_value_keeps_prior_value(self, collector):
        player = PlayerData(level=7)
        project_into(player, table_of("name Bob\nlevel abc\n", "P"), collector, source="save")

        assert player.level == 7
        assert player.name == "Bob"
        assert len(collector) == 1
        diagnostic = collector.items[0]
        assert diagnostic.kind is DiagnosticKind.PARSE
        assert diagnostic.message == "Expected an int value"
        assert diagnostic.line_number == 3
        assert diagnostic.source == "save"

    def test_unknown_field_is_schema_error(self, collector):
        player = project_into(PlayerData(), table_of("mana 30\nlevel 2\n", "P"), collector)

        assert player.level == 2
        assert [d.kind for d in collector] == [DiagnosticKind.SCHEMA]
        assert "mana" in collector.items[0].message
        assert collector.items[0].line_number == 2

    def test_unsupported_type(self, collector):
        inventory = project_into(Inventory(), table_of("items sword\ngold 10\n", "I"), collector)

        assert inventory.items == ()
        assert inventory.gold == 10
        assert len(collector) == 1
        assert collector.items[0].message == "The type 'tuple' is not supported by preferences"

    def test_frozen_dataclass_returns_new_instance(self, collector):
        limits = Limits()
        result = project_into(limits, table_of("max_players 8\n", "Limits"), collector)

        assert result == Limits(max_players=8)
        assert limits.max_players == 4

    def test_plain_class(self, collector):
        settings = project_into(Settings(), table_of("volume 0.8\nmuted false\n", "Settings"), collector)

        assert settings.volume == pytest.approx(0.8)
        assert settings.muted is False

    def test_optional_fields(self, collector):
        record = project_into(Optionals(), table_of("nickname Ace\nscore 99\n", "O"), collector)

        assert record.nickname == "Ace"
        assert record.score == 99

    def test_named_tuple_returns_new_instance(self, collector):
        point = Point()
        result = project_into(point, table_of("x 3\n", "Point"), collector)

        assert result == Point(x=3, y=0)
        assert point == Point()
        assert len(collector) == 0

    def test_frozen_init_false_field_is_schema_error(self, collector):
        result = project_into(Stamped(), table_of("revision 5\ncreated 9\n", "Stamped"), collector)

        assert result.revision == 5
        assert result.created == 0
        assert [d.kind for d in collector] == [DiagnosticKind.SCHEMA]
        assert collector.items[0].line_number == 3
        assert "cannot be assigned" in collector.items[0].message

    def test_read_only_attribute_is_schema_error(self, collector):
        record = Locked()
        result = project_into(record, table_of("level 4\n", "Locked"), collector, source="save")

        assert result is record
        assert record.level == 0
        assert [d.kind for d in collector] == [DiagnosticKind.SCHEMA]
        assert collector.items[0].line_number == 2
        assert collector.items[0].source == "save"


class TestProjectFrom:

    def test_one_pair_per_field_in_order(self, collector):
        table = project_from(PlayerData(name="Bob", level=3, experience=40), sink=collector)

        assert table.name == "PlayerData"
        assert [(p.key, p.value, p.line_number) for p in table.pairs] == [
            ("name", "Bob", 0),
            ("level", "3", 0),
            ("experience", "40", 0),
        ]
        assert len(collector) == 0

    def test_explicit_name(self, collector):
        table = project_from(WorldData(time=12.5, is_raining=True), "World", collector)

        assert table.name == "World"
        assert table.to_dict() == {"time": "12.5", "is_raining": "True"}

    def test_lossy_value_warns_but_is_written(self, collector):
        table = project_from(PlayerData(name="Bob # the builder"), sink=collector)

        assert table.get("name") == "Bob # the builder"
        assert [d.kind for d in collector] == [DiagnosticKind.WARNING]

    def test_empty_text_warns(self, collector):
        project_from(PlayerData(name=""), sink=collector)

        assert [d.kind for d in collector] == [DiagnosticKind.WARNING]

    def test_unsupported_type_is_reported(self, collector):
        table = project_from(Inventory(gold=3), sink=collector)

        assert table.get("items") == "()"
        assert [d.kind for d in collector] == [DiagnosticKind.PARSE]

    def test_written_table_reads_back(self, collector):
        original = WorldData(time=0.1, is_raining=True)
        table = project_from(original, sink=collector)

        assert project_into(WorldData(), table, collector) == original

    def test_none_is_skipped_with_warning(self, collector):
        table = project_from(Optionals(score=7), sink=collector)

        assert table.to_dict() == {"score": "7"}
        assert [d.kind for d in collector] == [DiagnosticKind.WARNING]
        assert "nickname" in collector.items[0].message

    def test_none_fields_keep_defaults_on_reload(self, collector):
        table = project_from(Optionals(), sink=collector)
        collector.clear()

        assert project_into(Optionals(), table, collector) == Optionals()
        assert len(collector) == 0

    def test_diagnostics_carry_source(self, collector):
        project_from(PlayerData(name="a # b"), sink=collector, source="example.save")

        assert collector.items[0].source == "example.save"

    def test_empty_name_is_kept(self, collector):
        assert project_from(PlayerData(), "", collector).name == ""
