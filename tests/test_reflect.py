import dataclasses
import logging
from dataclasses import dataclass, field, InitVar
from typing import ClassVar, Final

import pytest

from reflective import (
    meta_fields,
    meta_field,
    Config,
    MetaField,
    Modifier,
    InvalidArgument,
    UnsupportedClass,
    UnknownField,
)


def test_declaration_order():
    @dataclass
    class TestData:
        first: int
        second: str
        third: bool = False

    assert [described.name for described in meta_fields(TestData)] == ["first", "second", "third"]


def test_visibility():
    @dataclass
    class TestData:
        public: int
        _protected: int
        __private: int

    assert meta_fields(TestData) == (
        MetaField("public", Modifier.PUBLIC),
        MetaField("_protected", Modifier.PROTECTED),
        MetaField("_TestData__private", Modifier.PRIVATE),
    )


def test_frozen_fields_are_final():
    @dataclass(frozen=True)
    class TestData:
        value: int
        _hidden: str = "default"

    assert meta_fields(TestData) == (
        MetaField("value", Modifier.PUBLIC | Modifier.FINAL),
        MetaField("_hidden", Modifier.PROTECTED | Modifier.FINAL),
    )


def test_final_annotation():
    @dataclass
    class TestData:
        value: Final[int] = 42

    assert meta_field(TestData, "value").modifiers == Modifier.PUBLIC | Modifier.FINAL


def test_class_vars():
    @dataclass
    class TestData:
        LIMIT: ClassVar[int] = 10
        value: int = 0

    assert meta_fields(TestData) == (
        MetaField("LIMIT", Modifier.PUBLIC | Modifier.STATIC),
        MetaField("value", Modifier.PUBLIC),
    )


def test_frozen_class_vars_are_not_final():
    @dataclass(frozen=True)
    class TestData:
        LIMIT: ClassVar[int] = 10

    assert meta_field(TestData, "LIMIT").modifiers == Modifier.PUBLIC | Modifier.STATIC


def test_exclude_class_vars():
    @dataclass
    class TestData:
        LIMIT: ClassVar[int] = 10
        value: int = 0

    config = Config(include_class_vars=False)
    assert meta_fields(TestData, config) == (MetaField("value", Modifier.PUBLIC),)
    with pytest.raises(UnknownField):
        meta_field(TestData, "LIMIT", config)


def test_init_vars_skipped():
    @dataclass
    class TestData:
        value: int
        seed: InitVar[int] = 0

        def __post_init__(self, seed: int):
            self.value += seed

    assert [described.name for described in meta_fields(TestData)] == ["value"]


def test_custom_prefixes():
    @dataclass
    class TestData:
        m_value: int
        p_value: int
        value: int

    config = Config(private_prefix="m_", protected_prefix="p_")
    assert [described.modifiers for described in meta_fields(TestData, config)] == [
        Modifier.PRIVATE,
        Modifier.PROTECTED,
        Modifier.PUBLIC,
    ]


def test_metadata_modifiers():
    @dataclass
    class TestData:
        cache: dict = field(default_factory=dict, metadata={"reflective": Modifier.TRANSIENT})
        counter: int = field(default=0, metadata={"reflective": Modifier.VOLATILE | Modifier.SYNTHETIC})
        raw: int = field(default=0, metadata={"reflective": 0x0200})

    assert meta_fields(TestData) == (
        MetaField("cache", Modifier.PUBLIC | Modifier.TRANSIENT),
        MetaField("counter", Modifier.PUBLIC | Modifier.VOLATILE | Modifier.SYNTHETIC),
        MetaField("raw", 0x0201),
    )


def test_invalid_metadata():
    @dataclass
    class TestData:
        value: int = field(default=0, metadata={"reflective": "transient"})

    with pytest.raises(TypeError):
        meta_fields(TestData)


def test_inherited_fields():
    @dataclass
    class Base:
        base: int

    @dataclass(frozen=True)
    class Frozen:
        value: int

    @dataclass
    class Derived(Base):
        derived: str

    assert [described.name for described in meta_fields(Derived)] == ["base", "derived"]
    assert meta_field(Frozen, "value").has(Modifier.FINAL)
    assert not meta_field(Derived, "base").has(Modifier.FINAL)


def test_not_a_dataclass():
    class Plain:
        value: int

    @dataclass
    class TestData:
        value: int

    with pytest.raises(UnsupportedClass) as error:
        meta_fields(Plain)
    assert error.value.target is Plain

    with pytest.raises(UnsupportedClass):
        meta_fields(TestData(1))
    with pytest.raises(UnsupportedClass):
        meta_fields(None)


def test_meta_field_lookup():
    @dataclass
    class TestData:
        value: int

    assert meta_field(TestData, "value") == MetaField("value", Modifier.PUBLIC)
    with pytest.raises(UnknownField) as error:
        meta_field(TestData, "missing")
    assert error.value.class_name == "TestData"
    assert error.value.field_name == "missing"
    with pytest.raises(InvalidArgument):
        meta_field(TestData, None)


def test_records_are_immutable():
    @dataclass
    class TestData:
        value: int

    described = meta_field(TestData, "value")
    with pytest.raises(dataclasses.FrozenInstanceError):
        described.modifiers = Modifier.PRIVATE


def test_debug_logging(caplog):
    @dataclass(frozen=True)
    class TestData:
        value: int

    with caplog.at_level(logging.DEBUG, logger="reflective"):
        meta_fields(TestData)
    assert "Derived modifiers for TestData.value: public final" in caplog.text


def test_inherited_private_fields():
    @dataclass
    class Base:
        __secret: int = 0

    @dataclass
    class Derived(Base):
        __own: int = 0
        _shared: int = 0

    assert meta_fields(Base) == (MetaField("_Base__secret", Modifier.PRIVATE),)
    assert meta_fields(Derived) == (
        MetaField("_Base__secret", Modifier.PRIVATE),
        MetaField("_Derived__own", Modifier.PRIVATE),
        MetaField("_shared", Modifier.PROTECTED),
    )
