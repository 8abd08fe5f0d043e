"""Tests for field discovery."""

from dataclasses import dataclass, field
from typing import Any, ClassVar, NamedTuple

from pydantic import BaseModel, ConfigDict

from structcopy import describe
from structcopy.core.fields import fields_of, find_field, get_describer


@dataclass
class Invoice:
    number: str = ""
    total: float = 0.0
    lines: list[str] = field(default_factory=list)
    _audit: str = ""


@dataclass(frozen=True)
class FrozenInvoice:
    number: str = ""


class Profile(BaseModel):
    handle: str = ""
    score: float = 0.0


class FrozenProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    handle: str = ""


class Account:
    kind: ClassVar[str] = "account"
    owner: str = ""
    _secret: str = ""

    def __init__(self) -> None:
        self.balance = 0
        self._hidden = 1

    @property
    def label(self) -> str:
        return self.owner.upper()


class Pixel:
    __slots__ = ("x", "y")

    def __init__(self) -> None:
        self.x = 0
        self.y = 0


class Thermostat:
    def __init__(self) -> None:
        self._celsius = 20.0

    @property
    def celsius(self) -> float:
        return self._celsius

    @celsius.setter
    def celsius(self, value: float) -> None:
        self._celsius = value


class Span(NamedTuple):
    start: int
    end: int


def test_dataclass_fields_in_declaration_order() -> None:
    descriptors = describe(Invoice)

    assert [f.name for f in descriptors] == ["number", "total", "lines"]
    assert [f.annotation for f in descriptors] == [str, float, list[str]]
    assert all(f.readable and f.writable for f in descriptors)


def test_frozen_dataclass_fields_are_read_only() -> None:
    (number,) = describe(FrozenInvoice)
    assert number.readable
    assert not number.writable


def test_pydantic_model_fields() -> None:
    descriptors = describe(Profile)

    assert [(f.name, f.annotation) for f in descriptors] == [("handle", str), ("score", float)]
    assert all(f.writable for f in descriptors)


def test_frozen_pydantic_model_fields_are_read_only() -> None:
    assert not any(f.writable for f in describe(FrozenProfile))


def test_plain_class_annotations_skip_classvars_and_private_names() -> None:
    names = [f.name for f in describe(Account)]

    assert names == ["owner", "label"]


def test_read_only_property() -> None:
    label = next(f for f in describe(Account) if f.name == "label")

    assert label.annotation is str
    assert label.readable
    assert not label.writable


def test_property_with_setter_is_writable() -> None:
    (celsius,) = describe(Thermostat)

    assert celsius.name == "celsius"
    assert celsius.annotation is float
    assert celsius.writable


def test_slots_are_fields() -> None:
    descriptors = describe(Pixel)

    assert [f.name for f in descriptors] == ["x", "y"]
    assert all(f.annotation is Any for f in descriptors)


def test_named_tuple_fields_are_read_only() -> None:
    descriptors = describe(Span)

    assert [f.name for f in descriptors] == ["start", "end"]
    assert not any(f.writable for f in descriptors)


def test_fields_of_includes_instance_attributes() -> None:
    names = [f.name for f in fields_of(Account())]

    assert names == ["owner", "label", "balance"]
    assert find_field(Account(), "balance").annotation is Any


def test_fields_of_slotted_instance() -> None:
    assert [f.name for f in fields_of(Pixel())] == ["x", "y"]


def test_find_field_is_case_sensitive() -> None:
    assert find_field(Invoice(), "number") is not None
    assert find_field(Invoice(), "Number") is None


def test_descriptors_are_cached() -> None:
    first = describe(Invoice)

    assert get_describer().is_described(Invoice)
    assert describe(Invoice) is first
