"""Tests for type classification."""

import collections
import collections.abc as abc
import datetime
import enum
import pathlib
import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Annotated, Any, Literal, NamedTuple, NewType, Optional

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import BaseModel

from structcopy import CollectionKind, TypeKind, classify
from structcopy.core.classify import TypeClassifier, effective_type, get_classifier, same_type


class Color(enum.Enum):
    RED = "red"
    BLUE = "blue"


class Shade(enum.Enum):
    RED = "red"
    BLUE = "blue"


UserId = NewType("UserId", int)


@dataclass
class Point:
    x: int = 0
    y: int = 0


class PointModel(BaseModel):
    x: int = 0


class Pair(NamedTuple):
    left: int
    right: int


class Plain:
    pass


@pytest.mark.parametrize(
    "tp",
    [
        int,
        bool,
        float,
        complex,
        str,
        bytes,
        Decimal,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
        pathlib.Path,
        Color,
        type(None),
        Optional[int],
        int | None,
        int | str | None,
        Literal["a", "b"],
        UserId,
        Annotated[int, "unit"],
    ],
)
def test_simple_types(tp) -> None:
    assert classify(tp).kind is TypeKind.SIMPLE


@pytest.mark.parametrize(
    ("tp", "kind", "element_types"),
    [
        (list[int], CollectionKind.GROWABLE, (int,)),
        (list, CollectionKind.GROWABLE, ()),
        (set[str], CollectionKind.GROWABLE, (str,)),
        (frozenset[str], CollectionKind.GROWABLE, (str,)),
        (collections.deque[int], CollectionKind.GROWABLE, (int,)),
        (abc.Sequence[Point], CollectionKind.GROWABLE, (Point,)),
        (dict[str, int], CollectionKind.GROWABLE, (str, int)),
        (bytearray, CollectionKind.GROWABLE, ()),
        (tuple[int, ...], CollectionKind.FIXED_SIZE, (int,)),
        (tuple[int, str], CollectionKind.FIXED_SIZE, (int, str)),
        (tuple, CollectionKind.FIXED_SIZE, ()),
    ],
)
def test_collection_types(tp, kind, element_types) -> None:
    descriptor = classify(tp)
    assert descriptor.kind is TypeKind.COLLECTION
    assert descriptor.collection_kind is kind
    assert descriptor.element_types == element_types


def test_text_is_never_a_collection() -> None:
    """str and bytes iterate but stay atomic."""
    assert classify(str).is_simple
    assert classify(bytes).is_simple
    assert not classify(str).is_collection


def test_tuple_variadic_flag() -> None:
    assert classify(tuple[int, ...]).variadic
    assert classify(tuple).variadic
    assert not classify(tuple[int, str]).variadic


def test_arity_of_bare_containers() -> None:
    """Bare sequences count as one parameter, bare mappings as two."""
    assert classify(list).arity == 1
    assert classify(dict).arity == 2
    assert classify(dict[str, Point]).arity == 2


@pytest.mark.parametrize(
    "tp",
    [Point, PointModel, Pair, Plain, Any, object, Optional[Point], Point | None],
)
def test_complex_types(tp) -> None:
    assert classify(tp).kind is TypeKind.COMPLEX


def test_records_win_over_iterability() -> None:
    """Pydantic models iterate and named tuples are tuples, both are records."""
    assert classify(PointModel).is_complex
    assert classify(Pair).is_complex
    assert classify(Pair).origin is Pair


def test_classifier_memoizes_per_type() -> None:
    classifier = TypeClassifier()

    first = classifier.classify(list[int])
    second = classifier.classify(list[int])

    assert first is second
    assert classifier.is_cached(list[int])
    assert len(classifier) == 1


def test_unhashable_annotation_is_classified_without_caching() -> None:
    classifier = TypeClassifier()
    annotation = Annotated[int, {"unit": "m"}]

    assert classifier.classify(annotation).is_simple
    assert not classifier.is_cached(annotation)
    assert len(classifier) == 0


def test_module_classifier_is_shared() -> None:
    classify(Point)
    assert get_classifier() is get_classifier()
    assert get_classifier().is_cached(Point)


@given(
    st.sampled_from(
        [int, str, Color, list[int], tuple[int, ...], dict[str, int], Point, Optional[Point]]
    )
)
def test_classification_is_deterministic(tp) -> None:
    assert classify(tp) == TypeClassifier().classify(tp)


def test_effective_type_uses_runtime_type_when_undeclared() -> None:
    assert effective_type(Any, 5) is int
    assert effective_type(object, "a") is str


def test_effective_type_unwraps_optional() -> None:
    assert effective_type(Optional[Point], Point()) is Point
    assert effective_type(Annotated[Point | None, "doc"], Point()) is Point


def test_effective_type_keeps_simple_unions() -> None:
    assert effective_type(int | str, "a") == int | str


def test_effective_type_resolves_mixed_unions_by_value() -> None:
    assert effective_type(Point | Plain, Plain()) is Plain


def test_same_type_normalizes_optional_spellings() -> None:
    assert same_type(Optional[int], int | None)
    assert same_type(Annotated[int, "x"], int)
    assert same_type(list[int], list[int])


def test_same_type_is_strict() -> None:
    assert not same_type(int, float)
    assert not same_type(list[int], list[str])
    assert not same_type(Color, Shade)
    assert not same_type(int, int | None)
