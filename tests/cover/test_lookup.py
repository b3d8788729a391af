# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import ctypes
import typing
from typing import Dict, FrozenSet, Generic, List, Set, Tuple, TypeVar, Union

import pytest
from sortedcontainers import SortedDict

from counterexample import (
    REFERENCE_SIZE,
    Generator,
    InvalidArgument,
    RandomState,
    ResolutionFailed,
    arbitrary,
    generate,
    register_generator,
    shrink,
)
from counterexample.generators import integers, just, lists
from counterexample.generators._internal.types import _global_type_lookup, _resolve

from tests.common.utils import child_values

T = TypeVar("T")


@pytest.fixture
def temporary_registration():
    registered = []

    def register(custom_type, generator):
        registered.append(custom_type)
        register_generator(custom_type, generator)

    yield register
    for custom_type in registered:
        _global_type_lookup.pop(custom_type, None)
    _resolve.cache_clear()


def test_resolution_is_cached():
    assert arbitrary(List[int]) is arbitrary(List[int])
    assert arbitrary(int) is arbitrary(int)


@pytest.mark.parametrize(
    "thing, expected",
    [
        (int, "integers(bits=64, signed=True)"),
        (bool, "booleans()"),
        (float, "floats()"),
        (str, "text()"),
        (bytes, "binary()"),
        (type(None), "just(None)"),
        (ctypes.c_uint8, "integers(bits=8, signed=False)"),
        (ctypes.c_int16, "integers(bits=16, signed=True)"),
        (ctypes.c_uint32, "integers(bits=32, signed=False)"),
        (ctypes.c_float, "floats(width=32)"),
        (ctypes.c_double, "floats()"),
        (List[bool], "lists(booleans())"),
        (list[bool], "lists(booleans())"),
        (Tuple[int, bool], "tuples(integers(bits=64, signed=True), booleans())"),
        (tuple[bool, ...], "tuples_of(booleans())"),
        (Set[bool], "sets(booleans())"),
        (FrozenSet[bool], "frozensets(booleans())"),
        (Dict[str, bool], "dictionaries(text(), booleans())"),
        (List[List[ctypes.c_int8]], "lists(lists(integers(bits=8, signed=True)))"),
    ],
)
def test_resolves_to(thing, expected):
    assert repr(arbitrary(thing)) == expected


def test_generate_produces_the_requested_type():
    value = generate(Dict[int, List[bool]], REFERENCE_SIZE, RandomState(3))
    assert isinstance(value, SortedDict)
    for k, v in value.items():
        assert isinstance(k, int)
        assert isinstance(v, list)
        assert all(isinstance(b, bool) for b in v)


def test_fixed_width_values_stay_in_range():
    random = RandomState(1)
    for _ in range(100):
        assert 0 <= generate(ctypes.c_uint8, REFERENCE_SIZE, random) <= 255
        assert -128 < generate(ctypes.c_int8, REFERENCE_SIZE, random) <= 127


def test_shrink_by_type():
    assert child_values(shrink(Tuple[int, bool], (3, True))) == [
        (1, True),
        (0, True),
        (3, False),
    ]


@pytest.mark.parametrize(
    "thing",
    [
        complex,
        object,
        list,
        List,
        Dict,
        Union[int, str],
        typing.Optional[int],
        typing.Any,
        int | str,
    ],
)
def test_unresolvable_types_fail_at_once(thing):
    with pytest.raises(ResolutionFailed):
        arbitrary(thing)


@pytest.mark.parametrize("thing", [tuple[()], Tuple[()]])
def test_empty_tuple_types_resolve(thing):
    gen = arbitrary(thing)
    assert repr(gen) == "tuples()"
    assert gen.generate(REFERENCE_SIZE, RandomState(0)) == ()
    assert gen.shrink(()).is_leaf


def test_bare_tuple_still_needs_arguments():
    with pytest.raises(ResolutionFailed):
        arbitrary(tuple)
    with pytest.raises(ResolutionFailed):
        arbitrary(Tuple)


def test_unhashable_requests_fail():
    with pytest.raises(ResolutionFailed):
        arbitrary([int])


def test_unresolvable_arguments_fail():
    with pytest.raises(ResolutionFailed):
        arbitrary(List[complex])


def test_factories_with_the_wrong_arity_fail():
    with pytest.raises(ResolutionFailed):
        arbitrary(dict[int])


def test_resolution_failure_is_an_invalid_argument():
    assert issubclass(ResolutionFailed, InvalidArgument)


class Point:
    def __init__(self, x):
        self.x = x

    def __eq__(self, other):
        return isinstance(other, Point) and other.x == self.x

    def __hash__(self):
        return hash(self.x)


class Points(Generator[Point]):
    def produce(self, size, random):
        return Point(integers().produce(size, random))

    def shrink(self, value):
        return integers().shrink(value.x).map(Point)


class Box(Generic[T]):
    def __init__(self, contents):
        self.contents = contents


def test_registered_types_resolve(temporary_registration):
    with pytest.raises(ResolutionFailed):
        arbitrary(Point)
    temporary_registration(Point, Points())
    assert isinstance(arbitrary(Point), Points)
    assert child_values(shrink(Point, Point(2))) == [Point(1), Point(0)]
    assert isinstance(arbitrary(List[Point]).example(), list)


def test_plain_generators_take_no_arguments(temporary_registration):
    temporary_registration(Box, Points())
    assert isinstance(arbitrary(Box), Points)
    with pytest.raises(ResolutionFailed):
        arbitrary(Box[int])


def test_registered_generic_types_resolve(temporary_registration):
    temporary_registration(Box, lambda element: lists(element))
    assert repr(arbitrary(Box[bool])) == "lists(booleans())"
    with pytest.raises(ResolutionFailed):
        arbitrary(Box)


def test_registering_again_replaces_the_entry(temporary_registration):
    temporary_registration(Point, Points())
    first = arbitrary(Point)
    temporary_registration(Point, just(Point(0)))
    assert arbitrary(Point) is not first
    assert arbitrary(Point).example() == Point(0)


@pytest.mark.parametrize(
    "custom_type, generator",
    [(List[int], integers()), ("Point", integers()), (Point, 3)],
)
def test_bad_registrations(custom_type, generator):
    with pytest.raises(InvalidArgument):
        register_generator(custom_type, generator)
