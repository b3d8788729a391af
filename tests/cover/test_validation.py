# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest

from counterexample import (
    REFERENCE_SIZE,
    Generator,
    InvalidArgument,
    RandomState,
    ResolutionFailed,
    generate,
)
from counterexample.errors import CounterexampleException, InvalidState
from counterexample.generators import (
    booleans,
    dictionaries,
    integers,
    lists,
    resize,
    scale,
    text,
    tuples,
)


def test_errors_share_a_base_class():
    for error in (InvalidArgument, ResolutionFailed, InvalidState):
        assert issubclass(error, CounterexampleException)


def test_invalid_argument_is_a_type_error():
    assert issubclass(InvalidArgument, TypeError)


@pytest.mark.parametrize("size", [-1, 1.5, "10", None, True])
def test_generate_checks_the_size(size):
    with pytest.raises(InvalidArgument):
        integers().generate(size, RandomState(0))


@pytest.mark.parametrize("random", [None, 0, object()])
def test_generate_checks_the_random_state(random):
    with pytest.raises(InvalidArgument):
        integers().generate(REFERENCE_SIZE, random)


def test_generate_by_type_checks_its_arguments():
    with pytest.raises(InvalidArgument):
        generate(int, -1, RandomState(0))


@pytest.mark.parametrize(
    "factory, args",
    [
        (lists, (int,)),
        (tuples, (booleans(), bool)),
        (text, ("abc",)),
        (dictionaries, (integers(), None)),
        (resize, (1, int)),
        (scale, ("2", integers())),
        (integers, (8, "yes")),
    ],
)
def test_combinators_check_their_arguments(factory, args):
    with pytest.raises(InvalidArgument):
        factory(*args)


def test_generators_must_define_produce_and_shrink():
    with pytest.raises(NotImplementedError):
        Generator().produce(0, RandomState(0))
    with pytest.raises(NotImplementedError):
        Generator().shrink(0)


def test_example_is_deterministic_given_a_seed():
    gen = lists(integers())
    assert gen.example(seed=3) == gen.example(seed=3)


def test_example_checks_its_size():
    with pytest.raises(InvalidArgument):
        booleans().example(size=-1)
