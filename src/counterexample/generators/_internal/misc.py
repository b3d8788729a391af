# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from counterexample.errors import InvalidArgument
from counterexample.generators._internal.generators import REFERENCE_SIZE, Generator
from counterexample.generators._internal.numbers import Integers
from counterexample.internal.validation import check_type, check_valid_size
from counterexample.shrinking import constant, nothing
from counterexample.shrinktree import just as just_tree, shrink_recursively

UINT8 = Integers(8, signed=False)


class Booleans(Generator[bool]):
    """True or False with equal probability, whatever the size."""

    def __repr__(self):
        return "booleans()"

    def produce(self, size, random):
        return (UINT8.produce(REFERENCE_SIZE, random) & 1) == 0

    @staticmethod
    def candidates(value):
        if value:
            return constant([False])
        return nothing()

    def shrink(self, value):
        check_type(bool, value, "value")
        return shrink_recursively(value, self.candidates)


class Just(Generator):
    """A generator which always produces a single fixed value."""

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"just({self.value!r})"

    def produce(self, size, random):
        return self.value

    def shrink(self, value):
        return just_tree(value)


class Resized(Generator):
    """Runs ``generator`` at a fixed size, whatever size it is asked for."""

    def __init__(self, size, generator):
        check_valid_size(size)
        check_type(Generator, generator, "generator")
        self.size = size
        self.generator = generator

    def __repr__(self):
        return f"resize({self.size!r}, {self.generator!r})"

    def produce(self, size, random):
        return self.generator.produce(self.size, random)

    def shrink(self, value):
        return self.generator.shrink(value)


class Scaled(Generator):
    """Runs ``generator`` at the requested size multiplied by ``factor``."""

    def __init__(self, factor, generator):
        check_type((int, float), factor, "factor")
        if factor < 0:
            raise InvalidArgument(f"factor={factor!r} must be non-negative")
        check_type(Generator, generator, "generator")
        self.factor = factor
        self.generator = generator

    def __repr__(self):
        return f"scale({self.factor!r}, {self.generator!r})"

    def produce(self, size, random):
        return self.generator.produce(int(size * self.factor), random)

    def shrink(self, value):
        return self.generator.shrink(value)
