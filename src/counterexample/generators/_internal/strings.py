# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from counterexample.errors import InvalidArgument
from counterexample.generators._internal.collections import Collection
from counterexample.generators._internal.generators import Generator
from counterexample.generators._internal.numbers import (
    Integers,
    bits_for_size,
    mask_for_bits,
)
from counterexample.internal.validation import check_type
from counterexample.shrinking import towards
from counterexample.shrinktree import shrink_recursively

MAX_CODEPOINT = 0x10FFFF
CODEPOINT_DIGITS = MAX_CODEPOINT.bit_length()
SURROGATES = range(0xD800, 0xE000)

# Characters shrink to these first, in this order.
SIMPLEST_CHARACTERS = "abc"


def character_rank(c):
    if c in SIMPLEST_CHARACTERS:
        return SIMPLEST_CHARACTERS.index(c)
    return len(SIMPLEST_CHARACTERS) + abs(ord(c) - ord(SIMPLEST_CHARACTERS[0]))


class Characters(Generator[str]):
    """Single non-NUL characters.

    Half of the time the character is ASCII.  Otherwise it may be any code
    point that is not a surrogate, drawn from as many bits as the size
    allows.
    """

    def __repr__(self):
        return "characters()"

    def produce(self, size, random):
        atom = random.next_atom()
        n_bits = bits_for_size(size, CODEPOINT_DIGITS)
        if atom & 1 or n_bits == 0:
            return chr(1 + (atom >> 1) % 127)
        codepoint = 1 + ((atom >> 1) & mask_for_bits(n_bits)) % MAX_CODEPOINT
        if codepoint in SURROGATES:
            codepoint -= len(SURROGATES)
        return chr(codepoint)

    @staticmethod
    def candidates(value):
        rank = character_rank(value)
        for c in SIMPLEST_CHARACTERS:
            if character_rank(c) < rank:
                yield c
        for codepoint in towards(ord(value), ord(SIMPLEST_CHARACTERS[0])):
            c = chr(codepoint)
            if c not in SIMPLEST_CHARACTERS and codepoint not in SURROGATES:
                yield c

    def shrink(self, value):
        if not isinstance(value, str) or len(value) != 1:
            raise InvalidArgument(
                f"Expected a single character but got value={value!r}"
            )
        return shrink_recursively(value, self.candidates)


class TextOf(Collection):
    """Strings of characters from ``element``, a generator of single
    characters."""

    def __init__(self, element=None):
        super().__init__(element or Characters(), "".join, list)

    def __repr__(self):
        if isinstance(self.element, Characters):
            return "text()"
        return f"text({self.element!r})"

    def shrink(self, value):
        check_type(str, value, "value")
        return super().shrink(value)


class BytesOf(Collection):
    def __init__(self):
        super().__init__(Integers(8, signed=False), bytes, list)

    def __repr__(self):
        return "binary()"

    def shrink(self, value):
        check_type(bytes, value, "value")
        return super().shrink(value)
