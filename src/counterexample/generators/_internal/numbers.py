# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import math
import sys

from counterexample.errors import InvalidArgument
from counterexample.generators._internal.generators import REFERENCE_SIZE, Generator
from counterexample.internal.entropy import ATOM_BITS, ATOM_MAX
from counterexample.internal.floats import STRUCT_FORMATS, float_of, is_representable
from counterexample.internal.validation import check_integer, check_type
from counterexample.shrinking import constant, sequentially, towards
from counterexample.shrinktree import shrink_recursively

INT64_MAX = 2**63 - 1
FLOAT_GROWTH = 1.2


def clamp_size(size):
    return min(size, REFERENCE_SIZE)


def bits_for_size(size, digits):
    """The number of random bits a type with ``digits`` value bits gets at
    ``size``: none at size zero, all of them at the reference size."""
    return (clamp_size(size) * digits) // REFERENCE_SIZE


def mask_for_bits(n_bits):
    """An atom mask keeping the low ``n_bits`` bits, for ``n_bits`` >= 1."""
    assert 1 <= n_bits <= ATOM_BITS
    return ~((ATOM_MAX - 1) << (n_bits - 1)) & ATOM_MAX


class Integers(Generator[int]):
    """Integers of a fixed bit width, signed or unsigned.

    ``digits`` is the number of value bits, i.e. the width minus the sign bit
    of signed types.  At the reference size the magnitude uses all of them,
    so the largest value of the type can be produced.  The sign of signed
    values comes from the top bit of the same atom, which no magnitude ever
    uses.
    """

    def __init__(self, bits, signed):
        assert 1 <= bits <= ATOM_BITS
        self.bits = bits
        self.signed = signed
        self.digits = bits - 1 if signed else bits
        self.max_value = 2**self.digits - 1
        self.min_value = -(2**self.digits) if signed else 0

    def __repr__(self):
        return f"integers(bits={self.bits}, signed={self.signed})"

    def produce(self, size, random):
        n_bits = bits_for_size(size, self.digits)
        if n_bits == 0:
            return 0
        atom = random.next_atom()
        value = atom & mask_for_bits(n_bits)
        if self.signed and atom >> (ATOM_BITS - 1):
            value = -value
        return value

    def candidates(self, value):
        flipped = [-value] if value < 0 and -value <= self.max_value else []
        return sequentially(constant(flipped), towards(value, 0))

    def shrink(self, value):
        check_integer(value, "value")
        if not self.min_value <= value <= self.max_value:
            raise InvalidArgument(
                f"value={value!r} is out of range for {self!r} "
                f"({self.min_value}..{self.max_value})"
            )
        return shrink_recursively(value, self.candidates)


INT64 = Integers(64, signed=True)


def float_scale(size, width=64):
    """How far from zero a float of ``width`` bits produced at ``size`` may
    get.  Past the largest finite float of the width the scale is infinite
    for single precision, and capped at the largest double otherwise."""
    try:
        scale = FLOAT_GROWTH**size
    except OverflowError:
        scale = sys.float_info.max
    return float_of(scale, width)


class Floats(Generator[float]):
    """Floats drawn as a signed 64-bit integer scaled into ``[-1, 1]`` and
    then multiplied by ``1.2 ** size``.

    Unlike the integer generators the size is not capped at the reference
    size, so larger sizes keep producing larger floats.  With ``width=32``
    every step is rounded to single precision, so the values are exactly
    those a C ``float`` can hold, infinities included.
    """

    def __init__(self, width=64):
        assert width in STRUCT_FORMATS
        self.width = width

    def __repr__(self):
        if self.width == 64:
            return "floats()"
        return f"floats(width={self.width})"

    def produce(self, size, random):
        unit = float_of(INT64.produce(size, random) / INT64_MAX, self.width)
        if unit == 0:
            return 0.0
        return float_of(float_scale(size, self.width) * unit, self.width)

    def candidates(self, value):
        result = []
        if value < 0:
            result.append(-value)
        if math.isfinite(value):
            truncated = float(math.trunc(value))
            if abs(truncated) < abs(value):
                result.append(truncated)
        return constant([float_of(c, self.width) for c in result])

    def shrink(self, value):
        check_type((float, int), value, "value")
        if isinstance(value, bool):
            raise InvalidArgument(f"Expected float but got value={value!r}")
        value = float(value)
        if not is_representable(value, self.width):
            raise InvalidArgument(
                f"value={value!r} is not a {self.width}-bit float"
            )
        return shrink_recursively(value, self.candidates)
