# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from typing import Any, Dict, FrozenSet, List, Set, Tuple, TypeVar

from counterexample.errors import InvalidArgument
from counterexample.generators._internal.collections import (
    ListOf,
    MapOf,
    SetOf,
    TupleOf,
    VariableTupleOf,
)
from counterexample.generators._internal.generators import Generator
from counterexample.generators._internal.misc import Booleans, Just, Resized, Scaled
from counterexample.generators._internal.numbers import Floats, Integers
from counterexample.generators._internal.strings import BytesOf, Characters, TextOf
from counterexample.internal.validation import check_integer, check_type

Ex = TypeVar("Ex")
K = TypeVar("K")
V = TypeVar("V")


def integers(bits: int = 64, signed: bool = True) -> Generator[int]:
    """Returns a generator of integers that fit in ``bits`` bits.

    At size zero the only value is zero.  At the reference size every value
    of the type except the most negative one can be produced.  Values shrink
    by trying their absolute value first and then moving towards zero.
    """
    check_integer(bits, "bits")
    check_type(bool, signed, "signed")
    if not 1 <= bits <= 64:
        raise InvalidArgument(f"bits={bits!r} must be between 1 and 64")
    if signed and bits == 1:
        raise InvalidArgument("A signed integer needs at least two bits")
    return Integers(bits, signed)


def booleans() -> Generator[bool]:
    """Returns a generator of booleans.  ``True`` shrinks to ``False``."""
    return Booleans()


def floats(width: int = 64) -> Generator[float]:
    """Returns a generator of floats whose magnitude grows with the size.

    ``width`` is 64 for double precision or 32 for single precision values,
    which become infinite once the size takes them past the largest finite
    single precision float.

    Negative floats shrink to their absolute value, and floats with a
    fractional part shrink to their integer part.
    """
    check_integer(width, "width")
    if width not in (32, 64):
        raise InvalidArgument(f"width={width!r}, but must be 32 or 64")
    return Floats(width)


def just(value: Ex) -> Generator[Ex]:
    return Just(value)


def characters() -> Generator[str]:
    return Characters()


def tuples(*generators: Generator) -> Generator[tuple]:
    return TupleOf(generators)


def tuples_of(element: Generator[Ex]) -> Generator[Tuple[Ex, ...]]:
    return VariableTupleOf(element)


def lists(element: Generator[Ex]) -> Generator[List[Ex]]:
    return ListOf(element)


def sets(element: Generator[Ex]) -> Generator[Set[Ex]]:
    return SetOf(element)


def frozensets(element: Generator[Ex]) -> Generator[FrozenSet[Ex]]:
    return SetOf(element, frozenset)


def dictionaries(keys: Generator[K], values: Generator[V]) -> Generator[Dict[K, V]]:
    """Returns a generator of ordered maps from ``keys`` to ``values``.

    Maps are :class:`~sortedcontainers.SortedDict` instances, so keys must be
    orderable.
    """
    check_type(Generator, keys, "keys")
    check_type(Generator, values, "values")
    return MapOf(keys, values)


def text(element: Any = None) -> Generator[str]:
    """Returns a generator of strings, built from single characters drawn
    from ``element`` (by default :func:`characters`)."""
    if element is not None:
        check_type(Generator, element, "element")
    return TextOf(element)


def binary() -> Generator[bytes]:
    return BytesOf()


def resize(size: int, generator: Generator[Ex]) -> Generator[Ex]:
    """Returns a generator that runs ``generator`` at ``size``, whatever size
    it is itself asked for."""
    return Resized(size, generator)


def scale(factor: float, generator: Generator[Ex]) -> Generator[Ex]:
    """Returns a generator that runs ``generator`` at the size it is asked
    for multiplied by ``factor``."""
    return Scaled(factor, generator)
