# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The lookup from requested types to generators.

Resolution happens in :func:`arbitrary`, which is expected to be called when
a test or a composite generator is defined.  Asking for a type nobody has
registered fails there, with :class:`~counterexample.errors.ResolutionFailed`,
rather than when values are produced.
"""

import ctypes
import typing
from functools import lru_cache
from typing import Callable, Dict, Type, TypeVar, Union

from counterexample.errors import InvalidArgument, ResolutionFailed
from counterexample.generators._internal.collections import (
    ListOf,
    MapOf,
    SetOf,
    TupleOf,
    VariableTupleOf,
)
from counterexample.generators._internal.generators import Generator
from counterexample.generators._internal.misc import Booleans, Just
from counterexample.generators._internal.numbers import Floats, Integers
from counterexample.generators._internal.strings import BytesOf, TextOf
from counterexample.internal.entropy import RandomState
from counterexample.reporting import debug_report
from counterexample.shrinktree import ShrinkTree

Ex = TypeVar("Ex")

GeneratorFactory = Callable[..., Generator]

# Either a generator, for a plain type, or a function from the generators of
# the type arguments to a generator, for a generic type such as list.
_global_type_lookup: Dict[type, Union[Generator, GeneratorFactory]] = {
    type(None): Just(None),
    bool: Booleans(),
    ctypes.c_bool: Booleans(),
    int: Integers(64, signed=True),
    ctypes.c_int8: Integers(8, signed=True),
    ctypes.c_int16: Integers(16, signed=True),
    ctypes.c_int32: Integers(32, signed=True),
    ctypes.c_int64: Integers(64, signed=True),
    ctypes.c_uint8: Integers(8, signed=False),
    ctypes.c_uint16: Integers(16, signed=False),
    ctypes.c_uint32: Integers(32, signed=False),
    ctypes.c_uint64: Integers(64, signed=False),
    float: Floats(),
    ctypes.c_float: Floats(32),
    ctypes.c_double: Floats(),
    str: TextOf(),
    bytes: BytesOf(),
    list: ListOf,
    tuple: lambda *components: TupleOf(components),
    set: SetOf,
    frozenset: lambda element: SetOf(element, frozenset),
    dict: MapOf,
}


# The empty tuple type has no type arguments at all on recent Pythons, so it
# cannot be told apart from a bare tuple by its arguments.
EMPTY_TUPLE_TYPES = (tuple[()], typing.Tuple[()])


def _describe(thing):
    return getattr(thing, "__name__", None) or repr(thing)


def arbitrary(thing: Type[Ex]) -> Generator[Ex]:
    """Returns the generator for values of type ``thing``.

    ``thing`` may be any registered type, or a parametrised ``list``,
    ``tuple``, ``set``, ``frozenset`` or ``dict`` (or their ``typing``
    aliases) whose type arguments can in turn be resolved.  ``tuple[T, ...]``
    gives variable length tuples, and ``tuple[()]`` the empty tuple.

    Resolutions are cached, so asking for the same type twice gives the
    same generator object.
    """
    try:
        hash(thing)
    except TypeError:
        raise ResolutionFailed(f"{thing!r} is not a type") from None
    return _resolve(thing)


@lru_cache(maxsize=None)
def _resolve(thing):
    origin = typing.get_origin(thing)
    args = typing.get_args(thing)
    key = thing if origin is None else origin

    entry = _global_type_lookup.get(key)
    if entry is None:
        raise ResolutionFailed(
            f"Could not resolve {thing!r} to a generator.  Register one with "
            "counterexample.register_generator() first."
        )

    if isinstance(entry, Generator):
        if args:
            raise ResolutionFailed(
                f"{_describe(key)} does not take type arguments, but was "
                f"requested as {thing!r}"
            )
        result = entry
    elif key is tuple and thing in EMPTY_TUPLE_TYPES:
        result = TupleOf(())
    elif not args:
        raise ResolutionFailed(
            f"Cannot resolve {thing!r} without type arguments; ask for e.g. "
            f"{_describe(key)}[int] instead."
        )
    elif key is tuple and len(args) == 2 and args[1] is Ellipsis:
        result = VariableTupleOf(arbitrary(args[0]))
    else:
        generators = [arbitrary(arg) for arg in args]
        try:
            result = entry(*generators)
        except TypeError as err:
            raise ResolutionFailed(
                f"Could not build a generator for {thing!r}: {err}"
            ) from err

    debug_report(lambda: f"Resolved {thing!r} to {result!r}")
    return result


def register_generator(
    custom_type: type, generator: Union[Generator, GeneratorFactory]
) -> None:
    """Add an entry to the global type-to-generator lookup.

    ``generator`` may be a :class:`~counterexample.generators.Generator`, or
    for a generic type a function that takes the generators for the type's
    arguments and returns a generator.  Registering a type again replaces the
    previous entry.
    """
    if not isinstance(custom_type, type):
        raise InvalidArgument(f"custom_type={custom_type!r} must be a type")
    if not (isinstance(generator, Generator) or callable(generator)):
        raise InvalidArgument(
            f"generator={generator!r} must be a Generator, or a function that "
            "takes the generators of a generic type's arguments and returns a "
            "Generator"
        )
    _global_type_lookup[custom_type] = generator
    _resolve.cache_clear()


def generate(thing: Type[Ex], size: int, random: RandomState) -> Ex:
    """Produces a value of type ``thing`` at ``size`` from ``random``."""
    return arbitrary(thing).generate(size, random)


def shrink(thing: Type[Ex], value: Ex) -> ShrinkTree[Ex]:
    """Returns the shrink tree of ``value``, a value of type ``thing``."""
    return arbitrary(thing).shrink(value)
