# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""The deterministic random source that every generator draws from.

A :class:`RandomState` is identified by a seed and an address path.  Atoms
are read from it as a stream, and any other state can be looked up from it
by address without disturbing that stream, so that one part of a composite
generation can be reproduced on its own from ``(seed, path)``.
"""

import hashlib
import random
from typing import Iterable, Tuple

from counterexample._settings import settings
from counterexample.internal.validation import check_integer, check_valid_path

ATOM_BITS = 64
ATOM_MAX = 2**ATOM_BITS - 1


def state_key(seed: int, path: Tuple[int, ...]) -> int:
    """Returns the integer key that seeds the stream at ``(seed, path)``.

    Keys are hashed rather than combined arithmetically so that nearby
    addresses give unrelated streams."""
    digest = hashlib.sha384(repr((seed, path)).encode()).digest()
    return int.from_bytes(digest[:16], "big")


class RandomState:
    """A stream of :data:`ATOM_BITS`-bit unsigned integers.

    ``next_atom`` advances the stream.  ``derive`` and ``split`` return new
    states and never change the atoms this state goes on to produce.

    A RandomState must not be shared between threads: give each thread its
    own state via :meth:`derive` or :meth:`split`.
    """

    __slots__ = ("seed", "path", "__random", "__position", "__splits")

    def __init__(self, seed: int = 0, path: Iterable[int] = ()) -> None:
        check_integer(seed, "seed")
        self.seed = seed
        self.path = check_valid_path(path)
        self.__random = random.Random(state_key(self.seed, self.path))
        self.__position = 0
        self.__splits = 0

    @classmethod
    def fresh(cls) -> "RandomState":
        """Returns a state with an unpredictable seed, or the seed 0 state
        when the ``derandomize`` setting is on."""
        if settings.default.derandomize:
            return cls(0)
        return cls(random.SystemRandom().getrandbits(ATOM_BITS))

    @property
    def position(self) -> int:
        """The number of atoms drawn from this state so far."""
        return self.__position

    def next_atom(self) -> int:
        self.__position += 1
        return self.__random.getrandbits(ATOM_BITS)

    def derive(self, path: Iterable[int]) -> "RandomState":
        """Returns the state at ``self.path + path``.

        Every path is valid, and the same path always gives a state that
        produces the same atoms, however many atoms have been drawn from
        this one."""
        return RandomState(self.seed, self.path + check_valid_path(path))

    def split(self) -> "RandomState":
        """Returns a new independent child state.

        Successive splits of one state give the children at ``[0]``, ``[1]``,
        ``[2]``... so a sequence of splits is itself reproducible."""
        child = self.derive([self.__splits])
        self.__splits += 1
        return child

    def copy(self) -> "RandomState":
        result = RandomState(self.seed, self.path)
        result.__random.setstate(self.__random.getstate())
        result.__position = self.__position
        result.__splits = self.__splits
        return result

    def __eq__(self, other):
        if not isinstance(other, RandomState):
            return NotImplemented
        return (self.seed, self.path, self.__position, self.__splits) == (
            other.seed,
            other.path,
            other.__position,
            other.__splits,
        )

    def __hash__(self):
        return hash((self.seed, self.path))

    def __repr__(self):
        return f"RandomState(seed={self.seed!r}, path={list(self.path)!r})"


def derive_random_state(root: RandomState, path: Iterable[int]) -> RandomState:
    """Returns the state reachable from ``root`` by following ``path``.

    ``root`` is left untouched."""
    return root.derive(path)
