# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import threading
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class LazySequence(Generic[T]):
    """A sequence backed by an iterable that is only created when an element
    is first asked for, and only read as far as the furthest element anyone
    has asked for.

    Elements are remembered once read, so every traversal sees the very same
    objects in the same order and the underlying iterable is consumed at
    most once, even when several threads traverse the sequence together.
    """

    __slots__ = (
        "__thunk",
        "__iterator",
        "__cache",
        "__exhausted",
        "__error",
        "__lock",
    )

    def __init__(self, thunk: Callable[[], Iterable[T]]) -> None:
        self.__thunk: Optional[Callable[[], Iterable[T]]] = thunk
        self.__iterator: Optional[Iterator[T]] = None
        self.__cache: List[T] = []
        self.__exhausted = False
        self.__error: Optional[Exception] = None
        self.__lock = threading.Lock()

    def __force_to(self, i: int) -> bool:
        """Read elements until index ``i`` is available, returning whether
        it exists.

        If reading the underlying iterable failed, every later attempt to
        read past the elements it did produce fails with the same error.
        """
        with self.__lock:
            while len(self.__cache) <= i and not self.__exhausted:
                if self.__error is not None:
                    raise self.__error
                if self.__iterator is None:
                    assert self.__thunk is not None
                    self.__iterator = iter(self.__thunk())
                    self.__thunk = None
                try:
                    self.__cache.append(next(self.__iterator))
                except StopIteration:
                    self.__exhausted = True
                    self.__iterator = None
                except Exception as err:
                    self.__error = err
                    self.__iterator = None
                    raise
            return i < len(self.__cache)

    @property
    def materialized(self) -> int:
        """The number of elements read from the underlying iterable so far."""
        return len(self.__cache)

    @property
    def exhausted(self) -> bool:
        return self.__exhausted

    def __iter__(self) -> Iterator[T]:
        i = 0
        while self.__force_to(i):
            yield self.__cache[i]
            i += 1

    def __bool__(self) -> bool:
        return self.__force_to(0)

    def __len__(self) -> int:
        for _ in self:
            pass
        return len(self.__cache)

    def __getitem__(self, i: int) -> T:
        if i < 0:
            i += len(self)
        if i < 0 or not self.__force_to(i):
            raise IndexError(f"Index {i} out of range")
        return self.__cache[i]

    def __repr__(self) -> str:
        parts = [repr(x) for x in self.__cache]
        if not self.__exhausted:
            parts.append("...")
        return "LazySequence([{}])".format(", ".join(parts))
