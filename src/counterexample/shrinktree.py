# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Shrink trees: a value together with a lazily computed sequence of
simpler candidate values, each of which is itself a shrink tree.

Trees are usually infinite in principle and only the parts that a search
actually visits are ever computed.  Children are ordered from the most to the
least preferred simplification, and for a given value the order never
changes.
"""

from typing import Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from counterexample._settings import settings
from counterexample.internal.lazy import LazySequence
from counterexample.reporting import verbose_report

T = TypeVar("T")
S = TypeVar("S")


def _no_children():
    return ()


class ShrinkTree(Generic[T]):
    """A root ``value`` and the shrink trees of its candidate
    simplifications.

    ``children`` is a zero argument function returning an iterable of
    ShrinkTree objects. It is called at most once, the first time anybody
    looks at the children.
    """

    __slots__ = ("value", "__children")

    def __init__(
        self,
        value: T,
        children: Optional[Callable[[], Iterable["ShrinkTree[T]"]]] = None,
    ) -> None:
        self.value = value
        self.__children = LazySequence(children or _no_children)

    @property
    def children(self) -> LazySequence["ShrinkTree[T]"]:
        return self.__children

    @property
    def is_leaf(self) -> bool:
        return not self.__children

    def map(self, f: Callable[[T], S]) -> "ShrinkTree[S]":
        return map_tree(f, self)

    def map_shrinks(
        self, f: Callable[[LazySequence["ShrinkTree[T]"]], Iterable["ShrinkTree[T]"]]
    ) -> "ShrinkTree[T]":
        return map_shrinks(f, self)

    def filter(self, predicate: Callable[[T], bool]) -> Optional["ShrinkTree[T]"]:
        return filter_tree(predicate, self)

    def __repr__(self) -> str:
        return f"ShrinkTree({self.value!r})"


def just(value: T) -> ShrinkTree[T]:
    """A tree with no shrinks."""
    return ShrinkTree(value)


def shrink_recursively(
    value: T, strategy: Callable[[T], Iterable[T]]
) -> ShrinkTree[T]:
    """Builds the tree in which the children of every node are the candidates
    ``strategy`` proposes for that node's value."""
    return ShrinkTree(
        value,
        lambda: (shrink_recursively(c, strategy) for c in strategy(value)),
    )


def map_tree(f: Callable[[T], S], tree: ShrinkTree[T]) -> ShrinkTree[S]:
    """Returns the tree with ``f`` applied to every value.

    ``f`` is called for a node only when that node is reached."""
    return ShrinkTree(
        f(tree.value), lambda: (map_tree(f, child) for child in tree.children)
    )


def map_shrinks(
    f: Callable[[LazySequence[ShrinkTree[T]]], Iterable[ShrinkTree[T]]],
    tree: ShrinkTree[T],
) -> ShrinkTree[T]:
    """Returns a tree with the same root whose children are ``f`` applied to
    the original children."""
    return ShrinkTree(tree.value, lambda: f(tree.children))


def filter_tree(
    predicate: Callable[[T], bool], tree: ShrinkTree[T]
) -> Optional[ShrinkTree[T]]:
    """Removes every subtree whose root does not satisfy ``predicate``.

    A pruned subtree takes all of its descendants with it.  If the root itself
    fails, there is nothing left and None is returned.
    """
    if not predicate(tree.value):
        return None
    return ShrinkTree(tree.value, lambda: _filter_children(predicate, tree.children))


def _filter_children(predicate, children):
    for child in children:
        filtered = filter_tree(predicate, child)
        if filtered is not None:
            yield filtered


def iter_first_children(tree: ShrinkTree[T]) -> Iterator[ShrinkTree[T]]:
    """Yields ``tree``, then its first child, then that child's first child,
    and so on down to a leaf."""
    while True:
        yield tree
        if not tree.children:
            return
        tree = tree.children[0]


def find_local_min(
    tree: ShrinkTree[T],
    predicate: Callable[[T], bool],
    max_shrinks: Optional[int] = None,
) -> Tuple[T, int]:
    """Walks down ``tree`` by repeatedly moving to the first child whose value
    satisfies ``predicate``, and returns the value it stops at together with
    the number of steps taken.

    The root is assumed to satisfy ``predicate`` and is not checked.  The walk
    stops at a node none of whose children satisfy ``predicate``, or after
    ``max_shrinks`` steps (defaulting to the ``max_shrinks`` setting).
    """
    if max_shrinks is None:
        max_shrinks = settings.default.max_shrinks

    current = tree
    steps = 0
    while max_shrinks is None or steps < max_shrinks:
        for child in current.children:
            if predicate(child.value):
                current = child
                steps += 1
                verbose_report(lambda: f"Shrunk example to {current.value!r}")
                break
        else:
            break
    return current.value, steps
