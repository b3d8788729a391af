# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from typing import Any, Callable, Iterable, List, Sequence, Tuple

from sortedcontainers import SortedDict

from counterexample.errors import InvalidArgument
from counterexample.generators._internal.generators import Generator
from counterexample.generators._internal.numbers import clamp_size
from counterexample.internal.validation import check_type
from counterexample.shrinking import (
    constant,
    map_candidates,
    nothing,
    remove_each,
    replace_each,
    sequentially,
)
from counterexample.shrinktree import ShrinkTree


def _children_of(tree):
    return tree.children


def tuple_tree(trees: Tuple[ShrinkTree, ...]) -> ShrinkTree[tuple]:
    """Combines the trees of each component into the tree of the tuple.

    Every child changes exactly one component: first all the shrinks of the
    first component with the rest held fixed, then all those of the second,
    and so on.
    """

    def children():
        return map_candidates(tuple_tree, replace_each(trees, _children_of))

    return ShrinkTree(tuple(tree.value for tree in trees), children)


def collection_tree(
    trees: Tuple[ShrinkTree, ...], build: Callable[[List[Any]], Any]
) -> ShrinkTree:
    """Combines the trees of a collection's elements into the tree of the
    collection, whose values are ``build`` applied to the element values.

    The children are, in order: the empty collection, the collection with a
    single element removed (for each position), and the collection with a
    single element replaced by one of that element's shrinks.
    """

    def children():
        if not trees:
            return nothing()
        removals = remove_each(trees) if len(trees) > 1 else nothing()
        return map_candidates(
            lambda smaller: collection_tree(smaller, build),
            sequentially(
                constant([()]), removals, replace_each(trees, _children_of)
            ),
        )

    return ShrinkTree(build([tree.value for tree in trees]), children)


class TupleOf(Generator[tuple]):
    """Fixed length tuples whose components come from the given generators,
    produced left to right."""

    def __init__(self, generators: Sequence[Generator]) -> None:
        self.generators = tuple(generators)
        for g in self.generators:
            check_type(Generator, g, "generators")

    def __repr__(self):
        return "tuples({})".format(", ".join(map(repr, self.generators)))

    def produce(self, size, random):
        return tuple(g.produce(size, random) for g in self.generators)

    def shrink(self, value):
        check_type(tuple, value, "value")
        if len(value) != len(self.generators):
            raise InvalidArgument(
                f"Expected a tuple of length {len(self.generators)} but got "
                f"value={value!r}"
            )
        return tuple_tree(
            tuple(g.shrink(v) for g, v in zip(self.generators, value))
        )


class Collection(Generator):
    """A variable length collection of independent elements.

    The length is at most the (capped) size, and every element is produced
    at the full size rather than a share of it.  ``build`` turns the list of
    elements into the collection and ``elements_of`` does the opposite.
    """

    def __init__(
        self,
        element: Generator,
        build: Callable[[List[Any]], Any] = list,
        elements_of: Callable[[Any], Iterable[Any]] = list,
    ) -> None:
        check_type(Generator, element, "element")
        self.element = element
        self.build = build
        self.elements_of = elements_of

    def __repr__(self):
        return f"{type(self).__name__}({self.element!r})"

    def produce(self, size, random):
        length = random.next_atom() % (clamp_size(size) + 1)
        return self.build([self.element.produce(size, random) for _ in range(length)])

    def shrink(self, value):
        trees = tuple(self.element.shrink(v) for v in self.elements_of(value))
        return collection_tree(trees, self.build)


class ListOf(Collection):
    def __init__(self, element):
        super().__init__(element, list, list)

    def __repr__(self):
        return f"lists({self.element!r})"

    def shrink(self, value):
        check_type(list, value, "value")
        return super().shrink(value)


class VariableTupleOf(Collection):
    def __init__(self, element):
        super().__init__(element, tuple, list)

    def __repr__(self):
        return f"tuples_of({self.element!r})"

    def shrink(self, value):
        check_type(tuple, value, "value")
        return super().shrink(value)


def _sorted_if_possible(values):
    try:
        return sorted(values)
    except TypeError:
        return list(values)


class SetOf(Collection):
    """Sets of elements.  Equal elements collapse, so a set may come out
    shorter than the length that was drawn for it."""

    def __init__(self, element, build=set):
        super().__init__(element, build, _sorted_if_possible)

    def __repr__(self):
        name = "sets" if self.build is set else "frozensets"
        return f"{name}({self.element!r})"

    def shrink(self, value):
        check_type((set, frozenset), value, "value")
        return super().shrink(value)


def build_map(items):
    """Builds an ordered map from key/value pairs.  When a key appears more
    than once, its first value is kept."""
    result = SortedDict()
    for key, value in items:
        result.setdefault(key, value)
    return result


def _items(mapping):
    if isinstance(mapping, SortedDict):
        return list(mapping.items())
    return _sorted_if_possible(mapping.items())


class MapOf(Collection):
    """Ordered maps, as :class:`~sortedcontainers.SortedDict` objects, built
    from a collection of key/value pairs."""

    def __init__(self, keys, values):
        self.keys = keys
        self.values = values
        super().__init__(TupleOf((keys, values)), build_map, _items)

    def __repr__(self):
        return f"dictionaries({self.keys!r}, {self.values!r})"

    def shrink(self, value):
        check_type(dict, value, "value")
        return super().shrink(value)
