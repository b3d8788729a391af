# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Shrink strategies: functions from a value to a lazy iterator of simpler
candidate values.

Strategies only propose candidates.  Turning them into shrink trees is the
job of :func:`~counterexample.shrinktree.shrink_recursively`.  The sequence
helpers at the bottom work on any sequence, including a tuple of shrink
trees, which is how the composite generators order the children of a tuple
or a collection: removals by :func:`remove_each`, then replacements by
:func:`replace_each`.

Every function here is lazy: nothing is computed until the first candidate
is asked for, and no later candidate is computed before it is needed.
"""

from typing import Callable, Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")
S = TypeVar("S")


def nothing() -> Iterator[T]:
    """No candidates at all: the value is already as simple as it gets."""
    return iter(())


def constant(values: Iterable[T]) -> Iterator[T]:
    """Yields each of ``values`` once, in order."""
    yield from values


def _halve(distance):
    if isinstance(distance, int):
        # Round towards zero, i.e. towards the target.
        return distance // 2 if distance >= 0 else -(-distance // 2)
    return distance / 2


def towards(value: T, target: T) -> Iterator[T]:
    """Moves ``value`` towards ``target`` by repeatedly halving the distance
    between them.

    Each candidate is strictly closer to ``target`` than the one before it,
    ``value`` itself is never yielded, and ``target`` is always the last
    candidate.  For ``value == target`` there are no candidates.
    """
    distance = value - target
    previous = value
    while True:
        distance = _halve(distance)
        candidate = target + distance
        if candidate == previous:
            return
        yield candidate
        previous = candidate


def sequentially(*strategies: Iterable[T]) -> Iterator[T]:
    """Yields all the candidates of the first strategy, then all those of the
    second, and so on.

    A strategy is not started until every strategy before it has run out.
    """
    for strategy in strategies:
        yield from strategy


def map_candidates(f: Callable[[T], S], candidates: Iterable[T]) -> Iterator[S]:
    for candidate in candidates:
        yield f(candidate)


def _replaced(seq, i, replacement):
    result = list(seq[:i])
    result.extend(replacement)
    result.extend(seq[i + 1 :])
    if isinstance(seq, tuple):
        return tuple(result)
    return result


def remove_each(seq: Sequence[T]) -> Iterator[Sequence[T]]:
    """Yields ``seq`` with one element deleted, for each position in turn."""
    for i in range(len(seq)):
        yield _replaced(seq, i, ())


def replace_each(
    seq: Sequence[T], strategy: Callable[[T], Iterable[T]]
) -> Iterator[Sequence[T]]:
    """Yields ``seq`` with a single element replaced by one of the candidates
    ``strategy`` proposes for it, trying every candidate for the first
    element before moving on to the second."""
    for i, element in enumerate(seq):
        for candidate in strategy(element):
            yield _replaced(seq, i, (candidate,))
