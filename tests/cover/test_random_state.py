# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import threading

import pytest
from hypothesis import given, strategies as st

from counterexample import RandomState, derive_random_state
from counterexample._settings import local_settings, settings
from counterexample.errors import InvalidArgument
from counterexample.internal.entropy import ATOM_MAX

seeds = st.integers(min_value=-(2**70), max_value=2**70)
paths = st.lists(st.integers(min_value=-(2**40), max_value=2**40), max_size=5)


def atoms(state, n=10):
    return [state.next_atom() for _ in range(n)]


@given(seeds)
def test_atoms_are_in_range(seed):
    assert all(0 <= a <= ATOM_MAX for a in atoms(RandomState(seed)))


@given(seeds)
def test_same_seed_gives_same_stream(seed):
    assert atoms(RandomState(seed)) == atoms(RandomState(seed))


def test_successive_atoms_differ():
    state = RandomState(0)
    assert state.next_atom() != state.next_atom()


def test_different_seeds_give_different_streams():
    assert atoms(RandomState(0)) != atoms(RandomState(1))


@given(seeds, paths)
def test_derivation_is_reproducible(seed, path):
    root = RandomState(seed)
    assert atoms(root.derive(path)) == atoms(derive_random_state(root, path))


@given(seeds, paths)
def test_derivation_does_not_disturb_the_parent(seed, path):
    untouched = RandomState(seed)
    root = RandomState(seed)
    root.derive(path)
    derive_random_state(root, path)
    assert atoms(root) == atoms(untouched)


@given(seeds, paths)
def test_derivation_ignores_the_parents_position(seed, path):
    fresh = RandomState(seed)
    advanced = RandomState(seed)
    atoms(advanced, 3)
    assert atoms(fresh.derive(path)) == atoms(advanced.derive(path))


@given(seeds, paths, paths)
def test_derivation_composes(seed, path1, path2):
    root = RandomState(seed)
    assert atoms(root.derive(path1).derive(path2)) == atoms(
        root.derive(path1 + path2)
    )


def test_empty_path_is_the_root_stream():
    assert atoms(RandomState(3).derive([])) == atoms(RandomState(3))


def test_sibling_paths_give_different_streams():
    root = RandomState(0)
    assert atoms(root.derive([0])) != atoms(root.derive([1]))


def test_splits_are_reproducible():
    first = RandomState(5)
    second = RandomState(5)
    children = [first.split() for _ in range(3)]
    assert [c.path for c in children] == [(0,), (1,), (2,)]
    assert [atoms(c) for c in children] == [atoms(second.split()) for _ in range(3)]


def test_split_children_are_distinct():
    root = RandomState(5)
    a, b = root.split(), root.split()
    assert atoms(a) != atoms(b)


def test_copy_continues_from_the_same_position():
    state = RandomState(11)
    atoms(state, 4)
    copy = state.copy()
    assert copy == state
    assert copy.position == 4
    assert atoms(copy) == atoms(state)


def test_states_compare_by_seed_path_and_position():
    assert RandomState(1, [2]) == RandomState(1, [2])
    assert RandomState(1, [2]) != RandomState(1, [3])
    advanced = RandomState(1)
    advanced.next_atom()
    assert advanced != RandomState(1)


def test_repr_shows_the_address():
    assert repr(RandomState(4, (1, 2))) == "RandomState(seed=4, path=[1, 2])"


@pytest.mark.parametrize(
    "seed, path",
    [(1.5, ()), ("0", ()), (True, ()), (0, [1.0]), (0, ["a"]), (0, 3), (0, [False])],
)
def test_rejects_bad_addresses(seed, path):
    with pytest.raises(InvalidArgument):
        RandomState(seed, path)


def test_derive_rejects_bad_paths():
    with pytest.raises(InvalidArgument):
        RandomState(0).derive([None])


def test_fresh_is_seed_zero_when_derandomized():
    with local_settings(settings(derandomize=True)):
        assert RandomState.fresh() == RandomState(0)


def test_fresh_states_are_usable():
    state = RandomState.fresh()
    assert 0 <= state.next_atom() <= ATOM_MAX


def test_derived_states_can_be_used_from_separate_threads():
    root = RandomState(17)
    expected = [atoms(root.derive([i]), 100) for i in range(8)]
    results = [None] * 8

    def work(i):
        results[i] = atoms(root.derive([i]), 100)

    threads = [threading.Thread(target=work, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == expected
