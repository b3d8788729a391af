# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import contextlib
from io import StringIO

from counterexample import RandomState
from counterexample.reporting import with_reporter
from counterexample.shrinktree import ShrinkTree


class FixedAtoms(RandomState):
    """A random state that hands out exactly the given atoms, and fails the
    test if anything asks for more."""

    def __init__(self, atoms):
        super().__init__(0)
        self.atoms = list(atoms)
        self.consumed = 0

    def next_atom(self):
        assert self.consumed < len(self.atoms), "Drew more atoms than expected"
        atom = self.atoms[self.consumed]
        self.consumed += 1
        return atom


def child_values(tree):
    return [child.value for child in tree.children]


def all_values(tree):
    """Every value in a finite tree, depth first."""
    result = [tree.value]
    for child in tree.children:
        result.extend(all_values(child))
    return result


def recording_tree(value, children, log):
    """A tree whose children are only listed when someone looks, at which
    point ``value`` is appended to ``log``."""

    def make_children():
        log.append(value)
        return children

    return ShrinkTree(value, make_children)


@contextlib.contextmanager
def capture_reports():
    out = StringIO()

    def reporter(message):
        out.write(message)
        out.write("\n")

    with with_reporter(reporter):
        yield out
