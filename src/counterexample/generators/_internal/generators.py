# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from typing import Generic, Optional, TypeVar

from counterexample.internal.entropy import RandomState
from counterexample.internal.validation import check_type, check_valid_size
from counterexample.shrinktree import ShrinkTree

Ex = TypeVar("Ex", covariant=True)

REFERENCE_SIZE = 100


class Generator(Generic[Ex]):
    """A Generator is an object that knows how to produce values of some
    type, and how to shrink any value of that type.

    Two methods define a Generator:

    * ``produce(size, random)`` returns a value.  It may read atoms from
      ``random`` and look at ``size``, and at nothing else, so the same size
      and an equal random state always give the same value.
    * ``shrink(value)`` returns the :class:`~counterexample.shrinktree.ShrinkTree`
      rooted at ``value``.  It never touches a random state, so the tree
      depends only on the value and not on how it was produced.

    Generators hold no mutable state, and may be shared freely.
    """

    def produce(self, size: int, random: RandomState) -> Ex:
        raise NotImplementedError(f"{type(self).__name__}.produce")

    def shrink(self, value: Ex) -> ShrinkTree[Ex]:
        raise NotImplementedError(f"{type(self).__name__}.shrink")

    def generate(self, size: int, random: RandomState) -> Ex:
        """Like produce, but checks its arguments first.

        This is the entry point for code outside counterexample; generators
        calling each other use produce directly.
        """
        check_valid_size(size)
        check_type(RandomState, random, "random")
        return self.produce(size, random)

    def example(self, size: int = REFERENCE_SIZE, seed: Optional[int] = None) -> Ex:
        """Provide an example of the sort of value that this generator
        produces.

        This method is here for interactive exploration of the API, not for
        any sort of real testing.
        """
        random = RandomState.fresh() if seed is None else RandomState(seed)
        return self.generate(size, random)
