# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""counterexample produces random values of a requested type, sized to
order, and lazily enumerates simpler versions of any value so that a failing
one can be reduced to a minimal counterexample.

It is the value engine of a property-based testing library.  Running tests,
deciding how many to run and reporting the results are left to the caller.
"""

from counterexample._settings import Verbosity, settings
from counterexample.errors import InvalidArgument, ResolutionFailed
from counterexample.generators import (
    REFERENCE_SIZE,
    Generator,
    arbitrary,
    generate,
    register_generator,
    shrink,
)
from counterexample.internal.entropy import RandomState, derive_random_state
from counterexample.shrinktree import ShrinkTree, find_local_min
from counterexample.version import __version__, __version_info__

__all__ = [
    "REFERENCE_SIZE",
    "Generator",
    "InvalidArgument",
    "RandomState",
    "ResolutionFailed",
    "ShrinkTree",
    "Verbosity",
    "arbitrary",
    "derive_random_state",
    "find_local_min",
    "generate",
    "register_generator",
    "settings",
    "shrink",
    "__version__",
]
