# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from counterexample.generators._internal.collections import (
    Collection,
    collection_tree,
    tuple_tree,
)
from counterexample.generators._internal.core import (
    binary,
    booleans,
    characters,
    dictionaries,
    floats,
    frozensets,
    integers,
    just,
    lists,
    resize,
    scale,
    sets,
    text,
    tuples,
    tuples_of,
)
from counterexample.generators._internal.generators import REFERENCE_SIZE, Generator
from counterexample.generators._internal.numbers import bits_for_size
from counterexample.generators._internal.types import (
    arbitrary,
    generate,
    register_generator,
    shrink,
)

__all__ = [
    "REFERENCE_SIZE",
    "Collection",
    "Generator",
    "arbitrary",
    "binary",
    "bits_for_size",
    "booleans",
    "characters",
    "collection_tree",
    "dictionaries",
    "floats",
    "frozensets",
    "generate",
    "integers",
    "just",
    "lists",
    "register_generator",
    "resize",
    "scale",
    "sets",
    "shrink",
    "text",
    "tuple_tree",
    "tuples",
    "tuples_of",
]
