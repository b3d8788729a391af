# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import math
import struct

# Format codes for floats of each supported width, used for byte-wise casts.
# See https://docs.python.org/3/library/struct.html#format-characters
STRUCT_FORMATS = {
    32: "!f",
    64: "!d",
}


def reinterpret_bits(x, from_, to):
    return struct.unpack(to, struct.pack(from_, x))[0]


def float_of(x, width):
    """Rounds ``x`` to the nearest float of the given width.

    Values beyond the range of the width become infinite, as they would in
    arithmetic carried out at that width."""
    assert width in STRUCT_FORMATS
    if width == 64:
        return float(x)
    fmt = STRUCT_FORMATS[width]
    try:
        return reinterpret_bits(float(x), fmt, fmt)
    except OverflowError:
        return math.copysign(math.inf, x)


def is_representable(x, width):
    return math.isnan(x) or float_of(x, width) == x
