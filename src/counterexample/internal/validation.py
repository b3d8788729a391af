# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from counterexample.errors import InvalidArgument


def check_type(typ, arg, name):
    if not isinstance(arg, typ):
        if isinstance(typ, tuple):
            assert len(typ) >= 2, "Use bare type instead of len-1 tuple"
            typ_string = "one of " + ", ".join(t.__name__ for t in typ)
        else:
            typ_string = typ.__name__
        raise InvalidArgument(
            f"Expected {typ_string} but got {name}={arg!r} (type={type(arg).__name__})"
        )


def check_integer(arg, name):
    """Checks that ``arg`` is an int and not a bool."""
    if isinstance(arg, bool) or not isinstance(arg, int):
        raise InvalidArgument(
            f"Expected int but got {name}={arg!r} (type={type(arg).__name__})"
        )


def check_valid_size(size, name="size"):
    """Checks that size is a non-negative integer.

    Otherwise raises InvalidArgument.
    """
    check_integer(size, name)
    if size < 0:
        raise InvalidArgument(f"Invalid size {name}={size!r} < 0")


def check_valid_path(path, name="path"):
    """Checks that a random state address is a sequence of integers, and
    returns it as a tuple."""
    try:
        path = tuple(path)
    except TypeError:
        raise InvalidArgument(
            f"{name}={path!r} must be an iterable of integers"
        ) from None
    for i, step in enumerate(path):
        check_integer(step, f"{name}[{i}]")
    return path
