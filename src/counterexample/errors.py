# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.


class CounterexampleException(Exception):
    """Generic parent class for exceptions thrown by counterexample."""


class InvalidArgument(CounterexampleException, TypeError):
    """Used to indicate that the arguments to a counterexample function were
    in some manner incorrect."""


class ResolutionFailed(InvalidArgument):
    """Raised by :func:`~counterexample.arbitrary` when no generator is
    registered for the requested type.

    This happens when the generator is looked up, before any value is
    produced, so a program asking for an unsupported type fails as soon as
    it is defined rather than when it is first run.
    """


class InvalidState(CounterexampleException):
    """The system is not in a state where you were allowed to do that."""
