# This file is part of counterexample.
#
# Copyright the counterexample Authors.
# Individual contributors are listed in AUTHORS.rst and the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""A module controlling settings for counterexample.

Either an explicit settings object can be used or the default object on
this module can be modified.
"""

import contextlib
import os
from enum import IntEnum, unique
from typing import Any, Dict, Optional

import attr

from counterexample.errors import InvalidArgument, InvalidState
from counterexample.internal.validation import check_integer, check_type
from counterexample.utils.conventions import not_set
from counterexample.utils.dynamicvariables import DynamicVariable

__all__ = ["settings"]

PROFILE_ENVIRONMENT_VARIABLE = "COUNTEREXAMPLE_PROFILE"

all_settings: Dict[str, "Setting"] = {}


class settingsProperty:
    def __init__(self, name, show_default):
        self.name = name
        self.show_default = show_default

    def __get__(self, obj, type=None):
        if obj is None:
            return self
        try:
            return obj.__dict__[self.name]
        except KeyError:
            raise AttributeError(self.name) from None

    def __set__(self, obj, value):
        obj.__dict__[self.name] = value

    def __delete__(self, obj):
        raise AttributeError(f"Cannot delete attribute {self.name}")

    @property
    def __doc__(self):
        description = all_settings[self.name].description
        default = (
            repr(getattr(settings.default, self.name))
            if self.show_default
            else "(dynamically calculated)"
        )
        return f"{description}\n\ndefault value: ``{default}``"


default_variable = DynamicVariable(None)


class settingsMeta(type):
    @property
    def default(self):
        v = default_variable.value
        if v is not None:
            return v
        if hasattr(settings, "_current_profile"):
            if settings._current_profile not in settings._profiles:
                # Not registered yet; use the defaults until it is.
                return settings._profiles["default"]
            settings.load_profile(settings._current_profile)
            assert default_variable.value is not None
        return default_variable.value

    def _assign_default_internal(self, value):
        default_variable.value = value

    def __setattr__(self, name, value):
        if name == "default":
            raise AttributeError(
                "Cannot assign to the property settings.default - "
                "consider using settings.load_profile instead."
            )
        elif not (isinstance(value, settingsProperty) or name.startswith("_")):
            raise AttributeError(
                f"Cannot assign counterexample.settings.{name}={value!r} - the "
                "settings class is immutable.  You can change the global default "
                "settings with settings.load_profile, or use local_settings(...) "
                "for a single block of code instead."
            )
        return type.__setattr__(self, name, value)


class settings(metaclass=settingsMeta):
    """A settings object controls how much work the shrink walks do and how
    chatty counterexample is about it.

    Default values are picked up from the settings.default object and
    changes made there will be picked up in newly created settings.
    """

    _WHITELISTED_REAL_PROPERTIES = ["_construction_complete"]
    __definitions_are_locked = False
    _profiles: Dict[str, "settings"] = {}
    __module__ = "counterexample"

    def __getattr__(self, name):
        if name in all_settings:
            return all_settings[name].default
        raise AttributeError(f"settings has no attribute {name}")

    def __init__(self, parent: Optional["settings"] = None, **kwargs: Any) -> None:
        if parent is not None and not isinstance(parent, settings):
            raise InvalidArgument(
                f"Invalid argument: parent={parent!r} is not a settings instance"
            )
        self._construction_complete = False
        defaults = parent or settings.default
        for setting in all_settings.values():
            if kwargs.get(setting.name, not_set) is not_set:
                if defaults is not None:
                    kwargs[setting.name] = getattr(defaults, setting.name)
                else:
                    kwargs[setting.name] = setting.default
            elif setting.validator:
                kwargs[setting.name] = setting.validator(kwargs[setting.name])
        for name, value in kwargs.items():
            if name not in all_settings:
                raise InvalidArgument(
                    f"Invalid argument: {name!r} is not a valid setting"
                )
            setattr(self, name, value)
        self._construction_complete = True

    @classmethod
    def _define_setting(
        cls,
        name,
        description,
        default,
        options=None,
        validator=None,
        show_default=True,
    ):
        """Add a new setting.

        - name is the name of the property that will be used to access the
          setting. This must be a valid python identifier.
        - description will appear in the property's docstring
        - default is the default value.
        """
        if settings.__definitions_are_locked:
            raise InvalidState(
                "settings have been locked and may no longer be defined."
            )
        if options is not None:
            options = tuple(options)
            assert default in options
        else:
            assert validator is not None

        all_settings[name] = Setting(
            name=name,
            description=description.strip(),
            default=default,
            options=options,
            validator=validator,
        )
        setattr(settings, name, settingsProperty(name, show_default))

    @classmethod
    def lock_further_definitions(cls):
        settings.__definitions_are_locked = True

    def __setattr__(self, name, value):
        if name in settings._WHITELISTED_REAL_PROPERTIES:
            return object.__setattr__(self, name, value)
        elif name in all_settings:
            if self._construction_complete:
                raise AttributeError(
                    "settings objects are immutable and may not be assigned to"
                    " after construction."
                )
            setting = all_settings[name]
            if setting.options is not None and value not in setting.options:
                raise InvalidArgument(
                    f"Invalid {name}, {value!r}. Valid options: {setting.options!r}"
                )
            return object.__setattr__(self, name, value)
        else:
            raise AttributeError(f"No such setting {name}")

    def __repr__(self):
        bits = sorted(f"{name}={getattr(self, name)!r}" for name in all_settings)
        return "settings({})".format(", ".join(bits))

    def show_changed(self):
        bits = []
        for name, setting in all_settings.items():
            value = getattr(self, name)
            if value != setting.default:
                bits.append(f"{name}={value!r}")
        return ", ".join(sorted(bits, key=len))

    @staticmethod
    def register_profile(
        name: str, parent: Optional["settings"] = None, **kwargs: Any
    ) -> None:
        """Registers a collection of values to be used as a settings profile.

        The arguments to this method are exactly as for
        :class:`~counterexample.settings`: optional ``parent`` settings, and
        keyword arguments for each setting that will be set differently to
        parent (or settings.default, if parent is None).
        """
        check_type(str, name, "name")
        settings._profiles[name] = settings(parent=parent, **kwargs)

    @staticmethod
    def get_profile(name: str) -> "settings":
        """Return the profile with the given name."""
        check_type(str, name, "name")
        try:
            return settings._profiles[name]
        except KeyError:
            raise InvalidArgument(f"Profile {name!r} is not registered") from None

    @staticmethod
    def load_profile(name: str) -> None:
        """Loads in the settings defined in the profile provided.

        If the profile does not exist, InvalidArgument will be raised.
        Any setting not defined in the profile will be the library
        defined default for that setting.
        """
        check_type(str, name, "name")
        settings._current_profile = name
        settings._assign_default_internal(settings.get_profile(name))


@contextlib.contextmanager
def local_settings(s):
    with default_variable.with_value(s):
        yield s


@attr.s()
class Setting:
    name = attr.ib()
    description = attr.ib()
    default = attr.ib()
    options = attr.ib()
    validator = attr.ib()


@unique
class Verbosity(IntEnum):
    quiet = 0
    normal = 1
    verbose = 2
    debug = 3

    def __repr__(self):
        return f"Verbosity.{self.name}"


settings._define_setting(
    "verbosity",
    options=tuple(Verbosity),
    default=Verbosity.normal,
    description="Control the verbosity level of counterexample messages",
)


def _validate_max_shrinks(x):
    if x is None:
        return x
    check_integer(x, "max_shrinks")
    if x < 0:
        raise InvalidArgument(f"max_shrinks={x!r} must be non-negative or None.")
    return x


settings._define_setting(
    "max_shrinks",
    default=None,
    validator=_validate_max_shrinks,
    description="""
The largest number of successful shrink steps that
:func:`~counterexample.shrinktree.find_local_min` will take before returning
the best value found so far.  ``None`` means walk until a local minimum is
reached.
""",
)


settings._define_setting(
    "derandomize",
    default=False,
    options=(True, False),
    description="""
If this is True then :meth:`RandomState.fresh
<counterexample.internal.entropy.RandomState.fresh>` always returns the state
for seed 0, so a driver that never passes an explicit seed still produces the
same values on every run.
""",
)

settings.lock_further_definitions()

settings.register_profile("default", settings())
settings.load_profile("default")
assert settings.default is not None

if os.getenv(PROFILE_ENVIRONMENT_VARIABLE):
    # Resolved on first access of settings.default, so that the named profile
    # may be registered after import (e.g. in a conftest.py).
    settings._current_profile = os.environ[PROFILE_ENVIRONMENT_VARIABLE]
    settings._assign_default_internal(None)
