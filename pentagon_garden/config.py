"""Process-wide defaults for the orbit searches."""

from __future__ import annotations

import copy

from .approx import FloatHasher
from .search.model import ExpansionOptions

_DEFAULT_OPTIONS = ExpansionOptions()


def get_default_options() -> ExpansionOptions:
    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: ExpansionOptions) -> None:
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)


def get_float_hasher() -> FloatHasher:
    """Return the quantiser matching the current default tolerance."""

    return FloatHasher(_DEFAULT_OPTIONS.tolerance)
