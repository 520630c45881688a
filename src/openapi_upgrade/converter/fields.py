"""Helpers for building output nodes that only contain keys with a value."""

import copy
from typing import Any, Iterable


def pick(source: dict, keys: Iterable[str]) -> dict:
    """Copy the given keys from source, skipping the ones it does not have.

    An explicit null in the source is kept, only missing keys are skipped.
    Values are deep-copied so the result never aliases the input tree.
    """
    return {key: copy.deepcopy(source[key]) for key in keys if key in source}


def compact(**fields: Any) -> dict:
    """Build a dict from keyword arguments, dropping the ones that are None.

    Converter functions return None for "nothing to emit", so this is
    used for values that were computed rather than copied.
    """
    return {key: value for key, value in fields.items() if value is not None}
