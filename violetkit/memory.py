"""Helpers for moving values out of containers and objects."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any


def _default_of(value: Any) -> Any:
    kind = type(value)
    try:
        return kind()
    except TypeError as exc:
        raise TypeError(f"cannot create a default {kind.__name__}") from exc


def take(target: Any, name: Any) -> Any:
    """Replace ``target[name]`` or ``target.name`` with its type's default.

    Mappings are accessed by key, other objects by attribute. Returns the
    old value.
    """
    if isinstance(target, MutableMapping):
        old = target[name]
        target[name] = _default_of(old)
    else:
        old = getattr(target, name)
        setattr(target, name, _default_of(old))
    return old