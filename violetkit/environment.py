"""Reading and writing process environment variables."""

from __future__ import annotations

import os

from violetkit.optional import Optional


def get_environment_variable(key: object) -> Optional[str]:
    """Return the variable named ``key``, or an empty optional if unset."""
    name = str(key)
    if not name or "=" in name or "\0" in name:
        return Optional()
    value = os.environ.get(name)
    if value is None:
        return Optional()
    return Optional(value)


def set_environment_variable(key: object, value: object, replace: bool = False) -> None:
    """Set ``key`` to ``value``.

    An existing variable is only overwritten when ``replace`` is true.
    Names the system rejects are ignored.
    """
    name = str(key)
    text = str(value)
    if not name or "=" in name:
        return
    if not replace and name in os.environ:
        return
    try:
        os.environ[name] = text
    except (ValueError, OSError):
        return