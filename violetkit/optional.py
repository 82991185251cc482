"""An optional value container with explicit engaged and empty states."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_EMPTY: Any = object()


class BadOptionalAccess(LookupError):
    """Raised when the value of an empty :class:`Optional` is requested."""

    def __init__(self, message: str = "bad optional access") -> None:
        super().__init__(message)


class Optional(Generic[T]):
    """A value that may or may not be present.

    ``Optional()`` is empty. ``Optional(x)`` holds ``x``; ``None`` is a value
    like any other. Passing another :class:`Optional` copies its state.
    """

    __slots__ = ("_value", "_engaged")

    def __init__(self, value: Any = _EMPTY) -> None:
        self._value: Any = None
        self._engaged = False
        if isinstance(value, Optional):
            if value._engaged:
                self._store(value._value)
        elif value is not _EMPTY:
            self._store(value)

    def _store(self, value: T) -> None:
        self._value = value
        self._engaged = True

    def has_value(self) -> bool:
        """Return True if a value is present."""
        return self._engaged

    def has_value_and(self, fun: Callable[[T], Any]) -> bool:
        """Return True if a value is present and ``fun`` holds for it."""
        return self._engaged and bool(fun(self._value))

    def value(self) -> T:
        """Return the contained value, raising if empty."""
        if not self._engaged:
            raise BadOptionalAccess()
        return self._value

    def value_or(self, default: T) -> T:
        """Return the contained value, or ``default`` if empty."""
        return self._value if self._engaged else default

    def map(self, fun: Callable[[T], U]) -> Optional[U]:
        """Apply ``fun`` to the value if present, wrapping the result."""
        if not self._engaged:
            return Optional()
        return Optional(fun(self._value))

    def inspect(self, fun: Callable[[T], Any]) -> Optional[T]:
        """Call ``fun`` with the value if present; return a copy of self."""
        if self._engaged:
            fun(self._value)
        return Optional(self)

    def take(self) -> Optional[T]:
        """Move the value out, leaving this optional empty."""
        if not self._engaged:
            return Optional()
        taken: Optional[T] = Optional(self._value)
        self.reset()
        return taken

    def replace(self, value: T) -> T:
        """Store ``value``, discarding any previous one, and return it."""
        self.reset()
        self._store(value)
        return self._value

    def reset(self) -> None:
        """Discard the contained value, if any."""
        self._value = None
        self._engaged = False

    def __bool__(self) -> bool:
        return self._engaged

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        if self._engaged != other._engaged:
            return False
        if not self._engaged:
            return True
        return bool(self._value == other._value)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if not self._engaged:
            return "«no value»"
        return str(self._value)

    def __repr__(self) -> str:
        if not self._engaged:
            return "Optional()"
        return f"Optional({self._value!r})"


def some(value: T) -> Optional[T]:
    """Return an optional holding ``value``."""
    return Optional(value)


def nothing() -> Optional[Any]:
    """Return an empty optional."""
    return Optional()