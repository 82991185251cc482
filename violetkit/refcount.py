"""Reference-counted shared values with strong and weak handles.

:class:`Ref` and :class:`Weak` keep plain counters. :class:`ARef` and
:class:`AWeak` guard their counters with a lock so that handles can be
cloned and released from several threads at once.
"""

from __future__ import annotations

import threading
from typing import Any, Generic, TypeVar

from violetkit.optional import Optional

T = TypeVar("T")


class _Block:
    """Shared storage for a value and its strong and weak counters.

    The weak counter starts at one: the strong handles together hold one
    implicit weak reference, released when the last strong handle goes.
    """

    __slots__ = ("value", "strong", "weak")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.strong = 1
        self.weak = 1

    def inc_strong(self) -> None:
        self.strong += 1

    def dec_strong(self) -> int:
        self.strong -= 1
        return self.strong

    def try_inc_strong(self) -> bool:
        if self.strong == 0:
            return False
        self.strong += 1
        return True

    def inc_weak(self) -> None:
        self.weak += 1

    def dec_weak(self) -> int:
        self.weak -= 1
        return self.weak

    def load_strong(self) -> int:
        return self.strong

    def load_weak(self) -> int:
        return self.weak

    def destroy(self) -> None:
        self.value = None


class _AtomicBlock(_Block):
    """A block whose counters are updated under a lock."""

    __slots__ = ("_lock",)

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self._lock = threading.Lock()

    def inc_strong(self) -> None:
        with self._lock:
            self.strong += 1

    def dec_strong(self) -> int:
        with self._lock:
            self.strong -= 1
            return self.strong

    def try_inc_strong(self) -> bool:
        with self._lock:
            if self.strong == 0:
                return False
            self.strong += 1
            return True

    def inc_weak(self) -> None:
        with self._lock:
            self.weak += 1

    def dec_weak(self) -> int:
        with self._lock:
            self.weak -= 1
            return self.weak

    def load_strong(self) -> int:
        with self._lock:
            return self.strong

    def load_weak(self) -> int:
        with self._lock:
            return self.weak


class Ref(Generic[T]):
    """A strong, reference-counted handle to a shared value.

    Handles are shared explicitly with :meth:`clone`; :meth:`release` gives
    one up. When the last strong handle is released the value is dropped,
    and weak handles can no longer be upgraded.
    """

    __slots__ = ("_block",)

    _block_type: type[_Block] = _Block

    def __init__(self, value: T) -> None:
        self._block: _Block | None = self._block_type(value)

    @classmethod
    def null(cls) -> Ref[T]:
        """Return a handle that refers to nothing."""
        return cls._from_block(None)

    @classmethod
    def _from_block(cls, block: _Block | None) -> Ref[T]:
        handle = cls.__new__(cls)
        handle._block = block
        return handle

    def value(self) -> T:
        """Return the shared value, raising ReferenceError on a null handle."""
        if self._block is None:
            raise ReferenceError("reference no longer valid")
        return self._block.value

    def strong_count(self) -> int:
        """Return the number of strong handles, or 0 for a null handle."""
        return self._block.load_strong() if self._block is not None else 0

    def weak_count(self) -> int:
        """Return the number of weak handles, or 0 for a null handle."""
        return self._block.load_weak() - 1 if self._block is not None else 0

    def clone(self) -> Ref[T]:
        """Return a new strong handle to the same value."""
        if self._block is None:
            return type(self).null()
        self._block.inc_strong()
        return type(self)._from_block(self._block)

    def downgrade(self) -> Weak[T]:
        """Return a weak handle to the same value."""
        return Weak(self)

    def release(self) -> None:
        """Give up this handle, dropping the value if it was the last one."""
        block = self._block
        if block is None:
            return
        self._block = None
        if block.dec_strong() == 0:
            block.destroy()
            block.dec_weak()

    def take(self) -> Ref[T]:
        """Move this handle into a new one, leaving this one null."""
        block, self._block = self._block, None
        return type(self)._from_block(block)

    def __bool__(self) -> bool:
        return self._block is not None

    def __enter__(self) -> Ref[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_block", None) is not None:
            self.release()

    def __str__(self) -> str:
        if self._block is None:
            return "«reference no longer valid»"
        return str(self._block.value)

    def __repr__(self) -> str:
        if self._block is None:
            return f"{type(self).__name__}.null()"
        return f"{type(self).__name__}({self._block.value!r})"


class Weak(Generic[T]):
    """A weak handle that does not keep the shared value alive."""

    __slots__ = ("_block",)

    _ref_type: type[Ref[Any]] = Ref

    def __init__(self, ref: Ref[T] | None = None) -> None:
        block = ref._block if ref is not None else None
        if block is not None:
            block.inc_weak()
        self._block: _Block | None = block

    def upgrade(self) -> Optional[Ref[T]]:
        """Return a new strong handle, or an empty optional if the value is gone."""
        block = self._block
        if block is None or not block.try_inc_strong():
            return Optional()
        return Optional(self._ref_type._from_block(block))

    def strong_count(self) -> int:
        """Return the number of strong handles to the value."""
        return self._block.load_strong() if self._block is not None else 0

    def release(self) -> None:
        """Give up this weak handle."""
        block = self._block
        if block is None:
            return
        self._block = None
        block.dec_weak()

    def __bool__(self) -> bool:
        return self._block is not None

    def __del__(self) -> None:
        if getattr(self, "_block", None) is not None:
            self.release()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strong={self.strong_count()})"


class ARef(Ref[T]):
    """A thread-safe strong handle whose counters are updated atomically."""

    __slots__ = ()

    _block_type = _AtomicBlock

    def downgrade(self) -> AWeak[T]:
        """Return a thread-safe weak handle to the same value."""
        return AWeak(self)


class AWeak(Weak[T]):
    """A thread-safe weak handle to a value owned by :class:`ARef` handles."""

    __slots__ = ()

    _ref_type = ARef

    def upgrade(self) -> Optional[ARef[T]]:
        """Return a new :class:`ARef`, or an empty optional if the value is gone."""
        return super().upgrade()  # type: ignore[return-value]