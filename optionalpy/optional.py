from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .failure import Failure
from .logger import default_logger

T = TypeVar("T")
U = TypeVar("U")

_log = default_logger.bind(component="optional")


class _Missing:
    __slots__ = ()
    def __repr__(self) -> str: return "<missing>"


_MISSING: Any = _Missing()


class Optional(Generic[T]):
    """A value of ``T``, or nothing.

    Absence is always the one ``EMPTY`` instance, so ``opt is EMPTY`` is a
    valid emptiness check. ``None`` is never held as a present value, but
    every other falsy value (``False``, ``0``, ``""``) is.
    """

    @staticmethod
    def empty() -> "Optional[T]":
        return EMPTY

    @staticmethod
    def of(value: T | None = _MISSING) -> "Optional[T]":
        if value is None or value is _MISSING:
            return EMPTY
        return _Present(value)

    def is_present(self) -> bool: raise NotImplementedError
    def is_empty(self) -> bool: return not self.is_present()

    def get(self) -> T | None:
        return self.value if self.is_present() else None  # type: ignore[attr-defined]

    def map(self, f: Callable[[T], U | None]) -> "Optional[U]":
        if self.is_present():
            return Optional.of(f(self.value))  # type: ignore[attr-defined]
        return EMPTY

    def flat_map(self, f: Callable[[T], U]) -> U | None:
        """Apply ``f`` and return its result without re-wrapping it."""
        if self.is_present():
            return f(self.value)  # type: ignore[attr-defined]
        return None

    def filter(self, p: Callable[[T], bool]) -> "Optional[T]":
        if self.is_present() and p(self.value):  # type: ignore[attr-defined]
            return self
        return EMPTY

    def or_(self, supplier: Callable[[], "Optional[T] | T | None"]) -> "Optional[T]":
        """Fall back to another optional, built only when this one is empty.

        A plain value from ``supplier`` is wrapped with ``Optional.of``.
        """
        if self.is_present():
            return self
        alt = supplier()
        if isinstance(alt, Optional):
            return alt
        return Optional.of(alt)

    def or_else(self, other: U) -> T | U:
        return self.value if self.is_present() else other  # type: ignore[attr-defined]

    def or_else_get(self, supplier: Callable[[], U]) -> T | U:
        if self.is_present():
            return self.value  # type: ignore[attr-defined]
        return supplier()

    def or_throw(self, error_supplier: Callable[[], Any]) -> T:
        """Return the value, or raise whatever ``error_supplier`` produces.

        Exceptions (instances or classes) are raised as they are; any other
        error value is carried by a ``Failure``.
        """
        if self.is_present():
            return self.value  # type: ignore[attr-defined]
        err = error_supplier()
        _log.debug("raising for empty optional", error_type=type(err).__name__)
        if isinstance(err, BaseException) or (isinstance(err, type) and issubclass(err, BaseException)):
            raise err
        raise Failure(err)

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        if self.is_present():
            consumer(self.value)  # type: ignore[attr-defined]

    def if_present_or_else(self, consumer: Callable[[T], Any], empty_action: Callable[[], Any]) -> None:
        if self.is_present():
            consumer(self.value)  # type: ignore[attr-defined]
        else:
            empty_action()

    def __str__(self) -> str:
        if self.is_present():
            return f"Optional[value={self.value}]"  # type: ignore[attr-defined]
        return "Optional[empty]"


@dataclass(frozen=True, repr=False)
class _Present(Optional[T]):
    value: T
    def is_present(self) -> bool: return True
    def __repr__(self) -> str: return f"Optional.of({self.value!r})"


class _Empty(Optional[Any]):
    __slots__ = ()
    _instance: "_Empty | None" = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "Optional.empty()"
    def is_present(self) -> bool: return False

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Optional.empty() is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Optional.empty() is immutable")

    def __copy__(self) -> "_Empty": return self
    def __deepcopy__(self, memo: Any) -> "_Empty": return self
    def __reduce__(self) -> str: return "EMPTY"


EMPTY: Optional[Any] = _Empty()


def empty() -> Optional[Any]:
    return EMPTY


def of(value: T | None = _MISSING) -> Optional[T]:
    return Optional.of(value)
