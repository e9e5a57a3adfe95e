"""Base classes that restrict a class to a single instance."""

from __future__ import annotations

from typing import Optional, TypeVar

S = TypeVar("S")


class SingletonError(RuntimeError):
    """Raised when a singleton is used in the wrong state."""


def _stored(cls) -> Optional[object]:
    # Look only at the class's own namespace so subclasses keep separate instances.
    return cls.__dict__.get("_singleton_instance")


class AutoSingleton:
    """Singleton created on first access to instance()."""

    @classmethod
    def instance(cls: type[S]) -> S:
        """Return the only instance, creating it if needed."""
        existing = _stored(cls)
        if existing is None:
            existing = cls()
            cls._singleton_instance = existing  # type: ignore[attr-defined]
        return existing  # type: ignore[return-value]

    @classmethod
    def is_null(cls) -> bool:
        """Return True if no instance exists yet."""
        return _stored(cls) is None


class Singleton:
    """Singleton that must be created and destroyed explicitly."""

    @classmethod
    def create_instance(cls) -> None:
        """Create the only instance; raise if it already exists."""
        if _stored(cls) is not None:
            raise SingletonError(f"{cls.__name__} instance already exists")
        cls._singleton_instance = cls()  # type: ignore[attr-defined]

    @classmethod
    def instance(cls: type[S]) -> S:
        """Return the only instance; raise if it was not created."""
        existing = _stored(cls)
        if existing is None:
            raise SingletonError(f"{cls.__name__} instance has not been created")
        return existing  # type: ignore[return-value]

    @classmethod
    def destroy_instance(cls) -> None:
        """Drop the only instance if there is one."""
        if _stored(cls) is not None:
            cls._singleton_instance = None  # type: ignore[attr-defined]

    @classmethod
    def is_null(cls) -> bool:
        """Return True if no instance exists."""
        return _stored(cls) is None