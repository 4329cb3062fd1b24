import logging
from threading import Lock
from typing import Any, Callable, Generic, Optional, TypeVar

log = logging.getLogger(__name__)

T = TypeVar('T')


class _Singleton:
    """The shared value. Only a registry should construct one."""

    def __init__(self, value: Any):
        self.value = value

    def __repr__(self):
        return f"<Singleton value={self.value!r}>"


class SingletonRegistry(Generic[T]):
    """Holds at most one instance, created lazily by the first caller.

    Double-checked locking: once the slot is occupied, get_instance() returns it without touching the lock. Until
    then, callers serialize on the lock and re-check, so exactly one of them runs the factory.

    The value is fully constructed before it is published to the slot, and publication happens while the lock is
    held, so no caller can see a half-built instance.
    """

    def __init__(self, factory: Callable[[Any], T] = _Singleton):
        self._factory = factory
        self._instance: Optional[T] = None
        self._lock = Lock()

    def get_instance(self, value: Any = None) -> T:
        """Return the shared instance, creating it from `value` if this call wins the race.

        `value` is ignored by every call that does not perform construction.
        """
        # fast path: no lock once initialized
        instance = self._instance
        if instance is not None:
            return instance

        with self._lock:
            # another thread may have finished while we waited
            if self._instance is None:
                instance = self._factory(value)
                self._instance = instance
                log.debug("created singleton instance from %r", value)
            return self._instance

    def peek(self) -> Optional[T]:
        """The current instance, or None. Never creates."""
        return self._instance


registry: SingletonRegistry[_Singleton] = SingletonRegistry()


def get_instance(value: Any = None) -> _Singleton:
    return registry.get_instance(value)
