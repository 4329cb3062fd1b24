import logging
from typing import Callable, Optional

log = logging.getLogger(__name__)

BUSINESS_LOGIC = "Jovan's business logic goes here"


class NaiveSingleton:
    def some_business_logic(self) -> str:
        return BUSINESS_LOGIC


class NaiveSingletonRegistry:
    """Lazy singleton without any locking.

    Works when only one thread ever calls get_instance(). Two threads arriving before the first construction
    finishes can both see an empty slot and both construct; the last one to store wins. Kept as-is for comparison
    with SingletonRegistry.
    """

    def __init__(self, factory: Callable[[], NaiveSingleton] = NaiveSingleton):
        self._factory = factory
        self._instance: Optional[NaiveSingleton] = None

    def get_instance(self) -> NaiveSingleton:
        if self._instance is None:
            self._instance = self._factory()
            log.debug("created naive singleton instance")
        return self._instance
