"""
Dependency Injection Container

Named registry of services built once at startup. A service registered
through register_factory is constructed on first resolve and then reused,
which is how process-wide singletons (event log, user service) are shared
without module-level globals.
"""

from typing import Any, Callable, Dict, List
import logging

from .errors import ServiceNotFound

logger = logging.getLogger(__name__)


class Container:
    """Service locator populated explicitly by the application"""

    def __init__(self):
        self._services: Dict[str, Any] = {}
        self._factories: Dict[str, Callable[['Container'], Any]] = {}

    def register(self, name: str, service: Any) -> None:
        """Register a ready-made service instance, replacing any previous one"""
        self._factories.pop(name, None)
        self._services[name] = service
        logger.debug("registered service %s", name)

    def register_factory(self, name: str, factory: Callable[['Container'], Any]) -> None:
        """Register a builder called with the container on first resolve"""
        self._services.pop(name, None)
        self._factories[name] = factory
        logger.debug("registered factory for service %s", name)

    def resolve(self, name: str) -> Any:
        """
        Look up a service by name

        Raises:
            ServiceNotFound: If nothing is registered under name
        """
        if name in self._services:
            return self._services[name]
        if name in self._factories:
            service = self._factories.pop(name)(self)
            self._services[name] = service
            return service
        raise ServiceNotFound(name)

    def names(self) -> List[str]:
        return sorted(set(self._services) | set(self._factories))

    def __contains__(self, name: str) -> bool:
        return name in self._services or name in self._factories
