"""
Service registry module for the simulator.

A small lookup of optional integrations by capability. The combat core asks
the registry for the animation layer or the activity tracker each time it
needs one, so they can be plugged in and out while an encounter runs.
"""

from typing import Any, TypeVar

from catchery import log_debug, log_warning

T = TypeVar("T")


class ServiceRegistry:
    """Maps a capability (usually a Protocol class) to its implementation."""

    def __init__(self) -> None:
        self._services: dict[type, Any] = {}

    def register(self, capability: type[T], service: T) -> None:
        """
        Registers the implementation of a capability, replacing any previous one.

        Args:
            capability (type[T]): The capability, usually a Protocol class.
            service (T): The implementation.

        """
        if capability in self._services:
            log_warning(
                f"Service {capability.__name__} is already registered, replacing it",
                {"capability": capability.__name__},
            )
        self._services[capability] = service
        log_debug(
            f"Registered service {capability.__name__}",
            {"capability": capability.__name__, "service": type(service).__name__},
        )

    def get(self, capability: type[T]) -> T | None:
        """Returns the implementation of a capability, or None."""
        return self._services.get(capability)

    def is_registered(self, capability: type) -> bool:
        return capability in self._services

    def unregister(self, capability: type) -> None:
        """Removes a capability; unknown capabilities are ignored."""
        if self._services.pop(capability, None) is not None:
            log_debug(
                f"Unregistered service {capability.__name__}",
                {"capability": capability.__name__},
            )

    def registered_types(self) -> list[type]:
        return list(self._services)

    def clear(self) -> None:
        self._services.clear()
