"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests build a ServiceContainer around a stubbed BackendClient and
override the dependency functions below.
"""

from typing import TYPE_CHECKING

from shared.backend import BackendClient, get_backend_client

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthProxy
    from modules.proxy.interfaces import IResourceProxy


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. They hold no per-request state, only a handle
    on the backend client. Use reset() to clear cached services for testing.
    """

    def __init__(self, backend: BackendClient | None = None) -> None:
        self._backend = backend
        self._auth_proxy: "IAuthProxy | None" = None
        self._resource_proxy: "IResourceProxy | None" = None

    @property
    def backend(self) -> BackendClient:
        """Get the backend client."""
        if self._backend is None:
            self._backend = get_backend_client()
        return self._backend

    @property
    def auth(self) -> "IAuthProxy":
        """Get the auth proxy instance."""
        if self._auth_proxy is None:
            from modules.auth.service import AuthProxyService
            self._auth_proxy = AuthProxyService(self.backend)
        return self._auth_proxy

    @property
    def resources(self) -> "IResourceProxy":
        """Get the resource proxy instance."""
        if self._resource_proxy is None:
            from modules.proxy.service import ResourceProxyService
            self._resource_proxy = ResourceProxyService(self.backend)
        return self._resource_proxy

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._backend = None
        self._auth_proxy = None
        self._resource_proxy = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_proxy() -> "IAuthProxy":
    """FastAPI dependency for the auth proxy."""
    return get_container().auth


def get_resource_proxy() -> "IResourceProxy":
    """FastAPI dependency for the resource proxy."""
    return get_container().resources
