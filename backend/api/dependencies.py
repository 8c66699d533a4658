"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together the portal's
collaborators: one token store, one API client, one auth context and the
resource clients built on them. The container is the composition root;
the auth context it holds is the only one the portal uses.
"""

from typing import TYPE_CHECKING, Optional, TypeVar

import httpx

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthContext
    from modules.auth.token_store import ITokenStore
    from modules.client.service import ApiClient
    from modules.content import (
        AnalyticsClient,
        ContactClient,
        DashboardClient,
        DownloadsClient,
        EventsClient,
        GalleryClient,
        HealthClient,
        MinistriesClient,
        PostsClient,
        ResourcesClient,
        SermonsClient,
    )

C = TypeVar("C")


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached. ``aclose()``
    releases the HTTP client and drops every cached instance, so the
    container can be mounted again.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        token_store: "Optional[ITokenStore]" = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._transport = transport
        self._token_store: "ITokenStore | None" = token_store
        self._api_client: "ApiClient | None" = None
        self._auth: "IAuthContext | None" = None
        self._resources: dict[type, object] = {}

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def token_store(self) -> "ITokenStore":
        """Get the durable session token store."""
        if self._token_store is None:
            from modules.auth.token_store import FileTokenStore
            self._token_store = FileTokenStore(self._settings.token_store_path)
        return self._token_store

    @property
    def api_client(self) -> "ApiClient":
        """Get the shared API client."""
        if self._api_client is None:
            from modules.client.service import ApiClient
            self._api_client = ApiClient(
                self._settings.api_base_url,
                self.token_store,
                timeout=self._settings.request_timeout,
                transport=self._transport,
            )
        return self._api_client

    @property
    def auth(self) -> "IAuthContext":
        """Get the auth context."""
        if self._auth is None:
            from modules.auth.client import AuthAPI
            from modules.auth.service import AuthContext
            self._auth = AuthContext(AuthAPI(self.api_client), self.token_store)
        return self._auth

    def _resource(self, client_type: type[C]) -> C:
        if client_type not in self._resources:
            self._resources[client_type] = client_type(self.api_client)
        return self._resources[client_type]  # type: ignore[return-value]

    @property
    def events(self) -> "EventsClient":
        from modules.content import EventsClient
        return self._resource(EventsClient)

    @property
    def ministries(self) -> "MinistriesClient":
        from modules.content import MinistriesClient
        return self._resource(MinistriesClient)

    @property
    def posts(self) -> "PostsClient":
        from modules.content import PostsClient
        return self._resource(PostsClient)

    @property
    def resources(self) -> "ResourcesClient":
        from modules.content import ResourcesClient
        return self._resource(ResourcesClient)

    @property
    def gallery(self) -> "GalleryClient":
        from modules.content import GalleryClient
        return self._resource(GalleryClient)

    @property
    def sermons(self) -> "SermonsClient":
        from modules.content import SermonsClient
        return self._resource(SermonsClient)

    @property
    def contact(self) -> "ContactClient":
        from modules.content import ContactClient
        return self._resource(ContactClient)

    @property
    def dashboard(self) -> "DashboardClient":
        from modules.content import DashboardClient
        return self._resource(DashboardClient)

    @property
    def health(self) -> "HealthClient":
        from modules.content import HealthClient
        return self._resource(HealthClient)

    @property
    def analytics(self) -> "AnalyticsClient":
        from modules.content import AnalyticsClient
        return self._resource(AnalyticsClient)

    @property
    def downloads(self) -> "DownloadsClient":
        from modules.content import DownloadsClient
        return self._resource(DownloadsClient)

    async def aclose(self) -> None:
        """Close the HTTP client and forget all cached services."""
        if self._api_client is not None:
            await self._api_client.aclose()
        self.reset()

    def reset(self) -> None:
        """
        Reset all cached services.

        The token store is kept: it is durable state, not a service.
        """
        self._api_client = None
        self._auth = None
        self._resources.clear()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a specific container (tests inject mock transports this way)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_context() -> "IAuthContext":
    """FastAPI dependency for the auth context."""
    return get_container().auth


def get_events_client() -> "EventsClient":
    return get_container().events


def get_posts_client() -> "PostsClient":
    return get_container().posts


def get_dashboard_client() -> "DashboardClient":
    return get_container().dashboard


def get_health_client() -> "HealthClient":
    return get_container().health
