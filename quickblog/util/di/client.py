"""Client-side DI providers.

The client post repository talks to exactly one primary backend. Which one
is decided here, once, when the container first resolves it.
"""

from dishka import Scope, provide
import logfire

from quickblog.adapter.local import LocalPostBackend, LocalPostStore
from quickblog.adapter.remote import RemotePostBackend
from quickblog.adapter.samples import SamplePostCatalog
from quickblog.application.client import ClientPostRepository, PostBrowser
from quickblog.config import ClientSettings
from quickblog.domain.repository import PostBackend
from quickblog.util.di.base import ProviderBase
from quickblog.util.error import ConfigurationError


class ClientProvider(ProviderBase):
    """Client repository provider - concrete, APP-scoped.

    Backend per ``ClientSettings.mode``:
        production  -> remote
        development -> remote if it answers a reachability check, otherwise local
        offline     -> local, no network
    """

    scope = Scope.APP

    @provide
    def get_remote_backend(self, client_settings: ClientSettings) -> RemotePostBackend:
        """Provide HTTP backend for the Post Store."""
        if not client_settings.base_url:
            raise ConfigurationError("CLIENT__BASE_URL is not set")
        return RemotePostBackend(client_settings.base_url)

    @provide
    def get_local_store(self, client_settings: ClientSettings) -> LocalPostStore:
        """Provide on-device post store."""
        return LocalPostStore(client_settings.storage_path)

    @provide
    async def get_backend(
        self,
        client_settings: ClientSettings,
        remote: RemotePostBackend,
        local_store: LocalPostStore,
    ) -> PostBackend:
        """Select the primary backend for this process."""
        local = LocalPostBackend(
            local_store,
            synthesize_missing_on_update=client_settings.synthesize_missing_on_update,
        )

        if client_settings.mode == "production":
            backend: PostBackend = remote
        elif client_settings.mode == "offline":
            backend = local
        else:
            backend = remote if await remote.is_available() else local

        logfire.info(
            "Client backend selected", mode=client_settings.mode, backend=backend.name
        )
        return backend

    @provide
    def get_sample_catalog(self) -> SamplePostCatalog:
        """Provide built-in sample posts."""
        return SamplePostCatalog()

    @provide
    def get_client_repository(
        self, backend: PostBackend, local_store: LocalPostStore
    ) -> ClientPostRepository:
        """Provide client post repository."""
        return ClientPostRepository(backend=backend, local_store=local_store)

    @provide
    def get_post_browser(
        self, repository: ClientPostRepository, catalog: SamplePostCatalog
    ) -> PostBrowser:
        """Provide listing helper."""
        return PostBrowser(repository=repository, catalog=catalog)
