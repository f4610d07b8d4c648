"""Provider wiring for dogbreeds.

Builds the standard provider stack from :class:`Settings`: a
:class:`CachingBreedProvider` wrapping a :class:`DogApiBreedProvider`.
Callers that want the HTTP connection pool shared (or closed on exit) pass
their own ``httpx.AsyncClient``.
"""

from __future__ import annotations

import httpx

from dogbreeds.config.settings import Settings
from dogbreeds.providers.breed.dog_api_provider import DogApiBreedProvider
from dogbreeds.providers.cache.caching_breed_provider import CachingBreedProvider
from dogbreeds.utils.errors import ConfigurationError
from dogbreeds.utils.logging import get_logger

logger = get_logger(__name__)


def _validate_settings(settings: Settings) -> None:
    if not settings.dog_api_base_url.strip():
        raise ConfigurationError("DOG_API_BASE_URL must not be empty")
    if not settings.dog_api_base_url.startswith(("http://", "https://")):
        raise ConfigurationError(
            f"DOG_API_BASE_URL must be an http(s) URL, got {settings.dog_api_base_url!r}"
        )
    if settings.dog_api_timeout <= 0:
        raise ConfigurationError(
            f"DOG_API_TIMEOUT must be positive, got {settings.dog_api_timeout}"
        )


def build_breed_provider(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> CachingBreedProvider:
    """Return a caching dog.ceo provider configured from *settings*.

    Raises
    ------
    ConfigurationError
        If the API base URL or timeout is invalid.
    """
    settings = settings or Settings()
    _validate_settings(settings)

    remote = DogApiBreedProvider(
        http_client=http_client,
        base_url=settings.dog_api_base_url,
        timeout=settings.dog_api_timeout,
    )
    logger.debug(
        "breed_provider_built",
        base_url=settings.dog_api_base_url,
        timeout=settings.dog_api_timeout,
    )
    return CachingBreedProvider(remote)
