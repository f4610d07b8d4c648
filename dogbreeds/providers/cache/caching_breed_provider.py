"""Memoizing decorator for breed providers.

Wraps any :class:`IBreedProvider` and remembers successful lookups for the
lifetime of the instance, so repeated lookups of the same breed cost a single
call to the wrapped provider.  Failures are never remembered: a breed that
failed is delegated again on the next lookup.

The number of delegations (real calls to the wrapped provider, successful or
not) is exposed as :attr:`CachingBreedProvider.calls_made`.
"""

from __future__ import annotations

import asyncio

import structlog

from dogbreeds.interfaces.breed_provider import IBreedProvider
from dogbreeds.utils.errors import BreedNotFoundError

logger = structlog.get_logger(logger_name=__name__)


class CachingBreedProvider(IBreedProvider):
    """Breed provider that caches the sub-breed lists of a wrapped provider.

    Entries are keyed by the exact breed string passed to
    :meth:`lookup_sub_breeds`; ``"Hound"`` and ``"hound"`` are separate
    entries.  There is no eviction, expiry or size bound.

    Concurrent lookups of the same missing breed on one event loop are
    collapsed into a single delegation: later callers wait on a per-breed
    lock and then re-check the cache.

    Parameters
    ----------
    wrapped:
        The provider that performs the actual lookups.
    """

    def __init__(self, wrapped: IBreedProvider) -> None:
        self._wrapped = wrapped
        self._cache: dict[str, list[str]] = {}
        self._calls_made = 0
        self._pending: dict[str, asyncio.Lock] = {}
        self._pending_users: dict[str, int] = {}

    @property
    def calls_made(self) -> int:
        """Number of times the wrapped provider has been called."""
        return self._calls_made

    def is_cached(self, breed: str) -> bool:
        """Return ``True`` if a successful lookup of *breed* is stored."""
        return breed in self._cache

    # ------------------------------------------------------------------
    # IBreedProvider implementation
    # ------------------------------------------------------------------

    async def lookup_sub_breeds(self, breed: str) -> list[str]:
        """Return the sub-breeds of *breed*, delegating only on a cache miss.

        Raises
        ------
        BreedNotFoundError
            Propagated unchanged from the wrapped provider.  Nothing is
            cached for the breed in that case.
        """
        cached = self._cache.get(breed)
        if cached is not None:
            logger.debug("breed_cache_hit", breed=breed)
            return list(cached)

        lock = self._pending.get(breed)
        if lock is None:
            lock = self._pending[breed] = asyncio.Lock()
        self._pending_users[breed] = self._pending_users.get(breed, 0) + 1
        try:
            async with lock:
                # Another coroutine may have resolved the breed while we waited.
                cached = self._cache.get(breed)
                if cached is not None:
                    logger.debug("breed_cache_hit", breed=breed, after_wait=True)
                    return list(cached)
                return await self._delegate(breed)
        finally:
            self._release_pending(breed)

    async def aclose(self) -> None:
        """Close the wrapped provider."""
        await self._wrapped.aclose()

    def get_provider_name(self) -> str:
        return f"caching({self._wrapped.get_provider_name()})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _delegate(self, breed: str) -> list[str]:
        logger.debug("breed_cache_miss", breed=breed)
        self._calls_made += 1
        try:
            sub_breeds = await self._wrapped.lookup_sub_breeds(breed)
        except BreedNotFoundError as exc:
            logger.info(
                "breed_lookup_failed",
                breed=breed,
                provider=self._wrapped.get_provider_name(),
                error=str(exc),
                calls_made=self._calls_made,
            )
            raise

        self._cache[breed] = list(sub_breeds)
        logger.debug(
            "breed_cache_stored",
            breed=breed,
            sub_breed_count=len(sub_breeds),
            calls_made=self._calls_made,
        )
        return list(sub_breeds)

    def _release_pending(self, breed: str) -> None:
        """Forget the lock for *breed* once no caller holds or waits on it."""
        remaining = self._pending_users[breed] - 1
        if remaining:
            self._pending_users[breed] = remaining
            return
        del self._pending_users[breed]
        del self._pending[breed]
