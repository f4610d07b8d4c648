"""Abstract base class for breed providers.

Defines the single capability every breed data source offers: resolving a
breed name to the ordered list of its sub-breed names.  Implementations may
call a remote API, read a fixture, or decorate another provider (see
:class:`~dogbreeds.providers.cache.caching_breed_provider.CachingBreedProvider`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IBreedProvider(ABC):
    """Contract for breed → sub-breed lookups."""

    @abstractmethod
    async def lookup_sub_breeds(self, breed: str) -> list[str]:
        """Return the sub-breeds of *breed*.

        Parameters
        ----------
        breed:
            The breed name to resolve.  Case handling is up to the
            implementation.

        Returns
        -------
        list[str]
            Sub-breed names in the order the data source returned them.
            May be empty.

        Raises
        ------
        dogbreeds.utils.errors.BreedNotFoundError
            If the breed does not exist, the data source cannot be reached,
            or its response cannot be parsed.
        """

    def get_provider_name(self) -> str:
        """Return a short identifier used in log events and error prefixes."""
        return type(self).__name__

    async def aclose(self) -> None:
        """Release resources held by the provider (no-op by default)."""
