"""Cache providers.

CachingBreedProvider is a dict-based, process-local memo around any
IBreedProvider, used to avoid repeating a remote lookup for a breed that has
already been resolved.  It has no expiry and is not shared across processes.
"""

from dogbreeds.providers.cache.caching_breed_provider import CachingBreedProvider

__all__ = ["CachingBreedProvider"]
