"""Public interface definitions for breed providers.

Business code depends on :class:`IBreedProvider` only.  Concrete adapters
live in ``dogbreeds/providers/`` and are wired together in
``dogbreeds/main.py``:

    Interface        →  Concrete implementations
    ─────────────────────────────────────────────
    IBreedProvider   →  DogApiBreedProvider, CachingBreedProvider
"""

from dogbreeds.interfaces.breed_provider import IBreedProvider

__all__ = ["IBreedProvider"]
