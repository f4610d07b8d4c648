"""Shared pytest fixtures for the dogbreeds test suite."""

from __future__ import annotations

import asyncio

import pytest

from dogbreeds.interfaces.breed_provider import IBreedProvider
from dogbreeds.utils.errors import BreedNotFoundError


class StubBreedProvider(IBreedProvider):
    """In-memory breed provider with scripted outcomes per breed.

    Each breed maps to a list of outcomes consumed one per call; the last
    outcome repeats once the script runs out.  An outcome is either a list
    of sub-breeds or an exception instance to raise.  Unknown breeds raise
    BreedNotFoundError.
    """

    def __init__(self, script: dict[str, list[list[str] | Exception]] | None = None) -> None:
        self._script = {breed: list(outcomes) for breed, outcomes in (script or {}).items()}
        self.calls: list[str] = []
        self.gate: asyncio.Event | None = None

    async def lookup_sub_breeds(self, breed: str) -> list[str]:
        self.calls.append(breed)
        if self.gate is not None:
            await self.gate.wait()

        outcomes = self._script.get(breed)
        if not outcomes:
            raise BreedNotFoundError(f"Unknown breed '{breed}'", breed=breed, provider_name="stub")
        outcome = outcomes.pop(0) if len(outcomes) > 1 else outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return list(outcome)

    def get_provider_name(self) -> str:
        return "stub"


@pytest.fixture
def stub_provider() -> StubBreedProvider:
    """Stub knowing a handful of breeds, including one without sub-breeds."""
    return StubBreedProvider(
        {
            "terrier": [["affenpinscher-sub", "x"]],
            "hound": [["afghan", "basset", "blood"]],
            "pug": [[]],
        }
    )
