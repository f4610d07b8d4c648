"""Breed data-source providers."""

from dogbreeds.providers.breed.dog_api_provider import DogApiBreedProvider

__all__ = ["DogApiBreedProvider"]
