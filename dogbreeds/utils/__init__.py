"""Utility modules for dogbreeds.

- **errors** -- Exception hierarchy rooted at DogBreedsError; providers
  normalize every lookup failure into BreedNotFoundError.
- **logging** -- structlog setup: coloured console output in development,
  structured JSON in production.
"""

from dogbreeds.utils.errors import BreedNotFoundError, ConfigurationError, DogBreedsError
from dogbreeds.utils.logging import configure_logging, get_logger

__all__ = [
    "BreedNotFoundError",
    "ConfigurationError",
    "DogBreedsError",
    "configure_logging",
    "get_logger",
]
