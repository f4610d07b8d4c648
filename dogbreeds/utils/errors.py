"""Custom exception hierarchy for dogbreeds.

All application exceptions inherit from :class:`DogBreedsError`, which
carries an optional ``provider_name`` so error handlers can identify which
breed provider (e.g. "dog.ceo") caused the failure.

    DogBreedsError  (base -- catch-all for any dogbreeds error)
    +-- BreedNotFoundError  (breed unresolvable, for whatever reason)
    +-- ConfigurationError  (startup / invalid settings)

``BreedNotFoundError`` is the only error that crosses the
:class:`~dogbreeds.interfaces.breed_provider.IBreedProvider` contract.
Providers normalize every failure mode (unknown breed, transport failure,
malformed payload) into it and chain the original exception with
``raise ... from exc``.
"""


class DogBreedsError(Exception):
    """Base exception for all dogbreeds errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name``.  ``__str__`` prefixes the provider name in brackets
    for log output, e.g. ``[dog.ceo] HTTP 404 looking up breed 'bogus'``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class BreedNotFoundError(DogBreedsError):
    """Raised when a breed cannot be resolved to its sub-breeds.

    Covers unknown breed names as well as transport failures and responses
    that cannot be parsed.  The underlying exception, if any, is available
    as ``__cause__`` (and through :attr:`cause`).
    """

    def __init__(
        self,
        message: str = "Breed not found",
        breed: str | None = None,
        provider_name: str | None = None,
    ) -> None:
        self._breed = breed
        super().__init__(message=message, provider_name=provider_name)

    @property
    def breed(self) -> str | None:
        return self._breed

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__


class ConfigurationError(DogBreedsError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
