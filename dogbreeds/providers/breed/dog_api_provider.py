"""dog.ceo breed provider.

Resolves a breed to its sub-breeds with a single call to the public dog.ceo
API (``GET /breed/{breed}/list``).  The API answers with an envelope of the
form ``{"status": "success", "message": ["afghan", "basset", ...]}``; on
errors the status is ``"error"`` and ``message`` is a string.

Every failure mode (invalid URL, timeout, non-2xx status, malformed JSON, non-success
status, unexpected payload shape) is reported as
:class:`~dogbreeds.utils.errors.BreedNotFoundError` so callers only deal with
one error kind.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from dogbreeds.interfaces.breed_provider import IBreedProvider
from dogbreeds.utils.errors import BreedNotFoundError

logger = structlog.get_logger(logger_name=__name__)

DEFAULT_BASE_URL = "https://dog.ceo/api"
_DEFAULT_TIMEOUT = 10.0
_DEFAULT_HEADERS = {
    "User-Agent": "dogbreeds/0.1 (+https://dog.ceo/dog-api/)",
    "Accept": "application/json",
}


class DogApiBreedProvider(IBreedProvider):
    """Breed lookups backed by the dog.ceo REST API.

    Breed names are stripped and lowercased before the request is built.

    Parameters
    ----------
    http_client:
        Optional shared ``httpx.AsyncClient``.  When omitted the provider
        creates its own client and closes it in :meth:`aclose`.
    base_url:
        API root, without a trailing slash requirement.
    timeout:
        Request timeout in seconds for an owned client.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = _DEFAULT_TIMEOUT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers=_DEFAULT_HEADERS,
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build_url(self, breed: str) -> str:
        # One opaque path segment: no "/", "?", "#" or dot segments may leak through.
        segment = quote(breed, safe="").replace(".", "%2E")
        return f"{self._base_url}/breed/{segment}/list"

    def _fail(self, breed: str, message: str) -> BreedNotFoundError:
        logger.warning("dog_api_lookup_failed", breed=breed, error=message)
        return BreedNotFoundError(
            message=message,
            breed=breed,
            provider_name=self.get_provider_name(),
        )

    @staticmethod
    def _api_message(response: httpx.Response) -> str | None:
        """Extract the API's own error message from an error response, if any."""
        try:
            data = response.json()
        except ValueError:
            return None
        if isinstance(data, dict) and isinstance(data.get("message"), str):
            return data["message"]
        return None

    def _parse_sub_breeds(self, breed: str, data: Any) -> list[str]:
        if not isinstance(data, dict):
            raise self._fail(breed, f"Unexpected response for breed '{breed}': not a JSON object")

        status = data.get("status")
        if status != "success":
            api_message = data.get("message", "Unknown API error")
            raise self._fail(breed, f"API error for breed '{breed}': {api_message}")

        message = data.get("message")
        if not isinstance(message, list) or not all(isinstance(item, str) for item in message):
            raise self._fail(
                breed, f"Unexpected response for breed '{breed}': 'message' is not a list of names"
            )
        return list(message)

    # ------------------------------------------------------------------
    # IBreedProvider implementation
    # ------------------------------------------------------------------

    async def lookup_sub_breeds(self, breed: str) -> list[str]:
        """Fetch the sub-breeds of *breed* from dog.ceo."""
        normalized = breed.strip().lower()
        if not normalized:
            raise self._fail(breed, "Breed name must not be empty")

        try:
            response = await self._client.get(self._build_url(normalized))
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise self._fail(breed, f"Timeout looking up breed '{breed}': {exc}") from exc
        except httpx.HTTPStatusError as exc:
            detail = self._api_message(exc.response)
            message = f"HTTP {exc.response.status_code} looking up breed '{breed}'"
            if detail:
                message = f"{message}: {detail}"
            raise self._fail(breed, message) from exc
        except httpx.HTTPError as exc:
            raise self._fail(breed, f"HTTP error looking up breed '{breed}': {exc}") from exc
        except httpx.InvalidURL as exc:
            raise self._fail(breed, f"Invalid URL for breed '{breed}': {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise self._fail(breed, f"Malformed JSON for breed '{breed}': {exc}") from exc

        sub_breeds = self._parse_sub_breeds(breed, data)
        logger.info("dog_api_lookup_succeeded", breed=normalized, sub_breed_count=len(sub_breeds))
        return sub_breeds

    def get_provider_name(self) -> str:
        return "dog.ceo"
