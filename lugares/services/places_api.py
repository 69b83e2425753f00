import logging

import httpx
from pydantic import ValidationError

from lugares.exceptions.custom import PlacesApiError, RateLimitError
from lugares.schemas.places import Place

logger = logging.getLogger(__name__)

PLACES_PATH = "/getPlaces"


def build_places_url(base_url: str) -> str:
    return base_url.rstrip("/") + PLACES_PATH


class PlacesApiService:
    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self._client = client
        self._url = build_places_url(base_url)

    async def get_places(self, location: str, category: str) -> list[Place]:
        """Fetch places for a location/category.

        A successful response without a ``places`` array is an empty result,
        not an error.
        """
        params = {"location": location, "category": category}
        logger.info("Fetching places from %s (%s)", self._url, params)

        try:
            resp = await self._client.get(self._url, params=params)
        except httpx.HTTPError as exc:
            raise PlacesApiError(f"Request failed: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitError("Places API")
        if resp.status_code >= 400:
            raise PlacesApiError(resp.text, status_code=resp.status_code)

        try:
            body = resp.json()
        except ValueError:
            logger.warning("Places response is not JSON, treating as empty")
            return []

        if not isinstance(body, dict) or not isinstance(body.get("places"), list):
            logger.info("No places array for %s/%s", location, category)
            return []

        return parse_places(body["places"])


def parse_places(records: list) -> list[Place]:
    """Decode records one by one; a record that cannot be coerced is skipped."""
    places: list[Place] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning("Skipping place record %d: not an object", index)
            continue
        try:
            places.append(Place.model_validate(record))
        except ValidationError as exc:
            logger.warning(
                "Skipping place record %d: %d invalid fields", index, exc.error_count()
            )
    return places
