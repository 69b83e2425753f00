from __future__ import annotations

import logging
from typing import Annotated, Literal, Protocol

from pydantic import BaseModel, Field

from lugares.exceptions.custom import PlacesApiError, RateLimitError
from lugares.schemas.places import Place

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Error al cargar los lugares. Por favor, intenta nuevamente."


class Idle(BaseModel):
    kind: Literal["idle"] = "idle"


class Loading(BaseModel):
    kind: Literal["loading"] = "loading"
    generation: int


class Loaded(BaseModel):
    kind: Literal["loaded"] = "loaded"
    places: list[Place]


class Failed(BaseModel):
    kind: Literal["failed"] = "failed"
    message: str


PlaceListState = Annotated[Idle | Loading | Loaded | Failed, Field(discriminator="kind")]


class PlacesSource(Protocol):
    async def get_places(self, location: str, category: str) -> list[Place]: ...


def place_keys(places: list[Place]) -> list[str]:
    """Unique list keys: ``id:<id>`` for the first record with an id,
    ``idx:<position>`` for records without one or with a repeated id."""
    keys: list[str] = []
    seen: set[str] = set()
    for index, place in enumerate(places):
        if place.id and place.id not in seen:
            seen.add(place.id)
            keys.append(f"id:{place.id}")
        else:
            keys.append(f"idx:{index}")
    return keys


class PlaceListLoader:
    """Home list state: fetches places and tracks idle/loading/loaded/failed.

    Every load takes a new generation number. A response that comes back
    after a newer load was issued is dropped.
    """

    def __init__(self, source: PlacesSource, location: str, category: str):
        self._source = source
        self._location = location
        self._category = category
        self._generation = 0
        self._state: PlaceListState = Idle()

    @property
    def state(self) -> PlaceListState:
        return self._state

    @property
    def location(self) -> str:
        return self._location

    @property
    def category(self) -> str:
        return self._category

    @property
    def generation(self) -> int:
        return self._generation

    async def load(self) -> PlaceListState:
        self._generation += 1
        generation = self._generation
        self._state = Loading(generation=generation)

        try:
            places = await self._source.get_places(self._location, self._category)
        except (PlacesApiError, RateLimitError) as exc:
            if generation != self._generation:
                logger.info("Discarding stale failure for generation %d", generation)
                return self._state
            logger.error("Error fetching places: %s", exc)
            self._state = Failed(message=LOAD_ERROR_MESSAGE)
            return self._state

        if generation != self._generation:
            logger.info(
                "Discarding stale response for generation %d (latest=%d)",
                generation, self._generation,
            )
            return self._state

        self._state = Loaded(places=places)
        return self._state

    async def retry(self) -> PlaceListState:
        return await self.load()

    async def set_params(
        self,
        location: str | None = None,
        category: str | None = None,
    ) -> PlaceListState:
        """Update inputs; reload when one changed or nothing was loaded yet."""
        changed = False
        if location is not None and location != self._location:
            self._location = location
            changed = True
        if category is not None and category != self._category:
            self._category = category
            changed = True

        if changed or isinstance(self._state, Idle):
            return await self.load()
        return self._state

    def get_place(self, key: str) -> Place | None:
        if not isinstance(self._state, Loaded):
            return None
        for candidate, place in zip(place_keys(self._state.places), self._state.places):
            if candidate == key:
                return place
        return None
