from __future__ import annotations

import logging
from enum import StrEnum

from pydantic import BaseModel

from lugares.exceptions.custom import NavigationError
from lugares.services.place_details import PlaceDetailsScreen
from lugares.services.place_list import PlaceListLoader

logger = logging.getLogger(__name__)


class RouteName(StrEnum):
    home = "Home"
    place_details = "PlaceDetails"


class Transition(StrEnum):
    none = "none"
    slide_from_right = "slide_from_right"


class RouteOptions(BaseModel):
    title: str
    header_shown: bool = False
    transition: Transition = Transition.none


ROUTE_OPTIONS = {
    RouteName.home: RouteOptions(title="Lugares Turísticos"),
    RouteName.place_details: RouteOptions(
        title="Detalles del Lugar",
        transition=Transition.slide_from_right,
    ),
}


class Route:
    def __init__(self, name: RouteName, screen: PlaceListLoader | PlaceDetailsScreen):
        self.name = name
        self.screen = screen
        self.options = ROUTE_OPTIONS[name]


class Navigator:
    """Stack navigator. The initial route is mounted at construction and
    can never be popped.

    The app keeps one instance on `app.state`, so every HTTP client drives
    the same stack: the shell serves a single user.
    """

    def __init__(self, home: PlaceListLoader):
        self._stack: list[Route] = [Route(RouteName.home, home)]

    @property
    def current(self) -> Route:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def home(self) -> PlaceListLoader:
        return self._stack[0].screen

    def push(self, name: RouteName, screen: PlaceListLoader | PlaceDetailsScreen) -> Route:
        route = Route(name, screen)
        self._stack.append(route)
        logger.info("Navigate to %s (depth=%d)", name, len(self._stack))
        return route

    def go_back(self) -> Route:
        if len(self._stack) > 1:
            popped = self._stack.pop()
            logger.info("Leave %s", popped.name)
        return self.current

    def details(self) -> PlaceDetailsScreen:
        route = self.current
        if route.name != RouteName.place_details:
            raise NavigationError("La pantalla de detalles no está abierta")
        return route.screen
