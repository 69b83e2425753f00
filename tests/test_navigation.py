import httpx
import pytest

from lugares.config import Platform
from lugares.exceptions.custom import NavigationError
from lugares.navigation import Navigator, RouteName, Transition
from lugares.schemas.places import Place
from lugares.services.intents import ClientHandoffDispatcher
from lugares.services.place_actions import PlaceActionsService
from lugares.services.place_details import PlaceDetailsScreen
from lugares.services.place_list import PlaceListLoader
from lugares.services.web_viewer import WebPageLoader


class EmptySource:
    async def get_places(self, location, category):
        return []


@pytest.fixture
def navigator():
    return Navigator(PlaceListLoader(EmptySource(), "Barcelona", "attraction"))


def _details_screen(place: Place) -> PlaceDetailsScreen:
    actions = PlaceActionsService(ClientHandoffDispatcher(frozenset()), Platform.android)
    return PlaceDetailsScreen(place, actions, WebPageLoader(httpx.AsyncClient()))


def test_initial_route_is_home(navigator):
    assert navigator.current.name == RouteName.home
    assert navigator.current.options.transition == Transition.none
    assert navigator.depth == 1


def test_push_details(navigator):
    place = Place(name="Camp Nou")

    route = navigator.push(RouteName.place_details, _details_screen(place))

    assert navigator.current is route
    assert navigator.depth == 2
    assert route.options.transition == Transition.slide_from_right
    assert route.options.header_shown is False
    assert navigator.details().place is place


def test_go_back(navigator):
    navigator.push(RouteName.place_details, _details_screen(Place()))

    route = navigator.go_back()

    assert route.name == RouteName.home
    assert navigator.depth == 1


def test_go_back_at_root_is_noop(navigator):
    route = navigator.go_back()

    assert route.name == RouteName.home
    assert navigator.depth == 1


def test_details_requires_details_route(navigator):
    with pytest.raises(NavigationError):
        navigator.details()
