from lugares.schemas.places import Place
from lugares.schemas.views import EmptyState, ErrorState, HomeScreenView, PlaceListItem
from lugares.services.place_list import (
    Failed,
    Loaded,
    Loading,
    PlaceListLoader,
    place_keys,
)

NO_NAME = "Sin nombre"
ADDRESS_MARKER = "\U0001f4cd"
LOADING_TEXT = "Cargando lugares..."


def format_rating(rating: float | None) -> str | None:
    if rating is None:
        return None
    return f"{rating:g} / 5.0"


def build_list_item(place: Place, key: str) -> PlaceListItem:
    return PlaceListItem(
        key=key,
        title=place.name or NO_NAME,
        description=place.description or None,
        address=place.address or None,
        address_marker=ADDRESS_MARKER if place.address else None,
        rating_text=format_rating(place.rating),
        image_url=place.image_url or None,
    )


def build_home_screen(loader: PlaceListLoader) -> HomeScreenView:
    state = loader.state
    view = HomeScreenView(subtitle=loader.location, status=state.kind)

    if isinstance(state, Loading):
        view.loading_text = LOADING_TEXT
    elif isinstance(state, Failed):
        view.error = ErrorState(message=state.message)
    elif isinstance(state, Loaded):
        keys = place_keys(state.places)
        view.items = [build_list_item(p, k) for p, k in zip(state.places, keys)]
        if not view.items:
            view.empty = EmptyState()

    return view
