from lugares.schemas.places import Place
from lugares.schemas.views import (
    AddressSection,
    ContactEntry,
    ContactSection,
    PlaceDetailsView,
    RatingBadge,
    TagsSection,
    TextSection,
    WebsiteSection,
)

NO_NAME = "Sin nombre"
IMAGE_PLACEHOLDER = "\U0001f3db\ufe0f"
MAX_TYPE_TAGS = 5

_PRICE_LABELS = {
    1: "$ (Económico)",
    2: "$$ (Moderado)",
    3: "$$$ (Costoso)",
    4: "$$$$ (Muy costoso)",
}


def price_label(price_level: int | None) -> str | None:
    """Map price tier 1-4 to its label; anything else has no label."""
    if price_level is None:
        return None
    return _PRICE_LABELS.get(price_level)


def format_type_tags(types: list[str]) -> list[str]:
    return [t.replace("_", " ") for t in types[:MAX_TYPE_TAGS]]


def normalize_url(url: str) -> str:
    if url.startswith("http://") or url.startswith("https://"):
        return url
    return "https://" + url


def has_coordinates(place: Place) -> bool:
    return place.latitude is not None and place.longitude is not None


def _contact_section(place: Place) -> ContactSection | None:
    entries: list[ContactEntry] = []
    if place.phone:
        entries.append(ContactEntry(
            kind="phone",
            icon="\U0001f4f1",
            value=place.phone,
            action_label="Llamar \u203a",
            action="llamar",
        ))
    if place.email:
        entries.append(ContactEntry(
            kind="email",
            icon="\u2709\ufe0f",
            value=place.email,
            action_label="Escribir \u203a",
            action="correo",
        ))
    if not entries:
        return None
    return ContactSection(entries=entries)


def build_place_details(place: Place) -> PlaceDetailsView:
    view = PlaceDetailsView(
        name=place.name or NO_NAME,
        image_url=place.image_url or None,
        image_placeholder=None if place.image_url else IMAGE_PLACEHOLDER,
        category=place.category or None,
        place=place,
    )

    if place.rating is not None:
        view.rating = RatingBadge(text=f"{place.rating:g}")

    if place.description:
        view.description = TextSection(
            title="\U0001f4dd Descripción", text=place.description
        )

    if place.address:
        view.address = AddressSection(
            address=place.address,
            map_button_label="Ver en el mapa" if has_coordinates(place) else None,
        )

    if place.opening_hours:
        view.opening_hours = TextSection(
            title="\U0001f550 Horarios de apertura", text=place.opening_hours
        )

    view.contact = _contact_section(place)

    if place.website:
        view.website = WebsiteSection(url=place.website)

    label = price_label(place.price_level)
    if label:
        view.price_level = TextSection(title="\U0001f4b0 Nivel de precios", text=label)

    if place.types:
        view.types = TagsSection(tags=format_type_tags(place.types))

    return view
