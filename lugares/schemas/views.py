from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from lugares.schemas.places import Place


class Alert(BaseModel):
    title: str
    message: str


class ActionResult(BaseModel):
    status: str  # "opened" | "in_app" | "alert"
    uri: str | None = None
    alert: Alert | None = None


# --- Home screen ---


class PlaceListItem(BaseModel):
    key: str
    title: str
    description: str | None = None
    address: str | None = None
    address_marker: str | None = None
    rating_text: str | None = None
    image_url: str | None = None


class EmptyState(BaseModel):
    icon: str = "\U0001f3db\ufe0f"
    title: str = "No se encontraron lugares turísticos"
    subtitle: str = "Intenta con otra búsqueda"


class ErrorState(BaseModel):
    icon: str = "\u26a0\ufe0f"
    message: str
    retry_label: str = "Reintentar"


class HomeScreenView(BaseModel):
    screen: Literal["Home"] = "Home"
    title: str = "Lugares Turísticos"
    subtitle: str
    status: str  # "idle" | "loading" | "loaded" | "failed"
    loading_text: str | None = None
    items: list[PlaceListItem] = []
    empty: EmptyState | None = None
    error: ErrorState | None = None


# --- Details screen ---


class RatingBadge(BaseModel):
    icon: str = "\u2b50"
    text: str


class AddressSection(BaseModel):
    title: str = "\U0001f4cd Dirección"
    address: str
    map_button_label: str | None = None


class ContactEntry(BaseModel):
    kind: str  # "phone" | "email"
    icon: str
    value: str
    action_label: str
    action: str


class ContactSection(BaseModel):
    title: str = "\U0001f4de Contacto"
    entries: list[ContactEntry]


class WebsiteSection(BaseModel):
    title: str = "\U0001f310 Sitio web"
    url: str
    open_in_app_label: str = "Abrir en la app"
    open_in_browser_label: str = "Abrir en navegador"


class TextSection(BaseModel):
    title: str
    text: str


class TagsSection(BaseModel):
    title: str = "\U0001f3f7\ufe0f Tipos"
    tags: list[str]


class WebPage(BaseModel):
    url: str
    title: str | None = None
    text: str = ""
    error: str | None = None


class WebViewModalView(BaseModel):
    visible: bool
    title: str = "Sitio web"
    close_label: str = "\u2715 Cerrar"
    url: str | None = None
    loading: bool
    loading_text: str | None = None


class PlaceDetailsView(BaseModel):
    screen: Literal["PlaceDetails"] = "PlaceDetails"
    header_title: str = "Detalles"
    back_label: str = "\u2190 Atrás"
    name: str
    image_url: str | None = None
    image_placeholder: str | None = None
    rating: RatingBadge | None = None
    category: str | None = None
    description: TextSection | None = None
    address: AddressSection | None = None
    opening_hours: TextSection | None = None
    contact: ContactSection | None = None
    website: WebsiteSection | None = None
    price_level: TextSection | None = None
    types: TagsSection | None = None
    web_view: WebViewModalView | None = None
    place: Place


class ScreenResponse(BaseModel):
    route: str
    title: str
    header_shown: bool
    transition: str
    depth: int
    view: Annotated[HomeScreenView | PlaceDetailsView, Field(discriminator="screen")]
