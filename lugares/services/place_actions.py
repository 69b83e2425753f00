from lugares.config import Platform
from lugares.mappers.place_details import has_coordinates, normalize_url
from lugares.schemas.places import Place
from lugares.schemas.views import ActionResult, Alert
from lugares.services.intents import (
    DispatchOutcome,
    IntentDispatcher,
    build_map_uri,
    dispatch_intent,
)

NO_WEBSITE = Alert(title="Sin sitio web", message="Este lugar no tiene un sitio web disponible.")
NO_PHONE = Alert(title="Sin teléfono", message="Este lugar no tiene un teléfono disponible.")
NO_EMAIL = Alert(title="Sin correo", message="Este lugar no tiene un correo electrónico disponible.")
NO_LOCATION = Alert(title="Sin ubicación", message="Este lugar no tiene coordenadas disponibles.")

# (unsupported, failed) messages per intent
_BROWSER_ERRORS = ("No se puede abrir esta URL", "No se pudo abrir el sitio web")
_PHONE_ERRORS = ("No se puede realizar llamadas en este dispositivo", "No se pudo iniciar la llamada")
_EMAIL_ERRORS = ("No hay aplicación de correo configurada", "No se pudo abrir el cliente de correo")
_MAP_ERRORS = ("No se puede abrir el mapa", "No se pudo abrir el mapa")


def _alert(alert: Alert) -> ActionResult:
    return ActionResult(status="alert", alert=alert)


class PlaceActionsService:
    def __init__(self, dispatcher: IntentDispatcher, platform: Platform):
        self._dispatcher = dispatcher
        self._platform = platform

    async def _hand_off(self, uri: str, errors: tuple[str, str]) -> ActionResult:
        outcome = await dispatch_intent(self._dispatcher, uri)
        if outcome == DispatchOutcome.opened:
            return ActionResult(status="opened", uri=uri)
        unsupported, failed = errors
        message = unsupported if outcome == DispatchOutcome.unsupported else failed
        return ActionResult(status="alert", uri=uri, alert=Alert(title="Error", message=message))

    def open_website_in_app(self, url: str | None) -> ActionResult:
        if not url:
            return _alert(NO_WEBSITE)
        return ActionResult(status="in_app", uri=normalize_url(url))

    async def open_website_in_browser(self, url: str | None) -> ActionResult:
        if not url:
            return _alert(NO_WEBSITE)
        return await self._hand_off(normalize_url(url), _BROWSER_ERRORS)

    async def call_phone(self, phone: str | None) -> ActionResult:
        if not phone:
            return _alert(NO_PHONE)
        return await self._hand_off(f"tel:{phone}", _PHONE_ERRORS)

    async def send_email(self, email: str | None) -> ActionResult:
        if not email:
            return _alert(NO_EMAIL)
        return await self._hand_off(f"mailto:{email}", _EMAIL_ERRORS)

    async def open_map(self, place: Place) -> ActionResult:
        if not has_coordinates(place):
            return _alert(NO_LOCATION)
        uri = build_map_uri(self._platform, place.latitude, place.longitude, place.name)
        return await self._hand_off(uri, _MAP_ERRORS)
