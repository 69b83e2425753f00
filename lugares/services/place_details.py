import logging
from enum import StrEnum

from lugares.mappers.place_details import build_place_details
from lugares.schemas.places import Place
from lugares.schemas.views import ActionResult, PlaceDetailsView, WebPage
from lugares.services.place_actions import PlaceActionsService
from lugares.services.web_viewer import WebPageLoader, WebViewModal

logger = logging.getLogger(__name__)


class DetailAction(StrEnum):
    website_in_app = "sitio_web_app"
    website_in_browser = "sitio_web_navegador"
    call = "llamar"
    email = "correo"
    map = "mapa"


class PlaceDetailsScreen:
    """Details for one place record, received by value. No network access
    except through the in-app web viewer."""

    def __init__(self, place: Place, actions: PlaceActionsService, page_loader: WebPageLoader):
        self.place = place
        self._actions = actions
        self.web_view_visible = False
        self.web_view_url = ""
        self.web_view = WebViewModal(page_loader, on_close=self._close_web_view)

    def _close_web_view(self) -> None:
        self.web_view_visible = False

    def render(self) -> PlaceDetailsView:
        view = build_place_details(self.place)
        view.web_view = self.web_view.render(self.web_view_visible, self.web_view_url)
        return view

    async def run_action(self, action: DetailAction) -> ActionResult:
        if action == DetailAction.website_in_app:
            result = self._actions.open_website_in_app(self.place.website)
            if result.status == "in_app":
                self.web_view_url = result.uri
                self.web_view_visible = True
            return result
        if action == DetailAction.website_in_browser:
            return await self._actions.open_website_in_browser(self.place.website)
        if action == DetailAction.call:
            return await self._actions.call_phone(self.place.phone)
        if action == DetailAction.email:
            return await self._actions.send_email(self.place.email)
        if action == DetailAction.map:
            return await self._actions.open_map(self.place)
        raise ValueError(f"Unknown action: {action}")

    async def load_web_page(self) -> WebPage | None:
        if not self.web_view_visible or not self.web_view_url:
            return None
        logger.info("Loading %s in web viewer", self.web_view_url)
        return await self.web_view.load(self.web_view_url)
