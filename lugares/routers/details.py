from fastapi import APIRouter, HTTPException

from lugares.dependencies import NavigatorDep
from lugares.mappers.screen import build_screen_response
from lugares.schemas.views import (
    ActionResult,
    PlaceDetailsView,
    ScreenResponse,
    WebPage,
    WebViewModalView,
)
from lugares.services.place_details import DetailAction

router = APIRouter(prefix="/detalles")


@router.get("", response_model=PlaceDetailsView)
async def place_details(navigator: NavigatorDep) -> PlaceDetailsView:
    return navigator.details().render()


@router.post("/atras", response_model=ScreenResponse)
async def go_back(navigator: NavigatorDep) -> ScreenResponse:
    navigator.go_back()
    return build_screen_response(navigator)


@router.post("/acciones/{action}", response_model=ActionResult)
async def run_action(action: DetailAction, navigator: NavigatorDep) -> ActionResult:
    return await navigator.details().run_action(action)


@router.get("/web", response_model=WebViewModalView)
async def web_view(navigator: NavigatorDep) -> WebViewModalView:
    screen = navigator.details()
    return screen.web_view.render(screen.web_view_visible, screen.web_view_url)


@router.get("/web/pagina", response_model=WebPage)
async def web_page(navigator: NavigatorDep) -> WebPage:
    page = await navigator.details().load_web_page()
    if page is None:
        raise HTTPException(status_code=404, detail="El visor web no está abierto")
    return page


@router.post("/web/cerrar", response_model=WebViewModalView)
async def close_web_view(navigator: NavigatorDep) -> WebViewModalView:
    screen = navigator.details()
    screen.web_view.close()
    return screen.web_view.render(screen.web_view_visible, screen.web_view_url)
