
from fastapi import APIRouter, HTTPException

from lugares.dependencies import NavigatorDep, PageLoaderDep, PlaceActionsDep
from lugares.mappers.place_list import build_home_screen
from lugares.mappers.screen import build_screen_response
from lugares.navigation import RouteName
from lugares.schemas.views import HomeScreenView, ScreenResponse
from lugares.services.place_details import PlaceDetailsScreen
from lugares.services.place_list import Idle

router = APIRouter()


@router.get("/", response_model=ScreenResponse)
async def current_screen(navigator: NavigatorDep) -> ScreenResponse:
    if navigator.current.name == RouteName.home and isinstance(navigator.home.state, Idle):
        await navigator.home.load()
    return build_screen_response(navigator)


@router.get("/lugares", response_model=HomeScreenView)
async def list_places(
    navigator: NavigatorDep,
    location: str | None = None,
    category: str | None = None,
) -> HomeScreenView:
    loader = navigator.home
    await loader.set_params(location=location, category=category)
    return build_home_screen(loader)


@router.post("/lugares/reintentar", response_model=HomeScreenView)
async def retry_places(navigator: NavigatorDep) -> HomeScreenView:
    loader = navigator.home
    await loader.retry()
    return build_home_screen(loader)


@router.post("/lugares/{key:path}/seleccionar", response_model=ScreenResponse)
async def select_place(
    key: str,
    navigator: NavigatorDep,
    actions: PlaceActionsDep,
    page_loader: PageLoaderDep,
) -> ScreenResponse:
    place = navigator.home.get_place(key)
    if place is None:
        raise HTTPException(status_code=404, detail="Lugar no encontrado")

    navigator.push(
        RouteName.place_details,
        PlaceDetailsScreen(place, actions, page_loader),
    )
    return build_screen_response(navigator)
