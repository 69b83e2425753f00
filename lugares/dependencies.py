from typing import Annotated

from fastapi import Depends, Request

from lugares.navigation import Navigator
from lugares.services.place_actions import PlaceActionsService
from lugares.services.web_viewer import WebPageLoader


def get_navigator(request: Request) -> Navigator:
    return request.app.state.navigator


def get_place_actions(request: Request) -> PlaceActionsService:
    return request.app.state.place_actions


def get_page_loader(request: Request) -> WebPageLoader:
    return request.app.state.page_loader


NavigatorDep = Annotated[Navigator, Depends(get_navigator)]
PlaceActionsDep = Annotated[PlaceActionsService, Depends(get_place_actions)]
PageLoaderDep = Annotated[WebPageLoader, Depends(get_page_loader)]
