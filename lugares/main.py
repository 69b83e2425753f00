import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from lugares.config import Settings
from lugares.exceptions.custom import NavigationError
from lugares.exceptions.handlers import navigation_error_handler
from lugares.navigation import Navigator
from lugares.routers.details import router as details_router
from lugares.routers.home import router as home_router
from lugares.services.intents import build_dispatcher
from lugares.services.place_actions import PlaceActionsService
from lugares.services.place_list import PlaceListLoader
from lugares.services.places_api import PlacesApiService
from lugares.services.web_viewer import WebPageLoader


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        places_api = PlacesApiService(client, settings.places_api_base_url)
        loader = PlaceListLoader(
            places_api,
            location=settings.default_location,
            category=settings.default_category,
        )

        dispatcher = build_dispatcher(settings.intent_dispatcher, settings.client_scheme_set)

        # one navigation stack per process, shared by all clients
        app.state.navigator = Navigator(loader)
        app.state.place_actions = PlaceActionsService(dispatcher, settings.platform)
        app.state.page_loader = WebPageLoader(client)

        yield


app = FastAPI(title="Lugares Turísticos", lifespan=lifespan)

app.add_exception_handler(NavigationError, navigation_error_handler)

app.include_router(home_router)
app.include_router(details_router)
