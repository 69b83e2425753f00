from lugares.mappers.place_list import build_home_screen
from lugares.navigation import Navigator, RouteName
from lugares.schemas.views import ScreenResponse


def build_screen_response(navigator: Navigator) -> ScreenResponse:
    route = navigator.current
    if route.name == RouteName.home:
        view = build_home_screen(route.screen)
    else:
        view = route.screen.render()

    return ScreenResponse(
        route=route.name.value,
        title=route.options.title,
        header_shown=route.options.header_shown,
        transition=route.options.transition.value,
        depth=navigator.depth,
        view=view,
    )
