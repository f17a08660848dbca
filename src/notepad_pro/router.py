"""Screen router.

Maps route names to the four main views. There are no guards, deep links
or restored navigation state; the app always starts at `START_ROUTE`.
"""

from enum import Enum

from .errors import UnknownRouteError


class Route(str, Enum):
    """Destinations reachable from the bottom navigation bar."""

    HOME = "home"
    SEARCH = "search"
    EDITOR = "editor"
    SETTINGS = "settings"


# Bottom navigation order
NAV_ROUTES: tuple[Route, ...] = (Route.HOME, Route.SEARCH, Route.EDITOR, Route.SETTINGS)

START_ROUTE = Route.HOME

NAV_ICONS = {
    Route.HOME: "⌂",
    Route.SEARCH: "⌕",
    Route.EDITOR: "+",
    Route.SETTINGS: "⚙",
}


def resolve_route(name: str | Route) -> Route:
    """Map a route name to its Route.

    Raises:
        UnknownRouteError: If the name is not one of the four routes
    """
    if isinstance(name, Route):
        return name
    try:
        return Route(name.strip().lower())
    except ValueError:
        raise UnknownRouteError(name) from None


def route_label(route: Route) -> str:
    """Label for the navigation button, e.g. 'Home'."""
    return route.value[:1].upper() + route.value[1:]
