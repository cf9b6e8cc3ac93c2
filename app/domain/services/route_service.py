import json
from typing import Any, List, Optional

from app.domain.entities.route import Route
from app.domain.errors import RouteConfigParseError
from app.infrastructure.proxy.caddy_client import CaddyClient

DEFAULT_PATH = "N/A"
DEFAULT_UPSTREAM = "N/A"
DEFAULT_HANDLER = "reverse_proxy"


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _get(value: Any, key: str) -> Any:
    if isinstance(value, dict):
        return value.get(key)
    return None


def _text(value: Any) -> Optional[str]:
    """Numbers and non-empty strings as strings; anything else as None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value:
        return value
    return None


def format_route(index: int, route: Any) -> Route:
    """
    Summarise one route of the proxy configuration.

    Only the first matcher and the first handler are inspected. Anything
    missing falls back to a default instead of failing.
    """
    handler = _first(_get(route, "handle"))
    return Route(
        index=index,
        path=_text(_first(_get(_first(_get(route, "match")), "path"))) or DEFAULT_PATH,
        upstream=_text(_get(_first(_get(handler, "upstreams")), "dial")) or DEFAULT_UPSTREAM,
        type=_text(_get(handler, "handler")) or DEFAULT_HANDLER,
        strip_prefix=_text(_get(_get(handler, "rewrite"), "strip_path_prefix")),
    )


def parse_routes(output: str) -> List[Route]:
    try:
        config = json.loads(output)
    except json.JSONDecodeError as e:
        raise RouteConfigParseError(f"Route configuration is not valid JSON: {e}") from e

    # The admin API answers null for a server without routes.
    if config is None:
        return []
    if not isinstance(config, list):
        raise RouteConfigParseError(
            f"Route configuration must be a list, got {type(config).__name__}"
        )
    return [format_route(index, route) for index, route in enumerate(config)]


class RouteService:
    def __init__(self, proxy: CaddyClient):
        self.proxy = proxy

    async def list_routes(self) -> List[Route]:
        output = await self.proxy.get_routes_config()
        return parse_routes(output)
