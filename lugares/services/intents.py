import asyncio
import logging
import webbrowser
from enum import StrEnum
from typing import Protocol
from urllib.parse import urlparse

from lugares.config import Platform
from lugares.exceptions.custom import IntentDispatchError

logger = logging.getLogger(__name__)

DEFAULT_MAP_LABEL = "Lugar"


class DispatchOutcome(StrEnum):
    opened = "opened"
    unsupported = "unsupported"
    failed = "failed"


class IntentDispatcher(Protocol):
    async def can_open(self, uri: str) -> bool: ...

    async def open(self, uri: str) -> None: ...


def uri_scheme(uri: str) -> str:
    return urlparse(uri).scheme.lower()


class ClientHandoffDispatcher:
    """Checks the URI scheme against what the client declared it can open.

    Opening only records the hand-off; the client follows the returned URI.
    """

    def __init__(self, schemes: frozenset[str]):
        self._schemes = schemes

    async def can_open(self, uri: str) -> bool:
        return uri_scheme(uri) in self._schemes

    async def open(self, uri: str) -> None:
        logger.info("Handing off %s to client", uri)


class WebbrowserDispatcher:
    """Opens URIs with the system web browser (desktop)."""

    SCHEMES = frozenset({"http", "https", "mailto"})

    async def can_open(self, uri: str) -> bool:
        if uri_scheme(uri) not in self.SCHEMES:
            return False
        try:
            await asyncio.to_thread(webbrowser.get)
        except webbrowser.Error:
            return False
        return True

    async def open(self, uri: str) -> None:
        opened = await asyncio.to_thread(webbrowser.open, uri)
        if not opened:
            raise IntentDispatchError("Browser refused to open URI", uri=uri)


async def dispatch_intent(dispatcher: IntentDispatcher, uri: str) -> DispatchOutcome:
    """Capability check, then hand-off. Never raises."""
    try:
        if not await dispatcher.can_open(uri):
            logger.info("No handler for %s", uri)
            return DispatchOutcome.unsupported
        await dispatcher.open(uri)
    except Exception:
        logger.exception("Intent dispatch failed for %s", uri)
        return DispatchOutcome.failed
    return DispatchOutcome.opened


def build_map_uri(
    platform: Platform,
    latitude: float,
    longitude: float,
    label: str | None = None,
) -> str:
    lat_lng = f"{latitude},{longitude}"
    label = label or DEFAULT_MAP_LABEL
    if platform == Platform.ios:
        return f"maps:0,0?q={label}@{lat_lng}"
    return f"geo:0,0?q={lat_lng}({label})"


def build_dispatcher(kind: str, client_schemes: frozenset[str]) -> IntentDispatcher:
    if kind == "webbrowser":
        return WebbrowserDispatcher()
    if kind != "client":
        logger.warning("Unknown intent dispatcher %r, using client hand-off", kind)
    return ClientHandoffDispatcher(client_schemes)
