import logging
import re
from collections.abc import Callable

import httpx
from bs4 import BeautifulSoup

from lugares.schemas.views import WebPage, WebViewModalView

logger = logging.getLogger(__name__)

_MAX_BODY = 2 * 1024 * 1024  # 2 MB
_TIMEOUT = 10.0
_USER_AGENT = "LugaresTuristicos/1.0"

LOAD_FAILED_MESSAGE = "No se pudo cargar el sitio web"
LOADING_TEXT = "Cargando..."

_WHITESPACE_RE = re.compile(r"\n\s*\n+")


class WebPageLoader:
    """Rendering surface for the in-app viewer: fetches a page and extracts its text."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def fetch(
        self,
        url: str,
        on_load_start: Callable[[], None] | None = None,
        on_load_end: Callable[[], None] | None = None,
    ) -> WebPage:
        """Load ``url``. Best-effort, never raises."""
        if on_load_start:
            on_load_start()
        try:
            html = await self._fetch_html(url)
            return self._parse(url, html)
        except Exception:
            logger.exception("Web page load failed for %s", url)
            return WebPage(url=url, error=LOAD_FAILED_MESSAGE)
        finally:
            if on_load_end:
                on_load_end()

    async def _fetch_html(self, url: str) -> str:
        resp = await self._client.get(
            url,
            headers={"User-Agent": _USER_AGENT},
            follow_redirects=True,
            timeout=_TIMEOUT,
        )
        resp.raise_for_status()
        return resp.text[:_MAX_BODY]

    @staticmethod
    def _parse(url: str, html: str) -> WebPage:
        soup = BeautifulSoup(html, "html.parser")
        for tag in soup(["script", "style", "noscript"]):
            tag.decompose()

        title = soup.title.get_text(strip=True) if soup.title else None
        body = soup.body or soup
        text = body.get_text("\n", strip=True)
        text = _WHITESPACE_RE.sub("\n", text)
        return WebPage(url=url, title=title or None, text=text)


class WebViewModal:
    """Full-screen modal around a single page.

    Visibility and URL belong to the caller; the modal only tracks loading.
    """

    def __init__(self, loader: WebPageLoader, on_close: Callable[[], None]):
        self._loader = loader
        self._on_close = on_close
        self.loading = True

    def on_load_start(self) -> None:
        self.loading = True

    def on_load_end(self) -> None:
        self.loading = False

    async def load(self, url: str) -> WebPage:
        return await self._loader.fetch(
            url,
            on_load_start=self.on_load_start,
            on_load_end=self.on_load_end,
        )

    def close(self) -> None:
        self._on_close()

    def render(self, visible: bool, url: str | None) -> WebViewModalView:
        # a hidden modal never reports loading
        loading = visible and self.loading
        return WebViewModalView(
            visible=visible,
            url=url or None,
            loading=loading,
            loading_text=LOADING_TEXT if loading else None,
        )
