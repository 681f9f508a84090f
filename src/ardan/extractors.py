import re
from typing import Iterable, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .constants import (
    CONTENT_SELECTOR,
    EMBED_FRAME_SELECTOR,
    EMBED_HOST,
    SCRIPT_SELECTOR,
    STABLE_TIMEOUT,
)
from .errors import (
    ElementNotFound,
    EvalError,
    NoFrameFound,
    NoIdentifierFound,
    NoScriptFound,
)
from .logger import Logger

# Runs inside the embed frame. Kept as dumb as possible: all the matching
# happens in `media_id_from_sources`.
SCRIPT_SOURCES_JS = """
() => Array.from(document.querySelectorAll('script'))
    .map(s => s.src)
    .filter(src => !!src)
"""


def media_id_from_sources(sources: Iterable[str], embed_host: str = EMBED_HOST) -> Optional[str]:
    """
    Return the media id of the first script source pointing at the embed
    provider, or None.

    Example
    -------
    >>> media_id_from_sources(["https://fast.wistia.com/embed/medias/abc123.jsonp"])
    "abc123"
    """
    pattern = re.compile(
        rf"^https://{re.escape(embed_host)}/embed/medias/([^/?#]+)\.jsonp(?:[?#].*)?$"
    )
    for src in sources:
        match = pattern.match(src or "")
        if match:
            return match.group(1)
    return None


async def extract_text(page: Page, selector: str = CONTENT_SELECTOR) -> str:
    """Inner HTML of the lesson content container, untouched."""
    element = await page.query_selector(selector)
    if element is None:
        raise ElementNotFound(f"content container not found: {selector}")
    return await element.inner_html()


async def extract_video_id(
    page: Page,
    embed_host: str = EMBED_HOST,
    timeout: float = STABLE_TIMEOUT,
) -> str:
    """
    Recover the embed provider's media id of the video lesson on `page`.

    The player iframe and its scripts are injected client side, so the page
    has to be stable before calling this.
    """
    try:
        await page.wait_for_selector(SCRIPT_SELECTOR, state="attached", timeout=timeout * 1000)
    except PlaywrightTimeoutError as e:
        raise NoScriptFound("no scripts found on page") from e

    iframe = await page.query_selector(EMBED_FRAME_SELECTOR)
    if iframe is None:
        raise NoFrameFound("iframe not found")

    frame = await iframe.content_frame()
    if frame is None:
        raise NoFrameFound("iframe has no content frame")

    try:
        sources = await frame.evaluate(SCRIPT_SOURCES_JS)
    except PlaywrightError as e:
        raise EvalError(f"failed to evaluate frame scripts: {e}") from e

    Logger.debug(f"Frame scripts: {sources}")

    media_id = media_id_from_sources(sources or [], embed_host)
    if not media_id:
        raise NoIdentifierFound(f"no {embed_host} video id found")

    return media_id
