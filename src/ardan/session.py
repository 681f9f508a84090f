from playwright.async_api import Browser, BrowserContext, Page, async_playwright
from playwright.async_api import Error as PlaywrightError

from .constants import (
    COMPLETE_BUTTON_SELECTOR,
    COOKIE_DOMAIN,
    COOKIE_NAME,
    NAVIGATION_TIMEOUT,
    USER_AGENT,
)
from .errors import NavigationError, SessionError
from .logger import Logger


class BrowserSession:
    """
    One browser, one context and one page, authenticated with the
    ``remember_user_token`` cookie.

    Use it as an async context manager; the browser process is released
    exactly once whichever way the block is left.
    """

    def __init__(
        self,
        cookie: str,
        domain: str = COOKIE_DOMAIN,
        browser_type: str = "chromium",
        headless: bool = True,
        navigation_timeout: float = NAVIGATION_TIMEOUT,
    ):
        self.cookie = cookie
        self.domain = domain
        self.browser_type = browser_type.lower()
        self.headless = headless
        self.navigation_timeout = navigation_timeout
        self._playwright = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None
        self._closed = False

    async def __aenter__(self):
        try:
            await self._open()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    @property
    def page(self) -> Page:
        if self._page is None:
            raise SessionError("Browser session is not open")
        return self._page

    async def _open(self) -> None:
        if self.browser_type not in ("chromium", "firefox"):
            raise SessionError(f"Unsupported browser: {self.browser_type}")

        mode = "headless" if self.headless else "visible"
        Logger.info(f"Launching {self.browser_type} ({mode} mode)")

        try:
            self._playwright = await async_playwright().start()
            launcher = getattr(self._playwright, self.browser_type)
            self._browser = await launcher.launch(headless=self.headless)
            self._context = await self._browser.new_context(
                user_agent=USER_AGENT,
                viewport={"width": 1920, "height": 1080},
            )
            self._context.set_default_timeout(self.navigation_timeout * 1000)
            self._page = await self._context.new_page()
        except PlaywrightError as e:
            raise SessionError(f"Failed to launch browser: {e}") from e

        try:
            await self._context.add_cookies(
                [
                    {
                        "name": COOKIE_NAME,
                        "value": self.cookie,
                        "domain": self.domain,
                        "path": "/",
                        "secure": True,
                        "httpOnly": True,
                    }
                ]
            )
        except PlaywrightError as e:
            raise SessionError(f"Failed to set cookie: {e}") from e

        try:
            await self._page.goto("about:blank")
        except PlaywrightError as e:
            raise SessionError(f"Browser page is not usable: {e}") from e

        Logger.debug(f"Session ready, cookie {COOKIE_NAME} set for {self.domain}")

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        for resource in (self._page, self._context, self._browser):
            if resource is None:
                continue
            try:
                await resource.close()
            except PlaywrightError as e:
                Logger.debug(f"Error closing {type(resource).__name__}: {e}")

        if self._playwright is not None:
            await self._playwright.stop()

        self._page = self._context = self._browser = self._playwright = None

    async def navigate(self, url: str) -> None:
        try:
            response = await self.page.goto(
                url,
                wait_until="domcontentloaded",
                timeout=self.navigation_timeout * 1000,
            )
        except PlaywrightError as e:
            raise NavigationError(f"failed to navigate: {e}") from e

        if response is not None and not response.ok:
            Logger.debug(f"{url} answered with status {response.status}")

    async def mark_complete(self) -> bool:
        """Click the "complete and continue" button of the current lesson, if any."""
        try:
            button = await self.page.query_selector(COMPLETE_BUTTON_SELECTOR)
            if button is None:
                Logger.debug("No complete button on this page")
                return False
            await button.click()
        except PlaywrightError as e:
            Logger.debug(f"Could not mark lesson as complete: {e}")
            return False
        return True
