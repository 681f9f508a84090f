import asyncio

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .constants import SETTLE_WINDOW, STABLE_TIMEOUT
from .errors import StabilityTimeout
from .logger import Logger

# Resolves true once the DOM went `settleMs` without a mutation,
# false if that never happened within `timeoutMs`.
_QUIET_DOM_JS = """
({ settleMs, timeoutMs }) => new Promise((resolve) => {
    let timer = null;
    let limit = null;
    const done = (settled) => {
        observer.disconnect();
        clearTimeout(timer);
        clearTimeout(limit);
        resolve(settled);
    };
    const observer = new MutationObserver(() => {
        clearTimeout(timer);
        timer = setTimeout(done, settleMs, true);
    });
    observer.observe(document.documentElement || document, {
        attributes: true,
        characterData: true,
        childList: true,
        subtree: true,
    });
    limit = setTimeout(done, timeoutMs, false);
    timer = setTimeout(done, settleMs, true);
})
"""


async def wait_stable(
    page: Page,
    timeout: float = STABLE_TIMEOUT,
    settle: float = SETTLE_WINDOW,
) -> None:
    """
    Block until the page stopped loading and its DOM stayed quiet for
    `settle` seconds. Both phases share one overall `timeout`.

    :raises StabilityTimeout: if the page is still busy when `timeout` expires
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout

    try:
        await page.wait_for_load_state("networkidle", timeout=timeout * 1000)
    except PlaywrightTimeoutError as e:
        raise StabilityTimeout(f"page failed to stabilize: network busy after {timeout}s") from e

    remaining = deadline - loop.time()
    if remaining <= 0:
        raise StabilityTimeout(f"page failed to stabilize within {timeout}s")

    settled = await page.evaluate(
        _QUIET_DOM_JS,
        {"settleMs": int(settle * 1000), "timeoutMs": int(remaining * 1000)},
    )
    if not settled:
        raise StabilityTimeout(f"page failed to stabilize: DOM still changing after {timeout}s")

    Logger.debug(f"Page stable after {timeout - (deadline - loop.time()):.2f}s")
