import json

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ardan.logger import Logger
from ardan.models import ContentDescriptor, CourseDescriptor

WISTIA_SRC = "https://fast.wistia.com/embed/medias/{}.jsonp"


class FakeFrame:
    def __init__(self, sources=None, error=None):
        self.sources = sources or []
        self.error = error

    async def evaluate(self, expression, arg=None):
        if self.error is not None:
            raise self.error
        return self.sources


class FakeElement:
    def __init__(self, html="", frame=None):
        self.html = html
        self.frame = frame
        self.clicked = False

    async def inner_html(self):
        return self.html

    async def content_frame(self):
        return self.frame

    async def click(self):
        self.clicked = True


class FakePage:
    """Minimal stand-in for a playwright Page: selectors map to elements."""

    def __init__(self, elements=None, has_scripts=True):
        self.elements = elements or {}
        self.has_scripts = has_scripts

    async def query_selector(self, selector):
        return self.elements.get(selector)

    async def wait_for_selector(self, selector, state="visible", timeout=None):
        if selector == "script" and not self.has_scripts:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")
        return self.elements.get(selector)


class FakeSession:
    def __init__(self, cookie="token", fail_urls=(), **kwargs):
        self.cookie = cookie
        self.kwargs = kwargs
        self.page = FakePage()
        self.visited = []
        self.fail_urls = set(fail_urls)
        self.completed = 0
        self.entered = 0
        self.exited = 0

    async def __aenter__(self):
        self.entered += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.exited += 1

    async def navigate(self, url):
        from ardan.errors import NavigationError

        self.visited.append(url)
        self.current_url = url
        if url in self.fail_urls:
            raise NavigationError(f"failed to navigate: net::ERR_FAILED at {url}")

    async def mark_complete(self):
        self.completed += 1
        return True


@pytest.fixture(autouse=True)
def quiet_logger():
    Logger.debug_mode = False
    yield
    Logger.debug_mode = False


@pytest.fixture
def course():
    return CourseDescriptor(name="Ultimate Go: Language", slug="ultimate-go")


@pytest.fixture
def contents():
    return [
        ContentDescriptor(name="Intro", slug="intro", display_name="Video"),
        ContentDescriptor(name="Setup", slug="setup", display_name="Text"),
        ContentDescriptor(name="Variables", slug="variables", display_name="Video"),
        ContentDescriptor(name="Notes: Structs", slug="notes-structs", display_name="Text Lesson"),
        ContentDescriptor(name="Pointers", slug="pointers", display_name="Video Lesson"),
    ]


@pytest.fixture
def response_file(tmp_path, course, contents):
    path = tmp_path / "response.json"
    data = {
        "course": {"name": course.name, "slug": course.slug},
        "contents": [
            {"name": c.name, "slug": c.slug, "display_name": c.display_name}
            for c in contents
        ],
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
