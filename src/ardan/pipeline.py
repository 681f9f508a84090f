import asyncio
import functools
from pathlib import Path

from playwright.async_api import Error as PlaywrightError
from rich import box
from rich.table import Table

from .classifier import classify
from .errors import ExtractionError
from .extractors import extract_text, extract_video_id
from .logger import Logger
from .manifest import save_text_content
from .models import (
    Classification,
    ContentDescriptor,
    ContentKind,
    CourseDescriptor,
    ExtractionResult,
    ItemOutcome,
    OutputManifest,
    ScrapeConfig,
)
from .session import BrowserSession
from .stability import wait_stable
from .utils import item_name, sanitize_filename


def capture_outcome(func):
    """
    Turn a per-item coroutine returning an ExtractionResult into one that
    returns an ItemOutcome. Recoverable failures become failed outcomes;
    anything else propagates.
    """

    @functools.wraps(func)
    async def wrapper(self, session, index: int, content: ContentDescriptor, classification: Classification):
        outcome = ItemOutcome(
            index=index,
            name=content.name,
            kind=classification.kind,
            url=classification.url,
        )
        try:
            outcome.result = await func(self, session, index, content, classification)
        except (ExtractionError, PlaywrightError) as e:
            outcome.error = str(e) or type(e).__name__
            Logger.warning(f"Failed to process {content.name}: {outcome.error}")
            Logger.debug_exception(e)
        return outcome

    return wrapper


class Extractor:
    """
    Walks the course items in order over a single browser session and
    collects what could be extracted. Items that fail are left out of the
    result manifest; their index is simply missing.
    """

    def __init__(self, config: ScrapeConfig, course_dir: Path, sleep=asyncio.sleep):
        self.config = config
        self.course_dir = course_dir
        self.outcomes: list[ItemOutcome] = []
        self._sleep = sleep
        self._handlers = {
            ContentKind.TEXT: self._process_text,
            ContentKind.VIDEO: self._process_video,
        }

    async def run(
        self,
        course: CourseDescriptor,
        items: list[ContentDescriptor],
        session: BrowserSession,
    ) -> OutputManifest:
        self.outcomes = []
        total = len(items)

        for idx, content in enumerate(items):
            classification = classify(course, content, self.config.base_url)
            Logger.progress(
                f"Processing {content.name} ({classification.kind.label}) ({idx + 1}/{total})"
            )

            outcome = await self.process_item(session, idx, content, classification)
            self.outcomes.append(outcome)

            # pace requests, whatever the outcome
            await self._sleep(self.config.pace_delay)

        return OutputManifest.from_items(
            course.name, [outcome.result for outcome in self.outcomes if outcome.ok]
        )

    @capture_outcome
    async def process_item(
        self,
        session: BrowserSession,
        index: int,
        content: ContentDescriptor,
        classification: Classification,
    ) -> ExtractionResult:
        await session.navigate(classification.url)
        await wait_stable(
            session.page,
            timeout=self.config.stable_timeout,
            settle=self.config.settle_window,
        )

        handler = self._handlers[classification.kind]
        result = await handler(session, index, content)

        if self.config.mark_complete:
            await session.mark_complete()

        return result

    async def _process_text(self, session: BrowserSession, index: int, content: ContentDescriptor) -> ExtractionResult:
        html = await extract_text(session.page)

        path = self.course_dir / f"{index}_{sanitize_filename(content.name)}.html"
        await save_text_content(path, html)
        Logger.info(f"Saved HTML content to {path}")

        return ExtractionResult(
            index=index,
            downloaded=True,
            name=item_name(index, content.name),
            type=ContentKind.TEXT,
        )

    async def _process_video(self, session: BrowserSession, index: int, content: ContentDescriptor) -> ExtractionResult:
        media_id = await extract_video_id(
            session.page,
            embed_host=self.config.embed_host,
            timeout=self.config.stable_timeout,
        )
        Logger.info(f"Found video ID: {media_id}")

        return ExtractionResult(
            index=index,
            dynamic_part=media_id,
            downloaded=False,
            name=item_name(index, content.name),
            type=ContentKind.VIDEO,
        )

    @property
    def failures(self) -> list[ItemOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    def summary(self, title: str) -> Table:
        table = Table(
            title=title,
            title_style="green",
            header_style="green",
            footer_style="green",
            show_footer=True,
            box=box.SQUARE_DOUBLE_HEAD,
        )
        table.add_column("Kind", style="green", footer="Total", no_wrap=True)
        table.add_column("Processed", justify="center", footer=str(len(self.outcomes)))
        table.add_column(
            "Extracted",
            justify="center",
            style="green",
            footer=str(len(self.outcomes) - len(self.failures)),
        )
        table.add_column("Failed", justify="center", style="red", footer=str(len(self.failures)))

        for kind in ContentKind:
            of_kind = [outcome for outcome in self.outcomes if outcome.kind is kind]
            failed = sum(1 for outcome in of_kind if not outcome.ok)
            table.add_row(kind.label, str(len(of_kind)), str(len(of_kind) - failed), str(failed))

        return table
