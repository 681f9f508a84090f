import asyncio
from pathlib import Path

import typer
from rich import box, print
from rich.table import Table
from typing_extensions import Annotated

from ardan import (
    ArdanError,
    BrowserSession,
    Extractor,
    Logger,
    ScrapeConfig,
    classify,
    load_course_manifest,
    prepare_output_dirs,
    write_output_manifest,
)
from ardan.constants import PACE_DELAY, STABLE_TIMEOUT

app = typer.Typer(rich_markup_mode="rich")


@app.command()
def scrape(
    cookie: Annotated[
        str,
        typer.Option(
            "--cookie",
            "-c",
            help="remember_user_token cookie value.",
            show_default=False,
        ),
    ],
    response: Annotated[
        Path,
        typer.Option(
            "--response",
            "-r",
            help="Path to response.json file containing course metadata.",
            show_default=False,
        ),
    ],
    browser: Annotated[
        str,
        typer.Option(
            "--browser",
            "-b",
            help="Browser to use: chromium or firefox.",
            show_default=True,
        ),
    ] = "chromium",
    headless: Annotated[
        bool,
        typer.Option(
            "--headless/--no-headless",
            help="Hide the browser window.",
            show_default=True,
        ),
    ] = True,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Directory where jsons/ and the course directory are created.",
            show_default=True,
        ),
    ] = Path("."),
    delay: Annotated[
        float,
        typer.Option(
            "--delay",
            help="Seconds to wait after each item.",
            show_default=True,
        ),
    ] = PACE_DELAY,
    stable_timeout: Annotated[
        float,
        typer.Option(
            "--stable-timeout",
            help="Seconds to wait for a page to settle before extracting.",
            show_default=True,
        ),
    ] = STABLE_TIMEOUT,
    mark_complete: Annotated[
        bool,
        typer.Option(
            "--mark-complete",
            help="Click 'complete and continue' after each extracted lesson.",
            show_default=True,
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Show tracebacks for failed items.",
            show_default=True,
        ),
    ] = False,
):
    """
    Collect video ids and text lessons of an Ardan Labs course.

    Video lessons are recorded with their Wistia media id, text lessons are
    saved as HTML next to the results file.

    Usage:
        ardan scrape -c <cookie> -r response.json
        ardan scrape -c <cookie> -r response.json --no-headless
        ardan scrape -c <cookie> -r response.json --browser firefox --delay 5
    """
    Logger.set_debug_mode(debug)
    config = ScrapeConfig(
        browser_type=browser,
        headless=headless,
        output_dir=output,
        pace_delay=delay,
        stable_timeout=stable_timeout,
        mark_complete=mark_complete,
    )

    try:
        asyncio.run(_scrape(cookie, response, config))
    except ArdanError as e:
        Logger.error(str(e), exception=e)
        raise typer.Exit(code=1)


@app.command()
def plan(
    response: Annotated[
        Path,
        typer.Option(
            "--response",
            "-r",
            help="Path to response.json file containing course metadata.",
            show_default=False,
        ),
    ],
):
    """
    Show how every item of the course would be processed, without opening a browser.

    Usage:
        ardan plan -r response.json
    """
    try:
        manifest = load_course_manifest(response)
    except ArdanError as e:
        Logger.error(str(e), exception=e)
        raise typer.Exit(code=1)

    config = ScrapeConfig()
    table = Table(title=manifest.course.name, title_style="green", header_style="green", box=box.SQUARE_DOUBLE_HEAD)
    table.add_column("#", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Kind", justify="center")
    table.add_column("URL", overflow="fold")

    for idx, content in enumerate(manifest.contents):
        classification = classify(manifest.course, content, config.base_url)
        table.add_row(str(idx), content.name, classification.kind.label, classification.url)

    print(table)


async def _scrape(cookie: str, response: Path, config: ScrapeConfig) -> Path:
    manifest = load_course_manifest(response)
    course_dir = prepare_output_dirs(manifest.course, config.output_dir, config.jsons_dir)

    Logger.info(f"Course: {manifest.course.name} ({len(manifest.contents)} items)")

    extractor = Extractor(config, course_dir)
    async with BrowserSession(
        cookie,
        domain=config.domain,
        browser_type=config.browser_type,
        headless=config.headless,
        navigation_timeout=config.navigation_timeout,
    ) as session:
        output = await extractor.run(manifest.course, manifest.contents, session)

    path = write_output_manifest(output, config.jsons_dir)

    print()
    print(extractor.summary(manifest.course.name))
    for failure in extractor.failures:
        Logger.warning(f"#{failure.index} {failure.name} ({failure.kind.label}): {failure.error}")

    Logger.success(f"Successfully saved course data to {path}")
    return path
