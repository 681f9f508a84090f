import sys
import traceback

from rich import print
from rich.console import Console
from rich.markup import escape
from rich.traceback import Traceback


class Logger:
    show_warnings = True
    debug_mode = False
    console = Console()

    @classmethod
    def error(cls, text, exception=None):
        """Log an error. In debug mode a traceback for `exception` follows it."""
        cls.print(text, "ERROR:", "red", file=sys.stderr)

        if cls.debug_mode and exception is not None:
            cls.debug_exception(exception)

    @classmethod
    def warning(cls, text):
        if cls.show_warnings:
            cls.print(text, "WARNING:", "yellow")

    @classmethod
    def info(cls, text):
        cls.print(text, "INFO:", "green")

    @classmethod
    def progress(cls, text):
        cls.print(text, "==>", "cyan")

    @classmethod
    def success(cls, text):
        cls.print(text, "DONE:", "bold green")

    @classmethod
    def debug(cls, text):
        if cls.debug_mode:
            cls.print(text, "DEBUG:", "blue")

    @classmethod
    def print(cls, text, head, color="green", end="\n", file=None):
        print(f"[{color}]{head} {escape(str(text))}[/{color}]", end=end, flush=True, file=file)

    @classmethod
    def debug_exception(cls, exception):
        """Print type, message and a rich traceback for `exception` (debug mode only)."""
        if not cls.debug_mode:
            return

        print(f"\n[yellow]Exception Type:[/yellow] [red]{type(exception).__name__}[/red]")
        print(f"[yellow]Exception Message:[/yellow] [red]{escape(str(exception))}[/red]\n")

        try:
            tb = Traceback.from_exception(
                type(exception),
                exception,
                exception.__traceback__,
                show_locals=True,
            )
            cls.console.print(tb)
        except Exception:
            traceback.print_exception(type(exception), exception, exception.__traceback__)

    @classmethod
    def set_debug_mode(cls, enabled: bool):
        cls.debug_mode = enabled
        if enabled:
            cls.info("Debug mode enabled, tracebacks will be shown for failed items")
