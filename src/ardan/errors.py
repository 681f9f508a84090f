"""
Exception hierarchy for the scraper.

Fatal errors abort the whole run. Every subclass of ``ExtractionError`` is
recoverable: the pipeline logs it, skips the item and moves on.
"""


class ArdanError(Exception):
    """Base class for every error raised by this package."""


class ManifestError(ArdanError):
    """The course manifest could not be read or parsed."""


class OutputError(ArdanError):
    """An output directory or the result manifest could not be written."""


class SessionError(ArdanError):
    """The browser could not be launched or the auth cookie was rejected."""


class ExtractionError(ArdanError):
    """A single course item could not be processed."""


class NavigationError(ExtractionError):
    pass


class StabilityTimeout(ExtractionError):
    pass


class ElementNotFound(ExtractionError):
    pass


class NoScriptFound(ExtractionError):
    pass


class NoFrameFound(ExtractionError):
    pass


class EvalError(ExtractionError):
    pass


class NoIdentifierFound(ExtractionError):
    pass


class ContentWriteError(ExtractionError):
    pass
