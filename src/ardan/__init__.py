from .classifier import classify
from .errors import (
    ArdanError,
    ExtractionError,
    ManifestError,
    OutputError,
    SessionError,
)
from .logger import Logger
from .manifest import (
    load_course_manifest,
    prepare_output_dirs,
    read_output_manifest,
    write_output_manifest,
)
from .models import (
    ContentDescriptor,
    ContentKind,
    CourseDescriptor,
    CourseManifest,
    ExtractionResult,
    OutputManifest,
    ScrapeConfig,
)
from .pipeline import Extractor
from .session import BrowserSession
