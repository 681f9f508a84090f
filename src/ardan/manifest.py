import json
from pathlib import Path

import aiofiles
from pydantic import ValidationError

from .errors import ContentWriteError, ManifestError, OutputError
from .helpers import read_json, write_json
from .models import CourseDescriptor, CourseManifest, OutputManifest
from .utils import sanitize_filename


def load_course_manifest(path: str | Path) -> CourseManifest:
    """
    Read the course description exported from the platform API.

    :raises ManifestError: if the file is missing, is not JSON, or lacks fields
    """
    try:
        data = read_json(path)
    except OSError as e:
        raise ManifestError(f"failed to read response file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"failed to parse response file {path}: {e}") from e

    try:
        return CourseManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"invalid response file {path}: {e}") from e


def course_dir_for(course: CourseDescriptor, root: Path) -> Path:
    return root / sanitize_filename(course.name)


def manifest_path_for(course_name: str, jsons_dir: Path) -> Path:
    return jsons_dir / f"{sanitize_filename(course_name)}.json"


def prepare_output_dirs(course: CourseDescriptor, root: Path, jsons_dir: Path) -> Path:
    """Create the results directory and the course directory; return the latter."""
    course_dir = course_dir_for(course, root)
    for directory in (jsons_dir, course_dir):
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"failed to create directory {directory}: {e}") from e
    return course_dir


def write_output_manifest(manifest: OutputManifest, jsons_dir: Path) -> Path:
    path = manifest_path_for(manifest.name, jsons_dir)
    try:
        write_json(path, manifest.dump())
    except OSError as e:
        raise OutputError(f"failed to save output JSON: {e}") from e
    return path


def read_output_manifest(path: str | Path) -> OutputManifest:
    return OutputManifest.model_validate(read_json(path))


async def save_text_content(path: Path, html: str) -> None:
    try:
        async with aiofiles.open(path, "w", encoding="utf-8") as file:
            await file.write(html)
    except OSError as e:
        raise ContentWriteError(f"failed to save HTML content: {e}") from e
