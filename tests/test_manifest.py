import json

import pytest

from ardan.errors import ManifestError, OutputError
from ardan.manifest import (
    load_course_manifest,
    manifest_path_for,
    prepare_output_dirs,
    write_output_manifest,
)
from ardan.models import CourseDescriptor, ExtractionResult, OutputManifest


def test_load_course_manifest(response_file, course, contents):
    manifest = load_course_manifest(response_file)
    assert manifest.course == course
    assert list(manifest.contents) == contents


def test_load_missing_file(tmp_path):
    with pytest.raises(ManifestError, match="read"):
        load_course_manifest(tmp_path / "nope.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "response.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ManifestError, match="parse"):
        load_course_manifest(path)


def test_load_missing_fields(tmp_path):
    path = tmp_path / "response.json"
    path.write_text(json.dumps({"course": {"name": "Go"}, "contents": []}), encoding="utf-8")
    with pytest.raises(ManifestError, match="invalid"):
        load_course_manifest(path)


def test_prepare_output_dirs(tmp_path):
    course = CourseDescriptor(name="Go: The <Good> Parts", slug="go")
    course_dir = prepare_output_dirs(course, tmp_path, tmp_path / "jsons")
    assert course_dir == tmp_path / "Go_ The _Good_ Parts"
    assert course_dir.is_dir()
    assert (tmp_path / "jsons").is_dir()


def test_prepare_output_dirs_failure(tmp_path):
    blocker = tmp_path / "jsons"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(OutputError):
        prepare_output_dirs(CourseDescriptor(name="Go", slug="go"), tmp_path, blocker)


def test_written_manifest_is_two_space_indented(tmp_path):
    manifest = OutputManifest.from_items(
        "Go/Rust",
        [ExtractionResult(index=0, dynamic_part="abc", downloaded=False, name="0_A", type="video")],
    )
    path = write_output_manifest(manifest, tmp_path)

    assert path == manifest_path_for("Go/Rust", tmp_path) == tmp_path / "Go_Rust.json"
    text = path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "name": "Go/Rust",\n  "item-count": 1,')


def test_item_count_must_match_items():
    with pytest.raises(ValueError):
        OutputManifest(name="Go", item_count=2, items=[])
