from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import (
    COOKIE_DOMAIN,
    COURSES_URL,
    EMBED_HOST,
    JSONS_DIR,
    NAVIGATION_TIMEOUT,
    PACE_DELAY,
    SETTLE_WINDOW,
    STABLE_TIMEOUT,
)


class ContentKind(str, Enum):
    VIDEO = "video"
    TEXT = "text"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def path_segment(self) -> str:
        return _PATH_SEGMENTS[self]


_LABELS = {ContentKind.VIDEO: "Video", ContentKind.TEXT: "Text"}
_PATH_SEGMENTS = {ContentKind.VIDEO: "lessons", ContentKind.TEXT: "texts"}


class CourseDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    slug: str


class ContentDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    slug: str
    display_name: str


class CourseManifest(BaseModel):
    model_config = ConfigDict(frozen=True)

    course: CourseDescriptor
    contents: list[ContentDescriptor]


class Classification(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ContentKind
    url: str


class ExtractionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    index: int
    dynamic_part: Optional[str] = Field(default=None, alias="dynamic-part")
    downloaded: bool
    name: str
    type: ContentKind

    def dump(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class OutputManifest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    item_count: int = Field(alias="item-count")
    items: list[ExtractionResult]

    @model_validator(mode="after")
    def _check_count(self):
        if self.item_count != len(self.items):
            raise ValueError(
                f"item-count is {self.item_count} but there are {len(self.items)} items"
            )
        return self

    @classmethod
    def from_items(cls, name: str, items: list[ExtractionResult]) -> "OutputManifest":
        return cls(name=name, item_count=len(items), items=list(items))

    def dump(self) -> dict:
        return {
            "name": self.name,
            "item-count": self.item_count,
            "items": [item.dump() for item in self.items],
        }


class ItemOutcome(BaseModel):
    """Tagged result of processing one course item."""

    index: int
    name: str
    kind: ContentKind
    url: str
    result: Optional[ExtractionResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


class ScrapeConfig(BaseModel):
    base_url: str = COURSES_URL
    domain: str = COOKIE_DOMAIN
    embed_host: str = EMBED_HOST
    browser_type: str = "chromium"
    headless: bool = True
    navigation_timeout: float = NAVIGATION_TIMEOUT
    stable_timeout: float = STABLE_TIMEOUT
    settle_window: float = SETTLE_WINDOW
    pace_delay: float = PACE_DELAY
    output_dir: Path = Path(".")
    mark_complete: bool = False

    @property
    def jsons_dir(self) -> Path:
        return self.output_dir / JSONS_DIR
