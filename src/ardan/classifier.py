from .constants import COURSES_URL
from .models import Classification, ContentDescriptor, ContentKind, CourseDescriptor


def content_kind(content: ContentDescriptor) -> ContentKind:
    if "text" in content.display_name.lower():
        return ContentKind.TEXT
    return ContentKind.VIDEO


def classify(
    course: CourseDescriptor,
    content: ContentDescriptor,
    base_url: str = COURSES_URL,
) -> Classification:
    """
    Decide the kind of a course item and the URL its player lives at.

    :param course(CourseDescriptor): the course the item belongs to
    :param content(ContentDescriptor): the item to classify
    :param base_url(str): root of the course player URLs
    :return Classification: kind and target URL

    Example
    -------
    >>> classify(CourseDescriptor(name="Go", slug="go"),
    ...          ContentDescriptor(name="Intro", slug="intro", display_name="Text"))
    Classification(kind=<ContentKind.TEXT: 'text'>,
                   url='https://courses.ardanlabs.com/courses/take/go/texts/intro')
    """
    kind = content_kind(content)
    url = f"{base_url.rstrip('/')}/{course.slug}/{kind.path_segment}/{content.slug}"
    return Classification(kind=kind, url=url)
