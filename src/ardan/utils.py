import re

_INVALID_CHARS = re.compile(r'[/\\:*?"<>|]')


def sanitize_filename(text: str) -> str:
    """
    Replace every character that is unsafe in a path segment with ``_``.

    :param text(str): user-controlled string used as a file or directory name
    :return str: sanitized string, unchanged if already safe

    Example
    -------
    >>> sanitize_filename("a/b:c")
    "a_b_c"
    """
    return _INVALID_CHARS.sub("_", text)


def item_name(index: int, name: str) -> str:
    """Name recorded in the result manifest for the item at `index`."""
    return f"{index}_{name}"
