"""Small helpers over BeautifulSoup tags."""


def extract_text(element):
    """Extracts text content cleanly from a BeautifulSoup element.

    Nested strings are joined with single spaces, so ``<b>3°</b><b>9°</b>``
    reads as ``"3° 9°"``.

    Args:
        element (bs4.element.Tag or None): The BeautifulSoup element (Tag) or None.

    Returns:
        str: The stripped text content, or an empty string if element is None.
    """
    return element.get_text(' ', strip=True) if element else ''


def class_name(element):
    """Returns the element's class attribute as one space-separated string."""
    if element is None:
        return ''
    classes = element.get('class') or []
    if isinstance(classes, str):
        return classes
    return ' '.join(classes)


def parse_int(value):
    """Parses ``value`` as an int, returning None when it is not one."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def cell_text(element):
    """Reads an element's text the way a browser shows it inline.

    Unlike :func:`extract_text`, adjacent inline children are not spaced
    apart, so ``<b>14</b>:00`` reads as ``"14:00"``. Runs of whitespace
    collapse to one space.
    """
    return ' '.join(element.get_text().split()) if element else ''
