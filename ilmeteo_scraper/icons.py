"""Icon resolution for day cards and hourly rows.

The site has marked up its pictograms several ways over time. Each
strategy below looks for one of them inside an element and returns a
``(weather_code, icon_ref)`` pair, or None when that markup is absent.
Strategies are tried in order and the first hit wins.
"""

import re

from ilmeteo_scraper.codes import OVERCAST_ICON, icon_for_keywords, resolve_icon
from ilmeteo_scraper.dom import class_name, parse_int

SPRITE_CLASS_RE = re.compile(r'ss-small(\d+)')


def from_data_attribute(element):
    """Current markup: ``<span data-simbolo="3">``."""
    tag = element.select_one('[data-simbolo]')
    if tag is None:
        return None
    code = parse_int(tag.get('data-simbolo'))
    if not code:
        return None
    return code, resolve_icon(code)


def from_class_suffix(element):
    """Sprite markup: ``<span class="s-small ss-small12">``."""
    for tag in element.select("[class*='ss-small']"):
        match = SPRITE_CLASS_RE.search(class_name(tag))
        code = int(match.group(1)) if match else 0
        # ss-small0 is the site's "unknown" sprite
        if code:
            return code, resolve_icon(code)
    return None


def from_class_keywords(element):
    """Older markup naming the weather in the class, e.g. ``s-small pioggia``."""
    tag = element.select_one("[class*='s-small']")
    icon = icon_for_keywords(class_name(tag))
    if icon is None:
        return None
    return 0, icon


def from_image_src(element):
    """Plain ``<img>`` pictogram; protocol-relative sources get https."""
    tag = element.find('img', src=True)
    if tag is None or not tag['src'].strip():
        return None
    src = tag['src'].strip()
    if src.startswith('//'):
        src = 'https:' + src
    return 0, src


DAILY_STRATEGIES = (from_data_attribute, from_class_suffix, from_class_keywords, from_image_src)
HOURLY_STRATEGIES = (from_data_attribute, from_class_suffix, from_class_keywords)


def resolve_element_icon(element, strategies):
    """Runs ``strategies`` over ``element`` until one finds an icon.

    Args:
        element (bs4.element.Tag): Day card or icon cell to inspect.
        strategies (iterable): Strategy functions, highest priority first.

    Returns:
        tuple: ``(weather_code, icon_ref)``; ``(0, OVERCAST_ICON)`` when nothing matched.
    """
    for strategy in strategies:
        result = strategy(element)
        if result is not None:
            return result
    return 0, OVERCAST_ICON
