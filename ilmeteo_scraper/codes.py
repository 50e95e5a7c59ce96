"""Mapping from ilMeteo.it weather codes to pictogram URLs."""

ICON_BASE_URL = "https://www.ilmeteo.it/img/meteo/s/"

SUN_ICON = ICON_BASE_URL + "sole.png"
MOON_ICON = ICON_BASE_URL + "luna.png"
CLOUD_ICON = ICON_BASE_URL + "nuvoloso.png"
SNOW_ICON = ICON_BASE_URL + "neve.png"
RAIN_ICON = ICON_BASE_URL + "pioggia.png"
STORM_ICON = ICON_BASE_URL + "temporale.png"
FOG_ICON = ICON_BASE_URL + "nebbia.png"
OVERCAST_ICON = ICON_BASE_URL + "coperto.png"

# Site codes 1xx are the night variants.
CODE_ICONS = {
    1: SUN_ICON, 10: SUN_ICON,
    2: MOON_ICON, 110: MOON_ICON,
    3: CLOUD_ICON, 4: CLOUD_ICON, 11: CLOUD_ICON,
    13: SNOW_ICON, 111: SNOW_ICON, 113: SNOW_ICON,
    5: RAIN_ICON, 12: RAIN_ICON, 112: RAIN_ICON,
    19: STORM_ICON, 20: STORM_ICON,
    23: FOG_ICON, 24: FOG_ICON,
}

# Checked in order against a legacy icon class name, e.g. "s-small sole".
KEYWORD_ICONS = [
    (('sole', 'sereno'), SUN_ICON),
    (('pioggia',), RAIN_ICON),
    (('neve',), SNOW_ICON),
    (('nuvol',), CLOUD_ICON),
    (('nebbia',), FOG_ICON),
]


def resolve_icon(code):
    """Returns the pictogram URL for a site weather code.

    Args:
        code (int): Numeric code from ``data-simbolo`` or an ``ss-small<N>`` class.

    Returns:
        str: Icon URL; unknown codes map to the overcast icon.
    """
    return CODE_ICONS.get(code, OVERCAST_ICON)


def icon_for_keywords(class_name):
    """Guesses an icon from the words in a legacy icon class name, or None."""
    if not class_name:
        return None
    for keywords, icon in KEYWORD_ICONS:
        if any(keyword in class_name for keyword in keywords):
            return icon
    return None
