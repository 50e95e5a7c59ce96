"""Hourly forecast extraction from a day's detail page.

``extract_hourly`` is the default extractor: it scans every row of the
page and reads the meaning of the last column from the table header.
``extract_hourly_by_layout`` is the older table-body reader that tells
inland and seaside stations apart by probing the first data row. The two
are alternatives; pick one per run through ``hourly.strategy``.
"""

import logging
import re
from collections import namedtuple
from enum import Enum

from ilmeteo_scraper.dom import cell_text, class_name, extract_text
from ilmeteo_scraper.icons import HOURLY_STRATEGIES, resolve_element_icon
from ilmeteo_scraper.models import (
    HUMIDITY_LABEL, MISSING, PERCEIVED_LABEL, HourlyForecastItem, RainType,
)

logger = logging.getLogger(__name__)

MIN_CELLS = 6
FALLBACK_HUMIDITY_INDEX = 9
TIME_RE = re.compile(r'(\d{1,2}:\d{2})')
NUMBER_RE = re.compile(r'-?\d+(?:[.,]\d+)?\s*°?C?')

HEADER_SELECTOR = 'table.weather_table thead tr th'
BODY_ROW_SELECTOR = 'table.weather_table tbody tr'
HIDDEN_ROW_CLASSES = {'hidden', 'ad_row', 'separator'}
SNOWFLAKE_SELECTOR = '.fiocco'
PRECIPITATION_SELECTOR = '.precontainer'
RAIN_WORDS = ('mm', 'pioggia', 'rain')

ColumnMap = namedtuple('ColumnMap', ['time', 'icon', 'temp', 'rain', 'wind', 'humidity'])


class ColumnLayout(Enum):
    STANDARD = 'standard'
    SEASIDE = 'seaside'  # sea state column sits right after the icon


COLUMN_MAPS = {
    ColumnLayout.STANDARD: ColumnMap(time=0, icon=1, temp=2, rain=3, wind=5, humidity=9),
    ColumnLayout.SEASIDE: ColumnMap(time=0, icon=1, temp=3, rain=4, wind=6, humidity=10),
}


def extract_hourly(soup):
    """Extracts hourly forecasts from a day's detail page.

    Every ``<tr>`` in the document is considered because overnight hours
    are sometimes rendered outside the main table. A row counts when it is
    visible, has at least six cells and its first cell reads as a time.

    Args:
        soup (bs4.BeautifulSoup): Parsed detail page.

    Returns:
        list[HourlyForecastItem]: Rows in document order; empty on any failure.
    """
    try:
        column_index, column_label = find_dynamic_column(soup)
        if column_index is None:
            logger.debug("No humidity/perceived header found, using fixed column index")

        items = []
        for row in soup.find_all('tr'):
            if is_hidden_row(row):
                continue
            cells = row.find_all('td')
            if len(cells) < MIN_CELLS:
                continue
            time = parse_time(cell_text(cells[0]))
            if time is None:
                continue

            value, label = read_dynamic_column(cells, column_index, column_label)
            items.append(build_item(cells, time, COLUMN_MAPS[ColumnLayout.STANDARD], value, label))

        logger.debug(f"Parsed {len(items)} hourly rows")
        return items
    except Exception as e:
        logger.error(f"Hourly forecast extraction failed: {e}", exc_info=True)
        return []


def find_dynamic_column(soup):
    """Locates the last, station-dependent column from the table header.

    Args:
        soup (bs4.BeautifulSoup): Parsed detail page.

    Returns:
        tuple: ``(index, label)``; index is None when no header matched.
    """
    for index, th in enumerate(soup.select(HEADER_SELECTOR)):
        text = extract_text(th).lower()
        if 'ur' in text:
            return index, HUMIDITY_LABEL
        if 'perc' in text or 't.p.' in text:
            return index, PERCEIVED_LABEL
    return None, HUMIDITY_LABEL


def read_dynamic_column(cells, column_index, column_label):
    """Reads the humidity or perceived temperature cell of one row.

    Without a header match the value is read from column 9 and treated
    as humidity.

    Returns:
        tuple: ``(value, label)``.
    """
    if column_index is None:
        if len(cells) > FALLBACK_HUMIDITY_INDEX:
            return extract_text(cells[FALLBACK_HUMIDITY_INDEX]) + '%', HUMIDITY_LABEL
        return MISSING, HUMIDITY_LABEL

    if len(cells) <= column_index:
        return MISSING, column_label
    value = extract_text(cells[column_index])
    if column_label == HUMIDITY_LABEL and '%' not in value:
        value += '%'
    elif column_label == PERCEIVED_LABEL and '°' not in value:
        value += '°'
    return value, column_label


def parse_time(text):
    """Reads the time label of a row's first cell.

    ``"14:00 update"`` gives ``"14:00"``; one or two bare digits are kept
    as written (``"3"`` stays ``"3"``); anything else is not a time.

    Args:
        text (str): Trimmed first-cell text.

    Returns:
        str or None: The time label, or None if the row is not an hour slot.
    """
    match = TIME_RE.search(text)
    if match:
        return match.group(1)
    text = text.strip()
    if 0 < len(text) <= 2 and all(ch in '0123456789' for ch in text):
        return text
    return None


def is_hidden_row(row):
    """True for rows hidden inline or marked as ads/separators."""
    style = row.get('style', '').replace(' ', '').lower()
    if 'display:none' in style:
        return True
    return bool(HIDDEN_ROW_CLASSES.intersection(class_name(row).split()))


def classify_rain(cell):
    """Tells snow from rain using the precipitation cell's markup.

    Args:
        cell (bs4.element.Tag): Precipitation cell.

    Returns:
        RainType: SNOW when a snowflake marker is present, RAIN for an
        amount marker or rain text, NONE otherwise.
    """
    if cell.select_one(SNOWFLAKE_SELECTOR) is not None:
        return RainType.SNOW
    text = extract_text(cell).lower()
    if cell.select_one(PRECIPITATION_SELECTOR) is not None or any(word in text for word in RAIN_WORDS):
        return RainType.RAIN
    return RainType.NONE


def build_item(cells, time, columns, humidity_value, humidity_label):
    """Builds one hourly item from a row's cells using a column mapping."""
    weather_code, icon_ref = resolve_element_icon(cells[columns.icon], HOURLY_STRATEGIES)
    rain_cell = cells[columns.rain]
    return HourlyForecastItem(
        time=time,
        icon_ref=icon_ref,
        weather_code=weather_code,
        temp=extract_text(cells[columns.temp]),
        rain=extract_text(rain_cell),
        rain_type=classify_rain(rain_cell),
        wind=extract_text(cells[columns.wind]),
        humidity_value=humidity_value,
        humidity_label=humidity_label,
    )


# --- Table-body reader with inland/seaside layouts ---

def looks_numeric(text):
    return bool(NUMBER_RE.fullmatch(text.strip()))


def detect_layout(rows):
    """Decides the column layout from the first complete data row.

    Inland tables show the temperature in column 2. Seaside tables put the
    sea state there and move the temperature to column 3.

    Args:
        rows (list[list[bs4.element.Tag]]): Cells of each candidate row.

    Returns:
        ColumnLayout: The detected layout, STANDARD when undecided.
    """
    for cells in rows:
        if len(cells) < MIN_CELLS:
            continue
        if looks_numeric(extract_text(cells[2])):
            return ColumnLayout.STANDARD
        if looks_numeric(extract_text(cells[3])):
            return ColumnLayout.SEASIDE
        break
    return ColumnLayout.STANDARD


def extract_hourly_by_layout(soup):
    """Extracts hourly forecasts from the detail table body only.

    Rows whose first cell starts with a digit are hour slots. The last
    column is always read as humidity.

    Args:
        soup (bs4.BeautifulSoup): Parsed detail page.

    Returns:
        list[HourlyForecastItem]: Rows in table order; empty on any failure.
    """
    try:
        rows = []
        for row in soup.select(BODY_ROW_SELECTOR):
            if is_hidden_row(row):
                continue
            cells = row.find_all('td')
            first = cell_text(cells[0]) if cells else ''
            if first[:1].isdigit():
                rows.append(cells)

        layout = detect_layout(rows)
        columns = COLUMN_MAPS[layout]
        logger.debug(f"Detail table uses the {layout.value} layout")

        items = []
        for cells in rows:
            if len(cells) <= columns.wind:
                continue
            time = cell_text(cells[columns.time]).split()[0]
            if len(cells) > columns.humidity:
                humidity = extract_text(cells[columns.humidity])
                if '%' not in humidity:
                    humidity += '%'
            else:
                humidity = MISSING
            items.append(build_item(cells, time, columns, humidity, HUMIDITY_LABEL))
        return items
    except Exception as e:
        logger.error(f"Hourly forecast extraction failed: {e}", exc_info=True)
        return []
