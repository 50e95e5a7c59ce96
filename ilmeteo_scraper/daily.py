"""Daily forecast extraction from a city's main forecast page."""

import logging
from urllib.parse import urljoin

from ilmeteo_scraper.codes import SUN_ICON
from ilmeteo_scraper.dom import extract_text
from ilmeteo_scraper.icons import DAILY_STRATEGIES, resolve_element_icon
from ilmeteo_scraper.models import MISSING, DailyForecastItem, error_item

logger = logging.getLogger(__name__)

MAX_DAYS = 7
DAY_LABEL_LENGTH = 6  # "Lun 25"
DEFAULT_BASE_URL = "https://www.ilmeteo.it"

DAY_LIST_SELECTOR = '.forecast_day_selector__list li.forecast_day_selector__list__item'
DAY_TEMPS_SELECTOR = '.forecast_day_selector__list__item__link__values'
DAY_ABBREVIATIONS = ('Lun', 'Mar', 'Mer', 'Gio', 'Ven', 'Sab', 'Dom')
LEGACY_DESCRIPTION = "Forecast"


def extract_daily(soup, base_url=DEFAULT_BASE_URL):
    """Extracts up to seven daily forecasts from a city's forecast page.

    Tries the day-selector list of the current layout first and falls back
    to scanning table rows when the page uses the older table layout.
    Never raises: any parsing error yields a single error item instead.

    Args:
        soup (bs4.BeautifulSoup): Parsed forecast page.
        base_url (str): Site root, used to absolutise legacy icon sources.

    Returns:
        list[DailyForecastItem]: Days in page order, at most seven.
    """
    try:
        items = parse_day_selector(soup)
        if items:
            logger.debug(f"Parsed {len(items)} days from the day selector list")
            return items
        items = parse_legacy_rows(soup, base_url)
        logger.debug(f"Parsed {len(items)} days from legacy table rows")
        return items
    except Exception as e:
        logger.error(f"Daily forecast extraction failed: {e}", exc_info=True)
        return [error_item(str(e))]


# --- Current layout: horizontal day picker ---

def parse_day_selector(soup):
    """Parses the ``forecast_day_selector`` list items into daily forecasts.

    Args:
        soup (bs4.BeautifulSoup): Parsed forecast page.

    Returns:
        list[DailyForecastItem]: Parsed days; empty when the list is absent.
    """
    items = []
    for li in soup.select(DAY_LIST_SELECTOR):
        anchor = li.find('a')
        link_text = extract_text(anchor)
        # Skips entries like "Meteo giornaliero" that are not a date
        if not any(ch.isdigit() for ch in link_text):
            logger.debug(f"Skipping non-date day selector entry '{link_text}'")
            continue

        weather_code, icon_ref = resolve_element_icon(li, DAILY_STRATEGIES)
        min_temp, max_temp = split_temperatures(extract_text(li.select_one(DAY_TEMPS_SELECTOR)))

        items.append(DailyForecastItem(
            day=link_text[:DAY_LABEL_LENGTH],
            date=link_text,
            icon_ref=icon_ref,
            weather_code=weather_code,
            min_temp=min_temp,
            max_temp=max_temp,
            description=link_text,
            link=anchor.get('href', '') if anchor else '',
        ))
        if len(items) >= MAX_DAYS:
            break
    return items


def split_temperatures(text):
    """Splits a "min max" temperature text such as ``"3° 9°"``.

    A single token fills both fields, which is how the site shows days
    with one temperature.

    Args:
        text (str): Combined temperature text.

    Returns:
        tuple: ``(min_temp, max_temp)``, ``("--", "--")`` for empty text.
    """
    tokens = text.split()
    if not tokens:
        return MISSING, MISSING
    return tokens[0], tokens[-1]


# --- Legacy layout: one table row per day ---

def is_day_row(text):
    """True when a row's text carries a temperature and an Italian day name."""
    return '°' in text and any(day in text for day in DAY_ABBREVIATIONS)


def parse_legacy_rows(soup, base_url=DEFAULT_BASE_URL):
    """Parses daily forecasts out of table rows in the legacy layout.

    Rows are de-duplicated on the first word of their first cell. Legacy
    rows carry no link to an hourly page.

    Args:
        soup (bs4.BeautifulSoup): Parsed forecast page.
        base_url (str): Site root for relative icon sources.

    Returns:
        list[DailyForecastItem]: Up to seven days in row order.
    """
    items = []
    seen_days = set()
    for row in soup.find_all('tr'):
        if len(items) >= MAX_DAYS:
            break
        if not is_day_row(extract_text(row)):
            continue

        cells = row.find_all('td')
        first_cell = extract_text(cells[0]) if cells else ''
        day_key = first_cell.split()[0] if first_cell.split() else ''
        if not day_key or day_key in seen_days:
            continue

        icon_tag = row.select_one("img[src*='meteo']")
        icon_ref = urljoin(base_url + '/', icon_tag['src']) if icon_tag else SUN_ICON

        temps = [extract_text(cell) for cell in cells if '°' in extract_text(cell)]

        items.append(DailyForecastItem(
            day=first_cell,
            date=first_cell,
            icon_ref=icon_ref,
            weather_code=0,
            min_temp=temps[0] if temps else MISSING,
            max_temp=temps[-1] if temps else MISSING,
            description=LEGACY_DESCRIPTION,
            link='',
        ))
        seen_days.add(day_key)
    return items
