"""Fetch-and-extract pipeline: city page to daily list, day link to hourly rows."""

import logging

from ilmeteo_scraper.config import default_config, request_options
from ilmeteo_scraper.daily import extract_daily
from ilmeteo_scraper.fetcher import FetchError, build_detail_url, build_forecast_url, fetch_document
from ilmeteo_scraper.hourly import extract_hourly, extract_hourly_by_layout
from ilmeteo_scraper.models import error_item

logger = logging.getLogger(__name__)

HOURLY_EXTRACTORS = {
    'header': extract_hourly,
    'layout': extract_hourly_by_layout,
}


def get_forecast(city, config=None, fetch=fetch_document):
    """Fetches a city's forecast page and extracts the daily forecasts.

    A download failure is reported as the single error item, like any
    other failure of the daily list.

    Args:
        city (str): City name as typed by the user.
        config (dict, optional): Loaded configuration; defaults apply when None.
        fetch (callable): Document fetcher taking a URL and request options.

    Returns:
        list[DailyForecastItem]: Up to seven days, or the error item.
    """
    config = config or default_config()
    base_url = config['site']['base_url']
    url = build_forecast_url(city, base_url)
    try:
        soup = fetch(url, **request_options(config))
    except FetchError as e:
        logger.error(f"Could not download forecast for {city}: {e}")
        return [error_item(str(e))]
    return extract_daily(soup, base_url=base_url)


def get_hourly_forecast(city, day_link, config=None, fetch=fetch_document):
    """Fetches a day's detail page and extracts its hourly rows.

    Args:
        city (str): City the day belongs to.
        day_link (str): ``link`` of the selected daily item.
        config (dict, optional): Loaded configuration; defaults apply when None.
        fetch (callable): Document fetcher taking a URL and request options.

    Returns:
        list[HourlyForecastItem]: Hourly rows; empty when the page could not
        be fetched or parsed.
    """
    config = config or default_config()
    if not day_link:
        logger.info(f"No detail page for this day of {city}")
        return []
    url = build_detail_url(city, day_link, config['site']['base_url'])
    try:
        soup = fetch(url, **request_options(config))
    except FetchError as e:
        logger.error(f"Could not download hourly forecast for {city}: {e}")
        return []
    extractor = HOURLY_EXTRACTORS.get(config['hourly']['strategy'], extract_hourly)
    return extractor(soup)
