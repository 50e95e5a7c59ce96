"""Command line entry point."""

import argparse
import logging

from ilmeteo_scraper.config import CONFIG_FILE, load_config
from ilmeteo_scraper.fetcher import build_forecast_url
from ilmeteo_scraper.forecast import get_forecast, get_hourly_forecast
from ilmeteo_scraper.models import is_error_result
from ilmeteo_scraper.output import display_daily, display_hourly, forecast_to_dict, save_forecast

logger = logging.getLogger(__name__)


def select_days(daily_items, day=None, all_days=False):
    """Returns the daily items whose hourly page should be fetched.

    Args:
        daily_items (list[DailyForecastItem]): Daily list of a city.
        day (int, optional): 1-based position of a single day.
        all_days (bool): Select every day.

    Returns:
        list[DailyForecastItem]: Selected days that link to a detail page.
    """
    if all_days:
        selected = daily_items
    elif day is not None and 1 <= day <= len(daily_items):
        selected = [daily_items[day - 1]]
    else:
        selected = []
    return [item for item in selected if item.link]


def process_city(city, config, day=None, all_days=False, save=False):
    """Fetches, prints and optionally saves the forecast of one city.

    Returns:
        bool: False if only the error item came back.
    """
    daily_items = get_forecast(city, config)
    display_daily(city, daily_items)
    if is_error_result(daily_items):
        logger.error(f"Forecast for {city} failed: {daily_items[0].description}")
        return False

    hourly_by_day = {}
    for item in select_days(daily_items, day, all_days):
        hourly_items = get_hourly_forecast(city, item.link, config)
        # keyed by the full label; short day labels can repeat
        hourly_by_day[item.date] = hourly_items
        display_hourly(item, hourly_items)

    if save:
        source_url = build_forecast_url(city, config['site']['base_url'])
        forecast_data = forecast_to_dict(city, source_url, daily_items, hourly_by_day)
        save_forecast(forecast_data, daily_items, hourly_by_day, config['output']['directory'])
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="ilmeteo-scraper",
        description="Daily and hourly forecasts scraped from ilMeteo.it",
    )
    parser.add_argument("cities", nargs="*", help="Cities to fetch (default: cities from the config)")
    parser.add_argument("--config", default=CONFIG_FILE, help="Config YAML path")
    days = parser.add_mutually_exclusive_group()
    days.add_argument("--day", type=int, help="Also fetch hourly forecast for day N (1-based)")
    days.add_argument("--all-days", action="store_true", help="Also fetch hourly forecast for every day")
    parser.add_argument("--save", action="store_true", help="Save JSON and Markdown output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s:%(name)s - %(message)s',
    )

    config = load_config(args.config)
    if not config:
        logger.critical("Exiting due to configuration load failure.")
        return 1

    cities = args.cities or config['cities']
    if not cities:
        logger.error("No cities given on the command line or in the configuration.")
        return 1

    succeeded = 0
    for city in cities:
        if process_city(city, config, day=args.day, all_days=args.all_days, save=args.save):
            succeeded += 1
    logger.info(f"Fetched forecasts for {succeeded}/{len(cities)} cities.")
    return 0 if succeeded else 1
