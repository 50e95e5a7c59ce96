"""Scraper for ilMeteo.it daily and hourly forecasts."""

from ilmeteo_scraper.codes import resolve_icon
from ilmeteo_scraper.daily import extract_daily
from ilmeteo_scraper.fetcher import FetchError, fetch_document
from ilmeteo_scraper.forecast import get_forecast, get_hourly_forecast
from ilmeteo_scraper.hourly import extract_hourly, extract_hourly_by_layout
from ilmeteo_scraper.models import DailyForecastItem, HourlyForecastItem, RainType

__all__ = [
    'DailyForecastItem',
    'FetchError',
    'HourlyForecastItem',
    'RainType',
    'extract_daily',
    'extract_hourly',
    'extract_hourly_by_layout',
    'fetch_document',
    'get_forecast',
    'get_hourly_forecast',
    'resolve_icon',
]
