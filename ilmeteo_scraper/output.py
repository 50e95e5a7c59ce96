"""Console display, Markdown formatting and saving of forecasts."""

import dataclasses
import datetime
import json
import logging
import os
import re

from ilmeteo_scraper.models import HUMIDITY_LABEL, RainType

logger = logging.getLogger(__name__)

RAIN_MARKERS = {
    RainType.SNOW: '❄',
    RainType.RAIN: '💧',
}


def clean_filename(name):
    """Removes potentially problematic characters for filenames.

    Removes parentheses, replaces spaces/slashes/colons with underscores,
    and removes other non-alphanumeric characters (except underscores, hyphens, periods).

    Args:
        name (str): The original name string.

    Returns:
        str: The cleaned name suitable for use in a filename.
    """
    name = re.sub(r'[()]+', '', name)
    name = re.sub(r'[\s/\\:]+', '_', name).strip('_')
    name = re.sub(r'[^a-zA-Z0-9_\-.]', '', name)
    return name


def rain_text(item):
    marker = RAIN_MARKERS.get(item.rain_type)
    return f"{item.rain} {marker}".strip() if marker else item.rain


def humidity_header(hourly_items):
    """Column title for the dynamic last column, taken from the first row."""
    return hourly_items[0].humidity_label if hourly_items else HUMIDITY_LABEL


def display_daily(city, daily_items):
    """Prints the daily forecast list of a city to the console.

    Args:
        city (str): City name for the title.
        daily_items (list[DailyForecastItem]): Items to print.
    """
    print(f"\n--- {city} ---")
    if not daily_items:
        print("  No forecast days found.")
        return
    for index, item in enumerate(daily_items, start=1):
        print(f"  {index}. {item.day:<8} 🌡️ {item.min_temp} / {item.max_temp}  🖼️ {item.icon_ref}")
        if item.description and item.description != item.date:
            print(f"      📝 {item.description}")


def display_hourly(day_item, hourly_items):
    """Prints the hourly rows of one day with a header row."""
    print(f"\n  --- Hourly forecast for {day_item.day} ---")
    if not hourly_items:
        print("    No hourly data available.")
        return
    print(f"    {'Time':<6} {'°C':<6} {'Rain':<12} {'Wind':<16} {humidity_header(hourly_items)}")
    for item in hourly_items:
        print(f"    {item.time:<6} {item.temp:<6} {rain_text(item):<12} {item.wind:<16} {item.humidity_value}")


def format_forecast_markdown(city, daily_items, hourly_by_day=None):
    """Formats a city's forecast as Markdown.

    Produces one table for the daily list and one table per day whose
    hourly rows were fetched.

    Args:
        city (str): City name.
        daily_items (list[DailyForecastItem]): Daily list.
        hourly_by_day (dict, optional): Maps a day label to its hourly items.

    Returns:
        str: The Markdown document.
    """
    hourly_by_day = hourly_by_day or {}
    lines = [f"# Forecast for {city}", ""]
    lines.append("| Day | Min | Max | Description |")
    lines.append("|---|---|---|---|")
    for item in daily_items:
        lines.append(f"| {item.day} | {item.min_temp} | {item.max_temp} | {item.description} |")

    for day, hourly_items in hourly_by_day.items():
        lines.extend(["", f"## {day}", ""])
        if not hourly_items:
            lines.append("No hourly data available.")
            continue
        lines.append(f"| Time | Temp | Rain | Wind | {humidity_header(hourly_items)} |")
        lines.append("|---|---|---|---|---|")
        for item in hourly_items:
            lines.append(f"| {item.time} | {item.temp} | {rain_text(item)} | {item.wind} | {item.humidity_value} |")
    return "\n".join(lines) + "\n"


def forecast_to_dict(city, source_url, daily_items, hourly_by_day=None):
    """Builds the JSON-serialisable form of a city's forecast."""
    return {
        'city': city,
        'source_url': source_url,
        'scrape_time': datetime.datetime.now().isoformat(),
        'daily': [dataclasses.asdict(item) for item in daily_items],
        'hourly': {
            day: [dataclasses.asdict(item) for item in items]
            for day, items in (hourly_by_day or {}).items()
        },
    }


def save_forecast(forecast_data, daily_items, hourly_by_day=None, base_dir="forecasts"):
    """Saves a city's forecast as JSON and Markdown files.

    Files go to ``<base_dir>/<city>/`` and are named after the scrape time.

    Args:
        forecast_data (dict): Output of :func:`forecast_to_dict`.
        daily_items (list[DailyForecastItem]): Daily list, for the Markdown.
        hourly_by_day (dict, optional): Hourly rows per day, for the Markdown.
        base_dir (str): Root output directory.

    Returns:
        list[str]: Paths written; empty if the directory could not be created.
    """
    city = forecast_data.get('city', 'UnknownCity')
    city_dir = os.path.join(base_dir, clean_filename(city))
    try:
        os.makedirs(city_dir, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create directory {city_dir}: {e}")
        return []

    try:
        scrape_dt = datetime.datetime.fromisoformat(forecast_data['scrape_time'])
    except (KeyError, ValueError):
        scrape_dt = datetime.datetime.now()
    base_filename = f"{scrape_dt.strftime('%Y%m%d_%H%M%S')}_{clean_filename(city)}"

    json_filepath = os.path.join(city_dir, f"{base_filename}.json")
    with open(json_filepath, 'w', encoding='utf-8') as f:
        json.dump(forecast_data, f, indent=4, ensure_ascii=False)
    logger.info(f"Successfully saved forecast to: {json_filepath}")

    md_filepath = os.path.join(city_dir, f"{base_filename}.md")
    with open(md_filepath, 'w', encoding='utf-8') as f:
        f.write(format_forecast_markdown(city, daily_items, hourly_by_day))
    logger.info(f"Successfully saved Markdown forecast to: {md_filepath}")

    return [json_filepath, md_filepath]
