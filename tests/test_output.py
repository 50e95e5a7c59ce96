import json
import os

from ilmeteo_scraper.models import DailyForecastItem, HourlyForecastItem, RainType
from ilmeteo_scraper.output import (
    clean_filename, display_daily, display_hourly, forecast_to_dict, format_forecast_markdown, save_forecast,
)

DAY = DailyForecastItem("Lun 25", "Lun 25", "https://x/sole.png", 1, "3°", "9°", "Lun 25", "/meteo/Roma/domani")
HOURS = [
    HourlyForecastItem("14:00", "https://x/neve.png", 13, "-1", "1 mm", RainType.SNOW, "N 5 km/h",
                       humidity_value="4°", humidity_label="TP°"),
    HourlyForecastItem("15:00", "https://x/coperto.png", 0, "0", "0", RainType.NONE, "N 3 km/h",
                       humidity_value="3°", humidity_label="TP°"),
]


def test_clean_filename():
    assert clean_filename("Reggio (Emilia)/Nord: 2") == "Reggio_Emilia_Nord_2"


def test_markdown_uses_dynamic_column_label():
    markdown = format_forecast_markdown("Roma", [DAY], {"Lun 25": HOURS})
    assert "# Forecast for Roma" in markdown
    assert "| Lun 25 | 3° | 9° | Lun 25 |" in markdown
    assert "| Time | Temp | Rain | Wind | TP° |" in markdown
    assert "| 14:00 | -1 | 1 mm ❄ | N 5 km/h | 4° |" in markdown


def test_markdown_day_without_rows():
    assert "No hourly data available." in format_forecast_markdown("Roma", [DAY], {"Lun 25": []})


def test_display(capsys):
    display_daily("Roma", [DAY])
    display_hourly(DAY, HOURS)
    out = capsys.readouterr().out
    assert "--- Roma ---" in out
    assert "TP°" in out
    assert "14:00" in out


def test_save_forecast(tmp_path):
    data = forecast_to_dict("Roma", "https://www.ilmeteo.it/meteo/Roma", [DAY], {"Lun 25": HOURS})
    paths = save_forecast(data, [DAY], {"Lun 25": HOURS}, base_dir=str(tmp_path))

    assert len(paths) == 2
    assert all(os.path.dirname(path) == str(tmp_path / "Roma") for path in paths)
    with open(paths[0], encoding="utf-8") as f:
        saved = json.load(f)
    assert saved["daily"][0]["link"] == "/meteo/Roma/domani"
    assert saved["hourly"]["Lun 25"][0]["rain_type"] == "snow"
    assert saved["hourly"]["Lun 25"][0]["humidity_label"] == "TP°"
