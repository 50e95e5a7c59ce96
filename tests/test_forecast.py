from ilmeteo_scraper.config import default_config
from ilmeteo_scraper.fetcher import FetchError
from ilmeteo_scraper.forecast import get_forecast, get_hourly_forecast
from ilmeteo_scraper.models import is_error_result
from tests.conftest import (
    DAY_LIST_HTML, HOURLY_HTML, SEASIDE_LAYOUT_HTML, parse,
)


class FakeFetcher:
    def __init__(self, html=None, error=None):
        self.html = html
        self.error = error
        self.urls = []

    def __call__(self, url, **options):
        self.urls.append(url)
        if self.error:
            raise self.error
        return parse(self.html)


def test_get_forecast():
    fetch = FakeFetcher(DAY_LIST_HTML)
    items = get_forecast("Pinerolo", fetch=fetch)
    assert fetch.urls == ["https://www.ilmeteo.it/meteo/Pinerolo"]
    assert len(items) == 4


def test_get_forecast_download_failure_gives_error_item():
    fetch = FakeFetcher(error=FetchError("https://www.ilmeteo.it/meteo/X", "Page not found"))
    items = get_forecast("X", fetch=fetch)
    assert is_error_result(items)
    assert "Page not found" in items[0].description


def test_get_hourly_forecast():
    fetch = FakeFetcher(HOURLY_HTML)
    items = get_hourly_forecast("Pinerolo", "/meteo/Pinerolo/domani", fetch=fetch)
    assert fetch.urls == ["https://www.ilmeteo.it/meteo/Pinerolo/domani"]
    assert [item.time for item in items] == ["14:00", "3", "23:00"]


def test_get_hourly_forecast_download_failure_gives_no_rows():
    fetch = FakeFetcher(error=FetchError("https://www.ilmeteo.it/meteo/X/domani", "boom"))
    assert get_hourly_forecast("X", "domani", fetch=fetch) == []


def test_get_hourly_forecast_without_link():
    fetch = FakeFetcher(HOURLY_HTML)
    assert get_hourly_forecast("Pinerolo", "", fetch=fetch) == []
    assert fetch.urls == []


def test_layout_strategy_from_config():
    config = default_config()
    config["hourly"]["strategy"] = "layout"
    items = get_hourly_forecast("Genova", "domani", config=config, fetch=FakeFetcher(SEASIDE_LAYOUT_HTML))
    assert [item.temp for item in items] == ["18°", "19°"]
