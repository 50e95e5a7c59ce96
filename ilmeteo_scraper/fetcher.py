"""Fetching ilMeteo.it pages and parsing them into BeautifulSoup trees."""

import logging
import random
import time
from urllib.parse import urljoin, urlparse

import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

BASE_URL = "https://www.ilmeteo.it"
USER_AGENT = ('Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 '
              '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36')
REQUEST_TIMEOUT = 30
MAX_RETRIES = 3
RETRY_DELAY_BASE = 5  # seconds, doubled on each attempt


class FetchError(Exception):
    """Raised when a page could not be downloaded."""

    def __init__(self, url, message):
        super().__init__(f"{message} ({url})")
        self.url = url


def format_city(city):
    """Turns a user-typed city name into its URL path segment."""
    return city.strip().replace(' ', '-')


def build_forecast_url(city, base_url=BASE_URL):
    """Returns the main forecast page URL for a city, e.g. ``.../meteo/Pinerolo``."""
    return f"{base_url.rstrip('/')}/meteo/{format_city(city)}"


def build_detail_url(city, day_link, base_url=BASE_URL):
    """Resolves a day's link from the daily list into an absolute URL.

    Args:
        city (str): City the daily list was fetched for.
        day_link (str): ``link`` of a daily item: absolute, root-relative
            ("/meteo/Pinerolo/domani") or bare ("domani").
        base_url (str): Site root.

    Returns:
        str: Absolute URL of the hourly detail page.
    """
    if day_link.startswith('http'):
        return day_link
    if day_link.startswith('/'):
        return urljoin(base_url.rstrip('/') + '/', day_link)
    return f"{build_forecast_url(city, base_url)}/{day_link}"


def validate_url(url):
    """True if ``url`` has both a scheme and a host."""
    try:
        result = urlparse(url)
    except ValueError:
        return False
    return all([result.scheme, result.netloc])


def build_session(user_agent=USER_AGENT):
    """Creates a requests session with transport-level retries and browser headers."""
    session = requests.Session()
    retry_strategy = Retry(
        total=2,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["HEAD", "GET", "OPTIONS"]
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({
        'User-Agent': user_agent,
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
        'Accept-Language': 'it-IT,it;q=0.9,en;q=0.5',
    })
    return session


def get_html_with_retry(url, max_retries=MAX_RETRIES, timeout=REQUEST_TIMEOUT,
                        retry_delay_base=RETRY_DELAY_BASE, user_agent=USER_AGENT):
    """Fetches HTML content from a URL with retry logic.

    Implements exponential backoff with jitter between attempts. A 404 is
    final and is not retried.

    Args:
        url (str): The URL to fetch HTML from.
        max_retries (int): Maximum number of attempts.
        timeout (float): Per-request timeout in seconds.
        retry_delay_base (float): Delay before the second attempt, in seconds.
        user_agent (str): User-Agent header to send.

    Returns:
        str: The HTML content.

    Raises:
        FetchError: If the URL is malformed, missing, or every attempt failed.
    """
    if not validate_url(url):
        raise FetchError(url, "Invalid URL")

    session = build_session(user_agent)
    last_error = None
    for attempt in range(max_retries):
        try:
            logger.debug(f"Attempt {attempt + 1}/{max_retries} - Fetching HTML from {url}")
            response = session.get(url, timeout=timeout)
            response.raise_for_status()
            logger.info(f"Successfully fetched HTML from {url} (Status: {response.status_code})")
            return response.text

        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                logger.error(f"URL not found (404): {url}")
                raise FetchError(url, "Page not found") from e
            logger.warning(f"HTTP error on attempt {attempt + 1}/{max_retries} for {url}: {e}")
            last_error = e

        except requests.exceptions.RequestException as e:
            logger.warning(f"Request error on attempt {attempt + 1}/{max_retries} for {url}: {e}")
            last_error = e

        if attempt < max_retries - 1:
            delay = retry_delay_base * (2 ** attempt) + random.uniform(0, 1)
            logger.info(f"Waiting {delay:.1f} seconds before retry...")
            time.sleep(delay)

    logger.error(f"Failed to fetch HTML after {max_retries} attempts for {url}")
    raise FetchError(url, f"Download failed after {max_retries} attempts: {last_error}")


def fetch_document(url, **request_options):
    """Downloads ``url`` and parses it with BeautifulSoup's html.parser.

    Args:
        url (str): Page to fetch.
        **request_options: Passed on to :func:`get_html_with_retry`.

    Returns:
        bs4.BeautifulSoup: The parsed document.

    Raises:
        FetchError: On transport failure.
    """
    html = get_html_with_retry(url, **request_options)
    return BeautifulSoup(html, 'html.parser')
