#!/usr/bin/env python3
"""Check every configured city's forecast page to ensure it's accessible."""

import sys
import time

import requests

from ilmeteo_scraper.config import CONFIG_FILE, load_config
from ilmeteo_scraper.fetcher import build_forecast_url


def check_url(url, user_agent):
    """Check if a URL is accessible."""
    try:
        response = requests.head(url, timeout=10, allow_redirects=True, headers={'User-Agent': user_agent})
        return response.status_code, None
    except requests.RequestException as e:
        return None, str(e)


def main(config_path=CONFIG_FILE):
    config = load_config(config_path)
    if not config:
        print(f"Could not load {config_path}")
        return 1

    print(f"Checking all city pages in {config_path}...\n")

    failed_urls = []
    base_url = config['site']['base_url']
    user_agent = config['request']['user_agent']

    for city in config['cities']:
        url = build_forecast_url(city, base_url)
        print(f"{city}: {url}")
        status, error = check_url(url, user_agent)
        if status == 200:
            print("  ✓ OK")
        else:
            print(f"  ✗ Failed: {status or error}")
            failed_urls.append((city, url, status or error))
        time.sleep(1)

    print(f"\n\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")

    if failed_urls:
        print(f"\n{len(failed_urls)} URLs failed:\n")
        for city, url, error in failed_urls:
            print(f"- {city}: {error}")
            print(f"  URL: {url}")
    else:
        print("\n✓ All URLs are accessible!")

    return 1 if failed_urls else 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
