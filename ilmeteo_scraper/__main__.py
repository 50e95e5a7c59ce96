import sys

from ilmeteo_scraper.cli import main

sys.exit(main())
