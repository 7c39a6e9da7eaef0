"""``python -m station_uptime <input-file>``."""

import sys

from station_uptime.cli import main

if __name__ == "__main__":
    sys.exit(main())
