#!/usr/bin/env python3
"""API server - Main Entry Point

Runs the server startup sequence with settings from config/settings.yaml.
"""

import sys
from pathlib import Path

from server.bootstrap import main

# Default settings path
SETTINGS_PATH = Path(__file__).parent / "config" / "settings.yaml"


if __name__ == "__main__":
    sys.exit(main(settings_path=SETTINGS_PATH))
