"""
School Store Daily Inventory Report

Prints the day's inventory report for the bundled school store data.
Run with: python app.py
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from stores.cli import main


if __name__ == "__main__":
    sys.exit(main())
