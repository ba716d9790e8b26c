#!/usr/bin/env python3
"""Run the po2csv CLI from a checkout, without pip install."""

import sys
from pathlib import Path

# cli/ and src/ are imported from the checkout root
sys.path.insert(0, str(Path(__file__).resolve().parent))

from cli.main import app  # noqa: E402


def main() -> None:
    app(prog_name="po2csv")


if __name__ == "__main__":
    main()
