#!/usr/bin/env python3
"""PayTimer entry point.

Run with:
    python main.py
    python -m paytimer
"""

from paytimer.__main__ import main


if __name__ == "__main__":
    main()
