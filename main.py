#!/usr/bin/env python3
"""PulseFit — entry point.

Run with:
    python main.py
    python -m pulsefit
"""

from pulsefit.__main__ import main


if __name__ == "__main__":
    main()
