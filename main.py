#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py
    python main.py gui [--difficulty {easy,medium,hard}] [--seed N]
    python main.py console [--difficulty ...] [--columns C --rows R --mines M]

Requires the project to be installed (pip install -e .).
"""
from interface.cli import main


if __name__ == "__main__":
    main()
