#!/usr/bin/env python3
"""
Entry point for running the Glance server from a source checkout.

Usage:
    python run.py [--port PORT] [--host HOST]
"""

from glance.cli import main


if __name__ == "__main__":
    main()
