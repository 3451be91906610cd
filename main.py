#!/usr/bin/env python3
"""
Main entry point for the TMI line decoder
"""

import sys

from tmi_parser.cli import main

if __name__ == "__main__":
    sys.exit(main())
