#!/usr/bin/env python3
"""
CLI for the hand history parser.
Usage: python -m handreader -i hands.txt -o output.json [--stats] [--debug]
"""
import sys

from handreader.parse.runner import main

if __name__ == '__main__':
    sys.exit(main())
