#!/usr/bin/env python3
"""
Run Slack Uploader

Usage:
    python run.py -files report.pdf,photo.jpg
"""

import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from slack_upload import main

if __name__ == '__main__':
    sys.exit(main())
