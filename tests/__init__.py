"""
Wordbank test suite.

Each module inserts the project root into sys.path itself; doing it here as
well lets `pytest tests/test_x.py` work from any directory.
"""

import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
