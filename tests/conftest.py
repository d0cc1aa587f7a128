"""Shared test setup."""

import os
import sys

# Ensure tests/ is on sys.path so suites can import scripted_io.
sys.path.insert(0, os.path.dirname(__file__))
