"""Shared setup for create-cmd tests."""

import os
import sys

# Ensure tests/create-cmd/ is on sys.path so test files can import
# fake_command_runner unambiguously.
sys.path.insert(0, os.path.dirname(__file__))
