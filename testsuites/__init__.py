"""
Test suites package.

This repository keeps `testsuites` importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - importing the console and UI frameworks from other projects' tests
"""
