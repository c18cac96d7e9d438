"""Test package for PDF Insights.

Structure:
    - unit/: Individual function and class tests
    - integration/: API and end-to-end workflow tests

Uses pytest with pytest-asyncio and pytest-check for soft assertions.
"""
