"""Test package for the Velaris chat client.

Structure:
    - unit/: Individual function and class tests
    - integration/: Host app and end-to-end session tests

Leverages pytest with pytest-check for soft assertions.
"""
