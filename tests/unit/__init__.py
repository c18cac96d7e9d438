"""Unit tests for individual components in isolation.

Coverage:
    - documents/: data URI encoding and validation
    - agent/: configuration, prompts and gateway error handling
    - api/: action validation and error translation
    - ui/: session state machine, controller, client and Markdown rendering

Uses mocks for the model gateway and the HTTP backend.
Leverages pytest-check for multiple assertions per test.
"""
