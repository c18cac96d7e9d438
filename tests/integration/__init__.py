"""Integration tests for components working together as a system.

Coverage:
    - API endpoints with real HTTP requests through ASGITransport
    - Validation and error translation end to end
    - Page controller driving the API through the HTTP client
    - Live model calls (when an API key is configured)
"""
