"""
Test suite for the CrawlKit client.

Provides tests for all modules:
- Unit tests for errors, configuration, logging and metrics
- Executor tests against stub transports
- End-to-end client, resource and CLI tests
"""
