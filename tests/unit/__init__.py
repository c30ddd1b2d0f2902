"""
Unit Tests

Unit tests run in isolation without external dependencies.
LLM providers are always mocked.
"""
