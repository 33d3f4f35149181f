"""
Test Suite for chronofake

Provides tests for:
- Calendar arithmetic and random sources
- Local date/time, instant and duration generators
- Faker provider integration
- DataFrame generation and validation
- Configuration management and CLI
"""

__version__ = "1.0.0"
