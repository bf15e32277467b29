# ============================================================================
# src/appointment_extraction/utils/__init__.py
# ============================================================================
"""
Utility modules for the appointment extraction engine.
"""

from .exceptions import (
    ExtractionEngineError,
    ConfigurationError,
    LexiconError,
)

from .logging import (
    setup_logging,
    JsonFormatter,
    log_performance,
)

__all__ = [
    # Exceptions
    'ExtractionEngineError',
    'ConfigurationError',
    'LexiconError',
    # Logging
    'setup_logging',
    'JsonFormatter',
    'log_performance',
]
