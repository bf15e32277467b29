# ============================================================================
# src/appointment_extraction/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the appointment extraction engine.

Extraction itself never raises: every category degrades to "nothing
found". These exceptions cover programming errors only, such as a
lexicon that cannot be built.
"""


class ExtractionEngineError(Exception):
    """Base exception for all appointment extraction errors."""
    pass


class ConfigurationError(ExtractionEngineError):
    """Invalid configuration."""
    pass


class LexiconError(ConfigurationError):
    """Lexicon tables are empty or contain an invalid pattern."""
    def __init__(self, message: str, table: str):
        super().__init__(message)
        self.table = table
