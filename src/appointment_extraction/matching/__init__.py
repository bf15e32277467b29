# ============================================================================
# src/appointment_extraction/matching/__init__.py
# ============================================================================
"""
Medication name matching against the gazetteer.
"""

from .medication_matcher import (
    MedicationMatcher,
    longest_common_subsequence,
    calculate_similarity,
    normalize_for_matching,
    canonicalize,
)
