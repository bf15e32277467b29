# ============================================================================
# src/appointment_extraction/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .medication_gazetteer import COMMON_MEDICATIONS, KNOWN_MISSPELLINGS
from .trigger_phrases import (
    MEDICATION_TRIGGERS,
    TEST_REFERRAL_TRIGGERS,
    URGENCY_INDICATORS,
    FOLLOW_UP_TRIGGERS,
    FOLLOW_UP_LOCATIONS,
    SAFETY_TRIGGERS,
    SAFETY_CONDITIONS,
    EMERGENCY_KEYWORDS,
    SPECIAL_INSTRUCTIONS,
    LIFESTYLE_KEYWORDS,
    REASSURANCE_PHRASES,
)
from .patterns import (
    DOSAGE_PATTERN,
    FREQUENCY_PATTERNS,
    DURATION_PATTERNS,
    TIMEFRAME_PATTERNS,
)
