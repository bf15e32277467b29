# ============================================================================
# src/appointment_extraction/extractors/__init__.py
# ============================================================================
"""
Category and field extractors.
"""

from .base import CategoryExtractor
from .medication_extractor import MedicationExtractor
from .test_referral_extractor import TestReferralExtractor
from .follow_up_extractor import FollowUpExtractor
from .safety_extractor import SafetyExtractor
from .notes_extractor import AdditionalNotesExtractor

__all__ = [
    "CategoryExtractor",
    "MedicationExtractor",
    "TestReferralExtractor",
    "FollowUpExtractor",
    "SafetyExtractor",
    "AdditionalNotesExtractor",
]
