# ============================================================================
# src/appointment_extraction/__init__.py
# ============================================================================
"""
Appointment Extraction

Schema-guided, inference-free extraction of medication instructions,
tests/referrals, follow-up plans, safety advice and advisory notes from a
medical consultation transcript.
"""

from .core.schema import (
    MedicationInstruction,
    TestOrReferral,
    FollowUpInstruction,
    SafetyWarning,
    AppointmentMetadata,
    ExtractionResult,
)
from .core.extraction_engine import SchemaGuidedExtractor, extract, get_extractor

__version__ = "0.1.0"

__all__ = [
    "MedicationInstruction",
    "TestOrReferral",
    "FollowUpInstruction",
    "SafetyWarning",
    "AppointmentMetadata",
    "ExtractionResult",
    "SchemaGuidedExtractor",
    "extract",
    "get_extractor",
]
