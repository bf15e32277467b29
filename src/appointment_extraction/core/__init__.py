# ============================================================================
# src/appointment_extraction/core/__init__.py
# ============================================================================
"""
Core components for the appointment extraction engine.

The extraction engine itself is imported from
appointment_extraction.core.extraction_engine (it depends on the
extractors, which depend on these modules).
"""

from .schema import (
    Sentence,
    MedicationInstruction,
    TestOrReferral,
    FollowUpInstruction,
    SafetyWarning,
    AppointmentMetadata,
    ExtractionResult,
)
from .lexicon import LexiconStore, build_lexicon, get_lexicon
from .segmenter import segment_sentences
