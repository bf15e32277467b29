# ============================================================================
# src/appointment_extraction/core/extraction_engine.py
# ============================================================================
"""
Schema-Guided Extraction Engine

Turns a consultation transcript into an ExtractionResult.

Design principles:
1. Extract ONLY explicitly stated information (no inference)
2. Copy exact phrases from the transcript
3. Prioritise patient recall and safety
4. Remain explainable and auditable

Never extracted: diagnoses, interpretations, treatment reasoning,
inferred intent, medical opinions.

Pipeline: transcript -> sentences -> five category extractors ->
aggregated, immutable result. Extraction has no error path; a transcript
with nothing recognisable yields empty collections.

Usage:
    from appointment_extraction import extract

    result = extract(transcript, recording_duration_seconds=312)
    for med in result.medication_instructions:
        print(med.medicine_name, med.dosage)
"""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Callable, Optional

from ..config import ExtractionSettings, extraction_settings
from ..extractors import (
    MedicationExtractor,
    TestReferralExtractor,
    FollowUpExtractor,
    SafetyExtractor,
    AdditionalNotesExtractor,
)
from ..matching.medication_matcher import MedicationMatcher
from ..utils.logging import log_performance
from .lexicon import LexiconStore, get_lexicon
from .schema import AppointmentMetadata, ExtractionResult
from .segmenter import segment_sentences

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SchemaGuidedExtractor:
    """
    Stateless transcript extractor.

    All collaborators are read-only after construction, so one instance
    can be shared across threads.
    """

    def __init__(
        self,
        lexicon: Optional[LexiconStore] = None,
        settings: Optional[ExtractionSettings] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Args:
            lexicon: Keyword tables (defaults to the shared lexicon)
            settings: Tunables (defaults to environment settings)
            clock: Source of extraction_timestamp (defaults to UTC now)
        """
        self.lexicon = lexicon or get_lexicon()
        self.settings = settings or extraction_settings
        self.clock = clock or _utc_now

        matcher = MedicationMatcher(self.lexicon, self.settings)
        self.medications = MedicationExtractor(self.lexicon, matcher)
        self.tests_and_referrals = TestReferralExtractor(self.lexicon)
        self.follow_up = FollowUpExtractor(self.lexicon)
        self.safety = SafetyExtractor(self.lexicon)
        self.notes = AdditionalNotesExtractor(
            self.lexicon,
            max_notes=self.settings.MAX_ADDITIONAL_NOTES
        )

    @log_performance(logger, "Transcript extraction")
    def extract(
        self,
        transcript: str,
        recording_duration_seconds: Optional[int] = None
    ) -> ExtractionResult:
        """
        Extract medical instructions from a transcript.

        Args:
            transcript: Speech-to-text output, treated as opaque text
            recording_duration_seconds: Passed through to metadata unchanged

        Returns:
            ExtractionResult with only explicitly stated information
        """
        if not isinstance(transcript, str):
            raise TypeError(f"transcript must be str, not {type(transcript).__name__}")

        sentences = segment_sentences(transcript, self.settings.MIN_SENTENCE_LENGTH)

        medications = self.medications.run(sentences)
        tests = self.tests_and_referrals.run(sentences)
        follow_up = self.follow_up.run(sentences)
        safety = self.safety.run(sentences)

        claimed = {m.verbatim_quote for m in medications}
        claimed.update(t.verbatim_quote for t in tests)
        claimed.update(s.verbatim_quote for s in safety)
        if follow_up is not None:
            claimed.add(follow_up.verbatim_quote)
        notes = self.notes.run(sentences, claimed_quotes=frozenset(claimed))

        result = ExtractionResult(
            appointment_metadata=AppointmentMetadata(
                recording_duration_seconds=recording_duration_seconds
            ),
            medication_instructions=medications,
            tests_and_referrals=tests,
            follow_up=follow_up,
            safety_advice=safety,
            additional_notes=notes,
            extraction_timestamp=self.clock(),
        )

        logger.info(
            f"Extracted {len(medications)} medication(s), {len(tests)} test/referral(s), "
            f"{'a' if follow_up else 'no'} follow-up, {len(safety)} safety warning(s), "
            f"{len(notes)} note(s) from {len(sentences)} sentence(s)"
        )
        return result


@lru_cache(maxsize=1)
def get_extractor() -> SchemaGuidedExtractor:
    """Shared default extractor."""
    return SchemaGuidedExtractor()


def extract(transcript: str, recording_duration_seconds: Optional[int] = None) -> ExtractionResult:
    """Extract with the shared default extractor."""
    return get_extractor().extract(transcript, recording_duration_seconds)
