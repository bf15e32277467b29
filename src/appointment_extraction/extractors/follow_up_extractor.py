# ============================================================================
# src/appointment_extraction/extractors/follow_up_extractor.py
# ============================================================================
"""
Follow-Up Extraction

Examples:
- "Come back in two weeks"
- "Book a follow-up with reception"

Only the first sentence with a follow-up trigger is used; at most one
FollowUpInstruction is produced per transcript.
"""

from typing import Optional, Sequence

from ..core.lexicon import contains_any
from ..core.schema import FollowUpInstruction, Sentence
from .base import CategoryExtractor
from .field_extractors import extract_timeframe, extract_location_or_method


class FollowUpExtractor(CategoryExtractor):

    def get_name(self) -> str:
        return "FollowUpExtractor"

    def extract(self, sentences: Sequence[Sentence]) -> Optional[FollowUpInstruction]:
        for sentence in sentences:
            if not contains_any(sentence.lower, self.lexicon.follow_up_triggers):
                continue

            return FollowUpInstruction(
                required=True,
                timeframe=extract_timeframe(sentence.text, self.lexicon),
                location_or_method=extract_location_or_method(sentence.text, self.lexicon),
                verbatim_quote=sentence.text,
            )

        return None
