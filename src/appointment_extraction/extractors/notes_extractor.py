# ============================================================================
# src/appointment_extraction/extractors/notes_extractor.py
# ============================================================================
"""
Additional Notes Extraction

Catch-all for lifestyle advice and reassurance that fits no other
category. A sentence is skipped if it carries any medication, test,
follow-up or safety trigger, or if another category already quoted it,
so no sentence is reported twice. Capped at MAX_ADDITIONAL_NOTES.
"""

from typing import AbstractSet, List, Optional, Sequence, Tuple

from ..config import extraction_settings
from ..core.lexicon import LexiconStore, contains_any
from ..core.schema import Sentence
from .base import CategoryExtractor


class AdditionalNotesExtractor(CategoryExtractor):

    def __init__(self, lexicon: LexiconStore, max_notes: Optional[int] = None):
        super().__init__(lexicon)
        self.max_notes = extraction_settings.MAX_ADDITIONAL_NOTES if max_notes is None else max_notes

    def get_name(self) -> str:
        return "AdditionalNotesExtractor"

    def extract(
        self,
        sentences: Sequence[Sentence],
        claimed_quotes: AbstractSet[str] = frozenset()
    ) -> Tuple[str, ...]:
        """
        Args:
            sentences: Segmented transcript
            claimed_quotes: Verbatim quotes already used by other categories
        """
        notes: List[str] = []

        for sentence in sentences:
            if len(notes) >= self.max_notes:
                break

            lowered = sentence.lower
            advisory = (
                contains_any(lowered, self.lexicon.lifestyle_keywords)
                or contains_any(lowered, self.lexicon.reassurance_phrases)
            )
            if not advisory:
                continue

            if self.lexicon.has_any_category_trigger(lowered) or sentence.text in claimed_quotes:
                continue

            notes.append(sentence.text)

        return tuple(notes)

