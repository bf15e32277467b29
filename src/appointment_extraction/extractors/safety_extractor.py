# ============================================================================
# src/appointment_extraction/extractors/safety_extractor.py
# ============================================================================
"""
Safety Advice / Red Flags Extraction

Often missed by AI scribes. A sentence is a warning when it has both a
safety trigger ("if you", "watch out for") and a condition ("fever",
"chest pain"), or when it names an emergency service on its own
("A&E", "999", "ambulance"). The whole sentence is kept.
"""

from typing import List, Sequence, Tuple

from ..core.lexicon import contains_any
from ..core.schema import SafetyWarning, Sentence
from .base import CategoryExtractor


class SafetyExtractor(CategoryExtractor):

    def get_name(self) -> str:
        return "SafetyExtractor"

    def is_warning(self, lowered: str) -> bool:
        conditional = (
            contains_any(lowered, self.lexicon.safety_triggers)
            and contains_any(lowered, self.lexicon.safety_conditions)
        )
        return conditional or contains_any(lowered, self.lexicon.emergency_keywords)

    def extract(self, sentences: Sequence[Sentence]) -> Tuple[SafetyWarning, ...]:
        warnings: List[SafetyWarning] = []
        seen = set()

        for sentence in sentences:
            if not self.is_warning(sentence.lower):
                continue

            key = sentence.lower
            if key in seen:
                continue
            seen.add(key)

            warnings.append(SafetyWarning(
                warning=sentence.text,
                verbatim_quote=sentence.text,
            ))

        return tuple(warnings)
