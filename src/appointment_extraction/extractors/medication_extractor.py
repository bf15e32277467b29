# ============================================================================
# src/appointment_extraction/extractors/medication_extractor.py
# ============================================================================
"""
Medication Extraction

Highest-priority category: highest patient recall failure rate and
highest safety risk.

Two passes over the sentences:
1. Sentences with a medication trigger ("take", "prescribing", "mg", ...)
   whose medication name resolves against the gazetteer.
2. Recovery: any sentence naming a medication not yet recorded, kept only
   if it states a dosage or frequency itself or the previous sentence had
   a trigger ("I'm prescribing something. Amoxicillin, 500 mg.").

Medications are deduplicated by case-insensitive name, first occurrence
kept.
"""

from typing import List, Optional, Sequence, Tuple

from ..core.lexicon import LexiconStore, contains_any
from ..core.schema import MedicationInstruction, Sentence
from ..matching.medication_matcher import MedicationMatcher
from .base import CategoryExtractor
from .field_extractors import (
    extract_dosage,
    extract_frequency,
    extract_duration,
    extract_special_instructions,
)


class MedicationExtractor(CategoryExtractor):

    def __init__(self, lexicon: LexiconStore, matcher: Optional[MedicationMatcher] = None):
        super().__init__(lexicon)
        self.matcher = matcher or MedicationMatcher(lexicon)

    def get_name(self) -> str:
        return "MedicationExtractor"

    def extract(self, sentences: Sequence[Sentence]) -> Tuple[MedicationInstruction, ...]:
        # Sentence names resolved once; both passes and the carry-over need them
        names = [self.matcher.find_medication_name(s.lower) for s in sentences]
        has_trigger = [contains_any(s.lower, self.lexicon.medication_triggers) for s in sentences]

        medications: List[MedicationInstruction] = []

        # Pass 1: trigger and medication in the same sentence
        for i in range(len(sentences)):
            if has_trigger[i] and names[i] is not None:
                medications.append(self._build(sentences, i, names))

        # Pass 2: trigger in the previous sentence, or dosage/frequency stated here
        for i, sentence in enumerate(sentences):
            name = names[i]
            if name is None:
                continue
            if any(m.medicine_name.lower() == name.lower() for m in medications):
                continue

            states_dose = (
                extract_dosage(sentence.text, self.lexicon) is not None
                or extract_frequency(sentence.text, self.lexicon) is not None
            )
            previous_has_trigger = i > 0 and has_trigger[i - 1]

            if states_dose or previous_has_trigger:
                medications.append(self._build(sentences, i, names))

        return _dedupe(medications)

    def _build(
        self,
        sentences: Sequence[Sentence],
        i: int,
        names: Sequence[Optional[str]]
    ) -> MedicationInstruction:
        sentence = sentences[i]
        return MedicationInstruction(
            medicine_name=names[i],
            dosage=extract_dosage(sentence.text, self.lexicon),
            frequency=extract_frequency(sentence.text, self.lexicon),
            duration=extract_duration(sentence.text, self.lexicon),
            special_instructions=self._special_instructions(sentences, i, names),
            verbatim_quote=sentence.text,
        )

    def _special_instructions(
        self,
        sentences: Sequence[Sentence],
        i: int,
        names: Sequence[Optional[str]]
    ) -> Optional[str]:
        """
        Special instruction from the medication sentence, else from the next
        sentence when that one names no medication of its own
        ("Take amoxicillin 500 mg. Make sure you take it with food.").
        """
        found = extract_special_instructions(sentences[i].text, self.lexicon)
        if found is not None or i + 1 >= len(sentences):
            return found

        if names[i + 1] is not None:
            return None
        return extract_special_instructions(sentences[i + 1].text, self.lexicon)


def _dedupe(medications: Sequence[MedicationInstruction]) -> Tuple[MedicationInstruction, ...]:
    seen = set()
    unique = []
    for medication in medications:
        key = medication.medicine_name.lower()
        if key not in seen:
            seen.add(key)
            unique.append(medication)
    return tuple(unique)
