# ============================================================================
# src/appointment_extraction/matching/medication_matcher.py
# ============================================================================
"""
Medication Name Matcher

Finds a gazetteer medication name in a lowercased sentence, tolerating
speech-to-text noise on uncommon drug names:
- Spaces inserted: "a moxosilin" -> "amoxicillin"
- Phonetic misspellings: "moxosilin" -> "amoxicillin"
- Leading articles: "an amoxicillin" -> "amoxicillin"

Lookup order:
1. Exact substring match against the gazetteer (first entry wins)
2. Per entry, in gazetteer order, against the sentence with articles and
   whitespace stripped:
   a. substring match of the whitespace-free name
   b. fuzzy match (names of FUZZY_MIN_NAME_LENGTH or more only):
      known misspelling table, then LCS similarity with boundary boost

The result is always the gazetteer entry with its first letter
capitalised, never text copied from the sentence.
"""

import logging
import re
from typing import Optional

from ..config import ExtractionSettings, extraction_settings
from ..core.lexicon import LexiconStore, get_lexicon

logger = logging.getLogger(__name__)

_ARTICLES = re.compile(r'\b(a|an|the)\s+')
_WHITESPACE = re.compile(r'\s+')


def longest_common_subsequence(s1: str, s2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    if len(s1) < len(s2):
        return longest_common_subsequence(s2, s1)

    if len(s2) == 0:
        return 0

    previous_row = [0] * (len(s2) + 1)
    for c1 in s1:
        current_row = [0]
        for j, c2 in enumerate(s2):
            if c1 == c2:
                current_row.append(previous_row[j] + 1)
            else:
                current_row.append(max(previous_row[j + 1], current_row[j]))
        previous_row = current_row

    return previous_row[-1]


def calculate_similarity(
    str1: str,
    str2: str,
    boundary_length: int = 3,
    boundary_boost: float = 0.10
) -> float:
    """
    Similarity between 0.0 and 1.0 of two strings.

    Containment of the shorter string in the longer scores
    len(shorter) / len(longer); otherwise LCS / len(longer). Agreement of
    the first or last boundary_length characters adds boundary_boost.
    """
    if not str1 or not str2:
        return 0.0

    if len(str1) > len(str2):
        longer, shorter = str1, str2
    else:
        longer, shorter = str2, str1

    if shorter in longer:
        return len(shorter) / len(longer)

    similarity = longest_common_subsequence(shorter, longer) / len(longer)

    if len(shorter) >= boundary_length and len(longer) >= boundary_length:
        start_similar = shorter[:boundary_length] == longer[:boundary_length]
        end_similar = shorter[-boundary_length:] == longer[-boundary_length:]
        if start_similar or end_similar:
            similarity += boundary_boost

    return min(similarity, 1.0)


def normalize_for_matching(text: str) -> str:
    """Lowercase, drop leading articles and remove all whitespace."""
    text = _ARTICLES.sub('', text.lower())
    return _WHITESPACE.sub('', text)


def canonicalize(name: str) -> str:
    """Gazetteer entry as reported: first character upper-cased."""
    return name[:1].upper() + name[1:]


class MedicationMatcher:
    """
    Exact and fuzzy medication lookup against the lexicon gazetteer.

    Thresholds are read from settings once, at construction.
    """

    def __init__(
        self,
        lexicon: Optional[LexiconStore] = None,
        settings: Optional[ExtractionSettings] = None
    ):
        self.lexicon = lexicon or get_lexicon()
        settings = settings or extraction_settings

        self.min_name_length = settings.FUZZY_MIN_NAME_LENGTH
        self.similarity_threshold = settings.FUZZY_SIMILARITY_THRESHOLD
        self.boundary_boost = settings.FUZZY_BOUNDARY_BOOST
        self.boundary_length = settings.FUZZY_BOUNDARY_LENGTH

        # (entry, whitespace-free entry) in gazetteer order
        self._normalized = tuple(
            (medication, _WHITESPACE.sub('', medication))
            for medication in self.lexicon.medications
        )

    def find_medication_name(self, sentence: str) -> Optional[str]:
        """
        Find the medication named in a sentence.

        Args:
            sentence: Lowercased sentence text

        Returns:
            Canonical medication name or None
        """
        for medication in self.lexicon.medications:
            if medication in sentence:
                return canonicalize(medication)

        normalized = normalize_for_matching(sentence)
        if not normalized:
            return None

        for medication, med_normalized in self._normalized:
            if med_normalized in normalized:
                return canonicalize(medication)

            if self.fuzzy_match(med_normalized, normalized, sentence):
                logger.debug(f"Fuzzy medication match: {medication}")
                return canonicalize(medication)

        return None

    def fuzzy_match(self, medication: str, normalized: str, sentence: str = "") -> bool:
        """
        Fuzzy match of a whitespace-free gazetteer name against normalized text.

        Args:
            medication: Gazetteer entry with whitespace removed
            normalized: Sentence after normalize_for_matching()
            sentence: Lowercased original sentence, for misspellings
                that include a space
        """
        if len(medication) < self.min_name_length:
            return False

        if medication in normalized:
            return True

        if self._known_misspelling_of(medication, normalized, sentence):
            return True

        if not normalized:
            return False

        # LCS is at most the shorter length, which bounds the similarity
        shorter, longer = sorted((len(medication), len(normalized)))
        if shorter / longer + self.boundary_boost < self.similarity_threshold:
            return False

        similarity = calculate_similarity(
            medication,
            normalized,
            boundary_length=self.boundary_length,
            boundary_boost=self.boundary_boost
        )
        return similarity >= self.similarity_threshold

    def _known_misspelling_of(self, medication: str, normalized: str, sentence: str) -> bool:
        for misspelling, correct in self.lexicon.known_misspellings:
            if _WHITESPACE.sub('', correct) != medication:
                continue
            if misspelling in sentence or _WHITESPACE.sub('', misspelling) in normalized:
                return True
        return False
