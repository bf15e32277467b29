# ============================================================================
# src/appointment_extraction/core/lexicon.py
# ============================================================================
"""
Lexicon Store

Read-only keyword tables, the medication gazetteer and the precompiled
field patterns, bundled into one frozen object. The default store is built
once on first use and shared by every extraction; it holds no mutable
state, so concurrent extractions need no locking.

Usage:
    from appointment_extraction.core.lexicon import get_lexicon

    lexicon = get_lexicon()
    lexicon.dosage_pattern.search("500 mg")
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional, Pattern, Sequence, Tuple

from ..constants import (
    COMMON_MEDICATIONS,
    KNOWN_MISSPELLINGS,
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
    DOSAGE_PATTERN,
    FREQUENCY_PATTERNS,
    DURATION_PATTERNS,
    TIMEFRAME_PATTERNS,
)
from ..utils.exceptions import LexiconError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LexiconStore:
    medications: Tuple[str, ...]
    known_misspellings: Tuple[Tuple[str, str], ...]

    medication_triggers: Tuple[str, ...]
    test_referral_triggers: Tuple[str, ...]
    urgency_indicators: Tuple[str, ...]
    follow_up_triggers: Tuple[str, ...]
    follow_up_locations: Tuple[Tuple[Tuple[str, ...], str], ...]
    safety_triggers: Tuple[str, ...]
    safety_conditions: Tuple[str, ...]
    emergency_keywords: Tuple[str, ...]
    special_instructions: Tuple[str, ...]
    lifestyle_keywords: Tuple[str, ...]
    reassurance_phrases: Tuple[str, ...]

    dosage_pattern: Pattern
    frequency_patterns: Tuple[Pattern, ...]
    duration_patterns: Tuple[Pattern, ...]
    timeframe_patterns: Tuple[Pattern, ...]

    def has_any_category_trigger(self, lowered: str) -> bool:
        """True if the sentence carries a medication, test, follow-up or safety trigger."""
        return (
            contains_any(lowered, self.medication_triggers)
            or contains_any(lowered, self.test_referral_triggers)
            or contains_any(lowered, self.follow_up_triggers)
            or contains_any(lowered, self.safety_triggers)
        )


def contains_any(lowered: str, phrases: Iterable[str]) -> bool:
    return any(phrase in lowered for phrase in phrases)


def first_contained(lowered: str, phrases: Iterable[str]) -> Optional[str]:
    """Return the first phrase (in table order) found in the sentence."""
    for phrase in phrases:
        if phrase in lowered:
            return phrase
    return None


def _freeze(table: str, values: Sequence[str]) -> Tuple[str, ...]:
    frozen = tuple(v.lower() for v in values)
    if not frozen:
        raise LexiconError(f"Lexicon table '{table}' is empty", table=table)
    return frozen


def _compile(table: str, sources: Sequence[str]) -> Tuple[Pattern, ...]:
    if not sources:
        raise LexiconError(f"Pattern list '{table}' is empty", table=table)
    compiled = []
    for source in sources:
        try:
            compiled.append(re.compile(source, re.IGNORECASE))
        except re.error as e:
            raise LexiconError(f"Invalid pattern in '{table}': {source!r} ({e})", table=table) from e
    return tuple(compiled)


def build_lexicon(
    medications: Optional[Sequence[str]] = None,
    known_misspellings: Optional[Sequence[Tuple[str, str]]] = None,
    **overrides
) -> LexiconStore:
    """
    Build a lexicon store from the constant tables.

    Any table can be replaced by keyword (same name as the LexiconStore
    field); pattern tables take regex sources, not compiled patterns.

    Raises:
        LexiconError: a table is empty or a pattern does not compile
    """
    unknown = set(overrides) - {
        "medication_triggers", "test_referral_triggers", "urgency_indicators",
        "follow_up_triggers", "follow_up_locations", "safety_triggers",
        "safety_conditions", "emergency_keywords", "special_instructions",
        "lifestyle_keywords", "reassurance_phrases",
        "dosage_pattern", "frequency_patterns", "duration_patterns", "timeframe_patterns",
    }
    if unknown:
        raise LexiconError(f"Unknown lexicon tables: {sorted(unknown)}", table=sorted(unknown)[0])

    def table(name, default):
        return overrides.get(name, default)

    misspellings = tuple(
        (wrong.lower(), right.lower())
        for wrong, right in (KNOWN_MISSPELLINGS if known_misspellings is None else known_misspellings)
    )

    locations = tuple(
        (tuple(k.lower() for k in keywords), label)
        for keywords, label in table("follow_up_locations", FOLLOW_UP_LOCATIONS)
    )

    store = LexiconStore(
        medications=_freeze("medications", COMMON_MEDICATIONS if medications is None else medications),
        known_misspellings=misspellings,
        medication_triggers=_freeze("medication_triggers", table("medication_triggers", MEDICATION_TRIGGERS)),
        test_referral_triggers=_freeze("test_referral_triggers", table("test_referral_triggers", TEST_REFERRAL_TRIGGERS)),
        urgency_indicators=_freeze("urgency_indicators", table("urgency_indicators", URGENCY_INDICATORS)),
        follow_up_triggers=_freeze("follow_up_triggers", table("follow_up_triggers", FOLLOW_UP_TRIGGERS)),
        follow_up_locations=locations,
        safety_triggers=_freeze("safety_triggers", table("safety_triggers", SAFETY_TRIGGERS)),
        safety_conditions=_freeze("safety_conditions", table("safety_conditions", SAFETY_CONDITIONS)),
        emergency_keywords=_freeze("emergency_keywords", table("emergency_keywords", EMERGENCY_KEYWORDS)),
        special_instructions=_freeze("special_instructions", table("special_instructions", SPECIAL_INSTRUCTIONS)),
        lifestyle_keywords=_freeze("lifestyle_keywords", table("lifestyle_keywords", LIFESTYLE_KEYWORDS)),
        reassurance_phrases=_freeze("reassurance_phrases", table("reassurance_phrases", REASSURANCE_PHRASES)),
        dosage_pattern=_compile("dosage_pattern", [table("dosage_pattern", DOSAGE_PATTERN)])[0],
        frequency_patterns=_compile("frequency_patterns", table("frequency_patterns", FREQUENCY_PATTERNS)),
        duration_patterns=_compile("duration_patterns", table("duration_patterns", DURATION_PATTERNS)),
        timeframe_patterns=_compile("timeframe_patterns", table("timeframe_patterns", TIMEFRAME_PATTERNS)),
    )

    logger.debug(
        f"Lexicon built: {len(store.medications)} medications, "
        f"{len(store.known_misspellings)} known misspellings"
    )
    return store


@lru_cache(maxsize=1)
def get_lexicon() -> LexiconStore:
    """Shared default lexicon, built on first call."""
    return build_lexicon()
