# ============================================================================
# src/appointment_extraction/extractors/field_extractors.py
# ============================================================================
"""
Field Extractors

Pure functions over one sentence. Each returns the first entry of a fixed,
ordered list that matches, or None. Nothing is scored or combined.

Pattern-based fields return the matched span copied from the sentence;
phrase-table fields return the table entry.

The follow-up timeframe is the one exception to first-match-wins: every
timeframe pattern is tried and the last one in list order that matches
supplies the value.
"""

from typing import Optional, Pattern, Sequence

from ..core.lexicon import LexiconStore, first_contained


def _first_pattern_match(sentence: str, patterns: Sequence[Pattern]) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(sentence)
        if match:
            return match.group(0)
    return None


def extract_dosage(sentence: str, lexicon: LexiconStore) -> Optional[str]:
    """Number followed by a unit, e.g. "500 milligrams", "2 tablets"."""
    match = lexicon.dosage_pattern.search(sentence)
    return match.group(0) if match else None


def extract_frequency(sentence: str, lexicon: LexiconStore) -> Optional[str]:
    """e.g. "three times a day", "every 8 hours"."""
    return _first_pattern_match(sentence, lexicon.frequency_patterns)


def extract_duration(sentence: str, lexicon: LexiconStore) -> Optional[str]:
    """e.g. "for seven days", "until finished"."""
    return _first_pattern_match(sentence, lexicon.duration_patterns)


def extract_special_instructions(sentence: str, lexicon: LexiconStore) -> Optional[str]:
    """e.g. "with food", "swallow whole"."""
    return first_contained(sentence.lower(), lexicon.special_instructions)


def extract_urgency(sentence: str, lexicon: LexiconStore) -> Optional[str]:
    """Urgency only when explicitly said, e.g. "urgently", "two week wait"."""
    return first_contained(sentence.lower(), lexicon.urgency_indicators)


def extract_timeframe(sentence: str, lexicon: LexiconStore) -> Optional[str]:
    """
    Follow-up timeframe, e.g. "in two weeks".

    Last-wins: each matching pattern overwrites the previous match.
    """
    timeframe = None
    for pattern in lexicon.timeframe_patterns:
        match = pattern.search(sentence)
        if match:
            timeframe = match.group(0)
    return timeframe


def extract_location_or_method(sentence: str, lexicon: LexiconStore) -> Optional[str]:
    """
    Where/how to follow up.

    Cascade: reception -> online -> phone/call -> GP/surgery -> None.
    """
    lowered = sentence.lower()
    for keywords, label in lexicon.follow_up_locations:
        if any(keyword in lowered for keyword in keywords):
            return label
    return None
