# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from datetime import datetime, timezone

from appointment_extraction.core.lexicon import get_lexicon
from appointment_extraction.core.extraction_engine import SchemaGuidedExtractor
from appointment_extraction.matching.medication_matcher import MedicationMatcher


FIXED_TIME = datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def lexicon():
    """Shared default lexicon"""
    return get_lexicon()


@pytest.fixture
def matcher(lexicon):
    """Medication matcher over the default gazetteer"""
    return MedicationMatcher(lexicon)


@pytest.fixture
def fixed_time():
    """Extraction timestamp used by fixed_clock"""
    return FIXED_TIME


@pytest.fixture
def fixed_clock(fixed_time):
    """Clock that always returns fixed_time"""
    return lambda: fixed_time


@pytest.fixture
def extractor(fixed_clock):
    """Extractor with a deterministic timestamp"""
    return SchemaGuidedExtractor(clock=fixed_clock)


@pytest.fixture
def sample_consultation_transcript():
    """GP consultation covering every extraction category"""
    return (
        "Right, so I'm going to start you on amoxicillin 500 milligrams three times a day "
        "for seven days. Make sure you take it with food. "
        "I'd also like you to get a blood test this week. "
        "Come back in two weeks if it hasn't settled. "
        "If you develop a fever or any rash, go straight to A&E. "
        "Try to drink plenty of water and get some rest."
    )


@pytest.fixture
def lifestyle_transcript():
    """Seven advisory sentences with no category triggers"""
    return (
        "Go for a walk every day. Eat more vegetables. Get more sleep at night. "
        "Cut down on alcohol. Try to relax in the evenings. Drink more water. "
        "Exercise helps too."
    )
