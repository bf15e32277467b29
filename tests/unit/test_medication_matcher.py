# ============================================================================
# FILE: tests/unit/test_medication_matcher.py
# ============================================================================
"""
Unit tests for gazetteer medication matching
"""

import pytest

from appointment_extraction.config import ExtractionSettings
from appointment_extraction.core.lexicon import build_lexicon
from appointment_extraction.matching import medication_matcher
from appointment_extraction.matching.medication_matcher import (
    MedicationMatcher,
    longest_common_subsequence,
    calculate_similarity,
    normalize_for_matching,
    canonicalize,
)


# ============================================================================
# SIMILARITY HELPERS
# ============================================================================

def test_longest_common_subsequence():
    """Test LCS length on simple and transcription-noise inputs"""
    assert longest_common_subsequence("abcde", "ace") == 3
    assert longest_common_subsequence("ace", "abcde") == 3
    assert longest_common_subsequence("moxosilin", "amoxicillin") == 7
    assert longest_common_subsequence("", "amoxicillin") == 0
    assert longest_common_subsequence("abc", "xyz") == 0


def test_similarity_containment_shortcut():
    """Test shorter string contained in longer scores by length ratio"""
    similarity = calculate_similarity("amoxicillin", "amoxicillin500mg")
    assert similarity == pytest.approx(11 / 16)


def test_similarity_identical_strings():
    """Test identical strings score 1.0"""
    assert calculate_similarity("metformin", "metformin") == 1.0


def test_similarity_boundary_boost():
    """Test matching first characters add the boundary boost"""
    # LCS "abc" = 3/6, plus 0.10 for the shared "abc" prefix
    assert calculate_similarity("abcxyz", "abcpqr") == pytest.approx(0.6)


def test_similarity_without_boost():
    """Test no boost when neither boundary agrees"""
    assert calculate_similarity("duac", "dwac") == pytest.approx(0.75)


def test_similarity_capped_at_one():
    """Test boosted similarity never exceeds 1.0"""
    assert calculate_similarity("atorvastatin", "atorvastaten") == 1.0


def test_similarity_empty_strings():
    """Test empty input scores zero"""
    assert calculate_similarity("", "amoxicillin") == 0.0
    assert calculate_similarity("amoxicillin", "") == 0.0


def test_normalize_for_matching():
    """Test articles and whitespace are stripped"""
    assert normalize_for_matching("Take the a moxosilin now") == "takemoxosilinnow"
    assert normalize_for_matching("an  ibu\tprofen") == "ibuprofen"


def test_canonicalize():
    """Test first character is upper-cased, rest untouched"""
    assert canonicalize("amoxicillin") == "Amoxicillin"
    assert canonicalize("co-codamol") == "Co-codamol"
    assert canonicalize("vitamin d") == "Vitamin d"


# ============================================================================
# GAZETTEER LOOKUP
# ============================================================================

def test_exact_match(matcher):
    """Test exact gazetteer name in sentence"""
    assert matcher.find_medication_name("take paracetamol twice a day") == "Paracetamol"


def test_gazetteer_order_breaks_ties(matcher):
    """Test the earlier, more specific entry wins"""
    assert matcher.find_medication_name("use the canesten cream at night") == "Canesten cream"


def test_inserted_space_recovered(matcher):
    """Test name split by speech-to-text is matched after normalization"""
    assert matcher.find_medication_name("take amoxi cillin 500 mg") == "Amoxicillin"


def test_known_misspelling(matcher):
    """Test misspelling table resolves to the gazetteer name"""
    assert matcher.find_medication_name("a moxosilin 500 mg") == "Amoxicillin"


def test_misspelling_never_reported_verbatim(matcher):
    """Test reported name is always a gazetteer entry"""
    name = matcher.find_medication_name("i'm prescribing amoxacillin")
    assert name == "Amoxicillin"
    assert name.lower() in matcher.lexicon.medications


def test_phonetic_misspelling_by_similarity(matcher):
    """Test LCS similarity catches a misspelling not in the table"""
    assert matcher.find_medication_name("atorvastaten") == "Atorvastatin"


def test_no_medication(matcher):
    """Test ordinary sentence matches nothing"""
    assert matcher.find_medication_name("the weather is lovely today") is None
    assert matcher.find_medication_name("") is None


def test_short_names_never_fuzzy_matched():
    """Test names under the minimum length only match exactly"""
    matcher = MedicationMatcher(build_lexicon(medications=["duac"]))

    # Would pass the threshold if fuzzy matching were allowed
    assert calculate_similarity("duac", "dwac") >= matcher.similarity_threshold
    assert matcher.fuzzy_match("duac", "dwac") is False
    assert matcher.find_medication_name("dwac") is None
    assert matcher.find_medication_name("use duac gel") == "Duac"


def test_long_names_fuzzy_matched():
    """Test names at or over the minimum length use similarity"""
    matcher = MedicationMatcher(build_lexicon(medications=["metformin"]))

    assert matcher.find_medication_name("metformen") == "Metformin"


def test_threshold_from_settings():
    """Test a stricter threshold rejects the same misspelling"""
    strict = ExtractionSettings(FUZZY_SIMILARITY_THRESHOLD=1.0, FUZZY_BOUNDARY_BOOST=0.0)
    matcher = MedicationMatcher(build_lexicon(medications=["metformin"]), settings=strict)

    assert matcher.find_medication_name("metformen") is None


def test_similarity_skipped_when_length_rules_out_match(monkeypatch):
    """Test LCS is not computed when the length ratio cannot reach the threshold"""
    calls = []

    def counting_lcs(s1, s2):
        calls.append((s1, s2))
        return longest_common_subsequence(s1, s2)

    monkeypatch.setattr(medication_matcher, "longest_common_subsequence", counting_lcs)
    matcher = MedicationMatcher(build_lexicon(medications=["metformin"]))

    long_sentence = "the weather has been lovely and warm for most of the week so far"
    assert matcher.find_medication_name(long_sentence) is None
    assert calls == []

    assert matcher.find_medication_name("metformen") == "Metformin"
    assert calls == [("metformin", "metformen")]
