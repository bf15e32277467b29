# ============================================================================
# FILE: tests/unit/test_category_extractors.py
# ============================================================================
"""
Unit tests for the category extractors
"""

import pytest

from appointment_extraction.core.segmenter import segment_sentences
from appointment_extraction import extractors
from appointment_extraction.extractors import (
    MedicationExtractor,
    FollowUpExtractor,
    SafetyExtractor,
    AdditionalNotesExtractor,
)


class TestMedicationExtractor:

    @pytest.fixture
    def medications(self, lexicon, matcher):
        return MedicationExtractor(lexicon, matcher)

    def test_trigger_and_name_in_same_sentence(self, medications):
        """Test first pass with every field stated"""
        sentences = segment_sentences(
            "Take amoxicillin 500 milligrams three times a day for seven days. "
            "Make sure you take it with food."
        )
        result = medications.extract(sentences)

        assert len(result) == 1
        med = result[0]
        assert med.medicine_name == "Amoxicillin"
        assert med.dosage == "500 milligrams"
        assert med.frequency == "three times a day"
        assert med.duration == "for seven days"
        assert med.special_instructions == "with food"
        assert med.verbatim_quote == "Take amoxicillin 500 milligrams three times a day for seven days."

    def test_misspelt_name_resolved(self, medications):
        """Test speech-to-text misspelling is reported by its gazetteer name"""
        sentences = segment_sentences("I'm giving you a moxosilin 500 mg twice a day.")
        result = medications.extract(sentences)

        assert [m.medicine_name for m in result] == ["Amoxicillin"]
        assert result[0].dosage == "500 mg"
        assert result[0].frequency == "twice a day"

    def test_previous_sentence_trigger(self, medications):
        """Test second pass keeps a name following a trigger sentence"""
        sentences = segment_sentences("I'm prescribing something new for you. It's called omeprazole.")
        result = medications.extract(sentences)

        assert len(result) == 1
        assert result[0].medicine_name == "Omeprazole"
        assert result[0].verbatim_quote == "It's called omeprazole."
        assert result[0].dosage is None

    def test_frequency_without_trigger(self, medications):
        """Test second pass keeps a name stated with a frequency"""
        sentences = segment_sentences("Omeprazole once daily before breakfast.")
        result = medications.extract(sentences)

        assert len(result) == 1
        assert result[0].frequency == "once daily"

    def test_passing_mention_ignored(self, medications):
        """Test a bare mention with no trigger, dose or frequency is dropped"""
        sentences = segment_sentences("Omeprazole was mentioned on the radio.")
        assert medications.extract(sentences) == ()

    def test_deduplicated_first_kept(self, medications):
        """Test one record per medication, first occurrence kept"""
        sentences = segment_sentences(
            "Take amoxicillin 500 mg. Keep taking amoxicillin until finished."
        )
        result = medications.extract(sentences)

        assert len(result) == 1
        assert result[0].verbatim_quote == "Take amoxicillin 500 mg."
        assert result[0].duration is None

    def test_special_instruction_not_borrowed_from_other_medication(self, medications):
        """Test carry-over stops at a sentence naming another medication"""
        sentences = segment_sentences(
            "Take amoxicillin 500 mg. Take ibuprofen 400 mg with food."
        )
        result = medications.extract(sentences)

        assert [m.medicine_name for m in result] == ["Amoxicillin", "Ibuprofen"]
        assert result[0].special_instructions is None
        assert result[1].special_instructions == "with food"

    def test_no_medication(self, medications):
        sentences = segment_sentences("Take a deep breath for me.")
        assert medications.extract(sentences) == ()


class TestTestReferralExtractor:

    @pytest.fixture
    def tests(self, lexicon):
        return extractors.TestReferralExtractor(lexicon)

    def test_referral_with_urgency(self, tests):
        """Test first trigger in table order becomes the type"""
        result = tests.extract(segment_sentences("I'm referring you to a specialist urgently."))

        assert len(result) == 1
        assert result[0].type == "Refer"
        assert result[0].urgency == "urgent"

    def test_reason_never_inferred(self, tests):
        """Test reason stays absent even when a cause is spoken"""
        result = tests.extract(segment_sentences("You need an x-ray because of the fall."))

        assert len(result) == 1
        assert result[0].type == "X-ray"
        assert result[0].reason_if_stated is None
        assert result[0].urgency is None

    def test_deduplicated_by_type(self, tests):
        """Test the same test mentioned twice is recorded once"""
        result = tests.extract(segment_sentences(
            "We'll do a blood test today. Another blood test next month."
        ))

        assert len(result) == 1
        assert result[0].type == "Blood test"
        assert result[0].urgency == "today"

    def test_distinct_tests_kept_in_order(self, tests):
        result = tests.extract(segment_sentences(
            "You need an ECG first. Then we'll get an ultrasound."
        ))
        assert [t.type for t in result] == ["Ecg", "Ultrasound"]


class TestFollowUpExtractor:

    @pytest.fixture
    def follow_up(self, lexicon):
        return FollowUpExtractor(lexicon)

    def test_come_back_in_two_weeks(self, follow_up):
        result = follow_up.extract(segment_sentences(
            "Come back in two weeks to see how you're getting on with it."
        ))

        assert result is not None
        assert result.required is True
        assert result.timeframe == "in two weeks"
        assert result.location_or_method is None

    def test_first_trigger_sentence_only(self, follow_up):
        """Test at most one follow-up, from the first trigger sentence"""
        result = follow_up.extract(segment_sentences(
            "Book a review in 6 weeks. Come back next week if it's worse."
        ))

        assert result.verbatim_quote == "Book a review in 6 weeks."
        assert result.timeframe == "in 6 weeks"

    def test_location(self, follow_up):
        result = follow_up.extract(segment_sentences("Book online or at reception for next month."))

        assert result.location_or_method == "reception"
        assert result.timeframe == "next month"

    def test_no_follow_up(self, follow_up):
        assert follow_up.extract(segment_sentences("Drink more water.")) is None


class TestSafetyExtractor:

    @pytest.fixture
    def safety(self, lexicon):
        return SafetyExtractor(lexicon)

    def test_emergency_keyword_with_ellipsis(self, safety):
        """Test the full sentence is the warning text"""
        text = "If you develop any chest pain... go straight to A&E."
        result = safety.extract(segment_sentences(text))

        assert len(result) == 1
        assert result[0].warning == text
        assert result[0].verbatim_quote == text

    def test_emergency_keyword_alone(self, safety):
        assert safety.is_warning("ring 999 straight away.")

    def test_trigger_needs_condition(self, safety):
        """Test a trigger without a condition is not a warning"""
        assert not safety.is_warning("if you have any questions, ring the surgery.")
        assert not safety.is_warning("your temperature was normal.")
        assert safety.is_warning("if you get a fever, ring us.")

    def test_deduplicated_case_insensitive(self, safety):
        result = safety.extract(segment_sentences(
            "Call 999 if it spreads. CALL 999 IF IT SPREADS."
        ))
        assert len(result) == 1


class TestAdditionalNotesExtractor:

    def test_capped(self, lexicon, lifestyle_transcript):
        """Test only the first five advisory sentences are kept"""
        notes = AdditionalNotesExtractor(lexicon, max_notes=5)
        result = notes.extract(segment_sentences(lifestyle_transcript))

        assert result == (
            "Go for a walk every day.",
            "Eat more vegetables.",
            "Get more sleep at night.",
            "Cut down on alcohol.",
            "Try to relax in the evenings.",
        )

    def test_trigger_sentences_excluded(self, lexicon):
        """Test sentences belonging to another category are not notes"""
        notes = AdditionalNotesExtractor(lexicon)
        result = notes.extract(segment_sentences(
            "Take it with food. Drink plenty of water. Don't worry, it's very common."
        ))

        assert result == ("Drink plenty of water.",)

    def test_claimed_quotes_excluded(self, lexicon):
        """Test sentences quoted by another category are not repeated"""
        notes = AdditionalNotesExtractor(lexicon)
        sentences = segment_sentences("Amoxicillin is very common. Rest as much as you can.")
        result = notes.extract(sentences, claimed_quotes=frozenset({"Amoxicillin is very common."}))

        assert result == ("Rest as much as you can.",)

    def test_non_advisory_ignored(self, lexicon):
        notes = AdditionalNotesExtractor(lexicon)
        assert notes.extract(segment_sentences("Nice to see the sun out today.")) == ()


def test_run_returns_extract_result(lexicon):
    """Test run() wraps extract() without altering the result"""
    sentences = segment_sentences("Drink more water.")
    notes = AdditionalNotesExtractor(lexicon)
    assert notes.run(sentences) == notes.extract(sentences)
