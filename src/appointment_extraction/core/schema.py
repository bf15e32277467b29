# ============================================================================
# src/appointment_extraction/core/schema.py
# ============================================================================
"""
Extraction Schema

Typed records produced by the extractor. Categories follow stages 4 and 5
of the Calgary-Cambridge consultation model (explanation/planning and
closing):
- Medication instructions
- Tests and referrals
- Follow-up
- Safety advice
- Additional notes

Every record is frozen. Optional fields are None when the transcript does
not state them explicitly; an empty string is never used to mean absent.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Sentence:
    """A trimmed sentence span of the transcript."""
    index: int
    text: str
    start: int
    end: int

    @property
    def lower(self) -> str:
        return self.text.lower()


@dataclass(frozen=True)
class MedicationInstruction:
    """
    Medication as spoken, e.g.
    "Take amoxicillin 500 milligrams three times a day for seven days".

    medicine_name is always a gazetteer entry, never transcript text.
    """
    medicine_name: str
    verbatim_quote: str
    dosage: Optional[str] = None
    frequency: Optional[str] = None
    duration: Optional[str] = None
    special_instructions: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "medicine_name": self.medicine_name,
            "dosage": self.dosage,
            "frequency": self.frequency,
            "duration": self.duration,
            "special_instructions": self.special_instructions,
            "verbatim_quote": self.verbatim_quote,
        }


@dataclass(frozen=True)
class TestOrReferral:
    """
    Test or referral as spoken, e.g. "You'll need an x-ray urgently".

    reason_if_stated is never populated: the extractor does not infer a
    clinical reason.
    """
    type: str
    verbatim_quote: str
    urgency: Optional[str] = None
    reason_if_stated: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "test_or_referral_type": self.type,
            "reason_if_stated": self.reason_if_stated,
            "urgency": self.urgency,
            "verbatim_quote": self.verbatim_quote,
        }


@dataclass(frozen=True)
class FollowUpInstruction:
    verbatim_quote: str
    required: bool = True
    timeframe: Optional[str] = None
    location_or_method: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "follow_up_required": self.required,
            "timeframe": self.timeframe,
            "location_or_method": self.location_or_method,
            "verbatim_quote": self.verbatim_quote,
        }


@dataclass(frozen=True)
class SafetyWarning:
    warning: str
    verbatim_quote: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "warning": self.warning,
            "verbatim_quote": self.verbatim_quote,
        }


@dataclass(frozen=True)
class AppointmentMetadata:
    """
    Context for the user, not clinical decision-making.

    date and doctor_or_clinic are caller-supplied; the extractor never
    fills them from the transcript. The stored document names the
    duration key "recording_duration".
    """
    date: Optional[str] = None
    doctor_or_clinic: Optional[str] = None
    recording_duration_seconds: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "doctor_or_clinic": self.doctor_or_clinic,
            "recording_duration": self.recording_duration_seconds,
        }


@dataclass(frozen=True)
class ExtractionResult:
    """
    Aggregate extraction record for one transcript.

    extraction_timestamp is excluded from equality so that two extractions
    of the same transcript compare equal.
    """
    appointment_metadata: AppointmentMetadata = field(default_factory=AppointmentMetadata)
    medication_instructions: Tuple[MedicationInstruction, ...] = ()
    tests_and_referrals: Tuple[TestOrReferral, ...] = ()
    follow_up: Optional[FollowUpInstruction] = None
    safety_advice: Tuple[SafetyWarning, ...] = ()
    additional_notes: Tuple[str, ...] = ()
    extraction_timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
        compare=False
    )

    @property
    def recording_duration_seconds(self) -> Optional[int]:
        return self.appointment_metadata.recording_duration_seconds

    def is_empty(self) -> bool:
        """True when nothing at all was extracted."""
        return not (
            self.medication_instructions
            or self.tests_and_referrals
            or self.follow_up
            or self.safety_advice
            or self.additional_notes
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Document form handed to the persistence layer.

        Keys are snake_case, absent optionals are None and the timestamp is
        epoch milliseconds.
        """
        return {
            "appointment_metadata": self.appointment_metadata.to_dict(),
            "medication_instructions": [m.to_dict() for m in self.medication_instructions],
            "tests_and_referrals": [t.to_dict() for t in self.tests_and_referrals],
            "follow_up": self.follow_up.to_dict() if self.follow_up else None,
            "safety_advice": [s.to_dict() for s in self.safety_advice],
            "additional_notes": list(self.additional_notes),
            "extraction_timestamp": int(self.extraction_timestamp.timestamp() * 1000),
        }
