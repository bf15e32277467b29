# ============================================================================
# src/appointment_extraction/config/extraction_config.py
# ============================================================================
"""
Extraction Settings
- Sentence segmentation
- Fuzzy medication matching
- Additional notes cap
"""

from pydantic import Field
from pydantic_settings import BaseSettings

class ExtractionSettings(BaseSettings):
    MIN_SENTENCE_LENGTH: int = Field(
        default=3,
        ge=0,
        description="Fragments whose trimmed length is at or below this are discarded"
    )
    FUZZY_MIN_NAME_LENGTH: int = Field(
        default=6,
        ge=1,
        description="Medication names shorter than this are only matched exactly (avoids false positives on short names)"
    )
    FUZZY_SIMILARITY_THRESHOLD: float = Field(
        default=0.75,
        ge=0.0, le=1.0,
        description="Minimum boosted LCS similarity to accept a fuzzy medication match"
    )
    FUZZY_BOUNDARY_BOOST: float = Field(
        default=0.10,
        ge=0.0, le=1.0,
        description="Added to similarity when the first or last characters of both strings agree"
    )
    FUZZY_BOUNDARY_LENGTH: int = Field(
        default=3,
        ge=1,
        description="Number of leading/trailing characters compared for the boundary boost"
    )
    MAX_ADDITIONAL_NOTES: int = Field(
        default=5,
        ge=0,
        description="Maximum additional notes kept per transcript"
    )

extraction_settings = ExtractionSettings()
