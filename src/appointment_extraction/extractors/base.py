# ============================================================================
# src/appointment_extraction/extractors/base.py
# ============================================================================
"""
Abstract Base Category Extractor

Each extraction category (medication, tests/referrals, follow-up, safety,
additional notes) is one extractor. Every extractor must implement:
- extract(sentences): Category logic
- get_name(): Extractor identifier

Extractors hold only read-only references (lexicon, matcher), so a single
instance can serve concurrent calls.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Sequence
import logging

from ..core.lexicon import LexiconStore
from ..core.schema import Sentence


class CategoryExtractor(ABC):

    def __init__(self, lexicon: LexiconStore):
        self.lexicon = lexicon
        self.logger = logging.getLogger(f"{__name__}.{self.get_name()}")

    @abstractmethod
    def extract(self, sentences: Sequence[Sentence]) -> Any:
        """
        Extract this category from segmented sentences.

        Returns:
            Tuple of records, a single optional record, or a tuple of
            strings, depending on the category
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        pass

    def run(self, sentences: Sequence[Sentence], **kwargs) -> Any:
        """Wrapper around extract() that logs timing and result size."""
        start_time = datetime.now()
        result = self.extract(sentences, **kwargs)
        duration = (datetime.now() - start_time).total_seconds()

        if result is None:
            found = 0
        elif isinstance(result, tuple):
            found = len(result)
        else:
            found = 1
        self.logger.debug(f"{self.get_name()} found {found} item(s) in {duration:.4f}s")

        return result
