# ============================================================================
# src/appointment_extraction/core/segmenter.py
# ============================================================================
"""
Sentence Segmenter

Splits a transcript on sentence-terminal punctuation (. ! ?) followed by
whitespace. An ellipsis is a speech pause, not a sentence end. A
transcript without terminal punctuation comes back as one sentence.
"""

import re
from typing import List, Optional

from ..config import extraction_settings
from .schema import Sentence

# "?", "!" or a single ".", then whitespace. A "..." pause only ends the
# sentence when the next word is capitalised.
_SENTENCE_BOUNDARY = re.compile(r'([!?]|(?<!\.)\.|\.\.\.(?=\s+[A-Z]))\s+')


def segment_sentences(text: str, min_length: Optional[int] = None) -> List[Sentence]:
    """
    Split transcript text into ordered sentences.

    Args:
        text: Raw transcript
        min_length: Fragments with trimmed length <= this are dropped
            (defaults to MIN_SENTENCE_LENGTH)

    Returns:
        Sentences in source order; index is the position in the returned list
    """
    if min_length is None:
        min_length = extraction_settings.MIN_SENTENCE_LENGTH

    spans = []
    start = 0
    for match in _SENTENCE_BOUNDARY.finditer(text):
        # Keep the terminal punctuation with its sentence
        spans.append((start, match.end(1)))
        start = match.end()
    spans.append((start, len(text)))

    sentences: List[Sentence] = []
    for span_start, span_end in spans:
        raw = text[span_start:span_end]
        trimmed = raw.strip()
        if len(trimmed) <= min_length:
            continue

        offset = span_start + (len(raw) - len(raw.lstrip()))
        sentences.append(Sentence(
            index=len(sentences),
            text=trimmed,
            start=offset,
            end=offset + len(trimmed),
        ))

    return sentences
