"""Sentence segmentation for semantic chunking."""

import re
from collections.abc import Iterator

# Terminal punctuation and the whitespace after it are consumed by the split.
_SENTENCE_BOUNDARY = re.compile(r"[.!?]\s+")

DEFAULT_MIN_SENTENCE_LENGTH = 10


def segment_sentences(
    text: str, min_length: int = DEFAULT_MIN_SENTENCE_LENGTH
) -> Iterator[str]:
    """Yield sentences of text in order.

    Fragments no longer than ``min_length`` characters are dropped; these are
    mostly abbreviations, list numbering and extraction noise.
    """
    for fragment in _SENTENCE_BOUNDARY.split(text):
        if len(fragment) > min_length:
            yield fragment
