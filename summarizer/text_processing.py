# summarizer/text_processing.py
"""
Shared text primitives used by every ranking method:
sentence segmentation, word tokenization and bag-of-words cosine similarity.
"""

import math
import re
from collections import Counter
from typing import List

import numpy as np

import config

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
WORD_PATTERN = re.compile(r"\b\w+\b")


def _ensure_punkt():
    import nltk
    for resource in ("punkt", "punkt_tab"):
        try:
            nltk.data.find(f"tokenizers/{resource}")
        except LookupError:
            print(f"🔄 Downloading NLTK resource '{resource}'...")
            nltk.download(resource, quiet=True)


def segment_sentences(text: str, segmenter: str = "regex",
                      min_length: int = config.MIN_SENTENCE_LENGTH) -> List[str]:
    """
    Split raw text into trimmed sentences, dropping short fragments.

    The default "regex" segmenter splits on runs of '.', '!' and '?' with no
    abbreviation or decimal handling, so "e.g." ends a sentence. "punkt"
    switches to NLTK's trained tokenizer; results differ from the default.

    Args:
        text: Input document
        segmenter: "regex" or "punkt"
        min_length: Sentences must be strictly longer than this after trimming

    Returns:
        Sentences in document order
    """
    if not text:
        return []

    if segmenter == "regex":
        pieces = SENTENCE_BOUNDARY.split(text)
    elif segmenter == "punkt":
        from nltk.tokenize import sent_tokenize
        _ensure_punkt()
        # Punkt keeps the terminal punctuation; strip it so the join convention holds
        pieces = [SENTENCE_BOUNDARY.sub(" ", s).strip()
                  for s in sent_tokenize(text)]
    else:
        raise ValueError(f"Unknown segmenter: {segmenter}")

    sentences = []
    for piece in pieces:
        piece = piece.strip()
        if len(piece) > min_length:
            sentences.append(piece)
    return sentences


def split_words(text: str) -> List[str]:
    """Lowercase whitespace tokenization used by the similarity measure."""
    return text.lower().split()


def extract_words(text: str, min_length: int = 1) -> List[str]:
    """Lowercase word-character tokens, optionally only those of min_length or more."""
    words = WORD_PATTERN.findall(text.lower())
    if min_length > 1:
        words = [w for w in words if len(w) >= min_length]
    return words


def cosine_similarity(sentence_a: str, sentence_b: str) -> float:
    """
    Cosine similarity between the term-count vectors of two sentences.

    Returns 0 when either sentence has no words.
    """
    counts_a = Counter(split_words(sentence_a))
    counts_b = Counter(split_words(sentence_b))

    dot_product = sum(count * counts_b[word] for word, count in counts_a.items())
    magnitude_a = math.sqrt(sum(c * c for c in counts_a.values()))
    magnitude_b = math.sqrt(sum(c * c for c in counts_b.values()))

    if not magnitude_a or not magnitude_b:
        return 0.0
    # Rounding can push identical sentences a hair above 1
    return min(1.0, dot_product / (magnitude_a * magnitude_b))


def build_similarity_matrix(sentences: List[str]) -> np.ndarray:
    """Pairwise similarity matrix indexed like sentences, with a zero diagonal."""
    n = len(sentences)
    matrix = np.zeros((n, n))
    for i in range(n):
        for j in range(i + 1, n):
            similarity = cosine_similarity(sentences[i], sentences[j])
            matrix[i, j] = similarity
            matrix[j, i] = similarity
    return matrix


def join_sentences(sentences: List[str]) -> str:
    """Join sentences back into summary text: '. ' between, '.' at the end."""
    if not sentences:
        return ""
    return ". ".join(sentences) + "."


def truncate(text: str, length: int) -> str:
    return text[:length] + ("..." if len(text) > length else "")
