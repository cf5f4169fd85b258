"""
evaluation/analytics.py

Document-level statistics shown next to the summaries.
- Word, sentence and vocabulary counts
- Most frequent content words
- Flesch reading-ease approximation
- Sentiment distribution and metric comparison across methods
"""

import re
from collections import Counter

from summarizer.text_processing import SENTENCE_BOUNDARY, extract_words

TOP_WORDS = 10
SENTIMENT_NEUTRAL_BAND = 0.1


def estimate_syllables(word):
    """Rough English syllable count from vowel groups."""
    word = word.lower()
    if len(word) <= 3:
        return 1
    word = re.sub(r'(?:[^laeiouy]es|ed|[^laeiouy]e)$', '', word)
    word = re.sub(r'^y', '', word)
    groups = re.findall(r'[aeiouy]{1,2}', word)
    return len(groups) if groups else 1


def readability_score(words, sentence_count):
    """Flesch reading ease, clamped to [0, 100] and rounded."""
    if not words or not sentence_count:
        return 0
    avg_sentence_length = len(words) / sentence_count
    avg_syllables = sum(estimate_syllables(w) for w in words) / len(words)
    score = 206.835 - 1.015 * avg_sentence_length - 84.6 * avg_syllables
    return round(max(0.0, min(100.0, score)))


def sentiment_distribution(results):
    distribution = {'positive': 0, 'negative': 0, 'neutral': 0}
    for result in results:
        comparative = result.quality_metrics.sentiment.comparative
        if comparative > SENTIMENT_NEUTRAL_BAND:
            distribution['positive'] += 1
        elif comparative < -SENTIMENT_NEUTRAL_BAND:
            distribution['negative'] += 1
        else:
            distribution['neutral'] += 1
    return distribution


def analyze_document(text, results=None):
    """
    Compute document statistics.
    :param text: Original document
    :param results: SummaryResults produced for the document (optional)
    :return: dict of statistics
    """
    results = results or []
    words = extract_words(text or '')
    # Unlike the segmenter, every non-empty fragment counts as a sentence here
    sentences = [s for s in SENTENCE_BOUNDARY.split(text or '') if s.strip()]

    word_freq = Counter(w for w in words if len(w) > 3)
    top_words = [{'word': w, 'count': c} for w, c in word_freq.most_common(TOP_WORDS)]

    return {
        'document_count': 1,
        'total_words': len(words),
        'total_sentences': len(sentences),
        'avg_words_per_sentence': round(len(words) / len(sentences), 1) if sentences else 0.0,
        'vocabulary_size': len(set(words)),
        'top_words': top_words,
        'readability_score': readability_score(words, len(sentences)),
        'sentiment_distribution': sentiment_distribution(results),
        'quality_metrics_comparison': [
            {
                'method': r.method,
                'coverage': r.quality_metrics.coverage,
                'coherence': r.quality_metrics.coherence,
                'diversity': r.quality_metrics.diversity,
                'confidence': r.quality_metrics.confidence
            }
            for r in results
        ]
    }
