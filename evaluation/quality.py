"""
evaluation/quality.py

Reference-free quality metrics for a single summary.
- Coverage: share of the document's vocabulary that reaches the summary
- Coherence: mean similarity of consecutive summary sentences
- Diversity: type/token ratio of the summary
- Confidence: weighted blend of the three
- Sentiment: delegated to an injected SentimentAnalyzer
"""

import config
from summarizer.result import QualityMetrics, SentimentResult
from summarizer.text_processing import cosine_similarity, extract_words


class QualityEvaluator:
    def __init__(self, sentiment_analyzer):
        """
        :param sentiment_analyzer: Object with analyze(text) -> SentimentResult
        """
        self.sentiment_analyzer = sentiment_analyzer

    @staticmethod
    def coverage(original_text, summary_text):
        original_words = set(extract_words(original_text))
        if not original_words:
            return 0.0
        return len(set(extract_words(summary_text))) / len(original_words)

    @staticmethod
    def coherence(selected_sentences):
        """Mean similarity of each consecutive pair; 1 when there is no pair."""
        if len(selected_sentences) < 2:
            return 1.0
        total = sum(
            cosine_similarity(selected_sentences[i], selected_sentences[i + 1])
            for i in range(len(selected_sentences) - 1)
        )
        return total / (len(selected_sentences) - 1)

    @staticmethod
    def diversity(summary_text):
        words = extract_words(summary_text)
        if not words:
            return 0.0
        return len(set(words)) / len(words)

    def evaluate(self, original_text, summary_text, selected_sentences, all_sentences=None):
        """
        Compute all quality metrics for one summary.
        :param original_text: The full document
        :param summary_text: The summary as returned to the caller
        :param selected_sentences: Summary sentences in summary order
        :param all_sentences: Every document sentence (accepted for symmetry, unused)
        :return: QualityMetrics with values rounded to 2 decimals
        """
        coverage = self.coverage(original_text, summary_text)
        coherence = self.coherence(selected_sentences)
        diversity = self.diversity(summary_text)
        confidence = (coverage * config.COVERAGE_WEIGHT
                      + coherence * config.COHERENCE_WEIGHT
                      + diversity * config.DIVERSITY_WEIGHT)

        sentiment = self.sentiment_analyzer.analyze(summary_text)

        return QualityMetrics(
            coverage=round(coverage, 2),
            coherence=round(coherence, 2),
            diversity=round(diversity, 2),
            confidence=round(confidence, 2),
            sentiment=SentimentResult(
                score=sentiment.score,
                comparative=round(sentiment.comparative, 2),
                positive=list(sentiment.positive),
                negative=list(sentiment.negative),
            ),
        )
