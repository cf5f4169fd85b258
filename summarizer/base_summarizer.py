# summarizer/base_summarizer.py
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

import config
from summarizer.result import SummaryResult


class BaseSummarizer(ABC):
    """
    Abstract base class for all summarizers.
    All summarizer implementations must inherit from this class and implement the summarize method.
    """

    def __init__(self, sentiment_analyzer=None, quality_evaluator=None,
                 visualization_builder=None, segmenter: str = config.DEFAULT_SEGMENTER):
        """
        Initialize shared collaborators

        Args:
            sentiment_analyzer: Sentiment service shared by evaluator and builder
            quality_evaluator: QualityEvaluator instance (created if omitted)
            visualization_builder: VisualizationBuilder instance (created if omitted)
            segmenter: Sentence segmenter name ("regex" or "punkt")
        """
        from evaluation.quality import QualityEvaluator
        from evaluation.sentiment import SentimentAnalyzer
        from visualization.builder import VisualizationBuilder

        if sentiment_analyzer is None:
            sentiment_analyzer = SentimentAnalyzer()
        self.sentiment_analyzer = sentiment_analyzer
        self.quality_evaluator = quality_evaluator or QualityEvaluator(sentiment_analyzer)
        self.visualization_builder = visualization_builder or VisualizationBuilder(sentiment_analyzer)
        self.segmenter = segmenter

    @abstractmethod
    def summarize(self, text: str, sentences_count: int = config.DEFAULT_SENTENCES_COUNT,
                  **kwargs) -> SummaryResult:
        """
        Generate a summary of the input text

        Args:
            text: Input text to summarize
            sentences_count: Number of sentences requested (at least 1)
            **kwargs: Additional parameters specific to the summarizer

        Returns:
            SummaryResult for this method
        """
        pass

    @staticmethod
    def _check_sentences_count(sentences_count: int):
        if sentences_count < 1:
            raise ValueError(f"sentences_count must be at least 1, got {sentences_count}")

    def get_metadata(self) -> Dict[str, Any]:
        """
        Get metadata about the summarizer

        Returns:
            Dictionary with metadata (name, type, description, etc.)
        """
        return {
            "name": self.__class__.__name__,
            "type": "base",
            "description": "Base summarizer class"
        }

    def __str__(self) -> str:
        """String representation of the summarizer"""
        metadata = self.get_metadata()
        return f"{metadata['name']} ({metadata['type']})"
