# summarizer/extractive/base_extractive.py
import time
from abc import abstractmethod
from typing import Dict, Any, List, Optional, Tuple

import numpy as np

import config
from summarizer.base_summarizer import BaseSummarizer
from summarizer.result import Provenance, SummaryResult
from summarizer.text_processing import (
    build_similarity_matrix, join_sentences, segment_sentences)


class BaseExtractiveSummarizer(BaseSummarizer):
    """
    Base class for all extractive summarizers.
    Extractive summarizers select important sentences from the original text.

    Subclasses only implement score_sentences; segmentation, selection,
    quality metrics and visualization are shared.
    """

    method_name = "Extractive"

    def get_metadata(self) -> Dict[str, Any]:
        """Override metadata to indicate extractive type"""
        metadata = super().get_metadata()
        metadata.update({
            "type": "extractive",
            "description": "Base extractive summarizer"
        })
        return metadata

    @abstractmethod
    def score_sentences(self, sentences: List[str], text: str) -> Tuple[np.ndarray, np.ndarray]:
        """
        Score every sentence

        Args:
            sentences: Segmented sentences in document order
            text: The full document

        Returns:
            (scores, similarity matrix used for visualization)
        """
        pass

    def split_sentences(self, text: str) -> List[str]:
        return segment_sentences(text, segmenter=self.segmenter)

    @staticmethod
    def select_top_indices(scores: np.ndarray, sentences_count: int) -> List[int]:
        """
        Pick the best sentences, ties going to the earlier one

        Returns:
            Chosen indices in ascending document order
        """
        ranked = sorted(range(len(scores)), key=lambda i: (-scores[i], i))
        return sorted(ranked[:sentences_count])

    def get_ranked_sentences(self, text: str, **kwargs) -> List[Dict[str, Any]]:
        """
        Get sentences ranked by importance

        Args:
            text: Input text to analyze
            **kwargs: Additional parameters

        Returns:
            List of dictionaries with sentence text, score and index, best first
        """
        sentences = self.split_sentences(text)
        if not sentences:
            return []
        scores, _ = self.score_sentences(sentences, text)
        ranked = [{"text": s, "score": float(scores[i]), "index": i}
                  for i, s in enumerate(sentences)]
        ranked.sort(key=lambda x: (-x["score"], x["index"]))
        return ranked

    def summarize(self, text: str, sentences_count: int = config.DEFAULT_SENTENCES_COUNT,
                  method_name: Optional[str] = None,
                  provenance: Provenance = Provenance.PRIMARY, **kwargs) -> SummaryResult:
        """
        Generate an extractive summary

        Args:
            text: Input text to summarize
            sentences_count: Number of sentences to extract
            method_name: Overrides the method label on the result
            provenance: Provenance recorded on the result

        Returns:
            SummaryResult with sentences in document order
        """
        self._check_sentences_count(sentences_count)
        start_time = time.perf_counter()
        text = text or ""
        sentences = self.split_sentences(text)

        if len(sentences) <= sentences_count:
            # Nothing to rank: every sentence is kept
            scores = np.ones(len(sentences))
            similarity_matrix = build_similarity_matrix(sentences)
            selected = list(sentences)
        else:
            scores, similarity_matrix = self.score_sentences(sentences, text)
            selected = [sentences[i] for i in self.select_top_indices(scores, sentences_count)]

        summary = join_sentences(selected)
        quality_metrics = self.quality_evaluator.evaluate(text, summary, selected, sentences)
        visualization_data = self.visualization_builder.build(sentences, scores, similarity_matrix)

        return SummaryResult(
            method=method_name or self.method_name,
            summary=summary,
            sentences=selected,
            processing_time=(time.perf_counter() - start_time) * 1000,
            quality_metrics=quality_metrics,
            visualization_data=visualization_data,
            provenance=provenance,
        )
