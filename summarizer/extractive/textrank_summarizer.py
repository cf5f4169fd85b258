# summarizer/extractive/textrank_summarizer.py
from typing import Dict, Any, List, Optional, Tuple

import numpy as np

import config
from summarizer.extractive.base_extractive import BaseExtractiveSummarizer
from summarizer.text_processing import build_similarity_matrix


def row_normalize(matrix: np.ndarray) -> np.ndarray:
    """Divide each row by its sum; rows summing to zero stay all zero."""
    row_sums = matrix.sum(axis=1, keepdims=True)
    return np.divide(matrix, row_sums, out=np.zeros_like(matrix), where=row_sums > 0)


class TextRankSummarizer(BaseExtractiveSummarizer):
    """
    TextRank algorithm implementation for extractive summarization.
    Runs a damped PageRank update over the sentence-similarity graph.
    """

    method_name = "TextRank"

    def __init__(self, damping: float = config.TEXTRANK_DAMPING,
                 iterations: int = config.TEXTRANK_ITERATIONS,
                 tolerance: Optional[float] = config.CONVERGENCE_TOLERANCE, **kwargs):
        """
        Initialize TextRank summarizer

        Args:
            damping: Probability of following an edge rather than jumping
            iterations: Number of update rounds
            tolerance: Stop early once a round changes scores by less than this (L1)
        """
        super().__init__(**kwargs)
        self.damping = damping
        self.iterations = iterations
        self.tolerance = tolerance

    def get_metadata(self) -> Dict[str, Any]:
        """Override metadata with TextRank specific information"""
        metadata = super().get_metadata()
        metadata.update({
            "name": "TextRank",
            "description": "Graph-based extractive summarization using PageRank over sentence similarity",
            "damping": self.damping,
            "iterations": self.iterations
        })
        return metadata

    def rank(self, similarity_matrix: np.ndarray) -> np.ndarray:
        n = similarity_matrix.shape[0]
        transition = row_normalize(similarity_matrix)
        scores = np.ones(n)
        for _ in range(self.iterations):
            # All scores move together from the previous round
            new_scores = (1 - self.damping) + self.damping * (transition.T @ scores)
            delta = np.abs(new_scores - scores).sum()
            scores = new_scores
            if self.tolerance is not None and delta < self.tolerance:
                break
        return scores

    def score_sentences(self, sentences: List[str], text: str) -> Tuple[np.ndarray, np.ndarray]:
        similarity_matrix = build_similarity_matrix(sentences)
        return self.rank(similarity_matrix), similarity_matrix
