# summarizer/extractive/lexrank_summarizer.py
from typing import Dict, Any, List, Optional, Tuple

import numpy as np

import config
from summarizer.extractive.base_extractive import BaseExtractiveSummarizer
from summarizer.extractive.textrank_summarizer import row_normalize
from summarizer.text_processing import build_similarity_matrix


class LexRankSummarizer(BaseExtractiveSummarizer):
    """
    LexRank algorithm implementation for extractive summarization.
    Power iteration over a thresholded, row-stochastic similarity matrix.
    """

    method_name = "LexRank"

    def __init__(self, threshold: float = config.LEXRANK_THRESHOLD,
                 iterations: int = config.LEXRANK_ITERATIONS,
                 tolerance: Optional[float] = config.CONVERGENCE_TOLERANCE, **kwargs):
        """
        Initialize LexRank summarizer

        Args:
            threshold: Similarities at or below this value are dropped
            iterations: Number of power-iteration rounds
            tolerance: Stop early once a round changes scores by less than this (L1)
        """
        super().__init__(**kwargs)
        self.threshold = threshold
        self.iterations = iterations
        self.tolerance = tolerance

    def get_metadata(self) -> Dict[str, Any]:
        """Override metadata with LexRank specific information"""
        metadata = super().get_metadata()
        metadata.update({
            "name": "LexRank",
            "description": "Graph-based extractive summarization using LexRank algorithm",
            "threshold": self.threshold,
            "iterations": self.iterations
        })
        return metadata

    def transition_matrix(self, similarity_matrix: np.ndarray) -> np.ndarray:
        """
        Sparsified similarity matrix with rows summing to 1.
        Sentences without a neighbor above the threshold keep an all-zero row.
        """
        sparse = np.where(similarity_matrix > self.threshold, similarity_matrix, 0.0)
        return row_normalize(sparse)

    def rank(self, transition: np.ndarray) -> np.ndarray:
        n = transition.shape[0]
        scores = np.full(n, 1.0 / n) if n else np.zeros(0)
        for _ in range(self.iterations):
            # Score flows along incoming edges
            new_scores = transition.T @ scores
            delta = np.abs(new_scores - scores).sum()
            scores = new_scores
            if self.tolerance is not None and delta < self.tolerance:
                break
        return scores

    def score_sentences(self, sentences: List[str], text: str) -> Tuple[np.ndarray, np.ndarray]:
        similarity_matrix = build_similarity_matrix(sentences)
        return self.rank(self.transition_matrix(similarity_matrix)), similarity_matrix
