# summarizer/extractive/frequency_summarizer.py
from collections import Counter
from typing import Dict, Any, List, Tuple

import numpy as np

import config
from summarizer.extractive.base_extractive import BaseExtractiveSummarizer
from summarizer.result import Provenance, SummaryResult
from summarizer.text_processing import build_similarity_matrix, extract_words


class FrequencySummarizer(BaseExtractiveSummarizer):
    """
    Word-frequency extractive summarizer.
    Cheapest and most robust method; also the stand-in when abstractive summarization fails.
    """

    method_name = "Frequency-Based"
    fallback_method_name = "Frequency-Based (Fallback)"

    def __init__(self, min_word_length: int = config.FREQUENCY_MIN_WORD_LENGTH, **kwargs):
        """
        Initialize frequency summarizer

        Args:
            min_word_length: Shorter words do not contribute to the frequency table
        """
        super().__init__(**kwargs)
        self.min_word_length = min_word_length

    def get_metadata(self) -> Dict[str, Any]:
        """Override metadata with frequency specific information"""
        metadata = super().get_metadata()
        metadata.update({
            "name": "Frequency-Based",
            "description": "Extractive summarization by mean document frequency of sentence words",
            "min_word_length": self.min_word_length
        })
        return metadata

    def word_frequencies(self, text: str) -> Counter:
        return Counter(extract_words(text, min_length=self.min_word_length))

    def score_sentences(self, sentences: List[str], text: str) -> Tuple[np.ndarray, np.ndarray]:
        word_freq = self.word_frequencies(text)
        scores = np.zeros(len(sentences))
        for i, sentence in enumerate(sentences):
            # Every word counts toward the length, short ones just add nothing
            words = extract_words(sentence)
            if words:
                scores[i] = sum(word_freq[w] for w in words) / len(words)
        # Similarities are only needed for the sentence graph
        return scores, build_similarity_matrix(sentences)

    def summarize_fallback(self, text: str,
                           sentences_count: int = config.DEFAULT_SENTENCES_COUNT) -> SummaryResult:
        """Frequency summary tagged as a fallback for a failed method"""
        return self.summarize(text, sentences_count,
                              method_name=self.fallback_method_name,
                              provenance=Provenance.FALLBACK)
