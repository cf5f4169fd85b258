# summarizer/abstractive/bart_summarizer.py
import os
import time
from typing import Dict, Any, Optional, Tuple

import numpy as np
import requests

import config
from summarizer.abstractive.base_abstractive import (
    AbstractiveServiceError, BaseAbstractiveSummarizer)
from summarizer.result import SummaryResult
from summarizer.text_processing import (
    build_similarity_matrix, cosine_similarity, segment_sentences)


class BARTSummarizer(BaseAbstractiveSummarizer):
    """
    BART model implementation for abstractive summarization.
    Calls the Hugging Face Inference API; any failure falls back to the
    frequency summarizer, tagged as a fallback result.
    """

    method_name = "BART"

    def __init__(self, api_url: str = config.BART_API_URL, api_token: Optional[str] = None,
                 timeout: float = config.BART_TIMEOUT,
                 max_input_chars: int = config.BART_MAX_INPUT_CHARS,
                 session: Optional[requests.Session] = None, fallback=None, **kwargs):
        """
        Initialize BART summarizer

        Args:
            api_url: Inference endpoint of the hosted model
            api_token: Bearer token; read from the environment when omitted
            timeout: Seconds to wait for the service before falling back
            max_input_chars: Input is truncated to this many characters
            session: requests.Session used for the call
            fallback: FrequencySummarizer used when the service fails
        """
        super().__init__(**kwargs)
        self.api_url = api_url
        self.api_token = api_token or os.environ.get(config.API_TOKEN_ENV_VAR)
        self.timeout = timeout
        self.max_input_chars = max_input_chars
        self.session = session or requests.Session()

        if fallback is None:
            from summarizer.extractive.frequency_summarizer import FrequencySummarizer
            fallback = FrequencySummarizer(
                sentiment_analyzer=self.sentiment_analyzer,
                quality_evaluator=self.quality_evaluator,
                visualization_builder=self.visualization_builder,
                segmenter=self.segmenter)
        self.fallback = fallback

    def get_metadata(self) -> Dict[str, Any]:
        """Override metadata with BART specific information"""
        metadata = super().get_metadata()
        metadata.update({
            "name": "BART",
            "description": "Abstractive summarization using a hosted BART model",
            "model_name": config.BART_MODEL_NAME,
            "api_url": self.api_url
        })
        return metadata

    @staticmethod
    def length_range(sentences_count: int) -> Tuple[int, int]:
        """Target (min_length, max_length) in tokens for the requested sentence count"""
        return (sentences_count * config.BART_MIN_TOKENS_PER_SENTENCE,
                sentences_count * config.BART_MAX_TOKENS_PER_SENTENCE)

    def request_summary(self, text: str, sentences_count: int) -> str:
        """
        Make exactly one call to the inference service

        Raises:
            AbstractiveServiceError: on network errors, timeouts, non-2xx
                responses or a body without summary text
        """
        min_length, max_length = self.length_range(sentences_count)
        payload = {
            "inputs": text[:self.max_input_chars],
            "parameters": {"min_length": min_length, "max_length": max_length}
        }
        headers = {"Authorization": f"Bearer {self.api_token}"} if self.api_token else {}

        try:
            response = self.session.post(self.api_url, headers=headers, json=payload,
                                         timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise AbstractiveServiceError(f"BART request failed: {e}") from e
        except ValueError as e:
            raise AbstractiveServiceError(f"BART returned invalid JSON: {e}") from e

        if isinstance(data, dict) and "error" in data:
            raise AbstractiveServiceError(f"BART service error: {data['error']}")
        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            raise AbstractiveServiceError(f"Unexpected BART response: {data!r}")

        summary = data[0].get("summary_text")
        if not isinstance(summary, str) or not summary.strip():
            raise AbstractiveServiceError("BART response has no summary text")
        return summary.strip()

    def summarize(self, text: str, sentences_count: int = config.DEFAULT_SENTENCES_COUNT,
                  **kwargs) -> SummaryResult:
        """
        Generate an abstractive summary, or the tagged frequency fallback

        Args:
            text: Input text to summarize
            sentences_count: Drives the requested summary length range

        Returns:
            SummaryResult; provenance is FALLBACK when the service failed
        """
        self._check_sentences_count(sentences_count)
        if not text or not text.strip():
            return self.fallback.summarize_fallback("", sentences_count)

        start_time = time.perf_counter()
        try:
            summary = self.request_summary(text, sentences_count)
        except AbstractiveServiceError as e:
            print(f"⚠️ {e}. Using frequency-based fallback.")
            return self.fallback.summarize_fallback(text, sentences_count)

        summary_sentences = segment_sentences(summary, segmenter=self.segmenter)
        document_sentences = segment_sentences(text, segmenter=self.segmenter)

        # Document sentences are weighted by how closely the generated text follows them
        scores = np.array([cosine_similarity(s, summary) for s in document_sentences])
        similarity_matrix = build_similarity_matrix(document_sentences)

        quality_metrics = self.quality_evaluator.evaluate(
            text, summary, summary_sentences, document_sentences)
        visualization_data = self.visualization_builder.build(
            document_sentences, scores, similarity_matrix)

        return SummaryResult(
            method=self.method_name,
            summary=summary,
            sentences=summary_sentences,
            processing_time=(time.perf_counter() - start_time) * 1000,
            quality_metrics=quality_metrics,
            visualization_data=visualization_data,
            abstractive=True,
        )
