# summarizer/__init__.py
# Export main summarization functionality
from summarizer.summarizer_factory import SummarizerFactory
from summarizer.result import (
    Provenance, QualityMetrics, SentimentResult, SentenceNode, SummaryResult,
    TopicCluster, VisualizationData)
from summarizer.text_processing import (
    build_similarity_matrix, cosine_similarity, segment_sentences)

# Export base classes
from summarizer.base_summarizer import BaseSummarizer
from summarizer.extractive.base_extractive import BaseExtractiveSummarizer
from summarizer.abstractive.base_abstractive import (
    AbstractiveServiceError, BaseAbstractiveSummarizer)

# Export concrete implementations
from summarizer.extractive.textrank_summarizer import TextRankSummarizer
from summarizer.extractive.lexrank_summarizer import LexRankSummarizer
from summarizer.extractive.frequency_summarizer import FrequencySummarizer
from summarizer.abstractive.bart_summarizer import BARTSummarizer

# Version information
__version__ = '1.0.0'
