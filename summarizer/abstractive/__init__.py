# summarizer/abstractive/__init__.py
from summarizer.abstractive.base_abstractive import (
    AbstractiveServiceError, BaseAbstractiveSummarizer)
from summarizer.abstractive.bart_summarizer import BARTSummarizer

__all__ = ['AbstractiveServiceError', 'BaseAbstractiveSummarizer', 'BARTSummarizer']
