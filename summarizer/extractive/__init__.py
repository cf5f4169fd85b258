# summarizer/extractive/__init__.py
from summarizer.extractive.base_extractive import BaseExtractiveSummarizer
from summarizer.extractive.textrank_summarizer import TextRankSummarizer
from summarizer.extractive.lexrank_summarizer import LexRankSummarizer
from summarizer.extractive.frequency_summarizer import FrequencySummarizer

__all__ = ['BaseExtractiveSummarizer', 'TextRankSummarizer',
           'LexRankSummarizer', 'FrequencySummarizer']
