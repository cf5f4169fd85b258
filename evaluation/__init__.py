# evaluation/__init__.py
from evaluation.quality import QualityEvaluator
from evaluation.sentiment import SentimentAnalyzer

__all__ = ['QualityEvaluator', 'SentimentAnalyzer']
