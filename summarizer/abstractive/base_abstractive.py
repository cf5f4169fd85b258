# summarizer/abstractive/base_abstractive.py
from summarizer.base_summarizer import BaseSummarizer
from typing import Dict, Any


class AbstractiveServiceError(RuntimeError):
    """The remote summarization service failed or answered with something unusable."""


class BaseAbstractiveSummarizer(BaseSummarizer):
    """
    Base class for all abstractive summarizers.
    Abstractive summarizers generate new text rather than extracting sentences.
    """

    def get_metadata(self) -> Dict[str, Any]:
        """Override metadata to indicate abstractive type"""
        metadata = super().get_metadata()
        metadata.update({
            "type": "abstractive",
            "description": "Base abstractive summarizer"
        })
        return metadata
