# summarizer/summarizer_factory.py
from typing import Dict, Any, Optional, List


class SummarizerFactory:
    """
    Factory class to create and manage summarizer instances.
    Provides a centralized way to instantiate different summarizers.
    """

    @staticmethod
    def create_extractive_summarizer(name: str, **kwargs) -> Any:
        """
        Create an extractive summarizer instance

        Args:
            name: Name of the summarizer (e.g., 'textrank', 'lexrank', 'frequency')
            **kwargs: Additional parameters for initialization

        Returns:
            Instance of the requested summarizer
        """
        name = name.lower()

        if name == 'textrank':
            from summarizer.extractive.textrank_summarizer import TextRankSummarizer
            return TextRankSummarizer(**kwargs)

        elif name == 'lexrank':
            from summarizer.extractive.lexrank_summarizer import LexRankSummarizer
            return LexRankSummarizer(**kwargs)

        elif name == 'frequency':
            from summarizer.extractive.frequency_summarizer import FrequencySummarizer
            return FrequencySummarizer(**kwargs)

        else:
            raise ValueError(f"Unknown extractive summarizer: {name}")

    @staticmethod
    def create_abstractive_summarizer(name: str, **kwargs) -> Any:
        """
        Create an abstractive summarizer instance

        Args:
            name: Name of the summarizer (e.g., 'bart')
            **kwargs: Additional parameters for initialization

        Returns:
            Instance of the requested summarizer
        """
        name = name.lower()

        if name == 'bart':
            from summarizer.abstractive.bart_summarizer import BARTSummarizer
            return BARTSummarizer(**kwargs)

        else:
            raise ValueError(f"Unknown abstractive summarizer: {name}")

    @staticmethod
    def create_summarizer(name: str, **kwargs) -> Any:
        """
        Create any summarizer by name

        Args:
            name: Extractive or abstractive summarizer name
            **kwargs: Additional parameters for initialization

        Returns:
            Instance of the requested summarizer
        """
        available = SummarizerFactory.get_available_summarizers()
        if name.lower() in available["abstractive"]:
            return SummarizerFactory.create_abstractive_summarizer(name, **kwargs)
        return SummarizerFactory.create_extractive_summarizer(name, **kwargs)

    @staticmethod
    def get_available_summarizers() -> Dict[str, List[str]]:
        """
        Get a list of all available summarizers

        Returns:
            Dictionary with summarizer types and names
        """
        return {
            "extractive": ["textrank", "lexrank", "frequency"],
            "abstractive": ["bart"]
        }
