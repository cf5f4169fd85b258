"""
evaluation/sentiment.py

Lexicon-based sentiment scoring built on the AFINN word list.
- Raw score is the sum of AFINN valences of matched words/phrases
- Comparative score normalizes the raw score by the text's word count
- Matched words are split into positive and negative lists
"""

from afinn import Afinn

from summarizer.result import SentimentResult
from summarizer.text_processing import extract_words


class SentimentAnalyzer:
    def __init__(self, language='en'):
        """
        Stateless analyzer; one instance can be shared by any number of callers.
        :param language: AFINN lexicon language (default: 'en')
        """
        self.language = language
        self.lexicon = Afinn(language=language)

    def analyze(self, text):
        """
        Score a piece of text.
        :param text: Summary or sentence text
        :return: SentimentResult with an unrounded comparative score
        """
        if not text:
            return SentimentResult(score=0, comparative=0.0)

        matched = self.lexicon.find_all(text)
        valences = self.lexicon.scores(text)
        score = int(sum(valences))

        positive = [word for word, valence in zip(matched, valences) if valence > 0]
        negative = [word for word, valence in zip(matched, valences) if valence < 0]

        word_count = len(extract_words(text))
        comparative = score / word_count if word_count else 0.0

        return SentimentResult(score=score, comparative=comparative,
                               positive=positive, negative=negative)
