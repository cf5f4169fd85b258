import pytest
import requests

from summarizer.result import (
    Provenance, QualityMetrics, SentimentResult, SummaryResult, VisualizationData)

MAMMALS_TEXT = ("Cats are mammals. Dogs are mammals too. Birds can fly. "
                "Fish live in water. Mammals nurse their young.")

THREE_SENTENCE_TEXT = ("The river floods the valley every spring. "
                       "Farmers in the valley plant rice after the river floods. "
                       "Rice grows well in the wet valley soil.")

CAT_TEXT = ("The cat sat on the mat today. The cat sat on the mat again. "
            "The cat sat on the mat once more. Quantum physics explains tiny particles.")


class StubSentiment:
    """Deterministic sentiment: +1 per 'good', -1 per 'bad'."""

    def __init__(self):
        self.calls = []

    def analyze(self, text):
        self.calls.append(text)
        words = text.lower().split()
        positive = [w for w in words if w == 'good']
        negative = [w for w in words if w == 'bad']
        score = len(positive) - len(negative)
        return SentimentResult(score=score,
                               comparative=score / len(words) if words else 0.0,
                               positive=positive, negative=negative)


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    """Stands in for requests.Session; records every POST."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, headers=None, json=None, timeout=None):
        self.calls.append({'url': url, 'headers': headers, 'json': json, 'timeout': timeout})
        if self.error is not None:
            raise self.error
        return self.response


def make_result(method='TextRank', summary='A summary sentence here.', sentences=None,
                coverage=0.8, coherence=0.6, diversity=0.9, confidence=0.77,
                comparative=0.0, processing_time=5.0, provenance=Provenance.PRIMARY,
                abstractive=False):
    return SummaryResult(
        method=method,
        summary=summary,
        sentences=sentences if sentences is not None else ['A summary sentence here'],
        processing_time=processing_time,
        quality_metrics=QualityMetrics(
            coverage=coverage, coherence=coherence, diversity=diversity,
            confidence=confidence,
            sentiment=SentimentResult(score=0, comparative=comparative)),
        visualization_data=VisualizationData(),
        provenance=provenance,
        abstractive=abstractive,
    )


@pytest.fixture
def stub_sentiment():
    return StubSentiment()


@pytest.fixture
def mammals_text():
    return MAMMALS_TEXT


@pytest.fixture
def three_sentence_text():
    return THREE_SENTENCE_TEXT


@pytest.fixture
def cat_text():
    return CAT_TEXT


@pytest.fixture
def long_text():
    return " ".join(f"Sentence number {i} talks about subject {i} in some detail."
                    for i in range(30))
