import pytest
import requests

from conftest import FakeResponse, FakeSession
from summarizer import (
    AbstractiveServiceError, BARTSummarizer, FrequencySummarizer, Provenance,
    SummarizerFactory)

GENERATED = "Mammals such as cats and dogs nurse their young. Birds fly and fish swim."


def make_bart(session, stub_sentiment, **kwargs):
    return BARTSummarizer(session=session, sentiment_analyzer=stub_sentiment, **kwargs)


def test_successful_call_returns_primary_result(mammals_text, stub_sentiment):
    session = FakeSession(FakeResponse(200, [{"summary_text": f"  {GENERATED} "}]))
    result = make_bart(session, stub_sentiment).summarize(mammals_text, 2)

    assert result.method == "BART"
    assert result.provenance is Provenance.PRIMARY
    assert result.abstractive
    assert result.summary == GENERATED
    assert result.sentences == ["Mammals such as cats and dogs nurse their young",
                                "Birds fly and fish swim"]
    assert len(result.visualization_data.sentence_graph) == 5


def test_request_shape(mammals_text, stub_sentiment):
    session = FakeSession(FakeResponse(200, [{"summary_text": GENERATED}]))
    bart = make_bart(session, stub_sentiment, api_token="secret", timeout=4,
                     max_input_chars=20, api_url="http://example.test/bart")
    bart.summarize(mammals_text, 3)

    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == "http://example.test/bart"
    assert call["timeout"] == 4
    assert call["headers"] == {"Authorization": "Bearer secret"}
    assert call["json"]["inputs"] == mammals_text[:20]
    assert call["json"]["parameters"] == {"min_length": 30, "max_length": 120}


def test_token_read_from_environment(monkeypatch, stub_sentiment):
    monkeypatch.setenv("HF_API_TOKEN", "from-env")
    bart = make_bart(FakeSession(), stub_sentiment)
    assert bart.api_token == "from-env"


@pytest.mark.parametrize("session", [
    FakeSession(error=requests.exceptions.Timeout("read timed out")),
    FakeSession(error=requests.exceptions.ConnectionError("unreachable")),
    FakeSession(FakeResponse(503, {"error": "Model is loading"})),
    FakeSession(FakeResponse(200, {"error": "Model is loading"})),
    FakeSession(FakeResponse(200, [])),
    FakeSession(FakeResponse(200, [{"generated_text": "wrong key"}])),
    FakeSession(FakeResponse(200, [{"summary_text": "   "}])),
    FakeSession(FakeResponse(200, ValueError("not json"))),
])
def test_failures_fall_back_to_frequency(session, mammals_text, stub_sentiment):
    result = make_bart(session, stub_sentiment).summarize(mammals_text, 2)
    primary = FrequencySummarizer(sentiment_analyzer=stub_sentiment).summarize(mammals_text, 2)

    assert len(session.calls) == 1
    assert result.provenance is Provenance.FALLBACK
    assert result.method == "Frequency-Based (Fallback)"
    assert not result.abstractive
    assert result.method != primary.method
    assert result.summary == primary.summary
    assert result.sentences == primary.sentences
    assert result.quality_metrics == primary.quality_metrics


def test_request_summary_raises_service_error(stub_sentiment):
    bart = make_bart(FakeSession(FakeResponse(500, None)), stub_sentiment)
    with pytest.raises(AbstractiveServiceError):
        bart.request_summary("Some document text here.", 2)


def test_empty_document_skips_the_service(stub_sentiment):
    session = FakeSession(FakeResponse(200, [{"summary_text": GENERATED}]))
    result = make_bart(session, stub_sentiment).summarize("   ", 2)
    assert session.calls == []
    assert result.is_fallback
    assert result.summary == ""


def test_rejects_non_positive_sentence_count(mammals_text, stub_sentiment):
    with pytest.raises(ValueError):
        make_bart(FakeSession(), stub_sentiment).summarize(mammals_text, 0)


def test_factory_creates_bart(stub_sentiment):
    bart = SummarizerFactory.create_abstractive_summarizer(
        "bart", session=FakeSession(), sentiment_analyzer=stub_sentiment)
    assert isinstance(bart, BARTSummarizer)
    assert bart.get_metadata()["type"] == "abstractive"
    assert bart.get_metadata()["model_name"] == "facebook/bart-large-cnn"
    assert BARTSummarizer.length_range(2) == (20, 80)
