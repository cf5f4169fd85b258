import numpy as np
import pytest

from evaluation.quality import QualityEvaluator
from summarizer import (
    FrequencySummarizer, LexRankSummarizer, Provenance, SummarizerFactory,
    TextRankSummarizer)
from summarizer.text_processing import segment_sentences

EXTRACTIVE_METHODS = ["textrank", "lexrank", "frequency"]


@pytest.fixture(params=EXTRACTIVE_METHODS)
def extractive(request, stub_sentiment):
    return SummarizerFactory.create_extractive_summarizer(
        request.param, sentiment_analyzer=stub_sentiment)


def test_frequency_favors_repeated_terms(mammals_text, stub_sentiment):
    result = FrequencySummarizer(sentiment_analyzer=stub_sentiment).summarize(mammals_text, 2)
    assert result.method == "Frequency-Based"
    assert result.sentences == ["Cats are mammals", "Mammals nurse their young"]
    assert result.summary == "Cats are mammals. Mammals nurse their young."
    assert result.provenance is Provenance.PRIMARY


def test_frequency_scores_are_mean_frequency(mammals_text, stub_sentiment):
    summarizer = FrequencySummarizer(sentiment_analyzer=stub_sentiment)
    sentences = segment_sentences(mammals_text)
    scores, matrix = summarizer.score_sentences(sentences, mammals_text)
    # mammals appears 3 times, every other long word once
    assert scores == pytest.approx([4 / 3, 1.0, 1 / 3, 0.75, 1.5])
    assert matrix.shape == (5, 5)


def test_frequency_fallback_is_tagged(mammals_text, stub_sentiment):
    summarizer = FrequencySummarizer(sentiment_analyzer=stub_sentiment)
    primary = summarizer.summarize(mammals_text, 2)
    fallback = summarizer.summarize_fallback(mammals_text, 2)
    assert fallback.method != primary.method
    assert fallback.is_fallback and not primary.is_fallback
    assert fallback.summary == primary.summary
    assert fallback.quality_metrics == primary.quality_metrics


def test_short_document_returns_every_sentence(extractive, three_sentence_text):
    result = extractive.summarize(three_sentence_text, 5)
    sentences = segment_sentences(three_sentence_text)
    assert result.sentences == sentences
    assert result.summary == ". ".join(sentences) + "."


def test_short_document_uses_pairwise_coherence(extractive, three_sentence_text):
    result = extractive.summarize(three_sentence_text, 5)
    expected = round(QualityEvaluator.coherence(segment_sentences(three_sentence_text)), 2)
    assert result.quality_metrics.coherence == expected
    assert expected < 1


def test_empty_document(extractive):
    result = extractive.summarize("", 3)
    assert result.sentences == []
    assert result.summary == ""
    assert result.visualization_data.sentence_graph == []


def test_sentences_stay_in_document_order(extractive, cat_text):
    sentences = segment_sentences(cat_text)
    result = extractive.summarize(cat_text, 2)
    indices = [sentences.index(s) for s in result.sentences]
    assert len(result.sentences) == 2
    assert indices == sorted(indices)


def test_ranking_is_idempotent(extractive, cat_text):
    first = extractive.summarize(cat_text, 2)
    second = extractive.summarize(cat_text, 2)
    assert first.sentences == second.sentences
    assert first.quality_metrics == second.quality_metrics
    sentences = segment_sentences(cat_text)
    scores_a, _ = extractive.score_sentences(sentences, cat_text)
    scores_b, _ = extractive.score_sentences(sentences, cat_text)
    assert np.array_equal(scores_a, scores_b)


def test_rejects_non_positive_sentence_count(extractive, cat_text):
    with pytest.raises(ValueError):
        extractive.summarize(cat_text, 0)


def test_ranked_sentences_best_first(extractive, cat_text):
    ranked = extractive.get_ranked_sentences(cat_text)
    scores = [r["score"] for r in ranked]
    assert scores == sorted(scores, reverse=True)
    assert {r["index"] for r in ranked} == {0, 1, 2, 3}


def test_select_top_indices_breaks_ties_by_position():
    scores = np.array([0.5, 0.9, 0.5, 0.9, 0.1])
    assert TextRankSummarizer.select_top_indices(scores, 3) == [0, 1, 3]


def test_textrank_isolated_sentence_keeps_teleport_score(stub_sentiment):
    matrix = np.array([[0.0, 1.0, 0.0],
                       [1.0, 0.0, 0.0],
                       [0.0, 0.0, 0.0]])
    scores = TextRankSummarizer(sentiment_analyzer=stub_sentiment).rank(matrix)
    assert scores == pytest.approx([1.0, 1.0, 0.15])


def test_textrank_score_flows_along_incoming_edges(stub_sentiment):
    # Hub 0 links to both leaves; each leaf only links back to the hub
    star = np.array([[0.0, 0.5, 0.5],
                     [0.5, 0.0, 0.0],
                     [0.5, 0.0, 0.0]])
    scores = TextRankSummarizer(sentiment_analyzer=stub_sentiment).rank(star)
    assert scores == pytest.approx([1.4593, 0.7703, 0.7703], abs=1e-3)

    one_round = TextRankSummarizer(iterations=1, sentiment_analyzer=stub_sentiment).rank(star)
    assert one_round == pytest.approx([0.15 + 0.85 * 2, 0.15 + 0.85 * 0.5, 0.15 + 0.85 * 0.5])


def test_textrank_skips_unrelated_sentence(cat_text, stub_sentiment):
    result = TextRankSummarizer(sentiment_analyzer=stub_sentiment).summarize(cat_text, 2)
    assert "Quantum physics explains tiny particles" not in result.sentences


def test_textrank_tolerance_stops_early(stub_sentiment):
    matrix = np.array([[0.0, 0.6, 0.2],
                       [0.6, 0.0, 0.4],
                       [0.2, 0.4, 0.0]])
    early = TextRankSummarizer(tolerance=1e9, sentiment_analyzer=stub_sentiment).rank(matrix)
    one_round = TextRankSummarizer(iterations=1, sentiment_analyzer=stub_sentiment).rank(matrix)
    assert np.array_equal(early, one_round)


def test_lexrank_transition_matrix_thresholds_and_normalizes(stub_sentiment):
    summarizer = LexRankSummarizer(sentiment_analyzer=stub_sentiment)
    matrix = np.array([[0.0, 0.5, 0.2],
                       [0.5, 0.0, 0.1],
                       [0.2, 0.1, 0.0]])
    transition = summarizer.transition_matrix(matrix)
    assert transition[0] == pytest.approx([0.0, 0.5 / 0.7, 0.2 / 0.7])
    # 0.1 is not above the threshold and is dropped
    assert transition[1] == pytest.approx([1.0, 0.0, 0.0])
    assert transition[2] == pytest.approx([1.0, 0.0, 0.0])


def test_lexrank_score_flows_along_incoming_edges(stub_sentiment):
    star = np.array([[0.0, 0.5, 0.5],
                     [0.5, 0.0, 0.0],
                     [0.5, 0.0, 0.0]])
    summarizer = LexRankSummarizer(iterations=1, sentiment_analyzer=stub_sentiment)
    transition = summarizer.transition_matrix(star)
    assert transition[1] == pytest.approx([1.0, 0.0, 0.0])
    # Both leaves hand all of their score to the hub
    assert summarizer.rank(transition) == pytest.approx([2 / 3, 1 / 6, 1 / 6])


def test_lexrank_zero_rows_stay_zero(stub_sentiment):
    summarizer = LexRankSummarizer(sentiment_analyzer=stub_sentiment)
    transition = summarizer.transition_matrix(np.array([[0.0, 0.05], [0.05, 0.0]]))
    assert np.array_equal(transition, np.zeros((2, 2)))
    assert np.array_equal(summarizer.rank(transition), np.zeros(2))


def test_lexrank_isolated_sentence_scores_zero(cat_text, stub_sentiment):
    summarizer = LexRankSummarizer(sentiment_analyzer=stub_sentiment)
    sentences = segment_sentences(cat_text)
    scores, _ = summarizer.score_sentences(sentences, cat_text)
    assert scores[3] == 0.0
    assert np.all(scores[:3] > 0)
    assert np.all(np.isfinite(scores))


def test_factory_rejects_unknown_name():
    with pytest.raises(ValueError):
        SummarizerFactory.create_extractive_summarizer("lsa")


def test_factory_metadata(stub_sentiment):
    summarizer = SummarizerFactory.create_summarizer("lexrank", sentiment_analyzer=stub_sentiment)
    assert str(summarizer) == "LexRank (extractive)"
