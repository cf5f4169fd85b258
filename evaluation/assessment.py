"""
evaluation/assessment.py

Cross-method quality assessment over a set of SummaryResults.
- Agreement analysis: how similar the methods' summaries are to each other
- Quality indicators: per-method adjusted confidence, reliability and issues
- Consistency score and outlier detection across methods
"""

from itertools import combinations

from summarizer.text_processing import cosine_similarity

BART_MIN_SUMMARY_CHARS = 50
SLOW_PROCESSING_MS = 5000
OUTLIER_DEVIATION = 0.2


def jaccard_similarity(sentences_a, sentences_b):
    """Overlap of two sentence sets, ignoring case and surrounding whitespace."""
    set_a = {s.lower().strip() for s in sentences_a}
    set_b = {s.lower().strip() for s in sentences_b}
    union = set_a | set_b
    return len(set_a & set_b) / len(union) if union else 0.0


def _level(value, high, medium):
    if value > high:
        return 'high'
    if value > medium:
        return 'medium'
    return 'low'


def analyze_agreement(results):
    """
    Compare every pair of results.
    :param results: List of SummaryResult
    :return: dict with overall_agreement, pairwise_agreements, consensus_strength, disagreement_areas
    """
    if len(results) < 2:
        return {
            'overall_agreement': 0.0,
            'pairwise_agreements': [],
            'consensus_strength': 0.0,
            'disagreement_areas': ['Insufficient methods for comparison']
        }

    pairwise = []
    total = 0.0
    for first, second in combinations(results, 2):
        text_similarity = cosine_similarity(first.summary, second.summary)
        sentence_similarity = jaccard_similarity(first.sentences, second.sentences)
        similarity = (text_similarity + sentence_similarity) / 2
        pairwise.append({
            'methods': [first.method, second.method],
            'similarity': round(similarity, 2),
            'confidence': _level(similarity, 0.7, 0.4)
        })
        total += similarity

    overall = total / len(pairwise)

    disagreement_areas = []
    low_pairs = [p for p in pairwise if p['confidence'] == 'low']
    if low_pairs:
        disagreement_areas.append('Low agreement between ' + ', '.join(
            ' vs '.join(p['methods']) for p in low_pairs))
    if overall < 0.3:
        disagreement_areas.append('Methods produce significantly different summaries')

    high_pairs = sum(1 for p in pairwise if p['confidence'] == 'high')

    return {
        'overall_agreement': round(overall, 2),
        'pairwise_agreements': pairwise,
        'consensus_strength': round(high_pairs / len(pairwise), 2),
        'disagreement_areas': disagreement_areas or ['No significant disagreements detected']
    }


def assess_result(result):
    """
    Adjust one result's confidence for known weaknesses.
    :param result: SummaryResult
    :return: dict with method, confidence, reliability, issues
    """
    metrics = result.quality_metrics
    confidence = metrics.confidence
    issues = []

    if metrics.coverage < 0.5:
        issues.append('Low content coverage')
        confidence *= 0.8
    if metrics.coherence < 0.4:
        issues.append('Poor sentence coherence')
        confidence *= 0.9
    if metrics.diversity < 0.3:
        issues.append('Limited vocabulary diversity')
        confidence *= 0.95
    if result.processing_time > SLOW_PROCESSING_MS:
        issues.append('Unusually long processing time')
    if result.abstractive and len(result.summary) < BART_MIN_SUMMARY_CHARS:
        issues.append('Unusually short BART summary')
        confidence *= 0.9
    if result.is_fallback:
        issues.append('API fallback mode used')
        confidence *= 0.7

    return {
        'method': result.method,
        'confidence': round(confidence, 2),
        'reliability': _level(confidence, 0.7, 0.5),
        'issues': issues or ['No issues detected']
    }


def analyze_quality_indicators(results):
    """
    Per-method confidence plus consistency across methods.
    :param results: List of SummaryResult
    :return: dict with method_confidence, consistency_score, outlier_detection
    """
    method_confidence = [assess_result(r) for r in results]
    if not method_confidence:
        return {'method_confidence': [], 'consistency_score': 0.0, 'outlier_detection': []}

    values = [m['confidence'] for m in method_confidence]
    mean = sum(values) / len(values)
    variance = sum((v - mean) ** 2 for v in values) / len(values)

    outliers = []
    for m in method_confidence:
        deviation = abs(m['confidence'] - mean)
        outliers.append({
            'method': m['method'],
            'is_outlier': deviation > OUTLIER_DEVIATION,
            'deviation': round(deviation, 2)
        })

    return {
        'method_confidence': method_confidence,
        'consistency_score': round(max(0.0, 1 - variance), 2),
        'outlier_detection': outliers
    }


def assess(results):
    """Full assessment: agreement analysis plus quality indicators."""
    return {
        'agreement': analyze_agreement(results),
        'quality_indicators': analyze_quality_indicators(results)
    }
