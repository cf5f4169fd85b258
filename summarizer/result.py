# summarizer/result.py
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


class Provenance(Enum):
    """Whether a result came from the requested method or its local fallback."""
    PRIMARY = "primary"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class SentimentResult:
    score: float
    comparative: float
    positive: List[str] = field(default_factory=list)
    negative: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class QualityMetrics:
    coverage: float
    coherence: float
    diversity: float
    confidence: float
    sentiment: SentimentResult


@dataclass(frozen=True)
class SentenceNode:
    id: str
    text: str
    score: float
    sentiment: float
    connections: List[Tuple[str, float]] = field(default_factory=list)


@dataclass(frozen=True)
class TopicCluster:
    id: str
    keywords: List[str]
    sentences: List[str]
    centroid: Tuple[float, float]
    color: str


@dataclass(frozen=True)
class VisualizationData:
    sentence_graph: List[SentenceNode] = field(default_factory=list)
    topic_clusters: List[TopicCluster] = field(default_factory=list)


@dataclass(frozen=True)
class SummaryResult:
    """
    Everything one summarization method produced for one document.

    Attributes:
        method: Display name of the method (e.g. "TextRank")
        summary: Final summary text
        sentences: Selected sentences in document order
        processing_time: Wall-clock time in milliseconds
        quality_metrics: Coverage, coherence, diversity, confidence and sentiment
        visualization_data: Sentence graph and topic clusters
        provenance: PRIMARY, or FALLBACK when a local method stood in
        abstractive: True when the summary text was generated rather than extracted
    """
    method: str
    summary: str
    sentences: List[str]
    processing_time: float
    quality_metrics: QualityMetrics
    visualization_data: VisualizationData
    provenance: Provenance = Provenance.PRIMARY
    abstractive: bool = False

    @property
    def is_fallback(self) -> bool:
        return self.provenance is Provenance.FALLBACK

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation"""
        data = asdict(self)
        data["provenance"] = self.provenance.value
        for node in data["visualization_data"]["sentence_graph"]:
            node["connections"] = [
                {"target": target, "weight": weight}
                for target, weight in node["connections"]
            ]
        for cluster in data["visualization_data"]["topic_clusters"]:
            cluster["centroid"] = list(cluster["centroid"])
        return data
