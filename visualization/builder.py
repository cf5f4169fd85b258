# visualization/builder.py
"""
Derives lightweight visualization data from a ranking run:
a bounded sentence-similarity graph and keyword-based topic clusters.
"""

from collections import Counter
from typing import List, Optional, Sequence

import networkx as nx
import numpy as np

import config
from summarizer.result import SentenceNode, TopicCluster, VisualizationData
from summarizer.text_processing import build_similarity_matrix, extract_words, truncate


class VisualizationBuilder:
    """
    Builds the sentence graph and topic clusters for one SummaryResult.

    The graph keeps only the highest scoring sentences so that layout cost
    stays bounded, and connects them only to each other.
    """

    def __init__(self, sentiment_analyzer, max_nodes: int = config.MAX_GRAPH_NODES,
                 edge_threshold: float = config.EDGE_THRESHOLD,
                 seed: Optional[int] = config.CENTROID_SEED):
        """
        Args:
            sentiment_analyzer: Object with analyze(text) -> SentimentResult
            max_nodes: Maximum number of sentences in the graph
            edge_threshold: Similarities must exceed this to become edges
            seed: Seed for placeholder cluster centroids
        """
        self.sentiment_analyzer = sentiment_analyzer
        self.max_nodes = max_nodes
        self.edge_threshold = edge_threshold
        self.seed = seed

    def build(self, sentences: List[str], scores: Sequence[float],
              similarity_matrix: Optional[np.ndarray] = None) -> VisualizationData:
        if similarity_matrix is None:
            similarity_matrix = build_similarity_matrix(sentences)
        return VisualizationData(
            sentence_graph=self.build_sentence_graph(sentences, scores, similarity_matrix),
            topic_clusters=self.build_topic_clusters(sentences),
        )

    def select_nodes(self, scores: Sequence[float]) -> List[int]:
        """Indices of the top scoring sentences, returned in document order."""
        ranked = sorted(range(len(scores)), key=lambda i: (-scores[i], i))
        return sorted(ranked[:self.max_nodes])

    def to_graph(self, sentences: List[str], scores: Sequence[float],
                 similarity_matrix: np.ndarray) -> nx.Graph:
        graph = nx.Graph()
        selected = self.select_nodes(scores)
        for i in selected:
            graph.add_node(i, text=sentences[i], score=float(scores[i]))

        for pos, i in enumerate(selected):
            for j in selected[pos + 1:]:
                weight = float(similarity_matrix[i][j])
                if weight > self.edge_threshold:
                    graph.add_edge(i, j, weight=weight)
        return graph

    def build_sentence_graph(self, sentences: List[str], scores: Sequence[float],
                             similarity_matrix: np.ndarray) -> List[SentenceNode]:
        graph = self.to_graph(sentences, scores, similarity_matrix)

        nodes = []
        for i in sorted(graph.nodes):
            text = graph.nodes[i]["text"]
            connections = [
                (f"sentence-{j}", graph.edges[i, j]["weight"])
                for j in sorted(graph.neighbors(i))
            ]
            nodes.append(SentenceNode(
                id=f"sentence-{i}",
                text=truncate(text, config.NODE_PREVIEW_LENGTH),
                score=graph.nodes[i]["score"],
                sentiment=self.sentiment_analyzer.analyze(text).comparative,
                connections=connections,
            ))
        return nodes

    def build_topic_clusters(self, sentences: List[str]) -> List[TopicCluster]:
        """
        Group the most frequent keywords and collect the sentences mentioning them.

        Keywords are partitioned; sentences are not, so one sentence can sit
        in several clusters. Centroids are layout placeholders only.
        """
        word_freq = Counter()
        for sentence in sentences:
            word_freq.update(extract_words(sentence, min_length=config.CLUSTER_MIN_WORD_LENGTH))
        top_words = [word for word, _ in word_freq.most_common(config.TOP_KEYWORDS)]

        rng = np.random.default_rng(self.seed)
        per_cluster = config.KEYWORDS_PER_CLUSTER
        n_clusters = min(config.MAX_CLUSTERS, -(-len(top_words) // per_cluster))

        clusters = []
        for i in range(n_clusters):
            keywords = top_words[i * per_cluster:(i + 1) * per_cluster]
            members = [s for s in sentences
                       if any(keyword in s.lower() for keyword in keywords)]
            if not members:
                continue
            x, y = rng.uniform(0, 100, size=2)
            clusters.append(TopicCluster(
                id=f"cluster-{i}",
                keywords=keywords,
                sentences=[s[:config.CLUSTER_PREVIEW_LENGTH] + "..." for s in members],
                centroid=(float(x), float(y)),
                color=config.CLUSTER_COLORS[i % len(config.CLUSTER_COLORS)],
            ))
        return clusters
