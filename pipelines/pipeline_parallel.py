"""
pipelines/pipeline_parallel.py

Runs every configured summarization method over one document.
- All methods receive the same text and sentence count and share no state
- Methods can run one after another or side by side in a thread pool;
  the results are identical either way
- The abstractive method absorbs its own network failures via its fallback
- Produces per-method results, a cross-method assessment and document analytics
"""

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, List

import config
from evaluation.analytics import analyze_document
from evaluation.assessment import assess
from evaluation.quality import QualityEvaluator
from evaluation.sentiment import SentimentAnalyzer
from summarizer.result import SummaryResult
from summarizer.summarizer_factory import SummarizerFactory
from utils.common import save_json
from visualization.builder import VisualizationBuilder


@dataclass
class PipelineReport:
    display_name: str
    sentences_count: int
    results: List[SummaryResult] = field(default_factory=list)
    assessment: Dict[str, Any] = field(default_factory=dict)
    analytics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self):
        return {
            'display_name': self.display_name,
            'sentences_count': self.sentences_count,
            'results': [r.to_dict() for r in self.results],
            'assessment': self.assessment,
            'analytics': self.analytics
        }


class ParallelPipeline:
    def __init__(self, methods=None, sentences_count=config.DEFAULT_SENTENCES_COUNT,
                 parallel=False, segmenter=config.DEFAULT_SEGMENTER, centroid_seed=config.CENTROID_SEED,
                 method_options=None):
        """
        Initialize the pipeline with configurable methods and parameters.

        Args:
            methods: Method names to run, in report order
            sentences_count: Number of sentences requested from every method
            parallel: Run methods in a thread pool instead of sequentially
            segmenter: Sentence segmenter shared by all methods
            centroid_seed: Seed for placeholder cluster centroids
            method_options: Extra constructor arguments per method name
        """
        if sentences_count < 1:
            raise ValueError(f"sentences_count must be at least 1, got {sentences_count}")
        self.methods = [m.lower() for m in (methods or config.DEFAULT_METHODS)]
        self.sentences_count = sentences_count
        self.parallel = parallel

        sentiment_analyzer = SentimentAnalyzer()
        shared = {
            'sentiment_analyzer': sentiment_analyzer,
            'quality_evaluator': QualityEvaluator(sentiment_analyzer),
            'visualization_builder': VisualizationBuilder(sentiment_analyzer, seed=centroid_seed),
            'segmenter': segmenter
        }
        method_options = method_options or {}
        self.summarizers = {
            name: SummarizerFactory.create_summarizer(name, **shared, **method_options.get(name, {}))
            for name in self.methods
        }

    def _run_method(self, name, content):
        return self.summarizers[name].summarize(content, self.sentences_count)

    def summarize_all(self, content):
        """
        Run every method on the same text.

        Returns:
            List of SummaryResult in configured method order
        """
        if self.parallel and len(self.methods) > 1:
            with ThreadPoolExecutor(max_workers=len(self.methods)) as executor:
                futures = [executor.submit(self._run_method, name, content)
                           for name in self.methods]
                return [future.result() for future in futures]
        return [self._run_method(name, content) for name in self.methods]

    def run(self, content, display_name='document', outdir=None):
        """
        Summarize one document with every method.

        Args:
            content: Document text, accepted as-is
            display_name: Name of the document for the report
            outdir: If given, the report is also written there as JSON

        Returns:
            PipelineReport
        """
        print(f"🔄 Summarizing '{display_name}' with {', '.join(self.methods)}")
        try:
            results = self.summarize_all(content)
        except Exception as e:
            print(f"❌ Error processing '{display_name}': {e}")
            raise

        for result in results:
            marker = '⚠️' if result.is_fallback else '✅'
            print(f"{marker} {result.method}: {len(result.sentences)} sentences "
                  f"in {result.processing_time:.1f} ms")

        report = PipelineReport(
            display_name=display_name,
            sentences_count=self.sentences_count,
            results=results,
            assessment=assess(results),
            analytics=analyze_document(content, results)
        )

        if outdir:
            base = os.path.splitext(os.path.basename(display_name))[0] or 'document'
            output_path = os.path.join(outdir, f"{base}_summaries.json")
            save_json(report.to_dict(), output_path)
            print(f"Results saved to {output_path}")

        return report
