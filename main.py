"""
main.py

Command line entry point: summarize a text document with every method,
print a comparison and save the full report as JSON.
"""

import argparse
import os

import config
from evaluation.plotter import Plotter
from pipelines.pipeline_parallel import ParallelPipeline
from utils.common import Config, add_pipeline_args, ensure_dir, read_text_file

METHOD_OPTION_KEYS = ('textrank', 'lexrank', 'frequency', 'bart')


def build_pipeline(args, settings):
    """Merge command line arguments over the config file over config.py defaults."""
    methods = args.methods or settings.get('methods', config.DEFAULT_METHODS)
    if args.no_abstractive:
        methods = [m for m in methods if m != 'bart']

    method_options = {key: settings.get(key) for key in METHOD_OPTION_KEYS
                      if settings.get(key)}

    return ParallelPipeline(
        methods=methods,
        sentences_count=args.sentences or settings.get('sentences', config.DEFAULT_SENTENCES_COUNT),
        parallel=args.parallel or settings.get('parallel', False),
        segmenter=args.segmenter or settings.get('segmenter', config.DEFAULT_SEGMENTER),
        centroid_seed=settings.get('centroid_seed', config.CENTROID_SEED),
        method_options=method_options
    )


def print_report(report):
    print(f"\n==== Summaries for {report.display_name} ====")
    for result in report.results:
        metrics = result.quality_metrics
        summary = result.summary
        if len(summary) > config.SUMMARY_DISPLAY_LENGTH:
            summary = summary[:config.SUMMARY_DISPLAY_LENGTH] + '...'
        print(f"\n--- {result.method} ({result.processing_time:.1f} ms) ---")
        print(summary)
        print(f"coverage={metrics.coverage:.2f} coherence={metrics.coherence:.2f} "
              f"diversity={metrics.diversity:.2f} confidence={metrics.confidence:.2f} "
              f"sentiment={metrics.sentiment.comparative:+.2f}")

    agreement = report.assessment['agreement']
    print(f"\nOverall agreement: {agreement['overall_agreement']:.2f} "
          f"(consensus {agreement['consensus_strength']:.2f})")
    for area in agreement['disagreement_areas']:
        print(f"  - {area}")

    indicators = report.assessment['quality_indicators']
    print(f"Consistency score: {indicators['consistency_score']:.2f}")
    for entry in indicators['method_confidence']:
        print(f"  {entry['method']}: {entry['confidence']:.2f} ({entry['reliability']}) "
              f"- {'; '.join(entry['issues'])}")

    analytics = report.analytics
    print(f"\nWords: {analytics['total_words']}  Sentences: {analytics['total_sentences']}  "
          f"Vocabulary: {analytics['vocabulary_size']}  Readability: {analytics['readability_score']}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Summarize a document with TextRank, LexRank, frequency and BART methods')
    add_pipeline_args(parser)
    args = parser.parse_args(argv)

    settings = Config(args.config) if args.config else Config()
    outdir = args.outdir or settings.get('outdir', config.DEFAULT_OUTPUT_DIR)
    ensure_dir(outdir)

    content = read_text_file(args.input)
    pipeline = build_pipeline(args, settings)
    report = pipeline.run(content, display_name=os.path.basename(args.input), outdir=outdir)
    print_report(report)

    if args.plot:
        base = os.path.splitext(os.path.basename(args.input))[0] or 'document'
        Plotter().plot_quality_metrics(
            report.results, output_png=os.path.join(outdir, f"{base}_quality.png"),
            title=f"Summarization Quality: {report.display_name}")

    return report


if __name__ == '__main__':
    main()
