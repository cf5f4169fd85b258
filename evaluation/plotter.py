"""
plotter.py

Comparison charts for summarization results.
- One panel per quality metric, one bar per method
- Fallback results are drawn in a distinct color
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np


class Plotter:
    def __init__(self, font_size=12):
        self.font_size = font_size
        self.primary_color = '#3B82F6'
        self.fallback_color = '#95A5A6'

    def plot_quality_metrics(self, results, output_png='quality_metrics.png',
                             title='Summarization Quality Comparison'):
        """
        Draws four subplots for coverage, coherence, diversity and confidence.

        Args:
            results: List of SummaryResult
            output_png: Output filename for the chart
            title: Main title for the chart
        """
        metrics = [
            ('coverage', 'Coverage'),
            ('coherence', 'Coherence'),
            ('diversity', 'Diversity'),
            ('confidence', 'Confidence')
        ]
        method_names = [r.method for r in results]
        colors = [self.fallback_color if r.is_fallback else self.primary_color
                  for r in results]
        n_methods = len(method_names)
        x = np.arange(n_methods)
        bar_width = 0.65 if n_methods <= 4 else 0.5
        fig_width = max(2.5 * n_methods, 10)
        fig, axs = plt.subplots(2, 2, figsize=(fig_width, 8))
        fig.suptitle(title, fontsize=self.font_size+6)

        for i, (metric, ylabel) in enumerate(metrics):
            row, col = i // 2, i % 2
            ax = axs[row, col]
            values = [getattr(r.quality_metrics, metric) for r in results]
            ax.bar(x, values, width=bar_width, color=colors)
            ax.set_title(ylabel, fontsize=self.font_size+2)
            ax.set_ylabel('Score', fontsize=self.font_size)
            ax.set_ylim(0, max([1.05] + [v + 0.1 for v in values]))
            for idx, v in enumerate(values):
                ax.text(idx, v + 0.01, f'{v:.2f}',
                        ha='center', fontsize=self.font_size-2)
            ax.set_xticks(x)
            ax.set_xticklabels(
                method_names, fontsize=self.font_size+1, rotation=20 if n_methods > 3 else 0)
            ax.tick_params(axis='y', labelsize=self.font_size)
            for spine in ax.spines.values():
                spine.set_linewidth(0.8)

        plt.tight_layout(rect=[0, 0, 1, 0.96])
        plt.savefig(output_png, dpi=150)
        plt.close(fig)
        print(f"Plot saved to {output_png}")
        return output_png
