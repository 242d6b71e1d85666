"""
Visualization utilities for the diabetes GLM analysis
"""

import os
from contextlib import contextmanager

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from .config import OUTCOME_COLUMN, PREDICTOR_COLUMNS, PlotStyle


class Visualizer:
    """Saves evaluation and exploratory plots; style is passed in, never set globally"""

    def __init__(self, style=None):
        self.style = style if style is not None else PlotStyle()

    @contextmanager
    def _styled(self):
        with sns.axes_style(self.style.style), \
                sns.plotting_context(self.style.context), \
                sns.color_palette(self.style.palette):
            yield

    def _save(self, fig, results_dir, filename):
        os.makedirs(results_dir, exist_ok=True)
        path = os.path.join(results_dir, filename)
        fig.savefig(path, dpi=self.style.dpi, bbox_inches='tight')
        plt.close(fig)
        return path

    def plot_roc_curve(self, roc, auc=None, results_dir="results", filename='roc_curve.png'):
        """ROC curve (FPR vs TPR) with the chance diagonal"""
        points = roc.to_frame()
        label = f"Logistic regression (AUC = {auc:.3f})" if auc is not None else "Logistic regression"

        with self._styled():
            fig, ax = plt.subplots(figsize=self.style.figsize)
            ax.plot(points['fpr'], points['tpr'], linewidth=2, label=label)
            ax.plot([0, 1], [0, 1], linestyle='--', color='gray', label='Chance')
            ax.set_xlim(0, 1)
            ax.set_ylim(0, 1.01)
            ax.set_aspect('equal')
            ax.set_xlabel('False positive rate (1 - specificity)')
            ax.set_ylabel('True positive rate (sensitivity)')
            ax.set_title('ROC Curve')
            ax.legend(loc='lower right')
            path = self._save(fig, results_dir, filename)

        print("ROC curve plot saved")
        return path

    def plot_confusion_matrix(self, confusion, results_dir="results", filename='confusion_matrix.png'):
        """Annotated heatmap of a truth x prediction count table"""
        with self._styled():
            fig, ax = plt.subplots(figsize=(6, 5))
            sns.heatmap(confusion, annot=True, fmt='d', cmap=self.style.cmap, cbar=False, ax=ax)
            ax.set_ylabel('True Label')
            ax.set_xlabel('Predicted Label')
            ax.set_title('Confusion Matrix')
            path = self._save(fig, results_dir, filename)

        print("Confusion matrix plot saved")
        return path

    def plot_odds_ratios(self, odds_ratios, results_dir="results", filename='odds_ratios.png'):
        """Odds ratio per predictor with its confidence interval (log scale)"""
        table = odds_ratios[odds_ratios['term'] != 'Intercept']
        table = table.replace([np.inf, -np.inf], np.nan).dropna(subset=['estimate'])
        table = table.sort_values('estimate')

        with self._styled():
            fig, ax = plt.subplots(figsize=self.style.figsize)
            y = np.arange(len(table))
            ax.errorbar(table['estimate'], y,
                        xerr=[table['estimate'] - table['conf_low'],
                              table['conf_high'] - table['estimate']],
                        fmt='o', capsize=4)
            ax.axvline(1.0, linestyle='--', color='gray')
            ax.set_yticks(y)
            ax.set_yticklabels(table['term'])
            ax.set_xscale('log')
            ax.set_xlabel('Odds ratio (log scale)')
            ax.set_title('Odds Ratios with Confidence Intervals')
            path = self._save(fig, results_dir, filename)

        print("Odds ratio plot saved")
        return path

    def plot_predictor_distributions(self, df, results_dir="results",
                                     filename='predictor_distributions.png'):
        """Box plot of each predictor split by outcome"""
        with self._styled():
            fig, axes = plt.subplots(2, 4, figsize=(20, 9))
            for ax, col in zip(axes.flat, PREDICTOR_COLUMNS):
                sns.boxplot(data=df, x=OUTCOME_COLUMN, y=col, hue=OUTCOME_COLUMN,
                            legend=False, ax=ax)
                ax.set_title(col.replace('_', ' ').title())
                ax.set_xlabel('')
            fig.tight_layout()
            path = self._save(fig, results_dir, filename)

        print("Predictor distribution plot saved")
        return path
