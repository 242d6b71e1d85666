"""
Descriptive statistics comparing predictors across outcome groups
"""

import numpy as np
import pandas as pd
from scipy import stats

from .config import NEGATIVE_LABEL, OUTCOME_COLUMN, POSITIVE_LABEL, PREDICTOR_COLUMNS


class StatisticalAnalyzer:
    """Statistical analysis utilities"""

    def __init__(self, df, predictors=None):
        self.df = df
        self.predictors = predictors if predictors is not None else PREDICTOR_COLUMNS

    def predictor_summary(self):
        """Per-outcome summary statistics of every predictor"""
        print("=== PREDICTOR SUMMARY BY OUTCOME ===")

        # rows: (predictor, statistic), columns: outcome
        summary = self.df.groupby(OUTCOME_COLUMN, observed=True)[self.predictors].describe().T
        print(summary.round(2))
        return summary

    def compare_groups(self):
        """Welch t-test and Mann-Whitney U for each predictor, pos vs neg"""
        print("\n=== GROUP COMPARISONS (pos vs neg) ===")

        pos = self.df[self.df[OUTCOME_COLUMN] == POSITIVE_LABEL]
        neg = self.df[self.df[OUTCOME_COLUMN] == NEGATIVE_LABEL]

        rows = []
        for col in self.predictors:
            pos_values = pos[col].dropna()
            neg_values = neg[col].dropna()

            row = {
                'predictor': col,
                'mean_pos': pos_values.mean(),
                'mean_neg': neg_values.mean(),
                't_statistic': np.nan,
                't_pvalue': np.nan,
                'u_statistic': np.nan,
                'u_pvalue': np.nan,
            }

            if len(pos_values) > 1 and len(neg_values) > 1:
                ttest = stats.ttest_ind(pos_values, neg_values, equal_var=False)
                mannwhitney = stats.mannwhitneyu(pos_values, neg_values, alternative='two-sided')
                row.update({
                    't_statistic': ttest.statistic,
                    't_pvalue': ttest.pvalue,
                    'u_statistic': mannwhitney.statistic,
                    'u_pvalue': mannwhitney.pvalue,
                })
                print(f"{col}: t={ttest.statistic:.3f}, p={ttest.pvalue:.6f}; "
                      f"U={mannwhitney.statistic:.1f}, p={mannwhitney.pvalue:.6f}")
            else:
                print(f"{col}: not enough observations in both groups")

            rows.append(row)

        return pd.DataFrame(rows)

    def correlation_matrix(self):
        """Pearson correlation between predictors"""
        return self.df[self.predictors].corr()
