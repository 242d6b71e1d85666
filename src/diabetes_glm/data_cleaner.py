"""
Data cleaning utilities for the diabetes GLM analysis
"""

import numpy as np
import pandas as pd

from .config import (OUTCOME_COLUMN, PREDICTOR_COLUMNS, REQUIRED_COLUMNS,
                     ZERO_AS_MISSING_COLUMNS, ReferenceLevel)
from .data_loader import DataLoader
from .exceptions import DataError


class DataCleaner:
    """Complete-case cleaning and outcome re-levelling"""

    def __init__(self, reference_level=ReferenceLevel.POSITIVE, zero_as_missing=False):
        self.reference_level = reference_level
        self.zero_as_missing = zero_as_missing

    @staticmethod
    def standardize_label(label):
        """Normalise an outcome label ('POS ', 'Neg') to lower-case text"""
        if pd.isna(label):
            return np.nan
        label_str = str(label).strip().lower()
        if label_str in ('', 'nan', 'na'):
            return np.nan
        return label_str

    @staticmethod
    def relevel_outcome(outcome, reference_level):
        """Return the outcome as a categorical with the reference level first"""
        return pd.Categorical(outcome, categories=reference_level.levels)

    def clean_dataset(self, df):
        """Drop every observation with a missing value in any column"""
        print("=== Data Cleaning ===")

        missing_cols = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing_cols:
            raise DataError('clean', f"missing required columns: {missing_cols}")

        df_clean = df[REQUIRED_COLUMNS].copy()

        for col in PREDICTOR_COLUMNS:
            df_clean[col] = pd.to_numeric(df_clean[col], errors='coerce')

        if self.zero_as_missing:
            df_clean[ZERO_AS_MISSING_COLUMNS] = df_clean[ZERO_AS_MISSING_COLUMNS].replace(0, np.nan)

        # Infinite measurements are rejected the same way as missing ones
        df_clean[PREDICTOR_COLUMNS] = df_clean[PREDICTOR_COLUMNS].replace([np.inf, -np.inf], np.nan)

        outcome = DataLoader.standardize_outcome(df_clean[OUTCOME_COLUMN].astype(object))
        df_clean[OUTCOME_COLUMN] = outcome.map(self.standardize_label)
        known = set(self.reference_level.levels)
        unknown = sorted(set(df_clean[OUTCOME_COLUMN].dropna()) - known)
        if unknown:
            raise DataError('clean', f"unknown outcome labels {unknown}; expected {sorted(known)}")

        n_before = len(df_clean)
        df_clean = df_clean.dropna(how='any')
        df_clean[OUTCOME_COLUMN] = self.relevel_outcome(df_clean[OUTCOME_COLUMN], self.reference_level)

        print(f"Dropped {n_before - len(df_clean)} incomplete observations")
        print(f"Cleaned dataset: {len(df_clean)} observations")
        return df_clean

    def generate_quality_report(self, df):
        """Generate a data quality report for a raw or cleaned frame"""
        report = []
        report.append("=== DATA QUALITY REPORT ===\n")

        report.append(f"Total observations: {len(df)}")
        report.append("Outcome distribution:")
        for outcome, count in df[OUTCOME_COLUMN].value_counts(dropna=False).items():
            report.append(f"  {outcome}: {count}")

        report.append("\n=== MISSING DATA ANALYSIS ===")
        for col in REQUIRED_COLUMNS:
            if col in df.columns:
                missing_count = df[col].isnull().sum()
                missing_pct = (missing_count / len(df)) * 100 if len(df) else 0.0
                report.append(f"{col}: {missing_count} missing ({missing_pct:.1f}%)")

        complete_rows = df.dropna(how='any').shape[0]
        report.append(f"\nComplete observations: {complete_rows}/{len(df)}")

        return '\n'.join(report)
