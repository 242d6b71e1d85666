"""
Data loading utilities for the diabetes GLM analysis
"""

import os

import pandas as pd

from .config import (ALTERNATE_COLUMN_NAMES, DEFAULT_DATA_PATH, NEGATIVE_LABEL,
                     OUTCOME_COLUMN, POSITIVE_LABEL, REQUIRED_COLUMNS)
from .exceptions import DataError


CSV_SUFFIXES = ('.csv', '.txt', '.data')
EXCEL_SUFFIXES = ('.xlsx', '.xls')


def _looks_numeric(value):
    try:
        float(value)
    except (TypeError, ValueError):
        return False
    return True


class DataLoader:
    """Handles loading and initial exploration of the tabular data file"""

    def __init__(self, data_path=DEFAULT_DATA_PATH):
        self.data_path = data_path

    def _read(self, **kwargs):
        if not os.path.exists(self.data_path):
            raise DataError('load', f"data file not found: {self.data_path}")

        suffix = os.path.splitext(self.data_path)[1].lower()
        if suffix in EXCEL_SUFFIXES:
            return pd.read_excel(self.data_path, **kwargs)
        if suffix in CSV_SUFFIXES:
            return pd.read_csv(self.data_path, **kwargs)
        raise DataError('load', f"unsupported file format '{suffix}' for {self.data_path}")

    def explore_structure(self):
        """Explore the structure of the data file"""
        print("=== Data File Structure Analysis ===")

        df_raw = self._read()
        print(f"File: {self.data_path}")
        print(f"Raw shape: {df_raw.shape}")
        print(f"Columns: {list(df_raw.columns)}")
        print("First 5 rows:")
        print(df_raw.head())

        return {
            'shape': df_raw.shape,
            'columns': list(df_raw.columns),
            'dtypes': df_raw.dtypes.astype(str).to_dict(),
        }

    def load(self):
        """Load the file and normalise it to the nine canonical columns"""
        print(f"\nLoading {self.data_path}...")

        df = self._read()

        # Headerless UCI export: the "header" is actually the first record
        if len(df.columns) == len(REQUIRED_COLUMNS) and all(_looks_numeric(c) for c in df.columns):
            df = self._read(header=None, names=REQUIRED_COLUMNS)

        df = self.standardize_columns(df)

        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise DataError('load', f"missing required columns: {missing}")

        df = df[REQUIRED_COLUMNS].copy()
        df[OUTCOME_COLUMN] = self.standardize_outcome(df[OUTCOME_COLUMN])

        print(f"Loaded {len(df)} observations")
        return df

    @staticmethod
    def standardize_columns(df):
        """Rename alternate headers to the canonical column names"""
        renamed = df.rename(columns=ALTERNATE_COLUMN_NAMES)
        # Header matching is case-insensitive for the canonical names
        lower_map = {col: col.strip().lower() for col in renamed.columns
                     if isinstance(col, str) and col.strip().lower() in REQUIRED_COLUMNS}
        return renamed.rename(columns=lower_map)

    @staticmethod
    def standardize_outcome(outcome):
        """Map a numeric 0/1 outcome to neg/pos; leave text labels alone"""
        numeric = pd.to_numeric(outcome, errors='coerce')
        if numeric.notna().sum() == outcome.notna().sum() and numeric.dropna().isin([0, 1]).all():
            mapped = numeric.map({0: NEGATIVE_LABEL, 1: POSITIVE_LABEL})
            return mapped.astype(object)
        return outcome
