"""
Stratified train/test partitioning
"""

from sklearn.model_selection import train_test_split

from .config import OUTCOME_COLUMN, RANDOM_SEED, TRAIN_PROPORTION
from .exceptions import DataError


class DataSplitter:
    """Stratified, seeded train/test split"""

    def __init__(self, train_proportion=TRAIN_PROPORTION, random_seed=RANDOM_SEED):
        self.train_proportion = train_proportion
        self.random_seed = random_seed

    def split(self, df, strata=OUTCOME_COLUMN):
        """Partition rows into (train, test) preserving the strata proportions"""
        if strata not in df.columns:
            raise DataError('split', f"stratification column '{strata}' not found")

        counts = df[strata].value_counts()
        counts = counts[counts > 0]
        if len(counts) < 2:
            raise DataError('split', f"need at least two '{strata}' categories to stratify, "
                                     f"found {list(counts.index)}")
        if counts.min() < 2:
            raise DataError('split', f"category '{counts.idxmin()}' has too few members "
                                     f"({counts.min()}) to stratify")

        try:
            train, test = train_test_split(
                df,
                train_size=self.train_proportion,
                random_state=self.random_seed,
                stratify=df[strata].astype(str),
            )
        except ValueError as exc:
            raise DataError('split', str(exc)) from exc

        print(f"Training set: {len(train)} observations")
        print(f"Test set: {len(test)} observations")
        return train, test

    @staticmethod
    def class_proportions(df, strata=OUTCOME_COLUMN):
        """Fraction of rows in each category of the strata column"""
        return df[strata].value_counts(normalize=True, sort=False)
