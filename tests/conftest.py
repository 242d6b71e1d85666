import matplotlib
matplotlib.use('Agg')

import numpy as np
import pandas as pd
import pytest

from diabetes_glm.config import REQUIRED_COLUMNS
from diabetes_glm.data_cleaner import DataCleaner


def make_pima_frame(n=400, seed=0, missing_rate=0.05):
    """Synthetic data shaped like PimaIndiansDiabetes2 (pos/neg outcome, some NAs)"""
    rng = np.random.default_rng(seed)

    pregnant = rng.poisson(3.8, n).astype(float)
    glucose = rng.normal(121, 30, n).clip(44, 199)
    pressure = rng.normal(72, 12, n).clip(24, 122)
    triceps = rng.normal(29, 10, n).clip(7, 99)
    insulin = rng.lognormal(4.8, 0.6, n)
    mass = rng.normal(32.5, 7, n).clip(18, 67)
    pedigree = rng.gamma(2.0, 0.24, n)
    age = rng.integers(21, 81, n).astype(float)

    logit = -10 + 0.038 * glucose + 0.09 * mass + 0.9 * pedigree + 0.02 * age + 0.1 * pregnant
    prob = 1 / (1 + np.exp(-logit))
    outcome = np.where(rng.random(n) < prob, 'pos', 'neg')

    df = pd.DataFrame({
        'pregnant': pregnant,
        'glucose': glucose,
        'pressure': pressure,
        'triceps': triceps,
        'insulin': insulin,
        'mass': mass,
        'pedigree': pedigree,
        'age': age,
        'diabetes': outcome,
    }, columns=REQUIRED_COLUMNS)

    for col in ('triceps', 'insulin', 'glucose'):
        df.loc[rng.random(n) < missing_rate, col] = np.nan

    return df


@pytest.fixture
def raw_df():
    return make_pima_frame()


@pytest.fixture
def clean_df(raw_df):
    return DataCleaner().clean_dataset(raw_df)
