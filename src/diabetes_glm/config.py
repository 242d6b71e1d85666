"""
Shared constants and run configuration for the diabetes GLM analysis
"""

from enum import Enum


# Canonical predictor columns (mlbench PimaIndiansDiabetes2 naming)
PREDICTOR_COLUMNS = [
    'pregnant',
    'glucose',
    'pressure',
    'triceps',
    'insulin',
    'mass',
    'pedigree',
    'age',
]

OUTCOME_COLUMN = 'diabetes'
POSITIVE_LABEL = 'pos'
NEGATIVE_LABEL = 'neg'

REQUIRED_COLUMNS = PREDICTOR_COLUMNS + [OUTCOME_COLUMN]

# Kaggle / UCI header -> canonical names
ALTERNATE_COLUMN_NAMES = {
    'Pregnancies': 'pregnant',
    'Glucose': 'glucose',
    'BloodPressure': 'pressure',
    'SkinThickness': 'triceps',
    'Insulin': 'insulin',
    'BMI': 'mass',
    'DiabetesPedigreeFunction': 'pedigree',
    'Age': 'age',
    'Outcome': 'diabetes',
}

# Zero is a biological impossibility for these measurements
ZERO_AS_MISSING_COLUMNS = ['glucose', 'pressure', 'triceps', 'insulin', 'mass']

DEFAULT_DATA_PATH = 'data/PimaIndiansDiabetes2.csv'
RESULTS_DIR = 'results/diabetes_glm'

TRAIN_PROPORTION = 0.75
RANDOM_SEED = 42
CLASSIFICATION_THRESHOLD = 0.5


class ReferenceLevel(Enum):
    """Which outcome category is the first (reference) level.

    The GLM models the log-odds of the other level, so this choice fixes the
    sign of every reported coefficient. Evaluation always treats the positive
    label as the event of interest.
    """
    POSITIVE = POSITIVE_LABEL
    NEGATIVE = NEGATIVE_LABEL

    @property
    def label(self):
        return self.value

    @property
    def other_label(self):
        return NEGATIVE_LABEL if self is ReferenceLevel.POSITIVE else POSITIVE_LABEL

    @property
    def levels(self):
        return [self.label, self.other_label]


class PlotStyle:
    """Plot appearance, applied per figure rather than process-wide"""

    def __init__(self, style='whitegrid', context='notebook', palette='husl',
                 figsize=(7, 6), dpi=300, cmap='Blues'):
        self.style = style
        self.context = context
        self.palette = palette
        self.figsize = figsize
        self.dpi = dpi
        self.cmap = cmap


class AnalysisConfig:
    """Parameters for a single pipeline run"""

    def __init__(self, train_proportion=TRAIN_PROPORTION, random_seed=RANDOM_SEED,
                 reference_level=ReferenceLevel.POSITIVE,
                 threshold=CLASSIFICATION_THRESHOLD, exponentiate=True,
                 zero_as_missing=False, plot_style=None):
        if not 0 < train_proportion < 1:
            raise ValueError(f"train_proportion must be in (0, 1), got {train_proportion}")
        if not 0 < threshold < 1:
            raise ValueError(f"threshold must be in (0, 1), got {threshold}")
        if not isinstance(reference_level, ReferenceLevel):
            raise TypeError(f"reference_level must be a ReferenceLevel, got {reference_level!r}")

        self.train_proportion = train_proportion
        self.random_seed = random_seed
        self.reference_level = reference_level
        self.threshold = threshold
        self.exponentiate = exponentiate
        self.zero_as_missing = zero_as_missing
        self.plot_style = plot_style if plot_style is not None else PlotStyle()
