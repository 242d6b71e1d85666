"""
Clean -> split -> fit -> predict -> evaluate, once, in order
"""

from .config import AnalysisConfig
from .data_cleaner import DataCleaner
from .evaluator import ClassificationEvaluator
from .exceptions import DataError
from .model_fitter import GLMFitter
from .predictor import Predictor
from .splitter import DataSplitter


def run_pipeline(raw_df, config=None):
    """Run the full analysis on a loaded frame and return every artifact"""
    if config is None:
        config = AnalysisConfig()

    cleaner = DataCleaner(reference_level=config.reference_level,
                          zero_as_missing=config.zero_as_missing)
    df_clean = cleaner.clean_dataset(raw_df)
    if len(df_clean) == 0:
        raise DataError('clean', "no complete observations remain after cleaning")

    splitter = DataSplitter(train_proportion=config.train_proportion,
                            random_seed=config.random_seed)
    train, test = splitter.split(df_clean)

    fitter = GLMFitter(reference_level=config.reference_level)
    model = fitter.fit(train)

    results = Predictor(model, threshold=config.threshold).predict(test)

    evaluator = ClassificationEvaluator(results)
    metrics = evaluator.summary()

    return {
        'clean': df_clean,
        'train': train,
        'test': test,
        'model': model,
        'coefficients': model.coefficients(),
        'odds_ratios': model.coefficients(exponentiate=True),
        'model_statistics': model.model_statistics(),
        'results': results,
        'confusion_matrix': evaluator.confusion_matrix(),
        'metrics': metrics,
        'roc_curve': evaluator.roc_curve(),
        'roc_auc': metrics.set_index('metric').loc['roc_auc', 'estimate'],
    }
