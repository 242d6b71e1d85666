"""
Apply a fitted model to new observations
"""

import pandas as pd

from .config import (CLASSIFICATION_THRESHOLD, NEGATIVE_LABEL, OUTCOME_COLUMN,
                     POSITIVE_LABEL)
from .exceptions import DataError


class Predictor:
    """Class and probability predictions from a FittedModel"""

    def __init__(self, fitted_model, threshold=CLASSIFICATION_THRESHOLD):
        self.fitted_model = fitted_model
        self.threshold = threshold

    def predict(self, df):
        """Return the results table: truth, pred_class, pred_pos, pred_neg, linear_predictor"""
        predictors = self.fitted_model.predictors

        missing_cols = [col for col in predictors if col not in df.columns]
        if missing_cols:
            raise DataError('predict', f"missing predictor columns: {missing_cols}")
        if df[predictors].isnull().any().any():
            raise DataError('predict', "predictor values are missing; clean the data first")

        eta = pd.Series(self.fitted_model.linear_predictor(df), index=df.index)
        p_event = pd.Series(self.fitted_model.predict_event_probability(df), index=df.index)

        if self.fitted_model.event_label == POSITIVE_LABEL:
            pred_pos = p_event
        else:
            pred_pos = 1.0 - p_event

        levels = self.fitted_model.reference_level.levels
        pred_class = pred_pos.ge(self.threshold).map({True: POSITIVE_LABEL, False: NEGATIVE_LABEL})

        results = pd.DataFrame(index=df.index)
        if OUTCOME_COLUMN in df.columns:
            results['truth'] = pd.Categorical(df[OUTCOME_COLUMN].astype(object), categories=levels)
        results['pred_class'] = pd.Categorical(pred_class, categories=levels)
        results['pred_pos'] = pred_pos.astype(float)
        results['pred_neg'] = 1.0 - results['pred_pos']
        results['linear_predictor'] = eta.astype(float)

        print(f"Predicted {len(results)} observations "
              f"({(results['pred_class'] == POSITIVE_LABEL).sum()} classified '{POSITIVE_LABEL}')")
        return results
