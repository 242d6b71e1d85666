"""
Binomial GLM (logit link) fitting on the training partition

Fitting is delegated to statsmodels (IRLS). The modelled event is the
non-reference outcome level, so with ``ReferenceLevel.POSITIVE`` the
coefficients are log-odds of a *negative* outcome.
"""

import warnings

import numpy as np
import pandas as pd
import statsmodels.api as sm
import statsmodels.formula.api as smf
from statsmodels.tools.sm_exceptions import ConvergenceWarning, PerfectSeparationWarning

from .config import OUTCOME_COLUMN, PREDICTOR_COLUMNS, ReferenceLevel
from .exceptions import FittingError


EVENT_COLUMN = 'event'


class FittedModel:
    """A fitted logistic regression and its coefficient tables"""

    def __init__(self, result, formula, reference_level, predictors):
        self.result = result
        self.formula = formula
        self.reference_level = reference_level
        self.predictors = list(predictors)

    @property
    def reference_label(self):
        return self.reference_level.label

    @property
    def event_label(self):
        return self.reference_level.other_label

    @property
    def converged(self):
        return bool(self.result.converged)

    @property
    def iterations(self):
        return self.result.fit_history['iteration']

    @property
    def params(self):
        return self.result.params

    def coefficients(self, exponentiate=False, conf_level=0.95):
        """Coefficient table; exponentiate=True reports odds ratios.

        Odds ratios that overflow float64 are reported as inf.
        """
        ci = self.result.conf_int(alpha=1 - conf_level)
        table = pd.DataFrame({
            'term': self.result.params.index,
            'estimate': self.result.params.values,
            'std_error': self.result.bse.values,
            'statistic': self.result.tvalues.values,
            'p_value': self.result.pvalues.values,
            'conf_low': ci.iloc[:, 0].values,
            'conf_high': ci.iloc[:, 1].values,
        })

        if exponentiate:
            scaled = ['estimate', 'conf_low', 'conf_high']
            with np.errstate(over='ignore'):
                table[scaled] = np.exp(table[scaled])

        return table

    def model_statistics(self):
        """Goodness-of-fit summary of the fitted model"""
        result = self.result
        return pd.Series({
            'n_obs': int(result.nobs),
            'df_residual': int(result.df_resid),
            'log_likelihood': result.llf,
            'deviance': result.deviance,
            'null_deviance': result.null_deviance,
            'aic': result.aic,
            'bic': result.bic_llf,
            'pseudo_r2_mcfadden': result.pseudo_rsquared(kind='mcf'),
            'iterations': self.iterations,
        })

    def linear_predictor(self, df):
        """Intercept plus coefficient-weighted predictors, per row"""
        return self.result.predict(df[self.predictors], which='linear')

    def predict_event_probability(self, df):
        """Probability of the non-reference (event) level, per row"""
        return self.result.predict(df[self.predictors])


class GLMFitter:
    """Fits outcome ~ all predictors with a binomial family and logit link"""

    def __init__(self, reference_level=ReferenceLevel.POSITIVE, predictors=None, max_iterations=100):
        self.reference_level = reference_level
        self.max_iterations = max_iterations
        self.predictors = list(predictors) if predictors is not None else list(PREDICTOR_COLUMNS)

    def build_formula(self):
        return f"{EVENT_COLUMN} ~ " + ' + '.join(self.predictors)

    def _model_frame(self, train):
        data = train[self.predictors].astype(float).copy()
        outcome = train[OUTCOME_COLUMN].astype(object)
        data[EVENT_COLUMN] = (outcome == self.reference_level.other_label).astype(int)
        return data

    def fit(self, train):
        """Maximum-likelihood fit; any failure is raised as FittingError"""
        print("\n=== FITTING LOGISTIC REGRESSION (binomial GLM, logit link) ===")

        n_coefficients = len(self.predictors) + 1
        if len(train) == 0:
            raise FittingError("training data is empty")
        if len(train) <= n_coefficients:
            raise FittingError(f"only {len(train)} training observations for "
                               f"{n_coefficients} coefficients")

        data = self._model_frame(train)
        if data[EVENT_COLUMN].nunique() < 2:
            raise FittingError("training outcome has a single class; nothing to discriminate")

        formula = self.build_formula()
        model = smf.glm(formula, data=data, family=sm.families.Binomial())

        rank = np.linalg.matrix_rank(model.exog)
        if rank < model.exog.shape[1]:
            raise FittingError(f"design matrix is rank deficient ({rank} < {model.exog.shape[1]}); "
                               f"predictors are collinear")

        with warnings.catch_warnings():
            warnings.simplefilter('error', PerfectSeparationWarning)
            warnings.simplefilter('error', ConvergenceWarning)
            try:
                result = model.fit(maxiter=self.max_iterations)
            except PerfectSeparationWarning as exc:
                raise FittingError(f"perfect separation detected: {exc}") from exc
            except ConvergenceWarning as exc:
                raise FittingError(f"IRLS did not converge: {exc}") from exc

        if not result.converged:
            raise FittingError("IRLS did not converge")
        if not np.all(np.isfinite(result.params)) or not np.all(np.isfinite(result.bse)):
            raise FittingError("non-finite coefficient estimates")

        print(f"Formula: {formula}  (event = '{self.reference_level.other_label}')")
        print(f"Converged in {result.fit_history['iteration']} iterations")
        return FittedModel(result, formula, self.reference_level, self.predictors)
