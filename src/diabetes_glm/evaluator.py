"""
Classification metrics computed from a results table

Every metric is a pure function of a table with ``truth``, ``pred_class``
and ``pred_pos`` columns. The positive label is always the event of interest.
Metrics whose denominator is zero come back as NaN; MCC is 0 in that case.
"""

import warnings
from collections import namedtuple

import numpy as np
import pandas as pd
from sklearn import metrics
from sklearn.exceptions import UndefinedMetricWarning

from .config import NEGATIVE_LABEL, POSITIVE_LABEL


LABELS = [POSITIVE_LABEL, NEGATIVE_LABEL]

RocPoint = namedtuple('RocPoint', ['threshold', 'fpr', 'tpr'])


def _labels(results):
    y_true = results['truth'].astype(str).to_numpy()
    y_pred = results['pred_class'].astype(str).to_numpy()
    return y_true, y_pred


def _safe_ratio(numerator, denominator):
    if denominator == 0:
        return np.nan
    return numerator / denominator


def confusion_matrix(results):
    """2x2 counts, rows = truth, columns = prediction, positive label first"""
    y_true, y_pred = _labels(results)
    if len(y_true) == 0:
        cm = np.zeros((2, 2), dtype=int)
    else:
        cm = metrics.confusion_matrix(y_true, y_pred, labels=LABELS)
    return pd.DataFrame(cm,
                        index=pd.Index(LABELS, name='truth'),
                        columns=pd.Index(LABELS, name='prediction'))


def confusion_counts(results):
    """(tp, fp, fn, tn) with the positive label as the event"""
    cm = confusion_matrix(results)
    tp = int(cm.loc[POSITIVE_LABEL, POSITIVE_LABEL])
    fn = int(cm.loc[POSITIVE_LABEL, NEGATIVE_LABEL])
    fp = int(cm.loc[NEGATIVE_LABEL, POSITIVE_LABEL])
    tn = int(cm.loc[NEGATIVE_LABEL, NEGATIVE_LABEL])
    return tp, fp, fn, tn


def accuracy(results):
    y_true, y_pred = _labels(results)
    if len(y_true) == 0:
        return np.nan
    return float(metrics.accuracy_score(y_true, y_pred))


def sensitivity(results):
    """TP / (TP + FN), also called recall"""
    y_true, y_pred = _labels(results)
    if len(y_true) == 0:
        return np.nan
    return float(metrics.recall_score(y_true, y_pred, pos_label=POSITIVE_LABEL,
                                      zero_division=np.nan))


recall = sensitivity


def specificity(results):
    """TN / (TN + FP): recall of the negative label"""
    y_true, y_pred = _labels(results)
    if len(y_true) == 0:
        return np.nan
    return float(metrics.recall_score(y_true, y_pred, pos_label=NEGATIVE_LABEL,
                                      zero_division=np.nan))


def precision(results):
    """TP / (TP + FP)"""
    y_true, y_pred = _labels(results)
    if len(y_true) == 0:
        return np.nan
    return float(metrics.precision_score(y_true, y_pred, pos_label=POSITIVE_LABEL,
                                         zero_division=np.nan))


def negative_predictive_value(results):
    """TN / (TN + FN): precision of the negative label"""
    y_true, y_pred = _labels(results)
    if len(y_true) == 0:
        return np.nan
    return float(metrics.precision_score(y_true, y_pred, pos_label=NEGATIVE_LABEL,
                                         zero_division=np.nan))


def f_measure(results):
    """Harmonic mean of precision and recall; NaN if either is undefined"""
    p = precision(results)
    r = sensitivity(results)
    if np.isnan(p) or np.isnan(r) or p + r == 0:
        return np.nan
    return 2 * p * r / (p + r)


def balanced_accuracy(results):
    return (sensitivity(results) + specificity(results)) / 2


def j_index(results):
    """Youden's J: sensitivity + specificity - 1"""
    return sensitivity(results) + specificity(results) - 1


def detection_prevalence(results):
    """Share of observations predicted positive"""
    tp, fp, fn, tn = confusion_counts(results)
    return _safe_ratio(tp + fp, tp + fp + fn + tn)


def cohens_kappa(results):
    """Agreement beyond chance; NaN when chance agreement is already 1"""
    y_true, y_pred = _labels(results)
    if len(y_true) == 0:
        return np.nan
    with warnings.catch_warnings(), np.errstate(divide='ignore', invalid='ignore'):
        warnings.simplefilter('ignore', UndefinedMetricWarning)
        return float(metrics.cohen_kappa_score(y_true, y_pred, labels=LABELS))


def matthews_correlation(results):
    """MCC; 0 when any margin of the confusion matrix is empty"""
    y_true, y_pred = _labels(results)
    if len(y_true) == 0:
        return np.nan
    return float(metrics.matthews_corrcoef(y_true, y_pred))


def roc_auc(results):
    """Area under the ROC curve for pred_pos; NaN if truth has a single class"""
    y_true = results['truth'].astype(str).to_numpy()
    if len(set(y_true)) < 2:
        return np.nan
    return float(metrics.roc_auc_score(y_true == POSITIVE_LABEL, results['pred_pos'].to_numpy()))


class RocCurve:
    """Lazy, restartable sequence of (threshold, fpr, tpr) points"""

    def __init__(self, truth, scores, pos_label=POSITIVE_LABEL):
        self._truth = np.asarray(truth).astype(str)
        self._scores = np.asarray(scores, dtype=float)
        self.pos_label = pos_label
        self._points = None

    def _compute(self):
        if self._points is None:
            with warnings.catch_warnings():
                warnings.simplefilter('ignore', UndefinedMetricWarning)
                fpr, tpr, thresholds = metrics.roc_curve(self._truth, self._scores,
                                                         pos_label=self.pos_label,
                                                         drop_intermediate=False)
            self._points = tuple(RocPoint(float(t), float(f), float(r))
                                 for t, f, r in zip(thresholds, fpr, tpr))
        return self._points

    def __iter__(self):
        for point in self._compute():
            yield point

    def __len__(self):
        return len(self._compute())

    def to_frame(self):
        return pd.DataFrame(list(self), columns=list(RocPoint._fields))


def roc_curve(results):
    return RocCurve(results['truth'], results['pred_pos'])


METRICS = [
    ('accuracy', accuracy),
    ('kappa', cohens_kappa),
    ('sensitivity', sensitivity),
    ('specificity', specificity),
    ('precision', precision),
    ('npv', negative_predictive_value),
    ('f_measure', f_measure),
    ('mcc', matthews_correlation),
    ('balanced_accuracy', balanced_accuracy),
    ('j_index', j_index),
    ('detection_prevalence', detection_prevalence),
    ('roc_auc', roc_auc),
]


class ClassificationEvaluator:
    """Full metric battery over one results table"""

    def __init__(self, results):
        self.results = results

    def confusion_matrix(self):
        return confusion_matrix(self.results)

    def roc_curve(self):
        return roc_curve(self.results)

    def summary(self):
        """Tidy table of every metric"""
        return pd.DataFrame([{'metric': name, 'estimate': fn(self.results)}
                             for name, fn in METRICS])

    def report(self):
        """Printable confusion matrix and metrics"""
        lines = ["=== CONFUSION MATRIX ==="]
        lines.append(self.confusion_matrix().to_string())
        lines.append(f"\nTest observations: {len(self.results)}")
        lines.append("\n=== CLASSIFICATION METRICS ===")
        for _, row in self.summary().iterrows():
            lines.append(f"{row['metric']:<22}{row['estimate']:.4f}")
        return '\n'.join(lines)
