import numpy as np
import pandas as pd
import pytest

from diabetes_glm.config import AnalysisConfig, ReferenceLevel
from diabetes_glm.exceptions import DataError, PipelineError
from diabetes_glm.pipeline import run_pipeline


def test_full_run(raw_df):
    outputs = run_pipeline(raw_df)

    assert not outputs['clean'].isnull().any().any()
    assert len(outputs['train']) + len(outputs['test']) == len(outputs['clean'])
    assert outputs['confusion_matrix'].to_numpy().sum() == len(outputs['test'])
    assert len(outputs['results']) == len(outputs['test'])
    assert 0.5 < outputs['roc_auc'] <= 1.0


def test_pipeline_is_deterministic(raw_df):
    first = run_pipeline(raw_df)
    second = run_pipeline(raw_df)

    pd.testing.assert_frame_equal(first['coefficients'], second['coefficients'])
    pd.testing.assert_frame_equal(first['results'], second['results'])
    pd.testing.assert_frame_equal(first['metrics'], second['metrics'])
    assert list(first['roc_curve']) == list(second['roc_curve'])


def test_seed_changes_partition(raw_df):
    a = run_pipeline(raw_df, AnalysisConfig(random_seed=1))
    b = run_pipeline(raw_df, AnalysisConfig(random_seed=2))

    assert set(a['test'].index) != set(b['test'].index)


def test_metrics_do_not_depend_on_reference_level(raw_df):
    a = run_pipeline(raw_df, AnalysisConfig(reference_level=ReferenceLevel.POSITIVE))
    b = run_pipeline(raw_df, AnalysisConfig(reference_level=ReferenceLevel.NEGATIVE))

    np.testing.assert_allclose(a['metrics']['estimate'], b['metrics']['estimate'], atol=1e-9)
    np.testing.assert_allclose(a['coefficients']['estimate'], -b['coefficients']['estimate'],
                               rtol=1e-4, atol=1e-6)


def test_empty_after_cleaning_is_fatal(raw_df):
    df = raw_df.copy()
    df['age'] = np.nan

    with pytest.raises(DataError) as excinfo:
        run_pipeline(df)

    assert excinfo.value.stage == 'clean'
    assert str(excinfo.value).startswith('[clean]')
    assert isinstance(excinfo.value, PipelineError)


def test_config_validation():
    with pytest.raises(ValueError):
        AnalysisConfig(train_proportion=1.0)
    with pytest.raises(ValueError):
        AnalysisConfig(threshold=0)
    with pytest.raises(TypeError):
        AnalysisConfig(reference_level='pos')


def test_reference_level_levels():
    assert ReferenceLevel.POSITIVE.levels == ['pos', 'neg']
    assert ReferenceLevel.NEGATIVE.levels == ['neg', 'pos']
    assert ReferenceLevel.NEGATIVE.other_label == 'pos'


def test_numeric_outcome_runs_like_labels(raw_df):
    df = raw_df.copy()
    df['diabetes'] = (df['diabetes'] == 'pos').astype(int)

    numeric = run_pipeline(df)
    labelled = run_pipeline(raw_df)

    pd.testing.assert_frame_equal(numeric['coefficients'], labelled['coefficients'])
