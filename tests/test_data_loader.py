import pandas as pd
import pytest

from diabetes_glm.config import REQUIRED_COLUMNS
from diabetes_glm.data_loader import DataLoader
from diabetes_glm.exceptions import DataError

from conftest import make_pima_frame


def test_load_canonical_csv(tmp_path):
    df = make_pima_frame(n=50)
    path = tmp_path / "pima.csv"
    df.to_csv(path, index=False)

    loaded = DataLoader(str(path)).load()

    assert list(loaded.columns) == REQUIRED_COLUMNS
    assert len(loaded) == 50
    assert set(loaded['diabetes']) <= {'pos', 'neg'}


def test_load_drops_row_index_column(tmp_path):
    df = make_pima_frame(n=30)
    path = tmp_path / "pima_with_index.csv"
    df.to_csv(path)  # leading unnamed index column, as write.csv produces

    loaded = DataLoader(str(path)).load()

    assert list(loaded.columns) == REQUIRED_COLUMNS


def test_load_kaggle_header_maps_outcome(tmp_path):
    path = tmp_path / "diabetes.csv"
    pd.DataFrame({
        'Pregnancies': [6, 1],
        'Glucose': [148, 85],
        'BloodPressure': [72, 66],
        'SkinThickness': [35, 29],
        'Insulin': [0, 0],
        'BMI': [33.6, 26.6],
        'DiabetesPedigreeFunction': [0.627, 0.351],
        'Age': [50, 31],
        'Outcome': [1, 0],
    }).to_csv(path, index=False)

    loaded = DataLoader(str(path)).load()

    assert list(loaded.columns) == REQUIRED_COLUMNS
    assert list(loaded['diabetes']) == ['pos', 'neg']


def test_load_headerless_file(tmp_path):
    path = tmp_path / "pima-indians-diabetes.data.csv"
    path.write_text("6,148,72,35,0,33.6,0.627,50,1\n1,85,66,29,0,26.6,0.351,31,0\n")

    loaded = DataLoader(str(path)).load()

    assert len(loaded) == 2
    assert loaded.loc[0, 'glucose'] == 148
    assert list(loaded['diabetes']) == ['pos', 'neg']


def test_load_excel(tmp_path):
    df = make_pima_frame(n=20, missing_rate=0.0)
    path = tmp_path / "pima.xlsx"
    df.to_excel(path, index=False)

    loaded = DataLoader(str(path)).load()

    assert len(loaded) == 20
    assert list(loaded.columns) == REQUIRED_COLUMNS


def test_missing_column_is_data_error(tmp_path):
    path = tmp_path / "partial.csv"
    make_pima_frame(n=10).drop(columns=['insulin']).to_csv(path, index=False)

    with pytest.raises(DataError) as excinfo:
        DataLoader(str(path)).load()

    assert excinfo.value.stage == 'load'
    assert 'insulin' in str(excinfo.value)


def test_missing_file_is_data_error(tmp_path):
    with pytest.raises(DataError, match="not found"):
        DataLoader(str(tmp_path / "nope.csv")).load()


def test_unsupported_format(tmp_path):
    path = tmp_path / "pima.json"
    path.write_text("{}")

    with pytest.raises(DataError, match="unsupported"):
        DataLoader(str(path)).load()


def test_explore_structure(tmp_path):
    path = tmp_path / "pima.csv"
    make_pima_frame(n=15).to_csv(path, index=False)

    info = DataLoader(str(path)).explore_structure()

    assert info['shape'] == (15, 9)
    assert info['columns'] == REQUIRED_COLUMNS
