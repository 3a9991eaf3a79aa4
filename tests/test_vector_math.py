import numpy as np
import pytest

from triage_center.vector_math import (
    as_matrix, column_max, column_min, column_normalize, cosine_similarity, vector_norm,
)


def test_vector_norm():
    assert vector_norm([3, 4]) == pytest.approx(5.0)
    assert vector_norm([0, 0, 0]) == 0.0


def test_column_normalize_unit_columns_and_zero_column():
    X = [[3, 0, 1], [4, 0, 1]]
    N = column_normalize(X)
    norms = np.linalg.norm(N, axis=0)
    assert norms[0] == pytest.approx(1.0)
    assert norms[2] == pytest.approx(1.0)
    assert np.all(N[:, 1] == 0)
    assert N[0, 0] == pytest.approx(0.6)


def test_column_extrema(reference_matrix):
    assert column_min(reference_matrix).tolist() == [30, 25, 20, 20, 30]
    assert column_max(reference_matrix).tolist() == [90, 95, 90, 90, 90]


def test_cosine_similarity_self_and_opposite():
    v = [1.0, 0.5, 0.0, 2.0]
    assert cosine_similarity(v, v) == pytest.approx(1.0)
    assert cosine_similarity(v, [-x for x in v]) == pytest.approx(-1.0)


def test_cosine_similarity_zero_vectors_is_zero():
    assert cosine_similarity([0, 0], [0, 0]) == 0.0
    assert cosine_similarity([0, 0], [1, 2]) == 0.0


def test_cosine_similarity_length_mismatch():
    with pytest.raises(ValueError):
        cosine_similarity([1, 2, 3], [1, 2])


def test_as_matrix_rejects_bad_input():
    with pytest.raises(ValueError):
        as_matrix([[1, 2], [3]])
    with pytest.raises(ValueError):
        as_matrix([])
    with pytest.raises(ValueError):
        as_matrix([[1, float("nan")]])
