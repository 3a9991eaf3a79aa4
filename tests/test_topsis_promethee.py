import numpy as np
import pytest

from triage_center.topsis_promethee import (
    PROMETHEE, TOPSIS, calculate_promethee, calculate_topsis,
)


def test_topsis_reference_scenario(reference_matrix, reference_weights):
    scores = calculate_topsis(reference_matrix, reference_weights)
    assert len(scores) == 5
    assert all(-1e-9 <= s <= 1 + 1e-9 for s in scores)
    # mild case ranks last, the dominant row first
    assert int(np.argmin(scores)) == 3
    assert int(np.argmax(scores)) == 4
    assert scores[4] > scores[3]
    assert scores[0] > scores[3]


def test_topsis_weights_are_renormalised(reference_matrix, reference_weights):
    doubled = [2 * w for w in reference_weights]
    assert calculate_topsis(reference_matrix, doubled) == pytest.approx(
        calculate_topsis(reference_matrix, reference_weights))


def test_topsis_cost_criterion_prefers_lower():
    scores = calculate_topsis([[1.0], [2.0]], [1.0], benefit_criteria=[False])
    assert scores[0] > scores[1]


def test_topsis_single_row_is_finite():
    scores = calculate_topsis([[50, 60, 70, 80, 90]], [0.2] * 5)
    assert scores == [0.0]


def test_topsis_rank_output(reference_matrix, reference_weights):
    result = TOPSIS(reference_matrix, reference_weights).rank(labels=list("ABCDE"))
    labels = [r["label"] for r in result["rankings"]]
    assert labels[0] == "E"
    assert labels[-1] == "D"
    assert [r["rank"] for r in result["rankings"]] == [1, 2, 3, 4, 5]


def test_topsis_rejects_mismatched_weights(reference_matrix):
    with pytest.raises(ValueError):
        calculate_topsis(reference_matrix, [0.5, 0.5])


def test_promethee_net_flows_sum_to_zero(reference_matrix, reference_weights):
    scores = calculate_promethee(reference_matrix, reference_weights)
    assert sum(scores) == pytest.approx(0.0, abs=1e-9)
    assert int(np.argmax(scores)) == 4
    assert int(np.argmin(scores)) == 3


def test_promethee_single_row_is_zero():
    assert calculate_promethee([[10, 20, 30]], [1, 1, 1]) == [0.0]


def test_promethee_constant_matrix_has_no_preference():
    scores = calculate_promethee([[5, 5], [5, 5], [5, 5]], [0.5, 0.5])
    assert scores == pytest.approx([0.0, 0.0, 0.0])


def test_promethee_pairwise_preferences_are_complementary(reference_matrix, reference_weights):
    P = PROMETHEE(reference_matrix, reference_weights).preference_matrix()
    off_diagonal = ~np.eye(5, dtype=bool)
    assert np.allclose((P + P.T)[off_diagonal], 1.0)
    assert np.all(np.diag(P) == 0)


def test_promethee_flows_match_scores(reference_matrix, reference_weights):
    ranker = PROMETHEE(reference_matrix, reference_weights)
    flows = ranker.flows()
    assert np.allclose(flows["phi_plus"] - flows["phi_minus"], ranker.scores())
