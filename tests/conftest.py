import pytest

from routing_layer.reference_data import default_dataset, sample_patients


@pytest.fixture
def reference_matrix():
    # [severity, urgency, resource, waiting, age vulnerability]
    return [
        [90, 85, 80, 90, 85],
        [80, 85, 70, 80, 75],
        [85, 90, 85, 88, 82],
        [30, 25, 20, 20, 30],
        [90, 95, 90, 90, 90],
    ]


@pytest.fixture
def reference_weights():
    return [0.35, 0.30, 0.15, 0.15, 0.05]


@pytest.fixture
def dataset():
    return default_dataset()


@pytest.fixture
def patients():
    return sample_patients()
