import os

# No simulated upstream latency under test
os.environ.setdefault("RESILIENCE_SIMULATED_LATENCY_MS", "0")

import numpy as np
import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
