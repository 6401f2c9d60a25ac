"""
Pytest configuration for API integration tests
"""

import numpy as np
import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def client():
    """
    Create a test client with properly initialized app state.
    Each test gets a fresh client to avoid state contamination.
    """
    from graymap.core.image_manager import ImageManager
    from graymap.main import app

    image_manager = ImageManager(max_size_mb=16, max_images=20)

    test_config = {
        "image": {"include_preview": True, "max_dimension": 64},
        "instrumentation": {"enabled": True},
    }

    app.state.image_manager = image_manager
    app.state.config = test_config

    # Create test client (no context manager, the lifespan is not needed)
    test_client = TestClient(app, raise_server_exceptions=False)

    yield test_client

    image_manager.cleanup()


@pytest.fixture
def upload(client, pgm_bytes):
    """Upload an array as PGM and return the new image ID"""

    def _upload(array, maxval=255):
        response = client.post("/api/image/upload", content=pgm_bytes(array, maxval))
        assert response.status_code == 200, response.text
        return response.json()["id"]

    return _upload


@pytest.fixture
def uniform_id(upload):
    """4x4 image of level 10"""
    return upload(np.full((4, 4), 10, dtype=np.uint8))


@pytest.fixture
def ramp_id(upload, ramp_array):
    """5x5 image of distinct levels 0..24"""
    return upload(ramp_array)
