"""
API Integration Tests for Search Endpoints
"""

import numpy as np


class TestSearchAPI:
    """Integration tests for locate and match endpoints"""

    def test_locate_found(self, client, upload, ramp_id):
        """locate returns the first matching anchor"""
        sub_id = upload(np.array([[17]], dtype=np.uint8))
        response = client.post(
            "/api/search/locate", json={"image_id": ramp_id, "sub_image_id": sub_id}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["found"] is True
        assert data["position"] == {"x": 2, "y": 3}
        assert data["counters"]["adds"] == 18

    def test_locate_not_found(self, client, upload, ramp_id):
        """Absent sub-images report found=False"""
        sub_id = upload(np.array([[99]], dtype=np.uint8))
        response = client.post(
            "/api/search/locate", json={"image_id": ramp_id, "sub_image_id": sub_id}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["found"] is False
        assert data["position"] is None

    def test_locate_missing_image(self, client, ramp_id):
        """Unknown IDs give 404"""
        response = client.post(
            "/api/search/locate", json={"image_id": ramp_id, "sub_image_id": "nonexistent"}
        )
        assert response.status_code == 404

    def test_match(self, client, upload, ramp_id, ramp_array):
        """match compares at a single anchor"""
        sub_id = upload(ramp_array[1:3, 2:4])

        hit = client.post(
            "/api/search/match",
            json={"image_id": ramp_id, "sub_image_id": sub_id, "position": {"x": 2, "y": 1}},
        )
        miss = client.post(
            "/api/search/match",
            json={"image_id": ramp_id, "sub_image_id": sub_id, "position": {"x": 1, "y": 1}},
        )

        assert hit.status_code == 200
        assert hit.json()["found"] is True
        assert hit.json()["position"] == {"x": 2, "y": 1}
        assert miss.json()["found"] is False

    def test_match_overhang(self, client, upload, ramp_id):
        """Sub-images reaching past the border never match"""
        sub_id = upload(np.zeros((2, 2), dtype=np.uint8))
        response = client.post(
            "/api/search/match",
            json={"image_id": ramp_id, "sub_image_id": sub_id, "position": {"x": 4, "y": 4}},
        )

        assert response.status_code == 200
        assert response.json()["found"] is False
