"""
Tests for the bed endpoints.
"""
from fastapi import status


class TestBeds:
    """Tests for bed queries."""

    def test_list_beds(self, client, ward):
        response = client.get("/api/bed")
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert [bed["bed_number"] for bed in data] == ["G-101", "G-102", "ICU-201"]
        assert all(bed["status"] == "Available" for bed in data)

    def test_available_beds_exclude_occupied(self, client, ward):
        client.post("/api/admission", json={
            "patient_id": ward["patients"][0].id,
            "bed_id": ward["beds"][0].id,
        })

        response = client.get("/api/bed/available")
        assert response.status_code == status.HTTP_200_OK
        assert [bed["bed_number"] for bed in response.json()] == ["G-102", "ICU-201"]

        occupied = client.get(f"/api/bed/{ward['beds'][0].id}").json()
        assert occupied["status"] == "Occupied"

    def test_beds_by_ward(self, client, ward):
        response = client.get("/api/bed/ward/ICU")
        assert response.status_code == status.HTTP_200_OK
        assert [bed["bed_number"] for bed in response.json()] == ["ICU-201"]

    def test_beds_by_unknown_ward(self, client, ward):
        response = client.get("/api/bed/ward/Burns")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_get_unknown_bed(self, client):
        response = client.get("/api/bed/999")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_beds_are_read_only(self, client, ward):
        """Occupancy can only change through admissions."""
        response = client.put(f"/api/bed/{ward['beds'][0].id}", json={"is_occupied": True})
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
