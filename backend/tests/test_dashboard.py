"""
Tests for the role dashboards.
"""
from fastapi import status

from app.models.enums import RoleEnum
from app.services.auth_service import auth_service


class TestDashboards:
    """Tests for the FrontDesk, Doctor and HR dashboards."""

    def test_front_desk_dashboard(self, client, ward, auth_headers):
        client.post("/api/admission", json={
            "patient_id": ward["patients"][0].id,
            "bed_id": ward["beds"][0].id,
        })

        response = client.get("/api/dashboard/frontdesk", headers=auth_headers(RoleEnum.FRONT_DESK))
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["beds"] == {
            "total": 3,
            "occupied": 1,
            "available": 2,
            "occupancy_percentage": 33.3,
        }
        assert len(data["available_beds"]) == 2
        assert data["active_admissions"][0]["patient_name"] == "Maria Dela Cruz"

    def test_doctor_sees_own_patients(self, client, ward, create_user):
        user = create_user(role=RoleEnum.DOCTOR)
        headers = {"Authorization": f"Bearer {auth_service.create_access_token(user)}"}

        client.post("/api/admission", json={
            "patient_id": ward["patients"][0].id,
            "bed_id": ward["beds"][0].id,
            "doctor_id": user.employee_id,
        })
        client.post("/api/admission", json={
            "patient_id": ward["patients"][1].id,
            "bed_id": ward["beds"][1].id,
            "doctor_id": ward["doctor"].id,
        })

        response = client.get("/api/dashboard/doctor", headers=headers)
        assert response.status_code == status.HTTP_200_OK

        mine = response.json()["my_active_admissions"]
        assert [item["doctor_id"] for item in mine] == [user.employee_id]

    def test_hr_dashboard(self, client, ward, auth_headers):
        response = client.get("/api/dashboard/hr", headers=auth_headers(RoleEnum.HR))
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["total_patients"] == 2
        # The ward doctor plus the HR user's employee record
        assert data["staff_by_role"] == {"HR": 1, "Doctor": 1, "FrontDesk": 0}

    def test_wrong_role_is_forbidden(self, client, auth_headers):
        response = client.get("/api/dashboard/hr", headers=auth_headers(RoleEnum.DOCTOR))
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_dashboard_requires_token(self, client):
        response = client.get("/api/dashboard/frontdesk")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
