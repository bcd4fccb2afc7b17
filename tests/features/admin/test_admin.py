"""Tests for the admin submission management endpoints.
Covers: token checks, listing, retrieval and deletion of stored submissions.
"""

from datetime import timedelta

from fastapi import status

from src.features.admin.jwt_utils import create_access_token, decode_token, verify_token_type
from src.features.intake.service import IntakeService


class TestAdminTokens:
    """Tests for JWT helpers."""

    def test_token_round_trip(self):
        token = create_access_token({"sub": "ops", "role": "admin"})
        payload = decode_token(token)

        assert payload["sub"] == "ops"
        assert payload["role"] == "admin"
        assert verify_token_type(payload, "access")
        assert not verify_token_type(payload, "refresh")


class TestAdminAccess:
    """Tests for the require_admin dependency."""

    async def test_missing_token(self, client):
        response = await client.get("/api/submissions")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["www-authenticate"] == "Bearer"

    async def test_invalid_token(self, client):
        response = await client.get("/api/submissions", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_expired_token(self, client):
        token = create_access_token({"sub": "ops", "role": "admin"}, expires_delta=timedelta(minutes=-5))

        response = await client.get("/api/submissions", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_non_admin_role(self, client):
        token = create_access_token({"sub": "someone", "role": "viewer"})

        response = await client.get("/api/submissions", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestSubmissionEndpoints:
    """Tests for /api/submissions"""

    async def test_list_submissions(self, client, admin_headers, make_submission):
        await make_submission(email="first@example.com")
        await make_submission(email="second@example.com")

        response = await client.get("/api/submissions", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["total"] == 2
        assert body["page"] == 1
        assert body["page_size"] == 50
        assert [s["email"] for s in body["submissions"]] == ["second@example.com", "first@example.com"]
        assert all("password_hash" not in s for s in body["submissions"])

    async def test_list_submissions_paginated(self, client, admin_headers, make_submission):
        for _ in range(3):
            await make_submission()

        response = await client.get("/api/submissions?page=2&page_size=2", headers=admin_headers)

        body = response.json()
        assert body["total"] == 3
        assert len(body["submissions"]) == 1

    async def test_get_submission(self, client, admin_headers, make_submission):
        submission = await make_submission(email="detail@example.com", phone="1234567890")

        response = await client.get(f"/api/submissions/{submission.id}", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["email"] == "detail@example.com"
        assert body["phone"] == "1234567890"
        assert "password_hash" not in body

    async def test_get_missing_submission(self, client, admin_headers):
        response = await client.get("/api/submissions/999", headers=admin_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Submission not found"

    async def test_delete_submission(self, client, session, admin_headers, make_submission):
        submission = await make_submission()

        response = await client.delete(f"/api/submissions/{submission.id}", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Submission deleted successfully"}
        assert await IntakeService.count_submissions(session) == 0

    async def test_delete_missing_submission(self, client, admin_headers):
        response = await client.delete("/api/submissions/999", headers=admin_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
