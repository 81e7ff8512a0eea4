"""Tests for household and invite endpoints."""

import pytest


@pytest.mark.api
class TestHouseholdEndpoints:
    def test_requires_authentication(self, client):
        response = client.get("/api/households/me")

        assert response.status_code == 401

    def test_no_household_yet(self, client, auth_state, owner):
        auth_state.user = owner

        response = client.get("/api/households/me")

        assert response.status_code == 200
        assert response.json()["data"]["household"] is None

    def test_create_and_fetch_household(self, client, auth_state, owner):
        auth_state.user = owner

        created = client.post("/api/households", json={"name": "Alex & Sam"})
        fetched = client.get("/api/households/me")

        assert created.status_code == 201
        body = created.json()
        assert body["success"] is True
        assert body["data"]["household"]["name"] == "Alex & Sam"
        assert body["data"]["membership"]["role"] == "owner"
        assert fetched.json()["data"]["household"]["id"] == body["data"]["household"]["id"]

    def test_second_household_is_rejected(self, client, auth_state, owner, household):
        auth_state.user = owner

        response = client.post("/api/households", json={"name": "Another"})

        assert response.status_code == 400

    def test_blank_name_is_rejected(self, client, auth_state, owner):
        auth_state.user = owner

        response = client.post("/api/households", json={"name": "   "})

        assert response.status_code == 422

    def test_member_cannot_rename(self, client, auth_state, household, joined_partner):
        auth_state.user = joined_partner

        response = client.put("/api/households/me", json={"name": "Ours"})

        assert response.status_code == 403

    def test_me_includes_household_summary(self, client, auth_state, owner, household):
        auth_state.user = owner

        response = client.get("/api/auth/me")

        data = response.json()["data"]
        assert data["user"]["email"] == owner.email
        assert data["household"]["name"] == "Alex & Sam"
        assert data["household"]["role"] == "owner"


@pytest.mark.api
class TestInviteEndpoints:
    def test_full_invite_flow(self, client, auth_state, owner, partner, household):
        auth_state.user = owner
        invite = client.post("/api/households/me/invites", json={"email": partner.email})
        assert invite.status_code == 201
        token = invite.json()["data"]["invite"]["invite_token"]

        auth_state.user = partner
        pending = client.get("/api/households/invites/pending")
        assert pending.json()["data"]["total_count"] == 1
        assert pending.json()["data"]["invites"][0]["household"]["name"] == "Alex & Sam"

        joined = client.post("/api/households/join", json={"invite_token": token})
        assert joined.status_code == 200
        assert joined.json()["data"]["membership"]["status"] == "active"

        members = client.get("/api/households/me/members").json()["data"]
        assert members["active_count"] == 2
        assert members["pending_count"] == 0

    def test_token_cannot_be_reused(
        self, client, auth_state, owner, partner, outsider, household
    ):
        auth_state.user = owner
        token = client.post(
            "/api/households/me/invites", json={"email": partner.email}
        ).json()["data"]["invite"]["invite_token"]

        auth_state.user = partner
        assert client.post("/api/households/join", json={"invite_token": token}).status_code == 200

        auth_state.user = outsider
        response = client.post("/api/households/join", json={"invite_token": token})

        assert response.status_code == 404
        assert response.json()["detail"] == "Invalid invite code"

    def test_invalid_email_is_rejected(self, client, auth_state, owner, household):
        auth_state.user = owner

        response = client.post("/api/households/me/invites", json={"email": "nope"})

        assert response.status_code == 422

    def test_cancel_invite(self, client, auth_state, owner, household):
        auth_state.user = owner
        invite_id = client.post(
            "/api/households/me/invites", json={"email": "later@example.com"}
        ).json()["data"]["invite"]["id"]

        first = client.delete(f"/api/households/me/invites/{invite_id}")
        second = client.delete(f"/api/households/me/invites/{invite_id}")

        assert first.json()["data"]["cancelled"] is True
        assert second.json()["data"]["cancelled"] is False

    def test_invite_without_household(self, client, auth_state, outsider):
        auth_state.user = outsider

        response = client.post(
            "/api/households/me/invites", json={"email": "x@example.com"}
        )

        assert response.status_code == 400
