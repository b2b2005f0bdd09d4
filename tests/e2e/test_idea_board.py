"""End-to-end tests for the idea voting board."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from teamboard.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(build_test_container()))


def _submit(client, title="Podcast"):
    response = client.post(
        "/ideas",
        json={"title": title, "description": "Weekly episode", "proposer": "Ana"},
    )
    assert response.status_code == 201
    return response.json()["idea_id"]


class TestIdeaBoard:
    """End-to-end tests for submitting, listing and voting on ideas."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_submit_and_list(self, client):
        # Arrange
        _submit(client, "First")
        _submit(client, "Second")

        # Act
        response = client.get("/ideas", params={"sort": "newest"})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["sort"] == "newest"
        assert {i["title"] for i in data["ideas"]} == {"First", "Second"}
        assert all(i["votes"] == 0 for i in data["ideas"])

    def test_blank_submission_rejected(self, client):
        response = client.post(
            "/ideas", json={"title": " ", "description": "x", "proposer": "Ana"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Please fill in all fields"

    def test_vote_requires_voter_identity(self, client):
        idea_id = _submit(client)

        response = client.post(f"/ideas/{idea_id}/vote", json={"kind": "upvote"})

        assert response.status_code == 401

    def test_vote_flow(self, client):
        """Upvote, repeat, downvote, then check the voter's buttons."""
        # Arrange
        idea_id = _submit(client)
        headers = {"X-Voter-Id": "voter-1"}

        # Act
        first = client.post(f"/ideas/{idea_id}/vote", json={"kind": "upvote"}, headers=headers)
        repeat = client.post(f"/ideas/{idea_id}/vote", json={"kind": "upvote"}, headers=headers)
        down = client.post(f"/ideas/{idea_id}/vote", json={"kind": "downvote"}, headers=headers)
        listing = client.get("/ideas", headers=headers)

        # Assert
        assert first.status_code == 200
        assert first.json()["votes"] == 1
        assert first.json()["message"] == "Upvote added!"
        assert repeat.status_code == 409
        assert repeat.json()["detail"] == "You have already upvoted this idea"
        assert down.status_code == 200
        assert down.json()["votes"] == 0
        idea = listing.json()["ideas"][0]
        assert idea["can_upvote"] is False
        assert idea["can_downvote"] is False

    def test_other_voter_can_still_vote(self, client):
        idea_id = _submit(client)
        client.post(
            f"/ideas/{idea_id}/vote", json={"kind": "upvote"}, headers={"X-Voter-Id": "a"}
        )

        response = client.post(
            f"/ideas/{idea_id}/vote", json={"kind": "upvote"}, headers={"X-Voter-Id": "b"}
        )

        assert response.status_code == 200
        assert response.json()["votes"] == 2

    def test_vote_on_unknown_idea(self, client):
        response = client.post(
            f"/ideas/{uuid4()}/vote", json={"kind": "upvote"}, headers={"X-Voter-Id": "a"}
        )

        assert response.status_code == 404

    def test_malformed_idea_id(self, client):
        response = client.post(
            "/ideas/not-a-uuid/vote", json={"kind": "upvote"}, headers={"X-Voter-Id": "a"}
        )

        assert response.status_code == 422

    def test_overlong_title_rejected(self, client):
        response = client.post(
            "/ideas", json={"title": "x" * 301, "description": "x", "proposer": "Ana"}
        )

        assert response.status_code == 422

    def test_overlong_voter_id_rejected(self, client):
        idea_id = _submit(client)

        response = client.post(
            f"/ideas/{idea_id}/vote", json={"kind": "upvote"}, headers={"X-Voter-Id": "v" * 256}
        )

        assert response.status_code == 422

    def test_invalid_vote_kind(self, client):
        idea_id = _submit(client)

        response = client.post(
            f"/ideas/{idea_id}/vote", json={"kind": "sideways"}, headers={"X-Voter-Id": "a"}
        )

        assert response.status_code == 422
