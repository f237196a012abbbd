"""End-to-end tests for the competition registry API."""

import pytest
from fastapi.testclient import TestClient

from arena.config import Settings
from arena.interface.api.app import create_app
from arena.util.jwt import issue_token
from tests.conftest import ORGANIZER, OTHER_VOTER, OWNER, VOTER
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


def auth(user_id: str) -> dict[str, str]:
    """Authorization header for a caller identity."""
    return {"Authorization": f"Bearer {issue_token(user_id, Settings().auth)}"}


def create_cup(client: TestClient, title: str = "Cup") -> dict:
    response = client.post(
        "/competitions",
        json={"title": title, "description": "Finals", "game_type": "MOBA"},
        headers=auth(ORGANIZER),
    )
    assert response.status_code == 201
    return response.json()["competition"]


def vote(client: TestClient, competition_id: int, voter: str, rating: int = 5):
    return client.post(
        f"/competitions/{competition_id}/votes",
        json={"choice": True, "rating": rating, "comment": "gg"},
        headers=auth(voter),
    )


class TestCreateCompetition:
    """POST /competitions."""

    def test_create(self, client):
        competition = create_cup(client)

        assert competition["competition_id"] == 1
        assert competition["organizer"] == ORGANIZER
        assert competition["vote_count"] == 0
        assert competition["is_active"] is True

    def test_requires_authentication(self, client):
        response = client.post(
            "/competitions",
            json={"title": "Cup", "description": "Finals", "game_type": "MOBA"},
        )

        assert response.status_code == 401

    def test_cookie_authentication(self, client):
        token = issue_token(ORGANIZER, Settings().auth)
        client.cookies.set("auth_token", token)

        response = client.post(
            "/competitions",
            json={"title": "Cup", "description": "Finals", "game_type": "MOBA"},
        )

        assert response.status_code == 201
        assert response.json()["competition"]["organizer"] == ORGANIZER

    def test_empty_title(self, client):
        response = client.post(
            "/competitions",
            json={"title": "  ", "description": "Finals", "game_type": "MOBA"},
            headers=auth(ORGANIZER),
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_input"
        assert create_cup(client)["competition_id"] == 1


class TestVoting:
    """POST /competitions/{id}/votes."""

    def test_vote_updates_count(self, client):
        competition = create_cup(client)

        response = vote(client, competition["competition_id"], VOTER)

        assert response.status_code == 201
        assert response.json()["vote"]["vote_id"] == 1
        detail = client.get("/competitions/1", headers=auth(VOTER)).json()
        assert detail["competition"]["vote_count"] == 1
        assert detail["has_voted"] is True

    def test_duplicate_vote(self, client):
        create_cup(client)
        vote(client, 1, VOTER)

        response = vote(client, 1, VOTER)

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"

    def test_self_vote(self, client):
        create_cup(client)

        response = vote(client, 1, ORGANIZER)

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    def test_vote_on_missing_competition(self, client):
        response = vote(client, 42, VOTER)

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_rating_out_of_range(self, client):
        create_cup(client)

        response = vote(client, 1, VOTER, rating=6)

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_input"

    def test_vote_requires_authentication(self, client):
        create_cup(client)

        response = client.post(
            "/competitions/1/votes", json={"choice": True, "rating": 3}
        )

        assert response.status_code == 401


class TestStatus:
    """Toggle and deactivate endpoints."""

    def test_toggle_then_vote_inactive(self, client):
        create_cup(client)

        toggled = client.post("/competitions/1/toggle", headers=auth(ORGANIZER))
        response = vote(client, 1, VOTER)

        assert toggled.status_code == 200
        assert toggled.json()["competition"]["is_active"] is False
        assert response.status_code == 409
        assert response.json()["error"] == "inactive_resource"

    def test_toggle_by_non_organizer(self, client):
        create_cup(client)

        response = client.post("/competitions/1/toggle", headers=auth(VOTER))

        assert response.status_code == 403

    def test_toggle_missing(self, client):
        response = client.post("/competitions/3/toggle", headers=auth(ORGANIZER))

        assert response.status_code == 404

    def test_owner_deactivates(self, client):
        create_cup(client)

        denied = client.post("/competitions/1/deactivate", headers=auth(ORGANIZER))
        response = client.post("/competitions/1/deactivate", headers=auth(OWNER))

        assert denied.status_code == 403
        assert response.status_code == 200
        assert response.json()["competition"]["is_active"] is False


class TestListings:
    """Listing, detail, votes and stats endpoints."""

    def test_list_for_voting(self, client):
        create_cup(client, "Cup")
        create_cup(client, "Open")
        vote(client, 1, VOTER)

        voter_view = client.get("/competitions", headers=auth(VOTER)).json()
        organizer_view = client.get("/competitions", headers=auth(ORGANIZER)).json()

        assert [c["competition_id"] for c in voter_view["competitions"]] == [2]
        assert organizer_view["total"] == 0

    def test_list_mine(self, client):
        create_cup(client, "Cup")
        create_cup(client, "Open")
        client.post("/competitions/1/toggle", headers=auth(ORGANIZER))

        response = client.get("/competitions/mine", headers=auth(ORGANIZER))

        data = response.json()
        assert response.status_code == 200
        assert data["total"] == 2
        assert [c["is_active"] for c in data["competitions"]] == [False, True]

    def test_get_competition_anonymous(self, client):
        create_cup(client)

        response = client.get("/competitions/1")

        assert response.status_code == 200
        assert response.json()["has_voted"] is False

    def test_get_missing_competition(self, client):
        response = client.get("/competitions/9")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Competition not found: 9",
            "error": "not_found",
        }

    def test_vote_listing_visibility(self, client):
        create_cup(client)
        vote(client, 1, VOTER)
        vote(client, 1, OTHER_VOTER, rating=2)

        organizer = client.get("/competitions/1/votes", headers=auth(ORGANIZER))
        owner = client.get("/competitions/1/votes", headers=auth(OWNER))
        voter = client.get("/competitions/1/votes", headers=auth(VOTER))
        anonymous = client.get("/competitions/1/votes")

        assert organizer.status_code == 200
        assert [v["voter"] for v in organizer.json()["votes"]] == [VOTER, OTHER_VOTER]
        assert owner.json()["total"] == 2
        assert voter.status_code == 403
        assert anonymous.status_code == 403

    def test_stats(self, client):
        assert client.get("/stats").json() == {
            "total_competitions": 0,
            "total_votes": 0,
        }
        create_cup(client)
        vote(client, 1, VOTER)

        assert client.get("/stats").json() == {
            "total_competitions": 1,
            "total_votes": 1,
        }


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["environment"] == "test"


class TestGetVote:
    """GET /votes/{id}."""

    def test_read_own_vote(self, client):
        create_cup(client)
        vote(client, 1, VOTER)

        own = client.get("/votes/1", headers=auth(VOTER))
        other = client.get("/votes/1", headers=auth(OTHER_VOTER))

        assert own.status_code == 200
        assert own.json()["vote"]["comment"] == "gg"
        assert other.status_code == 403

    def test_unknown_vote(self, client):
        response = client.get("/votes/5", headers=auth(VOTER))

        assert response.status_code == 404
        assert response.json()["detail"] == "Vote not found: 5"


class TestOversizedIds:
    """IDs too large for the id columns are reported as unknown."""

    OVERSIZED = 99999999999999999999

    def test_get_competition(self, client):
        response = client.get(f"/competitions/{self.OVERSIZED}")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_vote_and_status_changes(self, client):
        create_cup(client)

        voted = vote(client, self.OVERSIZED, VOTER)
        toggled = client.post(
            f"/competitions/{self.OVERSIZED}/toggle", headers=auth(ORGANIZER)
        )
        deactivated = client.post(
            f"/competitions/{self.OVERSIZED}/deactivate", headers=auth(OWNER)
        )

        assert voted.status_code == 404
        assert toggled.status_code == 404
        assert deactivated.status_code == 404

    def test_votes_and_single_vote(self, client):
        listed = client.get(
            f"/competitions/{self.OVERSIZED}/votes", headers=auth(OWNER)
        )
        single = client.get(f"/votes/{self.OVERSIZED}", headers=auth(VOTER))

        assert listed.status_code == 404
        assert single.status_code == 404
