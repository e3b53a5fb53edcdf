"""Tests for the Flask API."""

import pytest

from axismundi.api.app import app
from axismundi.models.actors import CharacterActor, MonsterActor


@pytest.fixture
def client():
    """Flask test client."""
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def _payload(actor):
    return actor.model_dump(mode="json")


class TestActorRoutes:
    """Test suite for the actor routes."""

    def test_health(self, client):
        """Test the liveness route."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "ok"}

    def test_derive(self, client, character):
        """Test that derive returns the derived record."""
        response = client.post("/api/actors/derive", json=_payload(character))
        assert response.status_code == 200
        assert response.get_json()["actor"]["abilities"]["str"]["bonus"] == 2

    def test_derive_stronghold(self, client, stronghold):
        """Test stronghold totals through the API."""
        actor = client.post("/api/actors/derive", json=_payload(stronghold)).get_json()["actor"]
        assert actor["build_time"] == 79
        assert actor["items"][1]["price"] == 700

    def test_sheet(self, client, character):
        """Test the sheet route."""
        response = client.post("/api/actors/sheet", json=_payload(character))
        assert response.status_code == 200
        sheet = response.get_json()["sheet"]
        assert sheet["load_tier"] == 2
        assert sheet["weights"]["carried"] == 34

    def test_roll_data(self, client, monster):
        """Test the roll data route."""
        response = client.post("/api/actors/roll-data", json=_payload(monster))
        assert response.status_code == 200
        assert response.get_json()["roll_data"]["ab"] == 4

    def test_default_skills(self, client):
        """Test seeding starter skills through the API."""
        response = client.post("/api/actors/default-skills", json=_payload(CharacterActor(name="Novice")))
        assert response.status_code == 200
        body = response.get_json()
        assert len(body["created"]) == 7
        assert len(body["actor"]["items"]) == 7

    def test_calculate_skills(self, client, character):
        """Test skill calculation through the API."""
        response = client.post("/api/actors/skills/calculate", json=_payload(character))
        assert response.status_code == 200
        actor = response.get_json()["actor"]
        amounts = {item["name"]: item["amount"] for item in actor["items"] if item["type"] == "pericia"}
        assert amounts == {"Sigilo": 3, "Alquimia": 0}
        assert actor["skills_calculated"] is True

    def test_calculate_skills_rejects_monsters(self, client, monster):
        """Test that only characters have calculated skills."""
        response = client.post("/api/actors/skills/calculate", json=_payload(monster))
        assert response.status_code == 400


class TestRollFormulaRoute:
    """Test suite for the roll formula route."""

    def _post(self, client, character, **body):
        return client.post("/api/actors/roll-formula", json={"actor": _payload(character), **body})

    def test_melee_attack(self, client, character):
        """Test a melee attack formula."""
        response = self._post(client, character, kind="attack", item_id="sword")
        assert response.status_code == 200
        assert response.get_json()["formula"] == "d20+@str.bonus+2+1"

    def test_ranged_attack(self, client, character):
        """Test a ranged attack formula."""
        response = self._post(client, character, kind="attack", item_id="bow", attack="ranged")
        assert response.get_json()["formula"] == "d20+@dex.bonus+1+0"

    def test_damage(self, client, character):
        """Test a damage formula."""
        response = self._post(client, character, kind="damage", item_id="sword")
        assert response.get_json()["formula"] == "1d8+1"

    def test_skill(self, client, character):
        """Test a skill check formula."""
        response = self._post(client, character, kind="skill", item_id="stealth")
        assert response.get_json()["formula"] == "1d6"

    def test_unknown_item(self, client, character):
        """Test that an unknown item id returns 404."""
        response = self._post(client, character, kind="attack", item_id="missing")
        assert response.status_code == 404

    def test_wrong_item_type(self, client, character):
        """Test that attacking with rope is rejected."""
        assert self._post(client, character, kind="attack", item_id="rope").status_code == 400
        assert self._post(client, character, kind="skill", item_id="sword").status_code == 400

    def test_invalid_kind(self, client, character):
        """Test that an unknown formula kind is rejected."""
        assert self._post(client, character, kind="initiative", item_id="sword").status_code == 400

    def test_invalid_attack(self, client, character):
        """Test that an unknown attack kind is rejected."""
        response = self._post(client, character, kind="attack", item_id="sword", attack="thrown")
        assert response.status_code == 400

    def test_missing_actor(self, client):
        """Test that the actor payload is required."""
        response = client.post("/api/actors/roll-formula", json={"kind": "skill", "item_id": "x"})
        assert response.status_code == 400


class TestErrorHandling:
    """Test suite for JSON error responses."""

    def test_non_json_body(self, client):
        """Test that non-JSON requests are rejected."""
        response = client.post("/api/actors/derive", data="hello", content_type="text/plain")
        assert response.status_code == 400
        assert "error" in response.get_json()

    def test_validation_error(self, client):
        """Test that malformed actors return 400 with details."""
        response = client.post("/api/actors/derive", json={"type": "stronghold", "name": "Keep", "workers": 0})
        assert response.status_code == 400
        body = response.get_json()
        assert body["error"] == "Invalid payload"
        assert body["details"]

    def test_unknown_actor_type(self, client):
        """Test that an unknown actor type is a validation error."""
        response = client.post("/api/actors/derive", json={"type": "familiar", "name": "Cat"})
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "body",
        [
            '{"type": "monster", "name": "Titan", "hit_dice": Infinity}',
            '{"type": "monster", "name": "Titan", "hit_dice": NaN}',
            '{"type": "stronghold", "name": "Keep", "workers": 1,'
            ' "items": [{"type": "floor", "name": "Level", "area": Infinity}]}',
            '{"type": "character", "name": "Midas", "money": {"gp": Infinity}}',
        ],
    )
    def test_non_finite_numbers_rejected(self, client, body):
        """Test that Infinity and NaN in payloads are validation errors."""
        response = client.post("/api/actors/derive", data=body, content_type="application/json")
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid payload"

    def test_rule_error(self, client):
        """Test that a save category outside the table returns 422."""
        monster = MonsterActor(name="Aberration", monster_saves=15)
        response = client.post("/api/actors/derive", json=_payload(monster))
        assert response.status_code == 422
        assert response.get_json()["error"] == "InvalidSaveCategoryError"

    def test_unknown_route_is_json(self, client):
        """Test that API 404s are JSON."""
        response = client.get("/api/nowhere")
        assert response.status_code == 404
        assert response.get_json()["code"] == 404

    def test_wrong_method(self, client):
        """Test that GET on a POST route returns 405."""
        assert client.get("/api/actors/derive").status_code == 405
