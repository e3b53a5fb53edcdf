"""Flask API application."""

import logging

from flask import Flask, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from axismundi.config import DEFAULT_API_DEBUG, DEFAULT_API_HOST, DEFAULT_API_PORT, DEFAULT_LOG_LEVEL
from ..engine.derivation_engine import DerivationEngine
from ..engine.roll_data import RollDataProjector
from ..engine.roll_formulas import RollFormulaBuilder
from ..engine.sheet_builder import SheetBuilder
from ..engine.skill_manager import SkillManager
from ..errors import AxisMundiError
from ..models.actors import ActorType, parse_actor
from ..models.items import ItemType

logging.basicConfig(level=DEFAULT_LOG_LEVEL, format='[%(name)-19s - %(levelname)5s] %(message)s')

app = Flask("flask.axismundi")


@app.before_request
def log_request_info():
    app.logger.info('Access to: %s from %s (%s)',
        request.url,
        request.headers.get('X-Forwarded-For', request.remote_addr),
        request.headers.get('User-Agent'))


# Error handlers for API routes
@app.errorhandler(HTTPException)
def handle_http_exception(e: HTTPException):
    """Return JSON instead of HTML for HTTP errors in API routes."""
    if request.path.startswith("/api/"):
        response = e.get_response()
        response.data = jsonify(
            {
                "error": e.name,
                "code": e.code,
                "description": e.description,
            }
        ).data
        response.content_type = "application/json"
        return response
    return e


@app.errorhandler(ValidationError)
def handle_validation_error(e: ValidationError):
    """Malformed actor or item payloads."""
    app.logger.warning(f"Rejected payload: {e.error_count()} validation errors")
    # Raw inputs may hold Infinity or NaN, which are not valid JSON
    details = e.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"error": "Invalid payload", "details": details}), 400


@app.errorhandler(AxisMundiError)
def handle_rule_error(e: AxisMundiError):
    """Payloads that validate but break a rule table."""
    app.logger.warning(f"Rule error: {e}")
    return jsonify({"error": type(e).__name__, "message": str(e)}), 422


@app.errorhandler(500)
def handle_internal_error(e: Exception):
    """Handle 500 errors."""
    app.logger.error(f"Internal server error: {e}", exc_info=True)
    return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500


def _json_body():
    """Request JSON body, or an error response tuple."""
    if not request.is_json:
        return None, (jsonify({"error": "Content-Type must be application/json"}), 400)
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, (jsonify({"error": "No data provided"}), 400)
    return data, None


@app.route("/api/health", methods=["GET"])
def health():
    """Liveness check."""
    return jsonify({"status": "ok"})


@app.route("/api/actors/derive", methods=["POST"])
def derive_actor():
    """Derive an actor's computed values."""
    data, error = _json_body()
    if error:
        return error
    actor = DerivationEngine.derive(parse_actor(data))
    return jsonify({"actor": actor.model_dump(mode="json")})


@app.route("/api/actors/sheet", methods=["POST"])
def actor_sheet():
    """Classified items, weight totals, roll data and labels for an actor."""
    data, error = _json_body()
    if error:
        return error
    return jsonify({"sheet": SheetBuilder.build(parse_actor(data))})


@app.route("/api/actors/roll-data", methods=["POST"])
def actor_roll_data():
    """Roll data projection of a derived actor."""
    data, error = _json_body()
    if error:
        return error
    actor = DerivationEngine.derive(parse_actor(data))
    return jsonify({"roll_data": RollDataProjector.project(actor)})


@app.route("/api/actors/default-skills", methods=["POST"])
def seed_default_skills():
    """Seed starter skills on an actor without skills."""
    data, error = _json_body()
    if error:
        return error
    actor, created = SkillManager.ensure_default_skills(parse_actor(data))
    return jsonify(
        {
            "actor": actor.model_dump(mode="json"),
            "created": [item.model_dump(mode="json") for item in created],
        }
    )


@app.route("/api/actors/skills/calculate", methods=["POST"])
def calculate_skills():
    """Recalculate a character's skill ratings."""
    data, error = _json_body()
    if error:
        return error
    actor = DerivationEngine.derive(parse_actor(data))
    if actor.type != ActorType.CHARACTER.value:
        return jsonify({"error": "Only characters have calculated skills"}), 400
    only_uncalculated = request.args.get("only_uncalculated", "").lower() in ("true", "1", "yes", "on")
    actor = SkillManager.calculate_skill_values(actor, only_uncalculated=only_uncalculated)
    return jsonify({"actor": actor.model_dump(mode="json")})


@app.route("/api/actors/roll-formula", methods=["POST"])
def roll_formula():
    """Formula string for a weapon attack, weapon damage or skill roll."""
    data, error = _json_body()
    if error:
        return error

    kind = data.get("kind")
    if kind not in ("attack", "damage", "skill"):
        return jsonify({"error": "kind must be one of 'attack', 'damage', 'skill'"}), 400
    if "actor" not in data:
        return jsonify({"error": "actor is required"}), 400

    actor = DerivationEngine.derive(parse_actor(data["actor"]))
    item = actor.get_item(data.get("item_id", ""))
    if item is None:
        return jsonify({"error": "Item not found"}), 404

    if kind == "skill":
        if item.type != ItemType.SKILL.value:
            return jsonify({"error": f"Item {item.item_id} is not a skill"}), 400
        return jsonify({"formula": RollFormulaBuilder.skill_check()})

    if item.type != ItemType.WEAPON.value:
        return jsonify({"error": f"Item {item.item_id} is not a weapon"}), 400
    if kind == "damage":
        return jsonify({"formula": RollFormulaBuilder.weapon_damage(actor, item)})

    attack = data.get("attack", "melee")
    if attack not in ("melee", "ranged"):
        return jsonify({"error": "attack must be 'melee' or 'ranged'"}), 400
    return jsonify({"formula": RollFormulaBuilder.weapon_attack(actor, item, attack)})


if __name__ == "__main__":
    app.run(host=DEFAULT_API_HOST, port=DEFAULT_API_PORT, debug=DEFAULT_API_DEBUG)
