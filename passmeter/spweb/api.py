import logging

from flask import Flask, jsonify, request

from passmeter.config import load_policy
from passmeter.evaluator import evaluate
from passmeter.exceptions import PolicyError
from passmeter.policy import Policy

logger = logging.getLogger(__name__)


def create_app(policy: Policy = None) -> Flask:
    """Build the API app; the base policy defaults to the stored settings."""
    app = Flask(__name__)
    # keep criteria in evaluation order
    app.json.sort_keys = False
    base_policy = policy if policy is not None else load_policy()

    @app.route('/')
    def home():
        return jsonify({
            "message": "PassMeter API is running"
        })

    @app.route('/policy', methods=['GET'])
    def policy_route():
        return jsonify(base_policy.to_dict())

    @app.route('/score', methods=['POST'])
    def score_route():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({'error': 'expected a JSON object'}), 400
        password = data.get('password', '')
        if not isinstance(password, str):
            return jsonify({'error': "'password' must be a string"}), 400
        overrides = data.get('policy')
        if overrides is None:
            overrides = {}
        if not isinstance(overrides, dict):
            return jsonify({'error': "'policy' must be an object"}), 400
        try:
            merged = base_policy.to_dict()
            merged.update(overrides)
            effective = Policy.from_mapping(merged)
        except PolicyError as e:
            logger.info("Rejected policy override: %s", e)
            return jsonify({'error': str(e)}), 400
        result = evaluate(password, effective)
        return jsonify(result.to_dict())

    return app


_app = None


def __getattr__(name):
    # module-level `app` for WSGI servers (passmeter.spweb.api:app), built on first access
    global _app
    if name == "app":
        if _app is None:
            _app = create_app()
        return _app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


if __name__ == "__main__":
    create_app().run(debug=True)
