# backend/app.py
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from config import Config
from errors import ValidationError
from share import share_text
from split_state import SplitState

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_object(Config)
app.json.sort_keys = False  # balances keep the group's order
CORS(app, resources={r"/api/*": {"origins": Config.CORS_ORIGINS}})  # Allows the React frontend to talk to this backend


def build_state(data):
    """Turn the request body into a validated SplitState."""
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object.")

    people = data.get('people') or []
    expenses = data.get('expenses') or []
    if not isinstance(people, list) or not isinstance(expenses, list):
        raise ValidationError("'people' and 'expenses' must be lists.")

    state = SplitState()
    for item in people:
        if not isinstance(item, dict):
            raise ValidationError("Each person must be an object.")
        state.add_person(item.get('name'), item.get('id'))

    for item in expenses:
        if not isinstance(item, dict):
            raise ValidationError("Each expense must be an object.")
        shared_by = item.get('sharedBy') or []
        if not isinstance(shared_by, list):
            raise ValidationError("'sharedBy' must be a list.")
        state.add_expense(
            item.get('name'),
            item.get('amount'),
            item.get('paidBy'),
            shared_by,
            item.get('id'),
        )
    return state


# --- 1. HEALTH CHECK ROUTE ---
@app.route('/api', methods=['GET'])
def health_check():
    return jsonify({"status": "healthy", "message": "Backend is running!"})


# --- 2. CALCULATION ROUTE ---
@app.route('/api/calculate', methods=['POST'])
def calculate():
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({"error": "Request body must be valid JSON.", "type": "ValidationError"}), 400

    try:
        state = build_state(data)
        balances = state.balances()
        settlements = state.settlements()
    except ValidationError as e:
        logger.info("Rejected calculation request: %s", e)
        return jsonify({"error": str(e), "type": type(e).__name__}), 400
    except Exception as e:
        # Returns specific error message to the frontend if something crashes
        logger.exception("Calculation failed")
        return jsonify({"error": str(e)}), 500

    return jsonify({
        "balances": balances,
        "settlements": [s.to_dict() for s in settlements],
        "total": state.total_expenses,
        "shareText": share_text(state, settlements, app.config['APP_NAME']),
    })


if __name__ == '__main__':
    app.run(debug=Config.DEBUG, port=Config.PORT)
