import json
import logging
from flask import Blueprint, request, jsonify

verified_data_bp = Blueprint('verified_data', __name__)


# Echoes the cookie left behind by the document verification flow
@verified_data_bp.route('/api/get-verified-data', methods=['GET'])
def get_verified_data():
    raw = request.cookies.get('verifiedData')
    if not raw:
        return jsonify({'error': 'No verified data found'}), 404
    try:
        data = json.loads(raw)
    except ValueError as e:
        logging.error(f"[VERIFIED_DATA] Error parsing verified data cookie: {e}")
        return jsonify({'error': 'Failed to fetch verified data'}), 500
    return jsonify(data)
