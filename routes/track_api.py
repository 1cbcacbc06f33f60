from flask import Blueprint, request, jsonify
from models.models import db
from services.application_lookup import (
    ApplicationNotFound,
    InvalidApplicationId,
    StoreError,
    fetch_application,
    validate_application_id,
)

track_api_bp = Blueprint('track_api', __name__)


@track_api_bp.route('/api/track', methods=['GET'])
def track_application():
    try:
        application_id = validate_application_id(request.args.get('id'))
    except InvalidApplicationId as e:
        return jsonify({'error': e.message}), 400
    try:
        application = fetch_application(db.engine, application_id)
    except ApplicationNotFound:
        return jsonify({'error': 'Application not found', 'code': 'NOT_FOUND'}), 404
    except StoreError as e:
        return jsonify({
            'error': 'Failed to fetch application details',
            'details': e.details,
            'code': e.code,
        }), 500
    return jsonify(application)
