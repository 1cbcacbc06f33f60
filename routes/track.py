from flask import Blueprint, render_template, request, flash, current_app, redirect, url_for
from services.tracking_client import TrackingClient, TrackingError
from services.validation import application_id_error

track_bp = Blueprint('track', __name__)


@track_bp.route('/')
def index():
    return redirect(url_for('track.track_page'))


@track_bp.route('/track', methods=['GET', 'POST'])
def track_page():
    application_id = ''
    field_error = None
    error = None
    application = None
    if request.method == 'POST':
        application_id = request.form.get('applicationId', '')
        field_error = application_id_error(application_id)
        if not field_error:
            client = TrackingClient(
                current_app.config['TRACKING_API_URL'],
                timeout=current_app.config.get('TRACKING_TIMEOUT', 10),
            )
            try:
                application = client.fetch_application(application_id)
                flash('Application details fetched successfully', 'success')
            except TrackingError as e:
                error = e.message
                flash(error, 'error')
            finally:
                client.close()
    return render_template(
        'track.html',
        application_id=application_id,
        field_error=field_error,
        error=error,
        application=application,
    )
