import logging
from flask import Flask, jsonify
from config import Config
from models.models import db


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))

    # Bound every record store round trip
    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('mysql'):
        engine_options = dict(app.config.get('SQLALCHEMY_ENGINE_OPTIONS') or {})
        engine_options.setdefault('pool_pre_ping', True)
        engine_options['connect_args'] = {
            'connect_timeout': app.config['DB_CONNECT_TIMEOUT'],
            'read_timeout': app.config['DB_QUERY_TIMEOUT'],
            'write_timeout': app.config['DB_QUERY_TIMEOUT'],
        }
        app.config['SQLALCHEMY_ENGINE_OPTIONS'] = engine_options

    db.init_app(app)

    from services.formatting import format_date, yes_no, or_not_available
    app.add_template_filter(format_date)
    app.add_template_filter(yes_no)
    app.add_template_filter(or_not_available)

    from routes.track_api import track_api_bp
    from routes.verified_data import verified_data_bp
    from routes.track import track_bp
    app.register_blueprint(track_api_bp)
    app.register_blueprint(verified_data_bp)
    app.register_blueprint(track_bp)

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
