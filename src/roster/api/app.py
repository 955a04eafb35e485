from flask import Flask


def create_app() -> Flask:
    """Application factory."""
    app = Flask(__name__)

    # Register blueprints
    from roster.api.reports import bp as reports_bp

    app.register_blueprint(reports_bp, url_prefix="/api/reports")

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    return app
