from flask import Flask
from flask_cors import CORS
from app.config import Config
import logging
from .json_encoder import CustomJSONProvider


def _register_blueprints(app: Flask):
    """Registra todos los blueprints de la aplicación."""
    from app.views.main_routes import main_bp
    from app.views.material_routes import materiales_bp
    from app.views.catalogo_routes import catalogo_bp
    from app.views.orden_produccion_routes import orden_produccion_bp
    from app.views.traslado_routes import traslados_bp
    from app.views.planificacion_routes import planificacion_bp
    from app.views.reportes_routes import reportes_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(materiales_bp)
    app.register_blueprint(catalogo_bp)
    app.register_blueprint(orden_produccion_bp)
    app.register_blueprint(traslados_bp)
    app.register_blueprint(planificacion_bp)
    app.register_blueprint(reportes_bp)

def _register_error_handlers(app: Flask):
    """Registra los manejadores de errores globales."""
    @app.errorhandler(404)
    def not_found(error):
        return {'success': False, 'error': 'Endpoint no encontrado'}, 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return {'success': False, 'error': 'Método no permitido'}, 405

    @app.errorhandler(413)
    def payload_too_large(error):
        return {'success': False, 'error': 'El archivo supera el tamaño máximo permitido'}, 413

    @app.errorhandler(500)
    def internal_error(error):
        return {'success': False, 'error': 'Error interno del servidor'}, 500

def create_app(config_overrides: dict = None) -> Flask:
    """
    Factory para crear y configurar la aplicación Flask.
    """
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)
    app.json = CustomJSONProvider(app)

    CORS(app, resources={r"/api/*": {"origins": "*"}})

    _register_blueprints(app)
    _register_error_handlers(app)

    return app
