from flask import Blueprint, jsonify
from app.controllers.dashboard_controller import DashboardController
import logging

logger = logging.getLogger(__name__)

main_bp = Blueprint('main_routes', __name__)

@main_bp.route('/')
def index():
    """Ruta raíz: identifica el servicio."""
    return jsonify({
        'success': True,
        'message': 'PVA PRODUCCIÓN - Sistema de Gestión y Trazabilidad'
    })

@main_bp.route('/api/dashboard', methods=['GET'])
def dashboard():
    controller = DashboardController()
    response, status = controller.obtener_resumen()
    return jsonify(response), status

@main_bp.route('/api/conexion', methods=['GET'])
def probar_conexion():
    controller = DashboardController()
    response, status = controller.probar_conexion()
    return jsonify(response), status
