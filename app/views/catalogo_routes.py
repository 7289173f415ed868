from flask import Blueprint, jsonify, request
from app.controllers.lugar_produccion_controller import LugarProduccionController
from app.controllers.rotulador_controller import RotuladorController
import logging

logger = logging.getLogger(__name__)

catalogo_bp = Blueprint('catalogo', __name__, url_prefix='/api')


def _leer_json():
    datos = request.get_json(silent=True)
    if not datos:
        return None, (jsonify({'success': False, 'error': 'No se recibieron datos JSON válidos'}), 400)
    return datos, None


# --- Lugares de producción ---

@catalogo_bp.route('/lugares', methods=['GET'])
def obtener_lugares():
    response, status = LugarProduccionController().obtener_lugares_activos()
    return jsonify(response), status


@catalogo_bp.route('/lugares', methods=['POST'])
def crear_lugar():
    datos, error = _leer_json()
    if error:
        return error
    controller = LugarProduccionController()
    if isinstance(datos, list):
        response, status = controller.crear_lugares(datos)
    else:
        response, status = controller.crear_lugar(datos)
    return jsonify(response), status


# --- Rotuladores ---

@catalogo_bp.route('/rotuladores', methods=['GET'])
def obtener_rotuladores():
    response, status = RotuladorController().obtener_rotuladores_activos()
    return jsonify(response), status


@catalogo_bp.route('/rotuladores', methods=['POST'])
def crear_rotulador():
    datos, error = _leer_json()
    if error:
        return error
    controller = RotuladorController()
    if isinstance(datos, list):
        response, status = controller.crear_rotuladores(datos)
    else:
        response, status = controller.crear_rotulador(datos)
    return jsonify(response), status
