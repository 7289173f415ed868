from flask import Blueprint, jsonify, request
from app.controllers.material_controller import MaterialController
from app.utils.decorators import admin_key_required
import logging

logger = logging.getLogger(__name__)

materiales_bp = Blueprint('materiales', __name__, url_prefix='/api/materiales')


@materiales_bp.route('', methods=['GET'])
def obtener_materiales():
    controller = MaterialController()
    response, status = controller.obtener_materiales(request.args.get('tipo') or None)
    return jsonify(response), status


@materiales_bp.route('', methods=['POST'])
def crear_material():
    datos_json = request.get_json(silent=True)
    if not datos_json:
        return jsonify({'success': False, 'error': 'No se recibieron datos JSON válidos'}), 400

    controller = MaterialController()
    response, status = controller.crear_material(datos_json)
    return jsonify(response), status


@materiales_bp.route('/<string:material_id>', methods=['DELETE'])
@admin_key_required(accion='eliminar el material')
def eliminar_material(material_id):
    controller = MaterialController()
    response, status = controller.eliminar_material(material_id)
    return jsonify(response), status
