from flask import Blueprint, jsonify, request
from app.controllers.orden_produccion_controller import OrdenProduccionController
from app.utils.decorators import admin_key_required
import logging

logger = logging.getLogger(__name__)

orden_produccion_bp = Blueprint('orden_produccion', __name__, url_prefix='/api/ordenes')


@orden_produccion_bp.route('', methods=['GET'])
def listar():
    """Lista las órdenes; admite ?estado=, ?page= y ?page_size=."""
    filtros = {k: v for k, v in request.args.items() if v is not None and v != ""}
    controller = OrdenProduccionController()
    response, status = controller.obtener_ordenes(filtros)
    return jsonify(response), status


@orden_produccion_bp.route('/<string:orden_id>', methods=['GET'])
def detalle(orden_id):
    controller = OrdenProduccionController()
    response, status = controller.obtener_orden_por_id(orden_id)
    return jsonify(response), status


@orden_produccion_bp.route('', methods=['POST'])
def crear():
    datos_json = request.get_json(silent=True)
    if not datos_json:
        return jsonify({'success': False, 'error': 'No se recibieron datos JSON válidos'}), 400

    controller = OrdenProduccionController()
    response, status = controller.crear_orden(datos_json)
    return jsonify(response), status


@orden_produccion_bp.route('/<string:orden_id>/estado', methods=['PUT'])
def cambiar_estado(orden_id):
    controller = OrdenProduccionController()
    response, status = controller.cambiar_estado_orden(orden_id, request.get_json(silent=True) or {})
    return jsonify(response), status


@orden_produccion_bp.route('/<string:orden_id>/traslado', methods=['POST'])
def generar_traslado(orden_id):
    """Genera los traslados de la orden hacia empaque."""
    controller = OrdenProduccionController()
    response, status = controller.generar_traslado(orden_id, request.get_json(silent=True) or {})
    return jsonify(response), status


@orden_produccion_bp.route('/<string:orden_id>', methods=['DELETE'])
@admin_key_required(accion='eliminar la orden')
def eliminar(orden_id):
    controller = OrdenProduccionController()
    response, status = controller.eliminar_orden(orden_id)
    return jsonify(response), status
