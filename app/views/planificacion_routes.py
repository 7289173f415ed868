from flask import Blueprint, jsonify, request
from app.controllers.plan_produccion_controller import PlanProduccionController
from app.utils.decorators import admin_key_required
import logging

logger = logging.getLogger(__name__)

planificacion_bp = Blueprint('planificacion', __name__, url_prefix='/api/planes')


@planificacion_bp.route('', methods=['GET'])
def listar_planes():
    """?fecha_inicio=YYYY-MM-DD&fecha_fin=YYYY-MM-DD&referencia=texto"""
    filtros = {k: v for k, v in request.args.items() if v is not None and v != ""}
    response, status = PlanProduccionController().obtener_planes(filtros)
    return jsonify(response), status


@planificacion_bp.route('', methods=['POST'])
def crear_plan():
    datos = request.get_json(silent=True)
    if not datos:
        return jsonify({'success': False, 'error': 'No se recibieron datos JSON válidos'}), 400

    controller = PlanProduccionController()
    if isinstance(datos, list):
        response, status = controller.crear_planes(datos)
    else:
        response, status = controller.crear_plan(datos)
    return jsonify(response), status


@planificacion_bp.route('/<string:plan_id>', methods=['DELETE'])
@admin_key_required(accion='eliminar el plan de producción')
def eliminar_plan(plan_id):
    response, status = PlanProduccionController().eliminar_plan(plan_id)
    return jsonify(response), status
