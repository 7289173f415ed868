from flask import Blueprint, jsonify, request
from app.controllers.traslado_materia_prima_controller import TrasladoMateriaPrimaController
from app.controllers.traslado_producto_terminado_controller import TrasladoProductoTerminadoController
from app.utils.decorators import admin_key_required
import logging

logger = logging.getLogger(__name__)

traslados_bp = Blueprint('traslados', __name__, url_prefix='/api/traslados')


def _filtros():
    return {k: v for k, v in request.args.items() if v is not None and v != ""}


def _json():
    return request.get_json(silent=True) or {}


# --- Materia prima: bodega -> producción ---

@traslados_bp.route('/materia-prima', methods=['GET'])
def listar_materia_prima():
    response, status = TrasladoMateriaPrimaController().obtener_traslados(_filtros())
    return jsonify(response), status


@traslados_bp.route('/materia-prima/pendientes', methods=['GET'])
def pendientes_materia_prima():
    response, status = TrasladoMateriaPrimaController().obtener_pendientes()
    return jsonify(response), status


@traslados_bp.route('/materia-prima', methods=['POST'])
def crear_materia_prima():
    response, status = TrasladoMateriaPrimaController().crear_traslado(_json())
    return jsonify(response), status


@traslados_bp.route('/materia-prima/<string:traslado_id>/recibir', methods=['POST'])
def recibir_materia_prima(traslado_id):
    response, status = TrasladoMateriaPrimaController().recibir_traslado(traslado_id, _json())
    return jsonify(response), status


@traslados_bp.route('/materia-prima/<string:traslado_id>/rechazar', methods=['POST'])
def rechazar_materia_prima(traslado_id):
    response, status = TrasladoMateriaPrimaController().rechazar_traslado(traslado_id)
    return jsonify(response), status


@traslados_bp.route('/materia-prima/<string:traslado_id>', methods=['DELETE'])
@admin_key_required(accion='eliminar el traslado')
def eliminar_materia_prima(traslado_id):
    response, status = TrasladoMateriaPrimaController().eliminar_traslado(traslado_id)
    return jsonify(response), status


# --- Producto terminado: producción -> empaque -> bodega ---

@traslados_bp.route('/producto-terminado', methods=['GET'])
def listar_producto_terminado():
    response, status = TrasladoProductoTerminadoController().obtener_traslados(_filtros())
    return jsonify(response), status


@traslados_bp.route('/producto-terminado/empaque/pendientes', methods=['GET'])
def pendientes_empaque():
    response, status = TrasladoProductoTerminadoController().obtener_pendientes_empaque()
    return jsonify(response), status


@traslados_bp.route('/producto-terminado/bodega/pendientes', methods=['GET'])
def pendientes_bodega():
    response, status = TrasladoProductoTerminadoController().obtener_pendientes_bodega()
    return jsonify(response), status


@traslados_bp.route('/producto-terminado', methods=['POST'])
def crear_producto_terminado():
    response, status = TrasladoProductoTerminadoController().crear_traslado(_json())
    return jsonify(response), status


@traslados_bp.route('/producto-terminado/<string:traslado_id>/empaque', methods=['POST'])
def recibir_en_empaque(traslado_id):
    response, status = TrasladoProductoTerminadoController().recibir_en_empaque(traslado_id, _json())
    return jsonify(response), status


@traslados_bp.route('/producto-terminado/<string:traslado_id>/recepcion-final', methods=['POST'])
def recepcion_final(traslado_id):
    response, status = TrasladoProductoTerminadoController().recepcion_final(traslado_id, _json())
    return jsonify(response), status


@traslados_bp.route('/producto-terminado/<string:traslado_id>/rechazar', methods=['POST'])
@admin_key_required(accion='rechazar el traslado')
def rechazar_producto_terminado(traslado_id):
    response, status = TrasladoProductoTerminadoController().rechazar_traslado(traslado_id)
    return jsonify(response), status


@traslados_bp.route('/producto-terminado/<string:traslado_id>', methods=['DELETE'])
@admin_key_required(accion='eliminar el traslado')
def eliminar_producto_terminado(traslado_id):
    response, status = TrasladoProductoTerminadoController().eliminar_traslado(traslado_id)
    return jsonify(response), status
