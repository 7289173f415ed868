from flask import Blueprint, jsonify, request, send_file
from app.controllers.importacion_controller import ImportacionController
from app.controllers.reporte_controller import ReporteController, PLANTILLAS
import logging

logger = logging.getLogger(__name__)

reportes_bp = Blueprint('reportes', __name__, url_prefix='/api')

MIMETYPE_XLSX = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def _enviar_excel(output, nombre_archivo, error):
    if output is None:
        return jsonify({'success': False, 'error': error}), 500
    return send_file(
        output,
        mimetype=MIMETYPE_XLSX,
        as_attachment=True,
        download_name=nombre_archivo
    )


@reportes_bp.route('/reportes/completo', methods=['GET'])
def exportar_completo():
    output, nombre = ReporteController().generar_reporte_completo()
    return _enviar_excel(output, nombre, 'No se pudo generar el reporte completo.')


@reportes_bp.route('/reportes/ordenes', methods=['GET'])
def exportar_ordenes():
    output, nombre = ReporteController().generar_reporte_ordenes()
    return _enviar_excel(output, nombre, 'No se pudo generar el reporte de órdenes.')


@reportes_bp.route('/reportes/materiales', methods=['GET'])
def exportar_materiales():
    output, nombre = ReporteController().generar_reporte_materiales()
    return _enviar_excel(output, nombre, 'No se pudo generar el reporte de materiales.')


@reportes_bp.route('/reportes/plantillas/<string:tipo>', methods=['GET'])
def descargar_plantilla(tipo):
    """tipo: ordenes | lugares | rotuladores | plan"""
    if tipo not in PLANTILLAS:
        return jsonify({'success': False, 'error': f'Plantilla no disponible: {tipo}'}), 404
    output, nombre = ReporteController().generar_plantilla(tipo)
    return _enviar_excel(output, nombre, 'No se pudo generar la plantilla.')


@reportes_bp.route('/importar', methods=['POST'])
def importar():
    if 'archivo' not in request.files:
        return jsonify({'success': False, 'error': 'No se encontró el archivo en la petición'}), 400

    archivo = request.files['archivo']
    if archivo.filename == '':
        return jsonify({'success': False, 'error': 'No se seleccionó ningún archivo'}), 400

    response, status = ImportacionController().importar_archivo(archivo)
    return jsonify(response), status
