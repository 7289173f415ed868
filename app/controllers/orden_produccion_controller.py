from app.controllers.base_controller import BaseController
from app.models.material import MaterialModel
from app.models.orden_produccion import OrdenProduccionModel
from app.models.traslado_producto_terminado import TrasladoProductoTerminadoModel
from app.schemas.orden_produccion_schema import (
    OrdenProduccionSchema,
    EstadoOrdenSchema,
    GenerarTrasladoSchema,
)
from app.utils.date_utils import get_today_local
from app.utils.estados import (
    OP_PENDIENTE,
    OP_ESTADOS,
    OP_TRANSFERIDO_A_EMPAQUE,
    TIPO_PRODUCTO_TERMINADO,
    TIPO_SUBPRODUCTO,
    TIPO_MATERIAL_EMPAQUE,
    TR_PENDIENTE,
)
from typing import Dict, Optional
from marshmallow import ValidationError
import logging

logger = logging.getLogger(__name__)

class OrdenProduccionController(BaseController):
    """
    Controlador para la lógica de negocio de las Órdenes de Producción.
    """

    def __init__(self):
        super().__init__()
        self.model = OrdenProduccionModel()
        self.material_model = MaterialModel()
        self.traslado_model = TrasladoProductoTerminadoModel()
        self.schema = OrdenProduccionSchema()

    def obtener_ordenes(self, filtros: Optional[Dict] = None) -> tuple:
        """
        Obtiene las órdenes (más recientes primero). El filtro `estado` con
        valor 'all' equivale a no filtrar.
        """
        filtros = dict(filtros or {})
        paginacion, error = self._leer_paginacion(filtros)
        if error:
            return self.error_response(error, 400)

        estado = filtros.get('estado')
        filtros_db = {}
        if estado and estado != 'all':
            if estado not in OP_ESTADOS:
                return self.error_response(f"Estado de orden no válido: {estado}", 400)
            filtros_db['status'] = estado

        result = self.model.find_all(filters=filtros_db)
        if not result.get('success'):
            return self.error_response(f"Error cargando órdenes de producción: {result.get('error')}", 500)

        return self._responder_lista(result['data'], paginacion)

    def obtener_orden_por_id(self, orden_id: str) -> tuple:
        result = self.model.find_by_id(orden_id)
        if not result.get('success'):
            return self.error_response('Orden de producción no encontrada', 404)
        return self.success_response(data=result['data'])

    def crear_orden(self, form_data: Dict) -> tuple:
        """
        Valida y crea una nueva orden de producción en estado PENDIENTE.
        Cada línea {material_id, quantity} se completa con código, nombre y
        unidad del material, que debe ser del tipo que corresponde a su lista.
        """
        try:
            validated = self.schema.load(form_data)

            producidos, error = self._resolver_items(
                validated['produced_materials'], TIPO_PRODUCTO_TERMINADO, 'Productos producidos')
            if error:
                return self.error_response(error, 422)

            subproductos, error = self._resolver_items(
                validated['byproducts'], TIPO_SUBPRODUCTO, 'Subproductos')
            if error:
                return self.error_response(error, 422)

            empaque, error = self._resolver_items(
                validated['packaging_materials'], TIPO_MATERIAL_EMPAQUE, 'Materiales de empaque')
            if error:
                return self.error_response(error, 422)

            orden = {
                'order_date': validated.get('order_date') or get_today_local(),
                'production_place': validated['production_place'],
                'labeler_id': validated['labeler_id'],
                'produced_materials': producidos,
                'byproducts': subproductos,
                'packaging_materials': empaque,
                # Columnas heredadas que aún leen otros reportes
                'finished_products': producidos,
                'generated_byproducts': subproductos,
                'status': OP_PENDIENTE,
            }

            result = self.model.create(orden)
            if not result.get('success'):
                return self.error_response(f"Error creando orden de producción: {result.get('error')}", 500)

            logger.info(f"Orden de producción #{result['data'].get('consecutive_number')} creada.")
            return self.success_response(
                data=result['data'],
                message='Orden de producción creada exitosamente',
                status_code=201
            )

        except ValidationError as e:
            logger.warning(f"Error de validación al crear orden: {e.messages}")
            return self.error_response(f"Datos inválidos: {e.messages}", 422)
        except Exception as e:
            logger.error(f"Error creando orden de producción: {str(e)}", exc_info=True)
            return self.error_response(f'Error interno: {str(e)}', 500)

    def cambiar_estado_orden(self, orden_id: str, data: Dict) -> tuple:
        """Cambio manual de estado; cualquier estado válido es aceptado."""
        try:
            nuevo_estado = EstadoOrdenSchema().load(data)['status']
        except ValidationError as e:
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

        existente = self.model.find_by_id(orden_id)
        if not existente.get('success'):
            return self.error_response('Orden de producción no encontrada', 404)

        result = self.model.cambiar_estado(orden_id, nuevo_estado)
        if not result.get('success'):
            return self.error_response(f"Error actualizando estado: {result.get('error')}", 500)

        return self.success_response(data=result['data'], message=f"Estado actualizado a {nuevo_estado}.")

    def eliminar_orden(self, orden_id: str) -> tuple:
        existente = self.model.find_by_id(orden_id)
        if not existente.get('success'):
            return self.error_response('Orden de producción no encontrada', 404)

        result = self.model.delete(orden_id)
        if not result.get('success'):
            return self.error_response(f"Error eliminando orden: {result.get('error')}", 500)

        logger.info(f"Orden de producción {orden_id} eliminada.")
        return self.success_response(message='Orden eliminada exitosamente.')

    def generar_traslado(self, orden_id: str, data: Optional[Dict] = None) -> tuple:
        """
        Genera los traslados de producción hacia empaque: uno por cada producto
        terminado y uno por cada subproducto de la orden. Al terminar, la orden
        pasa a TRANSFERIDO_A_EMPAQUE.
        """
        try:
            opciones = GenerarTrasladoSchema().load(data or {})
        except ValidationError as e:
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

        orden_result = self.model.find_by_id(orden_id)
        if not orden_result.get('success'):
            return self.error_response('Orden de producción no encontrada', 404)
        orden = orden_result['data']

        if orden.get('status') == OP_TRANSFERIDO_A_EMPAQUE:
            return self.error_response('La orden ya fue transferida a empaque.', 409)

        producidos = orden.get('produced_materials') or []
        subproductos = orden.get('byproducts') or []
        if not producidos and not subproductos:
            return self.error_response('La orden no tiene productos para trasladar.', 409)

        numero = orden.get('consecutive_number')
        empleado_id = opciones.get('transfer_employee_id') or orden.get('labeler_id')
        fecha = opciones.get('transfer_date') or get_today_local()

        lineas = [(item, f"Traslado de Producto Terminado de Orden #{numero}") for item in producidos]
        lineas += [(item, f"Traslado de Subproducto de Orden #{numero}") for item in subproductos]

        creados = []
        for item, observacion in lineas:
            result = self.traslado_model.create({
                'material_id': item.get('material_id'),
                'quantity': item.get('quantity'),
                'transfer_employee_id': empleado_id,
                'transfer_date': fecha,
                'status': TR_PENDIENTE,
                'observations': observacion,
                'production_order_id': orden_id,
            })
            if not result.get('success'):
                logger.error(
                    f"Fallo al generar traslado de la orden #{numero} "
                    f"({len(creados)} de {len(lineas)} creados): {result.get('error')}"
                )
                return self.error_response(
                    f"Error generando traslados: se crearon {len(creados)} de {len(lineas)}. "
                    f"{result.get('error')}",
                    500
                )
            creados.append(result['data'])

        estado_result = self.model.cambiar_estado(orden_id, OP_TRANSFERIDO_A_EMPAQUE)
        if not estado_result.get('success'):
            return self.error_response(
                f"Se crearon {len(creados)} traslados pero no se pudo actualizar la orden: "
                f"{estado_result.get('error')}",
                500
            )

        logger.info(f"Orden #{numero} transferida a empaque con {len(creados)} traslados.")
        return self.success_response(
            data={'orden': estado_result['data'], 'traslados': creados},
            message=f"Se generaron {len(creados)} traslados hacia empaque.",
            status_code=201
        )
