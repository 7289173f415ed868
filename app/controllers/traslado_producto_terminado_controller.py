from app.controllers.traslado_base_controller import TrasladoBaseController
from app.models.material import MaterialModel
from app.models.traslado_producto_terminado import TrasladoProductoTerminadoModel
from app.schemas.traslado_schema import (
    TrasladoProductoTerminadoSchema,
    RecepcionSchema,
    RecepcionEmpaqueSchema,
)
from app.utils.date_utils import get_today_local, utc_now_iso
from app.utils.estados import (
    TIPO_PRODUCTO_TERMINADO,
    TIPO_SUBPRODUCTO,
    TIPO_MATERIAL_EMPAQUE,
    TR_PENDIENTE,
    TR_FINALIZADO_BODEGA,
)
from typing import Dict, Optional
from marshmallow import ValidationError
import logging

logger = logging.getLogger(__name__)

class TrasladoProductoTerminadoController(TrasladoBaseController):
    """
    Traslados de producto terminado: producción -> empaque (FINALIZADO_BODEGA)
    -> bodega (RECIBIDO). Pueden rechazarse en cualquiera de las dos etapas.
    """

    tipo_traslado = 'PT'

    def __init__(self):
        super().__init__()
        self.model = TrasladoProductoTerminadoModel()
        self.material_model = MaterialModel()

    def obtener_traslados(self, filtros: Optional[Dict] = None) -> tuple:
        return self._listar(filtros)

    def obtener_pendientes_empaque(self) -> tuple:
        return self._listar({'estado': TR_PENDIENTE})

    def obtener_pendientes_bodega(self) -> tuple:
        return self._listar({'estado': TR_FINALIZADO_BODEGA})

    def crear_traslado(self, data: Dict) -> tuple:
        """Registro manual de un traslado de producto terminado hacia empaque."""
        try:
            validated = TrasladoProductoTerminadoSchema().load(data)

            material = self.material_model.find_by_id(validated['material_id'])
            if not material.get('success'):
                return self.error_response('Material no encontrado', 404)
            if material['data'].get('type') != TIPO_PRODUCTO_TERMINADO:
                return self.error_response('Solo se pueden trasladar materiales de tipo Producto Terminado.', 422)

            subproductos, error = self._resolver_items(
                validated['byproducts_transferred'], TIPO_SUBPRODUCTO, 'Subproductos')
            if error:
                return self.error_response(error, 422)

            validated['byproducts_transferred'] = subproductos
            validated['transfer_date'] = validated.get('transfer_date') or get_today_local()
            validated['status'] = TR_PENDIENTE

            result = self.model.create(validated)
            if not result.get('success'):
                return self.error_response(f"Error creando traslado: {result.get('error')}", 500)

            return self.success_response(data=result['data'], message='Traslado registrado.', status_code=201)

        except ValidationError as e:
            logger.warning(f"Error de validación en traslado de producto terminado: {e.messages}")
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

    def recibir_en_empaque(self, traslado_id: str, data: Dict) -> tuple:
        """Recepción en empaque: registra cajas y material de empaque usado."""
        try:
            recepcion = RecepcionEmpaqueSchema().load(data)
        except ValidationError as e:
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

        empaque, error = self._resolver_items(
            recepcion['packaging_materials_used'], TIPO_MATERIAL_EMPAQUE, 'Materiales de empaque')
        if error:
            return self.error_response(error, 422)

        recepcion['packaging_materials_used'] = empaque
        recepcion['received_at'] = utc_now_iso()
        return self._aplicar_transicion(traslado_id, 'recibir_empaque', recepcion)

    def recepcion_final(self, traslado_id: str, data: Dict) -> tuple:
        """Recepción final en bodega: FINALIZADO_BODEGA -> RECIBIDO."""
        try:
            recepcion = RecepcionSchema().load(data)
        except ValidationError as e:
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

        recepcion['received_at'] = utc_now_iso()
        return self._aplicar_transicion(traslado_id, 'recepcion_final', recepcion)

    def rechazar_traslado(self, traslado_id: str) -> tuple:
        return self._aplicar_transicion(traslado_id, 'rechazar')
