from app.controllers.traslado_base_controller import TrasladoBaseController
from app.models.material import MaterialModel
from app.models.traslado_materia_prima import TrasladoMateriaPrimaModel
from app.schemas.traslado_schema import TrasladoMateriaPrimaSchema, RecepcionSchema
from app.utils.date_utils import get_today_local, utc_now_iso
from app.utils.estados import TIPO_MATERIA_PRIMA, TR_PENDIENTE
from typing import Dict, Optional
from marshmallow import ValidationError
import logging

logger = logging.getLogger(__name__)

class TrasladoMateriaPrimaController(TrasladoBaseController):
    """Traslados de materia prima desde bodega hacia producción"""

    tipo_traslado = 'MP'

    def __init__(self):
        super().__init__()
        self.model = TrasladoMateriaPrimaModel()
        self.material_model = MaterialModel()

    def obtener_traslados(self, filtros: Optional[Dict] = None) -> tuple:
        return self._listar(filtros)

    def obtener_pendientes(self) -> tuple:
        return self._listar({'estado': TR_PENDIENTE})

    def crear_traslado(self, data: Dict) -> tuple:
        try:
            validated = TrasladoMateriaPrimaSchema().load(data)

            material = self.material_model.find_by_id(validated['material_id'])
            if not material.get('success'):
                return self.error_response('Material no encontrado', 404)
            if material['data'].get('type') != TIPO_MATERIA_PRIMA:
                return self.error_response('Solo se pueden trasladar materiales de tipo Materia Prima.', 422)

            validated['transfer_date'] = validated.get('transfer_date') or get_today_local()
            validated['status'] = TR_PENDIENTE

            result = self.model.create(validated)
            if not result.get('success'):
                return self.error_response(f"Error creando traslado: {result.get('error')}", 500)

            return self.success_response(data=result['data'], message='Traslado registrado.', status_code=201)

        except ValidationError as e:
            logger.warning(f"Error de validación en traslado de materia prima: {e.messages}")
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

    def recibir_traslado(self, traslado_id: str, data: Dict) -> tuple:
        """Recepción en producción: PENDIENTE -> RECIBIDO."""
        try:
            recepcion = RecepcionSchema().load(data)
        except ValidationError as e:
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

        recepcion['received_at'] = utc_now_iso()
        return self._aplicar_transicion(traslado_id, 'recibir', recepcion)

    def rechazar_traslado(self, traslado_id: str) -> tuple:
        return self._aplicar_transicion(traslado_id, 'rechazar')
