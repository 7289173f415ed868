from app.controllers.base_controller import BaseController
from app.models.base_model import BaseModel
from app.utils.estados import puede_transicionar, estado_destino, TR_ESTADOS
from typing import Dict, Optional
import logging

logger = logging.getLogger(__name__)

class TrasladoBaseController(BaseController):
    """
    Operaciones comunes a los traslados de materia prima ('MP') y de producto
    terminado ('PT'): listado con filtro de estado, cambios de estado según
    el flujo y eliminación.
    """

    tipo_traslado = None
    model: BaseModel = None

    def _listar(self, filtros: Optional[Dict] = None) -> tuple:
        filtros = dict(filtros or {})
        paginacion, error = self._leer_paginacion(filtros)
        if error:
            return self.error_response(error, 400)

        estado = filtros.get('estado')
        if estado and estado != 'all':
            if estado not in TR_ESTADOS:
                return self.error_response(f"Estado de traslado no válido: {estado}", 400)
            result = self.model.find_by_estado(estado)
        else:
            result = self.model.find_all()

        if not result.get('success'):
            return self.error_response(f"Error cargando traslados: {result.get('error')}", 500)

        return self._responder_lista(result['data'], paginacion)

    def _aplicar_transicion(self, traslado_id: str, accion: str, datos_extra: Optional[Dict] = None) -> tuple:
        """
        Aplica `accion` al traslado si su estado actual lo permite.
        404 si no existe, 409 si el estado actual no admite la acción.
        """
        existente = self.model.find_by_id(traslado_id)
        if not existente.get('success'):
            return self.error_response('Traslado no encontrado', 404)

        estado_actual = existente['data'].get('status')
        if not puede_transicionar(self.tipo_traslado, estado_actual, accion):
            return self.error_response(
                f"No se puede {accion.replace('_', ' ')} un traslado en estado {estado_actual}.", 409)

        nuevo_estado = estado_destino(self.tipo_traslado, accion)
        cambios = dict(datos_extra or {})
        cambios['status'] = nuevo_estado

        result = self.model.update(traslado_id, cambios)
        if not result.get('success'):
            return self.error_response(f"Error actualizando traslado: {result.get('error')}", 500)

        logger.info(f"Traslado {self.tipo_traslado} {traslado_id}: {estado_actual} -> {nuevo_estado}")
        return self.success_response(data=result['data'], message=f"Traslado actualizado a {nuevo_estado}.")

    def eliminar_traslado(self, traslado_id: str) -> tuple:
        existente = self.model.find_by_id(traslado_id)
        if not existente.get('success'):
            return self.error_response('Traslado no encontrado', 404)

        result = self.model.delete(traslado_id)
        if not result.get('success'):
            return self.error_response(f"Error eliminando traslado: {result.get('error')}", 500)

        return self.success_response(message='Traslado eliminado exitosamente.')
