from app.controllers.base_controller import BaseController
from app.models.material import MaterialModel
from app.models.orden_produccion import OrdenProduccionModel
from app.models.plan_produccion import PlanProduccionModel
from app.models.traslado_materia_prima import TrasladoMateriaPrimaModel
from app.models.traslado_producto_terminado import TrasladoProductoTerminadoModel
from app.utils.estados import (
    OP_PENDIENTE,
    OP_EN_PRODUCCION,
    OP_COMPLETADO,
    OP_EN_BODEGA,
    TIPOS_MATERIAL,
    TR_PENDIENTE,
    TR_FINALIZADO_BODEGA,
    color_estado,
)
from typing import Dict, List
import logging

logger = logging.getLogger(__name__)

class DashboardController(BaseController):
    """Indicadores de la pantalla principal y prueba de conexión."""

    def __init__(self):
        super().__init__()
        self.orden_model = OrdenProduccionModel()
        self.material_model = MaterialModel()
        self.plan_model = PlanProduccionModel()
        self.traslado_mp_model = TrasladoMateriaPrimaModel()
        self.traslado_pt_model = TrasladoProductoTerminadoModel()

    @staticmethod
    def _resumen_orden(orden: Dict) -> Dict:
        producidos = orden.get('produced_materials') or []
        return {
            'id': orden.get('id'),
            'consecutive_number': orden.get('consecutive_number'),
            'producto': producidos[0].get('material_name') if producidos else 'Sin productos',
            'lugar': orden.get('production_place') or 'Sin lugar',
            'status': orden.get('status'),
            'color': color_estado(orden.get('status')),
        }

    def _contar(self, model, filtros: Dict = None) -> int:
        result = model.get_count(filtros)
        if not result.get('success'):
            raise RuntimeError(result.get('error'))
        return result['data']

    def obtener_resumen(self) -> tuple:
        try:
            ordenes_result = self.orden_model.find_all()
            if not ordenes_result.get('success'):
                return self.error_response(f"Error cargando órdenes: {ordenes_result.get('error')}", 500)
            ordenes: List[Dict] = ordenes_result['data']

            def por_estado(estado):
                return sum(1 for o in ordenes if o.get('status') == estado)

            materiales_por_tipo = {
                tipo: self._contar(self.material_model, {'type': tipo}) for tipo in TIPOS_MATERIAL
            }

            resumen = {
                'total_ordenes': len(ordenes),
                'ordenes_pendientes': por_estado(OP_PENDIENTE),
                'ordenes_en_produccion': por_estado(OP_EN_PRODUCCION),
                'ordenes_en_bodega': por_estado(OP_EN_BODEGA),
                'ordenes_completadas': por_estado(OP_COMPLETADO),
                'total_materiales': self._contar(self.material_model),
                'materiales_por_tipo': materiales_por_tipo,
                'total_planes': self._contar(self.plan_model),
                'ordenes_recientes': [self._resumen_orden(o) for o in ordenes[:5]],
                'traslados_mp_pendientes': self._contar(self.traslado_mp_model, {'status': TR_PENDIENTE}),
                'recepciones_empaque_pendientes': self._contar(self.traslado_pt_model, {'status': TR_PENDIENTE}),
                'recepciones_bodega_pendientes': self._contar(self.traslado_pt_model, {'status': TR_FINALIZADO_BODEGA}),
            }
            return self.success_response(data=resumen)

        except Exception as e:
            logger.error(f"Error generando el resumen del dashboard: {str(e)}", exc_info=True)
            return self.error_response(f'Error interno: {str(e)}', 500)

    def probar_conexion(self) -> tuple:
        """Consulta de conteo sobre `materials` para verificar la conexión."""
        result = self.material_model.get_count()
        if not result.get('success'):
            logger.error(f"Fallo la prueba de conexión a Supabase: {result.get('error')}")
            return {'success': False, 'error': result.get('error')}, 503

        return {
            'success': True,
            'message': 'Conexión exitosa a Supabase',
            'materials_count': result['data'],
        }, 200
