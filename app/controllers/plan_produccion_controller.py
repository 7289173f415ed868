from app.controllers.base_controller import BaseController
from app.models.material import MaterialModel
from app.models.plan_produccion import PlanProduccionModel
from app.schemas.plan_produccion_schema import PlanProduccionSchema
from app.utils.estados import TIPO_PRODUCTO_TERMINADO
from app.utils.validators import is_fecha_iso
from datetime import date, timedelta
from typing import Dict, List, Optional
from marshmallow import ValidationError
import logging

logger = logging.getLogger(__name__)

class PlanProduccionController(BaseController):
    """Controlador para los planes de producción diarios"""

    def __init__(self):
        super().__init__()
        self.model = PlanProduccionModel()
        self.material_model = MaterialModel()
        self.schema = PlanProduccionSchema()

    def _filtros_fecha(self, fecha_inicio: Optional[str], fecha_fin: Optional[str]) -> Dict:
        """
        Solo inicio: coincidencia exacta del día. Inicio y fin: rango
        inclusivo, consultado como [inicio, fin + 1 día). Sin inicio no se
        filtra por fecha, aunque venga un fin.
        """
        if not fecha_inicio:
            return {}
        if not fecha_fin:
            return {'planned_date': fecha_inicio}
        dia_siguiente = date.fromisoformat(fecha_fin) + timedelta(days=1)
        return {
            'planned_date_gte': fecha_inicio,
            'planned_date_lt': dia_siguiente.isoformat(),
        }

    @staticmethod
    def _coincide_referencia(plan: Dict, referencia: str) -> bool:
        material = plan.get('material') or {}
        texto = referencia.lower()
        return (
            texto in (material.get('material_code') or '').lower()
            or texto in (material.get('material_name') or '').lower()
        )

    def obtener_planes(self, filtros: Optional[Dict] = None) -> tuple:
        """
        Lista los planes por fecha ascendente. Filtros: fecha_inicio,
        fecha_fin y referencia (código o nombre del material).
        """
        filtros = filtros or {}
        fecha_inicio = filtros.get('fecha_inicio') or None
        fecha_fin = filtros.get('fecha_fin') or None
        referencia = (filtros.get('referencia') or '').strip()

        for fecha in (fecha_inicio, fecha_fin):
            if fecha and not is_fecha_iso(fecha):
                return self.error_response(f"Formato de fecha inválido: {fecha}. Se esperaba YYYY-MM-DD.", 400)

        result = self.model.find_all(filters=self._filtros_fecha(fecha_inicio, fecha_fin))
        if not result.get('success'):
            return self.error_response(f"Error cargando planes de producción: {result.get('error')}", 500)

        planes = result['data']
        if referencia:
            planes = [p for p in planes if self._coincide_referencia(p, referencia)]

        return self.success_response(data=planes)

    def _validar_materiales(self, planes: List[Dict]) -> Optional[str]:
        ids = list({p['material_id'] for p in planes})
        result = self.material_model.find_all(filters={'id': ids})
        if not result.get('success'):
            return f"Error consultando materiales: {result.get('error')}"

        por_id = {m['id']: m for m in result['data']}
        for plan in planes:
            material = por_id.get(plan['material_id'])
            if not material:
                return f"Material {plan['material_id']} no encontrado."
            if material.get('type') != TIPO_PRODUCTO_TERMINADO:
                return f"'{material.get('material_name')}' no es un Producto Terminado."
        return None

    def crear_plan(self, data: Dict) -> tuple:
        try:
            validated = self.schema.load(data)
            error = self._validar_materiales([validated])
            if error:
                return self.error_response(error, 422)

            result = self.model.create(validated)
            if not result.get('success'):
                return self.error_response(f"Error creando plan de producción: {result.get('error')}", 500)

            return self.success_response(data=result['data'], message='Plan de producción creado.', status_code=201)

        except ValidationError as e:
            logger.warning(f"Error de validación en plan de producción: {e.messages}")
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

    def crear_planes(self, registros: List[Dict]) -> tuple:
        """Alta masiva de planes (importación desde Excel)."""
        try:
            validated = self.schema.load(registros, many=True)
            if not validated:
                return self.success_response(data=[], status_code=201)

            error = self._validar_materiales(validated)
            if error:
                return self.error_response(error, 422)

            result = self.model.create_many(validated)
            if not result.get('success'):
                return self.error_response(f"Error creando planes de producción: {result.get('error')}", 500)

            return self.success_response(data=result['data'], status_code=201)

        except ValidationError as e:
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

    def eliminar_plan(self, plan_id: str) -> tuple:
        existente = self.model.find_by_id(plan_id)
        if not existente.get('success'):
            return self.error_response('Plan de producción no encontrado', 404)

        result = self.model.delete(plan_id)
        if not result.get('success'):
            return self.error_response(f"Error eliminando plan: {result.get('error')}", 500)

        return self.success_response(message='Plan de producción eliminado.')
