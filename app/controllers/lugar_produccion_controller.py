from app.controllers.base_controller import BaseController
from app.models.lugar_produccion import LugarProduccionModel
from app.schemas.catalogo_schema import LugarProduccionSchema
from typing import Dict, List
from marshmallow import ValidationError
import logging

logger = logging.getLogger(__name__)

class LugarProduccionController(BaseController):
    """Controlador para lugares de producción"""

    def __init__(self):
        super().__init__()
        self.model = LugarProduccionModel()
        self.schema = LugarProduccionSchema()

    def obtener_lugares_activos(self) -> tuple:
        result = self.model.find_activos()
        if not result.get('success'):
            return self.error_response(f"Error cargando lugares de producción: {result.get('error')}", 500)
        return self.success_response(data=result['data'])

    def crear_lugar(self, data: Dict) -> tuple:
        try:
            validated = self.schema.load(data)
            result = self.model.create(validated)
            if not result.get('success'):
                return self.error_response(f"Error creando lugar de producción: {result.get('error')}", 500)
            return self.success_response(data=result['data'], message='Lugar de producción creado', status_code=201)
        except ValidationError as e:
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

    def crear_lugares(self, registros: List[Dict]) -> tuple:
        try:
            validated = self.schema.load(registros, many=True)
            result = self.model.create_many(validated)
            if not result.get('success'):
                return self.error_response(f"Error creando múltiples lugares de producción: {result.get('error')}", 500)
            return self.success_response(data=result['data'], status_code=201)
        except ValidationError as e:
            return self.error_response(f"Datos inválidos: {e.messages}", 422)
