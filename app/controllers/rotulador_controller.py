from app.controllers.base_controller import BaseController
from app.models.rotulador import RotuladorModel
from app.schemas.catalogo_schema import RotuladorSchema
from typing import Dict, List
from marshmallow import ValidationError
import logging

logger = logging.getLogger(__name__)

class RotuladorController(BaseController):
    """Controlador para rotuladores (empleados)"""

    def __init__(self):
        super().__init__()
        self.model = RotuladorModel()
        self.schema = RotuladorSchema()

    def obtener_rotuladores_activos(self) -> tuple:
        result = self.model.find_activos()
        if not result.get('success'):
            return self.error_response(f"Error cargando rotuladores: {result.get('error')}", 500)
        return self.success_response(data=result['data'])

    def crear_rotulador(self, data: Dict) -> tuple:
        try:
            validated = self.schema.load(data)
            result = self.model.create(validated)
            if not result.get('success'):
                return self.error_response(f"Error creando rotulador: {result.get('error')}", 500)
            logger.info(f"Rotulador creado: {validated['name']} ({validated['cedula']})")
            return self.success_response(data=result['data'], message='Rotulador creado', status_code=201)
        except ValidationError as e:
            logger.warning(f"Error de validación al crear rotulador: {e.messages}")
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

    def crear_rotuladores(self, registros: List[Dict]) -> tuple:
        try:
            validated = self.schema.load(registros, many=True)
            result = self.model.create_many(validated)
            if not result.get('success'):
                return self.error_response(f"Error creando múltiples rotuladores: {result.get('error')}", 500)
            return self.success_response(data=result['data'], status_code=201)
        except ValidationError as e:
            return self.error_response(f"Datos inválidos: {e.messages}", 422)
