from app.controllers.base_controller import BaseController
from app.models.material import MaterialModel
from app.schemas.material_schema import MaterialSchema
from app.utils.estados import TIPOS_MATERIAL
from typing import Dict, List, Optional
from marshmallow import ValidationError
import logging

logger = logging.getLogger(__name__)

class MaterialController(BaseController):
    """Controlador para el catálogo de materiales"""

    def __init__(self):
        super().__init__()
        self.material_model = MaterialModel()
        self.schema = MaterialSchema()

    def obtener_materiales(self, tipo: Optional[str] = None) -> tuple:
        """Lista de materiales; con `tipo` se filtra y ordena por nombre."""
        try:
            if tipo:
                if tipo not in TIPOS_MATERIAL:
                    return self.error_response(f"Tipo de material no válido: {tipo}", 400)
                result = self.material_model.find_by_tipo(tipo)
            else:
                result = self.material_model.find_all()

            if not result.get('success'):
                return self.error_response(f"Error cargando materiales: {result.get('error')}", 500)

            return self.success_response(data=result['data'])

        except Exception as e:
            logger.error(f"Error obteniendo materiales: {str(e)}")
            return self.error_response(f'Error interno: {str(e)}', 500)

    def crear_material(self, data: Dict) -> tuple:
        """Crear un nuevo material en el catálogo"""
        try:
            validated_data = self.schema.load(data)

            existente = self.material_model.find_by_codigo(validated_data['material_code'])
            if existente.get('success'):
                return self.error_response('Ya existe un material con ese código.', 409)

            result = self.material_model.create(validated_data)
            if not result.get('success'):
                return self.error_response(f"Error creando material: {result.get('error')}", 500)

            logger.info(f"Material creado exitosamente: {validated_data['material_code']}")
            return self.success_response(
                data=result['data'],
                message='Material creado exitosamente',
                status_code=201
            )

        except ValidationError as e:
            logger.warning(f"Error de validación al crear material: {e.messages}")
            return self.error_response(f"Datos inválidos: {e.messages}", 422)
        except Exception as e:
            logger.error(f"Error creando material: {str(e)}")
            return self.error_response(f'Error interno: {str(e)}', 500)

    def crear_materiales(self, registros: List[Dict]) -> tuple:
        """Alta masiva de materiales (importación desde Excel)."""
        try:
            validated = self.schema.load(registros, many=True)
            result = self.material_model.create_many(validated)
            if not result.get('success'):
                return self.error_response(f"Error creando materiales: {result.get('error')}", 500)
            return self.success_response(data=result['data'], status_code=201)

        except ValidationError as e:
            logger.warning(f"Error de validación en alta masiva de materiales: {e.messages}")
            return self.error_response(f"Datos inválidos: {e.messages}", 422)

    def eliminar_material(self, material_id: str) -> tuple:
        """Eliminación física e irreversible de un material"""
        try:
            existente = self.material_model.find_by_id(material_id)
            if not existente.get('success'):
                return self.error_response('Material no encontrado', 404)

            result = self.material_model.delete(material_id)
            if not result.get('success'):
                return self.error_response(f"Error eliminando material: {result.get('error')}", 500)

            return self.success_response(message='Material eliminado exitosamente.')

        except Exception as e:
            logger.error(f"Error eliminando material {material_id}: {str(e)}")
            return self.error_response(f'Error interno: {str(e)}', 500)
