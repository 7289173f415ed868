from app.models.base_model import BaseModel
from typing import Dict
import logging

logger = logging.getLogger(__name__)

class MaterialModel(BaseModel):
    """Modelo para la tabla materials (catálogo de materiales)"""

    def get_table_name(self) -> str:
        return 'materials'

    def find_all(self, filters=None, order_by: str = 'created_at.desc', limit=None, select_query=None) -> Dict:
        """Por defecto los materiales más recientes primero."""
        return super().find_all(filters, order_by, limit, select_query)

    def find_by_tipo(self, tipo: str) -> Dict:
        """Materiales de un tipo, ordenados alfabéticamente por nombre."""
        return super().find_all(filters={'type': tipo}, order_by='material_name')

    def find_by_codigo(self, codigo: str) -> Dict:
        """Busca un material por su código. Falla si no existe."""
        try:
            result = self._get_query_builder().select('*').eq('material_code', codigo).limit(1).execute()
            if result.data:
                return {'success': True, 'data': result.data[0]}
            return {'success': False, 'error': 'Material no encontrado'}
        except Exception as e:
            logger.error(f"Error buscando material por código {codigo}: {str(e)}", exc_info=True)
            return {'success': False, 'error': str(e)}
