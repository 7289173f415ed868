from app.database import Database
from typing import Dict, List, Optional, Any
from abc import ABC, abstractmethod
import logging
from datetime import datetime, date
from decimal import Decimal
from uuid import UUID

logger = logging.getLogger(__name__)

class BaseModel(ABC):
    """
    Clase base abstracta con las operaciones CRUD genéricas sobre una tabla
    de Supabase. Todos los métodos devuelven un diccionario de resultado
    `{'success': bool, 'data' | 'error': ...}` y nunca propagan excepciones.
    """

    # Consulta de selección por defecto; las subclases la sobrescriben para
    # incluir relaciones (joins de PostgREST).
    select_query = '*'

    def __init__(self):
        self.db = Database().client
        self.table_name = self.get_table_name()

    def _get_query_builder(self):
        """Devuelve el constructor de consultas para la tabla del modelo."""
        return self.db.table(self.table_name)

    @abstractmethod
    def get_table_name(self) -> str:
        """Nombre de la tabla con la que interactúa el modelo."""
        pass

    def _prepare_data_for_db(self, data: Dict) -> Dict:
        """
        Convierte tipos de Python (Decimal, datetime, UUID) a formatos
        compatibles con JSON y descarta los valores None.
        """
        clean_data = {}
        for key, value in data.items():
            if value is not None:
                if isinstance(value, UUID):
                    clean_data[key] = str(value)
                elif isinstance(value, Decimal):
                    clean_data[key] = str(value)
                elif isinstance(value, (date, datetime)):
                    clean_data[key] = value.isoformat()
                else:
                    clean_data[key] = value
        return clean_data

    def create(self, data: Dict) -> Dict:
        """Crea un nuevo registro en la tabla."""
        try:
            clean_data = self._prepare_data_for_db(data)
            result = self._get_query_builder().insert(clean_data, returning="representation").execute()

            if result.data:
                logger.info(f"Registro creado en {self.table_name}: {result.data[0].get('id')}")
                return {'success': True, 'data': result.data[0]}

            return {'success': False, 'error': 'No se pudo crear el registro'}

        except Exception as e:
            logger.error(f"Error al crear en {self.table_name}: {str(e)}", exc_info=True)
            return {'success': False, 'error': str(e)}

    def create_many(self, records: List[Dict]) -> Dict:
        """Inserta varios registros en una sola petición."""
        if not records:
            return {'success': True, 'data': []}
        try:
            clean_records = [self._prepare_data_for_db(r) for r in records]
            result = self._get_query_builder().insert(clean_records, returning="representation").execute()
            logger.info(f"{len(result.data or [])} registros creados en {self.table_name}")
            return {'success': True, 'data': result.data or []}

        except Exception as e:
            logger.error(f"Error al crear múltiples registros en {self.table_name}: {str(e)}", exc_info=True)
            return {'success': False, 'error': str(e)}

    def find_by_id(self, id_value: Any, id_field: str = None) -> Dict:
        """Busca un registro por su campo de identificación."""
        try:
            if id_field is None:
                id_field = "id"

            result = self._get_query_builder().select(self.select_query).eq(id_field, id_value).execute()

            if result.data:
                return {'success': True, 'data': result.data[0]}

            return {'success': False, 'error': 'Registro no encontrado'}

        except Exception as e:
            logger.error(f"Error al buscar en {self.table_name}: {str(e)}", exc_info=True)
            return {'success': False, 'error': str(e)}

    def find_all(self, filters: Optional[Dict] = None, order_by: str = None, limit: Optional[int] = None, select_query: Optional[str] = None) -> Dict:
        """
        Obtiene los registros que coinciden con los filtros.

        Las claves de `filters` pueden llevar un sufijo de operador
        (`planned_date_gte`, `status_in`, ...). Las listas se traducen a `in`
        y el resto a igualdad. `order_by` usa la sintaxis `columna.desc`.
        """
        try:
            query = self._get_query_builder().select(select_query or self.select_query)

            if filters:
                for key, value in filters.items():
                    if value is None:
                        continue

                    op_map = {
                        'eq': query.eq, 'gt': query.gt, 'gte': query.gte,
                        'lt': query.lt, 'lte': query.lte, 'in': query.in_,
                        'ilike': query.ilike, 'neq': query.neq
                    }

                    # Solo se interpreta como operador si la ÚLTIMA parte es conocida
                    parts = key.split('_')
                    operator = parts[-1]

                    if len(parts) > 1 and operator in op_map:
                        column_name = '_'.join(parts[:-1])
                        query = op_map[operator](column_name, value)
                    elif isinstance(value, list):
                        query = query.in_(key, value)
                    else:
                        query = query.eq(key, value)

            if order_by:
                column, *direction = order_by.split('.')
                descending = len(direction) > 0 and direction[0].lower() == 'desc'
                query = query.order(column, desc=descending)

            if limit:
                query = query.limit(limit)

            result = query.execute()
            return {'success': True, 'data': result.data or []}

        except Exception as e:
            logger.error(f"Error al obtener registros de {self.table_name}: {str(e)}", exc_info=True)
            return {'success': False, 'error': str(e)}

    def update(self, id_value: Any, data: Dict, id_field: str = None) -> Dict:
        """Actualiza un registro existente."""
        try:
            if id_field is None:
                id_field = "id"

            if not data:
                return {'success': False, 'error': 'No se proporcionaron datos para actualizar.'}

            clean_data = self._prepare_data_for_db(data)
            result = self._get_query_builder().update(clean_data).eq(id_field, id_value).execute()

            if result.data:
                logger.info(f"Registro actualizado en {self.table_name}: {id_value}")
                return {'success': True, 'data': result.data[0]}

            return {'success': False, 'error': 'No se pudo actualizar el registro o no se encontró.'}

        except Exception as e:
            logger.error(f"Error al actualizar en {self.table_name}: {str(e)}", exc_info=True)
            return {'success': False, 'error': str(e)}

    def delete(self, id_value: Any, id_field: str = None) -> Dict:
        """Elimina físicamente un registro."""
        try:
            if id_field is None:
                id_field = "id"

            self._get_query_builder().delete().eq(id_field, id_value).execute()

            logger.info(f"Registro eliminado. ID: {id_value} en tabla: {self.table_name}")
            return {'success': True, 'message': 'Registro eliminado físicamente.'}

        except Exception as e:
            logger.error(f"Error al eliminar en {self.table_name}: {str(e)}", exc_info=True)
            return {'success': False, 'error': str(e)}

    def get_count(self, filtros: Optional[Dict] = None) -> Dict:
        """Cuenta el número de registros que coinciden con los filtros."""
        try:
            query = self._get_query_builder().select('id', count='exact')

            if filtros:
                for key, value in filtros.items():
                    if value is not None:
                        query = query.eq(key, value)

            response = query.execute()

            return {'success': True, 'data': response.count or 0}
        except Exception as e:
            logger.error(f"Error contando registros en {self.table_name}: {e}")
            return {'success': False, 'error': str(e)}
