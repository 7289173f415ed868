from typing import Dict, List, Optional, Any, Tuple
from app.config import Config
from app.utils.validators import validate_pagination
import logging

logger = logging.getLogger(__name__)

class BaseController:
    """
    Controlador base que proporciona métodos de utilidad comunes heredables
    por otros controladores de la aplicación.
    """

    # Los controladores que manejan líneas de material asignan aquí su MaterialModel
    material_model = None

    def success_response(self, data: Any = None, message: str = "Acción exitosa", status_code: int = 200) -> tuple:
        """
        Genera una tupla de respuesta HTTP estándar para operaciones exitosas.
        """
        response = {
            'success': True,
            'data': data,
            'message': message
        }
        return response, status_code

    def error_response(self, error_message: str, status_code: int = 400) -> tuple:
        """
        Genera una tupla de respuesta HTTP estándar para operaciones fallidas.
        """
        response = {
            'success': False,
            'error': str(error_message)
        }
        return response, status_code

    def paginate_results(self, data: list, page: int, page_size: int) -> Dict:
        """
        Aplica paginación a una lista de resultados.
        """
        total = len(data)
        start = (page - 1) * page_size
        end = start + page_size

        return {
            'items': data[start:end],
            'pagination': {
                'page': page,
                'page_size': page_size,
                'total_items': total,
                'total_pages': (total + page_size - 1) // page_size
            }
        }

    def _resolver_items(self, items: List[Dict], tipo_esperado: str, etiqueta: str) -> Tuple[Optional[List[Dict]], Optional[str]]:
        """
        Convierte líneas {material_id, quantity} en ProducedItems completos
        (código, nombre y unidad tomados del catálogo).

        Devuelve (items, None) o (None, mensaje_de_error) si algún material no
        existe o no es del tipo esperado.
        """
        if not items:
            return [], None

        ids = list({item['material_id'] for item in items})
        result = self.material_model.find_all(filters={'id': ids})
        if not result.get('success'):
            return None, f"Error consultando materiales: {result.get('error')}"

        por_id = {m['id']: m for m in result.get('data', [])}
        resueltos = []
        for item in items:
            material = por_id.get(item['material_id'])
            if not material:
                return None, f"{etiqueta}: material {item['material_id']} no encontrado."
            if material.get('type') != tipo_esperado:
                return None, f"{etiqueta}: '{material.get('material_name')}' no es de tipo {tipo_esperado}."
            resueltos.append({
                'material_id': material['id'],
                'material_code': material['material_code'],
                'material_name': material['material_name'],
                'unit': material['unit'],
                'quantity': item['quantity'],
            })
        return resueltos, None

    def _leer_paginacion(self, filtros: Dict) -> Tuple[Optional[Tuple[int, int]], Optional[str]]:
        """
        Extrae page/page_size de los filtros. Devuelve (None, None) si no se
        pidió paginación y (None, error) si los valores no son válidos.
        """
        if 'page' not in filtros and 'page_size' not in filtros:
            return None, None
        try:
            page = int(filtros.pop('page', 1))
            page_size = int(filtros.pop('page_size', Config.DEFAULT_PAGE_SIZE))
        except (TypeError, ValueError):
            return None, 'Los parámetros de paginación deben ser números enteros.'

        errores = validate_pagination(page, page_size, Config.MAX_PAGE_SIZE)
        if errores:
            return None, ' '.join(errores.values())
        return (page, page_size), None

    def _responder_lista(self, data: list, paginacion: Optional[Tuple[int, int]]) -> tuple:
        """Devuelve la lista completa o, si se pidió, la página solicitada."""
        if paginacion:
            page, page_size = paginacion
            return self.success_response(data=self.paginate_results(data, page, page_size))
        return self.success_response(data=data)
