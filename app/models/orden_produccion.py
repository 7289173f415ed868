from app.models.base_model import BaseModel
from typing import Dict, Optional
import logging

logger = logging.getLogger(__name__)

class OrdenProduccionModel(BaseModel):
    """
    Modelo para la tabla `production_orders`. Las órdenes se leen junto con
    su rotulador (relación 1 a 1 con `labelers`).
    """

    select_query = '*, labeler:labelers(id, name, cedula)'

    def get_table_name(self) -> str:
        return 'production_orders'

    def find_all(self, filters: Optional[Dict] = None, order_by: str = 'consecutive_number.desc', limit=None, select_query=None) -> Dict:
        return super().find_all(filters, order_by, limit, select_query)

    def cambiar_estado(self, orden_id: str, nuevo_estado: str) -> Dict:
        """Actualiza únicamente el estado de la orden."""
        result = self.update(id_value=orden_id, data={'status': nuevo_estado})
        if not result.get('success'):
            logger.error(f"Fallo al actualizar la orden {orden_id} a estado {nuevo_estado}: {result.get('error')}")
        return result
