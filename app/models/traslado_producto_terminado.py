from app.models.base_model import BaseModel
from app.models.traslado_materia_prima import TRASLADO_SELECT
from typing import Dict, Optional


class TrasladoProductoTerminadoModel(BaseModel):
    """
    Modelo para la tabla finished_product_transfers: traslados de producto
    terminado y subproductos desde producción hacia empaque y bodega.
    """

    select_query = TRASLADO_SELECT

    def get_table_name(self) -> str:
        return 'finished_product_transfers'

    def find_all(self, filters: Optional[Dict] = None, order_by: str = 'created_at.desc', limit=None, select_query=None) -> Dict:
        return super().find_all(filters, order_by, limit, select_query)

    def find_by_estado(self, estado: str) -> Dict:
        return self.find_all(filters={'status': estado})
