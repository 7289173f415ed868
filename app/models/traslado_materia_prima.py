from app.models.base_model import BaseModel
from typing import Dict, Optional

TRASLADO_SELECT = (
    '*, material:materials(id, material_code, material_name, unit, type), '
    'transfer_employee:labelers!transfer_employee_id(id, name, cedula), '
    'received_employee:labelers!received_employee_id(id, name, cedula)'
)


class TrasladoMateriaPrimaModel(BaseModel):
    """Modelo para la tabla raw_material_transfers"""

    select_query = TRASLADO_SELECT

    def get_table_name(self) -> str:
        return 'raw_material_transfers'

    def find_all(self, filters: Optional[Dict] = None, order_by: str = 'created_at.desc', limit=None, select_query=None) -> Dict:
        return super().find_all(filters, order_by, limit, select_query)

    def find_by_estado(self, estado: str) -> Dict:
        return self.find_all(filters={'status': estado})
