from app.models.base_model import BaseModel
from typing import Dict


class LugarProduccionModel(BaseModel):
    """Modelo para la tabla production_places"""

    def get_table_name(self) -> str:
        return 'production_places'

    def find_activos(self) -> Dict:
        return self.find_all(filters={'active': True}, order_by='name')
