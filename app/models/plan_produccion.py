from app.models.base_model import BaseModel
from typing import Dict, Optional


class PlanProduccionModel(BaseModel):
    """Modelo para la tabla production_plans"""

    select_query = '*, material:materials(id, material_code, material_name, unit, type)'

    def get_table_name(self) -> str:
        return 'production_plans'

    def find_all(self, filters: Optional[Dict] = None, order_by: str = 'planned_date', limit=None, select_query=None) -> Dict:
        return super().find_all(filters, order_by, limit, select_query)
