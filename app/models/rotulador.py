from app.models.base_model import BaseModel
from typing import Dict


class RotuladorModel(BaseModel):
    """Modelo para la tabla labelers (empleados que rotulan, trasladan o reciben)"""

    def get_table_name(self) -> str:
        return 'labelers'

    def find_activos(self) -> Dict:
        return self.find_all(filters={'active': True}, order_by='name')
