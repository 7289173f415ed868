# Este archivo hace que el directorio 'models' sea un paquete de Python.

from .material import MaterialModel
from .lugar_produccion import LugarProduccionModel
from .rotulador import RotuladorModel
from .orden_produccion import OrdenProduccionModel
from .traslado_materia_prima import TrasladoMateriaPrimaModel
from .traslado_producto_terminado import TrasladoProductoTerminadoModel
from .plan_produccion import PlanProduccionModel

__all__ = [
    'MaterialModel',
    'LugarProduccionModel',
    'RotuladorModel',
    'OrdenProduccionModel',
    'TrasladoMateriaPrimaModel',
    'TrasladoProductoTerminadoModel',
    'PlanProduccionModel',
]
