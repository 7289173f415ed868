from app.controllers.base_controller import BaseController
from app.controllers.lugar_produccion_controller import LugarProduccionController
from app.controllers.material_controller import MaterialController
from app.controllers.plan_produccion_controller import PlanProduccionController
from app.controllers.rotulador_controller import RotuladorController
from app.models.material import MaterialModel
from app.models.orden_produccion import OrdenProduccionModel
from app.utils.date_utils import get_today_local
from app.utils.estados import OP_PENDIENTE, TIPO_PRODUCTO_TERMINADO
from app.utils.validators import is_fecha_iso, normalize_date
from datetime import date, datetime
from typing import Any, Dict, List, Optional
import json
import numbers
import pandas as pd
import logging

logger = logging.getLogger(__name__)

EXTENSIONES_PERMITIDAS = ('.xlsx', '.xls')


def _vacio(valor: Any) -> bool:
    if valor is None:
        return True
    if isinstance(valor, str):
        return not valor.strip()
    try:
        return bool(pd.isna(valor))
    except (TypeError, ValueError):
        return False


def _texto(valor: Any) -> Optional[str]:
    """Convierte una celda a texto; los enteros leídos como float pierden el '.0'."""
    if _vacio(valor):
        return None
    if isinstance(valor, float) and valor.is_integer():
        valor = int(valor)
    return str(valor).strip()


def _valor(fila: Dict, *claves: str) -> Any:
    """Primer valor no vacío entre los encabezados alternativos."""
    for clave in claves:
        valor = fila.get(clave)
        if not _vacio(valor):
            return valor
    return None


def _es_activo(valor: Any) -> bool:
    if _vacio(valor):
        return True
    if isinstance(valor, bool):
        return valor
    return str(valor).strip().upper() == 'TRUE'


def _fecha_excel(valor: Any) -> Optional[str]:
    """
    Acepta un número de serie de Excel, una celda de fecha o un texto
    YYYY-MM-DD. Devuelve la fecha ISO o None si el valor no es interpretable.
    """
    if isinstance(valor, bool):
        return None
    if isinstance(valor, numbers.Number):
        return pd.to_datetime(valor, unit='D', origin='1899-12-30').date().isoformat()
    if isinstance(valor, (datetime, date)):
        return normalize_date(valor)
    if isinstance(valor, str) and is_fecha_iso(valor.strip()):
        return valor.strip()
    return None


def _lista_json(valor: Any) -> List:
    if _vacio(valor):
        return []
    datos = json.loads(valor) if isinstance(valor, str) else valor
    if not isinstance(datos, list):
        raise ValueError('se esperaba una lista JSON')
    return datos


class ImportacionController(BaseController):
    """
    Importación masiva desde Excel. Cada hoja reconocida se procesa de
    forma independiente; los errores se acumulan sin detener el resto.
    """

    def __init__(self):
        super().__init__()
        self.material_controller = MaterialController()
        self.lugar_controller = LugarProduccionController()
        self.rotulador_controller = RotuladorController()
        self.plan_controller = PlanProduccionController()
        self.orden_model = OrdenProduccionModel()
        self.material_model = MaterialModel()

    @staticmethod
    def _filas(df: pd.DataFrame) -> List[Dict]:
        df = df.astype(object).where(pd.notna(df), None)
        return df.to_dict('records')

    def _registrar_lote(self, respuesta: tuple, etiqueta: str, errores: List[str]) -> int:
        cuerpo, status = respuesta
        if status >= 400:
            errores.append(f"Error al importar {etiqueta}: {cuerpo.get('error')}")
            return 0
        return len(cuerpo.get('data') or [])

    # ------------------------------------------------------------------
    # Hojas
    # ------------------------------------------------------------------

    def _importar_materiales(self, filas: List[Dict], errores: List[str]) -> int:
        materiales = []
        for fila in filas:
            material = {
                'material_code': _texto(_valor(fila, 'Código de Material', 'material_code')),
                'material_name': _texto(_valor(fila, 'Nombre del Material', 'material_name')),
                'unit': _texto(_valor(fila, 'Unidad de Medida', 'unit')),
                'type': _texto(_valor(fila, 'Tipo', 'type')),
                'recipe': _texto(_valor(fila, 'Receta', 'recipe')),
            }
            # Filas incompletas se omiten sin error
            if all(material[c] for c in ('material_code', 'material_name', 'unit', 'type')):
                materiales.append(material)

        if not materiales:
            return 0
        return self._registrar_lote(self.material_controller.crear_materiales(materiales), 'materiales', errores)

    def _importar_ordenes(self, filas: List[Dict], errores: List[str]) -> int:
        importadas = 0
        for numero, fila in enumerate(filas, start=2):
            try:
                producidos = _lista_json(_valor(fila, 'Productos Producidos (JSON)', 'produced_materials'))
                subproductos = _lista_json(_valor(fila, 'Subproductos (JSON)', 'byproducts'))
                empaque = _lista_json(_valor(fila, 'Materiales de Empaque (JSON)', 'packaging_materials'))
            except ValueError as e:
                errores.append(f"Error al parsear fila de orden {numero}: {str(e)}")
                continue

            fecha_cruda = _valor(fila, 'Fecha de Orden (YYYY-MM-DD)', 'order_date')
            fecha = _fecha_excel(fecha_cruda) if fecha_cruda is not None else get_today_local().isoformat()
            if not fecha:
                errores.append(f'Fecha de orden inválida en la fila {numero}: "{fecha_cruda}".')
                continue

            orden = {
                'order_date': fecha,
                'production_place': _texto(_valor(fila, 'Lugar de Producción (Nombre)', 'production_place')),
                'labeler_id': _texto(_valor(fila, 'ID Rotulador (UUID)', 'labeler_id')),
                'produced_materials': producidos,
                'byproducts': subproductos,
                'packaging_materials': empaque,
                'finished_products': producidos,
                'generated_byproducts': subproductos,
                'status': OP_PENDIENTE,
            }

            result = self.orden_model.create(orden)
            if not result.get('success'):
                errores.append(f"Error al importar orden de la fila {numero}: {result.get('error')}")
                continue
            importadas += 1
        return importadas

    def _importar_lugares(self, filas: List[Dict], errores: List[str]) -> int:
        lugares = [
            {
                'name': _texto(_valor(fila, 'Nombre del Lugar', 'name')),
                'description': _texto(_valor(fila, 'Descripción', 'description')),
                'active': _es_activo(_valor(fila, 'Activo (TRUE/FALSE)', 'active')),
            }
            for fila in filas
        ]
        lugares = [l for l in lugares if l['name']]
        if not lugares:
            return 0
        return self._registrar_lote(self.lugar_controller.crear_lugares(lugares), 'lugares de producción', errores)

    def _importar_rotuladores(self, filas: List[Dict], errores: List[str]) -> int:
        rotuladores = [
            {
                'cedula': _texto(_valor(fila, 'Cédula', 'cedula')),
                'name': _texto(_valor(fila, 'Nombre Completo', 'name')),
                'position': _texto(_valor(fila, 'Posición', 'position')) or 'Rotulador',
                'active': _es_activo(_valor(fila, 'Activo (TRUE/FALSE)', 'active')),
            }
            for fila in filas
        ]
        rotuladores = [r for r in rotuladores if r['cedula'] and r['name']]
        if not rotuladores:
            return 0
        return self._registrar_lote(self.rotulador_controller.crear_rotuladores(rotuladores), 'rotuladores', errores)

    def _importar_planes(self, filas: List[Dict], errores: List[str]) -> int:
        terminados = self.material_model.find_by_tipo(TIPO_PRODUCTO_TERMINADO)
        if not terminados.get('success'):
            errores.append(f"Error al importar planes de producción: {terminados.get('error')}")
            return 0
        por_codigo = {m['material_code']: m for m in terminados['data']}

        planes = []
        for fila in filas:
            codigo = _texto(fila.get('Código de Material'))
            material = por_codigo.get(codigo)
            if not material:
                errores.append(f"Material con código {codigo} no encontrado o no es Producto Terminado.")
                continue

            fecha_cruda = fila.get('Fecha de Producción Requerida (YYYY-MM-DD)')
            fecha = _fecha_excel(fecha_cruda)
            if not fecha:
                errores.append(
                    f'Formato de fecha inválido para el plan de producción: "{fecha_cruda}". Se esperaba YYYY-MM-DD.')
                continue

            planes.append({
                'material_id': material['id'],
                'planned_quantity': fila.get('Cantidad a Producir'),
                'planned_date': fecha,
            })

        if not planes:
            return 0
        return self._registrar_lote(self.plan_controller.crear_planes(planes), 'planes de producción', errores)

    # ------------------------------------------------------------------

    def importar_archivo(self, archivo) -> tuple:
        """
        Procesa todas las hojas reconocidas del libro. 200 sin errores, 207
        si algunas filas u hojas fallaron, 400 si el archivo no se puede leer.
        """
        nombre = (getattr(archivo, 'filename', '') or '').lower()
        if not nombre.endswith(EXTENSIONES_PERMITIDAS):
            return self.error_response('Formato de archivo no válido. Use .xlsx o .xls', 400)

        try:
            hojas = pd.read_excel(archivo, sheet_name=None)
        except Exception as e:
            logger.error(f"Error leyendo archivo de importación: {str(e)}", exc_info=True)
            return self.error_response(f"Error importando archivo: {str(e)}", 400)

        importados = 0
        errores: List[str] = []

        if 'Materiales' in hojas:
            importados += self._importar_materiales(self._filas(hojas['Materiales']), errores)

        hoja_ordenes = 'Órdenes' if 'Órdenes' in hojas else 'Plantilla Órdenes'
        if hoja_ordenes in hojas:
            importados += self._importar_ordenes(self._filas(hojas[hoja_ordenes]), errores)

        if 'Plantilla Lugares' in hojas:
            importados += self._importar_lugares(self._filas(hojas['Plantilla Lugares']), errores)

        if 'Plantilla Rotuladores' in hojas:
            importados += self._importar_rotuladores(self._filas(hojas['Plantilla Rotuladores']), errores)

        if 'Plantilla Plan Producción' in hojas:
            importados += self._importar_planes(self._filas(hojas['Plantilla Plan Producción']), errores)

        logger.info(f"Importación finalizada: {importados} registros, {len(errores)} errores.")
        resultado = {'importados': importados, 'errores': errores}
        if errores:
            return self.success_response(
                data=resultado,
                message=f"Errores durante la importación: {'; '.join(errores)}",
                status_code=207
            )
        return self.success_response(
            data=resultado,
            message=f"¡Datos importados exitosamente! Se importaron {importados} registros."
        )
