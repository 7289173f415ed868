from app.controllers.base_controller import BaseController
from app.models.material import MaterialModel
from app.models.orden_produccion import OrdenProduccionModel
from app.models.plan_produccion import PlanProduccionModel
from app.utils.date_utils import get_now_local, formatear_fecha
from app.utils.estados import (
    OP_PENDIENTE,
    OP_EN_PRODUCCION,
    OP_COMPLETADO,
    OP_EN_BODEGA,
    OP_TRANSFERIDO_A_EMPAQUE,
    TIPO_MATERIA_PRIMA,
    TIPO_PRODUCTO_TERMINADO,
    TIPO_MATERIAL_EMPAQUE,
    TIPO_SUBPRODUCTO,
)
from io import BytesIO
from typing import Dict, List, Optional, Tuple
from openpyxl.utils import get_column_letter
import pandas as pd
import logging

logger = logging.getLogger(__name__)

# Encabezados que lee la importación; las plantillas deben coincidir exactamente
PLANTILLAS = {
    'ordenes': ('Plantilla Órdenes', [
        'Fecha de Orden (YYYY-MM-DD)',
        'Lugar de Producción (Nombre)',
        'ID Rotulador (UUID)',
        'Productos Producidos (JSON)',
        'Subproductos (JSON)',
        'Materiales de Empaque (JSON)',
    ]),
    'lugares': ('Plantilla Lugares', [
        'Nombre del Lugar',
        'Descripción',
        'Activo (TRUE/FALSE)',
    ]),
    'rotuladores': ('Plantilla Rotuladores', [
        'Cédula',
        'Nombre Completo',
        'Posición',
        'Activo (TRUE/FALSE)',
    ]),
    'plan': ('Plantilla Plan Producción', [
        'Código de Material',
        'Cantidad a Producir',
        'Fecha de Producción Requerida (YYYY-MM-DD)',
    ]),
}

COLUMNAS_ORDENES = [
    'Número de Orden', 'Fecha de Orden', 'Lugar de Producción', 'Rotulador',
    'Productos Producidos', 'Subproductos', 'Materiales de Empaque', 'Estado',
    'Fecha de Creación', 'Última Actualización',
]
COLUMNAS_MATERIALES = [
    'Código de Material', 'Nombre del Material', 'Unidad de Medida', 'Tipo',
    'Receta', 'Fecha de Creación', 'Última Actualización',
]
COLUMNAS_PLANES = ['Código de Material', 'Nombre del Material', 'Cantidad Planificada', 'Unidad', 'Fecha Planificada']

ANCHOS_ORDENES = [15, 15, 25, 25, 40, 30, 30, 22, 15, 15]
ANCHOS_MATERIALES = [15, 25, 15, 20, 40, 15, 15]
ANCHOS_PLANES = [15, 25, 18, 12, 15]
ANCHOS_RESUMEN = [30, 15]


def formatear_cantidad(valor) -> str:
    """10.0 -> '10', 2.5 -> '2.5'."""
    try:
        numero = float(valor)
    except (TypeError, ValueError):
        return str(valor)
    return str(int(numero)) if numero.is_integer() else str(numero)


def formatear_items(items: Optional[List[Dict]]) -> str:
    """Lista de ProducedItems como texto 'Nombre (cantidad unidad), ...' o N/A."""
    if not items:
        return 'N/A'
    return ', '.join(
        f"{item.get('material_name', '')} ({formatear_cantidad(item.get('quantity'))} {item.get('unit', '')})"
        for item in items
    )


class ReporteController(BaseController):
    """
    Genera los reportes Excel (pandas + openpyxl) y las plantillas de
    importación. Los métodos devuelven (BytesIO, nombre_archivo) o
    (None, None) si algo falla.
    """

    def __init__(self):
        super().__init__()
        self.orden_model = OrdenProduccionModel()
        self.material_model = MaterialModel()
        self.plan_model = PlanProduccionModel()

    # ------------------------------------------------------------------
    # Construcción de filas
    # ------------------------------------------------------------------

    def _filas_ordenes(self, ordenes: List[Dict], incluir_actualizacion: bool = True) -> List[Dict]:
        filas = []
        for orden in ordenes:
            rotulador = orden.get('labeler') or {}
            fila = {
                'Número de Orden': orden.get('consecutive_number'),
                'Fecha de Orden': formatear_fecha(orden.get('order_date')),
                'Lugar de Producción': orden.get('production_place') or 'N/A',
                'Rotulador': rotulador.get('name') or 'N/A',
                'Productos Producidos': formatear_items(orden.get('produced_materials')),
                'Subproductos': formatear_items(orden.get('byproducts')),
                'Materiales de Empaque': formatear_items(orden.get('packaging_materials')),
                'Estado': orden.get('status'),
                'Fecha de Creación': formatear_fecha(orden.get('creation_date')),
            }
            if incluir_actualizacion:
                fila['Última Actualización'] = formatear_fecha(orden.get('updated_at'))
            filas.append(fila)
        return filas

    def _filas_materiales(self, materiales: List[Dict], incluir_actualizacion: bool = True) -> List[Dict]:
        filas = []
        for material in materiales:
            fila = {
                'Código de Material': material.get('material_code'),
                'Nombre del Material': material.get('material_name'),
                'Unidad de Medida': material.get('unit'),
                'Tipo': material.get('type'),
                'Receta': material.get('recipe') or 'N/A',
                'Fecha de Creación': formatear_fecha(material.get('created_at')),
            }
            if incluir_actualizacion:
                fila['Última Actualización'] = formatear_fecha(material.get('updated_at'))
            filas.append(fila)
        return filas

    def _filas_planes(self, planes: List[Dict]) -> List[Dict]:
        filas = []
        for plan in planes:
            material = plan.get('material') or {}
            filas.append({
                'Código de Material': material.get('material_code'),
                'Nombre del Material': material.get('material_name'),
                'Cantidad Planificada': plan.get('planned_quantity'),
                'Unidad': material.get('unit'),
                'Fecha Planificada': formatear_fecha(plan.get('planned_date')),
            })
        return filas

    def _filas_resumen(self, ordenes: List[Dict], materiales: List[Dict], planes: List[Dict]) -> List[Dict]:
        ahora = get_now_local()

        def por_estado(estado):
            return sum(1 for o in ordenes if o.get('status') == estado)

        def por_tipo(tipo):
            return sum(1 for m in materiales if m.get('type') == tipo)

        metricas = [
            ('Total de Órdenes', len(ordenes)),
            ('Órdenes Pendientes', por_estado(OP_PENDIENTE)),
            ('Órdenes en Producción', por_estado(OP_EN_PRODUCCION)),
            ('Órdenes Completadas', por_estado(OP_COMPLETADO)),
            ('Órdenes en Bodega', por_estado(OP_EN_BODEGA)),
            ('Órdenes Transferidas a Empaque', por_estado(OP_TRANSFERIDO_A_EMPAQUE)),
            ('Total de Materiales', len(materiales)),
            ('Materias Primas', por_tipo(TIPO_MATERIA_PRIMA)),
            ('Productos Terminados', por_tipo(TIPO_PRODUCTO_TERMINADO)),
            ('Material de Empaque', por_tipo(TIPO_MATERIAL_EMPAQUE)),
            ('Subproductos', por_tipo(TIPO_SUBPRODUCTO)),
            ('Total de Planes de Producción', len(planes)),
            ('Fecha de Exportación', ahora.strftime('%d/%m/%Y')),
            ('Hora de Exportación', ahora.strftime('%H:%M:%S')),
        ]
        return [{'Métrica': metrica, 'Valor': valor} for metrica, valor in metricas]

    # ------------------------------------------------------------------
    # Escritura del libro
    # ------------------------------------------------------------------

    @staticmethod
    def _escribir_hoja(writer, nombre_hoja: str, filas: List[Dict], columnas: List[str], anchos: List[int]):
        df = pd.DataFrame(filas, columns=columnas)
        df.to_excel(writer, sheet_name=nombre_hoja, index=False)

        hoja = writer.sheets[nombre_hoja]
        for indice, ancho in enumerate(anchos, start=1):
            hoja.column_dimensions[get_column_letter(indice)].width = ancho

    def _cargar(self, model) -> List[Dict]:
        result = model.find_all()
        if not result.get('success'):
            raise RuntimeError(result.get('error'))
        return result['data']

    def generar_reporte_completo(self) -> Tuple[Optional[BytesIO], Optional[str]]:
        """Libro con órdenes, materiales, planes y un resumen de métricas."""
        try:
            ordenes = self._cargar(self.orden_model)
            materiales = self._cargar(self.material_model)
            planes = self._cargar(self.plan_model)

            output = BytesIO()
            with pd.ExcelWriter(output, engine='openpyxl') as writer:
                self._escribir_hoja(writer, 'Órdenes de Producción', self._filas_ordenes(ordenes),
                                    COLUMNAS_ORDENES, ANCHOS_ORDENES)
                self._escribir_hoja(writer, 'Materiales', self._filas_materiales(materiales),
                                    COLUMNAS_MATERIALES, ANCHOS_MATERIALES)
                self._escribir_hoja(writer, 'Planes de Producción', self._filas_planes(planes),
                                    COLUMNAS_PLANES, ANCHOS_PLANES)
                self._escribir_hoja(writer, 'Resumen', self._filas_resumen(ordenes, materiales, planes),
                                    ['Métrica', 'Valor'], ANCHOS_RESUMEN)

            output.seek(0)
            nombre = f"PVA_Produccion_Completo_{get_now_local().strftime('%Y-%m-%d_%H-%M')}.xlsx"
            return output, nombre

        except Exception as e:
            logger.error(f"Error al generar el reporte completo: {str(e)}", exc_info=True)
            return None, None

    def generar_reporte_ordenes(self) -> Tuple[Optional[BytesIO], Optional[str]]:
        try:
            ordenes = self._cargar(self.orden_model)

            output = BytesIO()
            with pd.ExcelWriter(output, engine='openpyxl') as writer:
                self._escribir_hoja(writer, 'Órdenes', self._filas_ordenes(ordenes, incluir_actualizacion=False),
                                    COLUMNAS_ORDENES[:-1], ANCHOS_ORDENES[:-1])

            output.seek(0)
            return output, f"PVA_Ordenes_{get_now_local().strftime('%Y-%m-%d')}.xlsx"

        except Exception as e:
            logger.error(f"Error al generar el reporte de órdenes: {str(e)}", exc_info=True)
            return None, None

    def generar_reporte_materiales(self) -> Tuple[Optional[BytesIO], Optional[str]]:
        try:
            materiales = self._cargar(self.material_model)

            output = BytesIO()
            with pd.ExcelWriter(output, engine='openpyxl') as writer:
                self._escribir_hoja(writer, 'Materiales', self._filas_materiales(materiales, incluir_actualizacion=False),
                                    COLUMNAS_MATERIALES[:-1], ANCHOS_MATERIALES[:-1])

            output.seek(0)
            return output, f"PVA_Materiales_{get_now_local().strftime('%Y-%m-%d')}.xlsx"

        except Exception as e:
            logger.error(f"Error al generar el reporte de materiales: {str(e)}", exc_info=True)
            return None, None

    def _fila_ejemplo(self, tipo: str) -> List:
        hoy = get_now_local().strftime('%Y-%m-%d')
        if tipo == 'ordenes':
            item = ('[{"material_id": "<uuid>", "material_code": "%s", "material_name": "%s", '
                    '"unit": "kilos", "quantity": 10}]')
            return [
                hoy,
                'Planta Principal',
                '00000000-0000-0000-0000-000000000000',
                item % ('PT-001', 'Producto de ejemplo'),
                item % ('SP-001', 'Subproducto de ejemplo'),
                '[]',
            ]
        if tipo == 'lugares':
            return ['Planta Principal', 'Área de producción principal', 'TRUE']
        if tipo == 'rotuladores':
            return ['1234567890', 'Nombre Apellido', 'Rotulador', 'TRUE']
        return ['PT-001', 100, hoy]

    def generar_plantilla(self, tipo: str) -> Tuple[Optional[BytesIO], Optional[str]]:
        """Plantilla de importación con los encabezados exactos y una fila de ejemplo."""
        if tipo not in PLANTILLAS:
            return None, None
        try:
            nombre_hoja, columnas = PLANTILLAS[tipo]
            fila = dict(zip(columnas, self._fila_ejemplo(tipo)))

            output = BytesIO()
            with pd.ExcelWriter(output, engine='openpyxl') as writer:
                self._escribir_hoja(writer, nombre_hoja, [fila], columnas,
                                    [max(len(c) + 4, 15) for c in columnas])

            output.seek(0)
            return output, f"{nombre_hoja.replace(' ', '_')}.xlsx"

        except Exception as e:
            logger.error(f"Error al generar la plantilla '{tipo}': {str(e)}", exc_info=True)
            return None, None
