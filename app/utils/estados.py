# -*- coding: utf-8 -*-
"""
Módulo centralizado para los catálogos de valores de la aplicación:
tipos de material, unidades de medida, estados de órdenes de producción y
estados de traslados, junto con las reglas del flujo de traslados.
"""

# -----------------------------------------------------------------------------
# TIPOS DE MATERIAL Y UNIDADES
# -----------------------------------------------------------------------------

TIPO_MATERIA_PRIMA = 'Materia Prima'
TIPO_PRODUCTO_TERMINADO = 'Producto Terminado'
TIPO_SUBPRODUCTO = 'Subproducto'
TIPO_MATERIAL_EMPAQUE = 'Material de Empaque'

TIPOS_MATERIAL = [
    TIPO_MATERIA_PRIMA,
    TIPO_PRODUCTO_TERMINADO,
    TIPO_SUBPRODUCTO,
    TIPO_MATERIAL_EMPAQUE,
]

UNIDADES_MEDIDA = ['kilos', 'unidad', 'paquete', 'bulto', 'caja', 'litros']


# -----------------------------------------------------------------------------
# ESTADOS DE ÓRDENES DE PRODUCCIÓN (OP)
# -----------------------------------------------------------------------------

OP_PENDIENTE = 'PENDIENTE'
OP_EN_PRODUCCION = 'EN PRODUCCIÓN'
OP_COMPLETADO = 'COMPLETADO'
OP_EN_BODEGA = 'EN BODEGA'
OP_TRANSFERIDO_A_EMPAQUE = 'TRANSFERIDO_A_EMPAQUE'

OP_ESTADOS = [
    OP_PENDIENTE,
    OP_EN_PRODUCCION,
    OP_COMPLETADO,
    OP_EN_BODEGA,
    OP_TRANSFERIDO_A_EMPAQUE,
]


# -----------------------------------------------------------------------------
# ESTADOS DE TRASLADOS
# -----------------------------------------------------------------------------

TR_PENDIENTE = 'PENDIENTE'
TR_RECIBIDO = 'RECIBIDO'
TR_RECHAZADO = 'RECHAZADO'
TR_FINALIZADO_BODEGA = 'FINALIZADO_BODEGA'

TR_ESTADOS = [TR_PENDIENTE, TR_RECIBIDO, TR_RECHAZADO, TR_FINALIZADO_BODEGA]

# Acción -> (estados de origen permitidos, estado destino)
FLUJO_MATERIA_PRIMA = {
    'recibir': ([TR_PENDIENTE], TR_RECIBIDO),
    'rechazar': ([TR_PENDIENTE], TR_RECHAZADO),
}

FLUJO_PRODUCTO_TERMINADO = {
    'recibir_empaque': ([TR_PENDIENTE], TR_FINALIZADO_BODEGA),
    'recepcion_final': ([TR_FINALIZADO_BODEGA], TR_RECIBIDO),
    'rechazar': ([TR_PENDIENTE, TR_FINALIZADO_BODEGA], TR_RECHAZADO),
}

_FLUJOS = {
    'MP': FLUJO_MATERIA_PRIMA,
    'PT': FLUJO_PRODUCTO_TERMINADO,
}


# -----------------------------------------------------------------------------
# COLORES PARA LA UI
# -----------------------------------------------------------------------------

COLORES_ESTADO = {
    OP_PENDIENTE: 'yellow',
    OP_EN_PRODUCCION: 'blue',
    OP_COMPLETADO: 'green',
    OP_EN_BODEGA: 'purple',
    OP_TRANSFERIDO_A_EMPAQUE: 'orange',
    TR_RECIBIDO: 'green',
    TR_RECHAZADO: 'red',
    TR_FINALIZADO_BODEGA: 'purple',
}


# -----------------------------------------------------------------------------
# FUNCIONES DE UTILIDAD
# -----------------------------------------------------------------------------

def obtener_flujo(tipo: str) -> dict:
    """Devuelve el mapa de acciones del flujo de traslados ('MP' o 'PT')."""
    flujo = _FLUJOS.get(tipo)
    if flujo is None:
        raise ValueError(f"Tipo de traslado desconocido: {tipo}")
    return flujo


def puede_transicionar(tipo: str, estado_actual: str, accion: str) -> bool:
    """
    Indica si un traslado en `estado_actual` admite la `accion` dada.
    Una acción que no pertenece al flujo nunca está permitida.
    """
    regla = obtener_flujo(tipo).get(accion)
    if regla is None:
        return False
    origenes, _ = regla
    return estado_actual in origenes


def estado_destino(tipo: str, accion: str) -> str:
    """Estado en el que queda un traslado tras aplicar `accion`."""
    regla = obtener_flujo(tipo).get(accion)
    if regla is None:
        raise ValueError(f"Acción '{accion}' no válida para traslados {tipo}")
    return regla[1]


def color_estado(estado: str) -> str:
    return COLORES_ESTADO.get(estado, 'gray')
