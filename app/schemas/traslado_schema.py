from marshmallow import EXCLUDE, Schema, fields, post_load, validate
from app.schemas.item_producido_schema import ItemEntradaSchema

_cantidad_positiva = validate.Range(min=0, min_inclusive=False, error="La cantidad debe ser mayor que cero.")
_cajas_positivas = validate.Range(min=1, error="La cantidad de cajas debe ser mayor que cero.")


class TrasladoMateriaPrimaSchema(Schema):
    """Registro de un traslado de materia prima hacia producción."""

    class Meta:
        unknown = EXCLUDE

    material_id = fields.Str(required=True, validate=validate.Length(min=1),
                             error_messages={'required': 'El material es obligatorio'})
    quantity = fields.Float(required=True, validate=_cantidad_positiva,
                            error_messages={'required': 'La cantidad es obligatoria'})
    transfer_employee_id = fields.Str(required=True, validate=validate.Length(min=1),
                                      error_messages={'required': 'El empleado que traslada es obligatorio'})
    transfer_date = fields.Date(load_default=None)
    observations = fields.Str(allow_none=True, load_default=None)


class TrasladoProductoTerminadoSchema(TrasladoMateriaPrimaSchema):
    """Traslado manual de producto terminado (con subproductos) hacia empaque."""

    num_boxes = fields.Int(required=True, strict=True, validate=_cajas_positivas,
                           error_messages={'required': 'La cantidad de cajas es obligatoria',
                                           'invalid': 'La cantidad de cajas debe ser un número entero.'})
    byproducts_transferred = fields.List(fields.Nested(ItemEntradaSchema), load_default=list)


class RecepcionSchema(Schema):
    """
    Recepción de un traslado (materia prima o recepción final en bodega).
    Si `observations` no viene se conservan las del traslado; si viene vacío
    o nulo se limpian.
    """

    class Meta:
        unknown = EXCLUDE

    received_employee_id = fields.Str(required=True, validate=validate.Length(min=1),
                                      error_messages={'required': 'Selecciona el empleado que recibe.'})
    received_quantity = fields.Float(required=True, validate=_cantidad_positiva,
                                     error_messages={'required': 'La cantidad recibida es obligatoria'})
    observations = fields.Str(allow_none=True)

    @post_load
    def limpiar_observaciones(self, data, **kwargs):
        if 'observations' in data and data['observations'] is None:
            data['observations'] = ''
        return data


class RecepcionEmpaqueSchema(RecepcionSchema):
    """Recepción en empaque: además registra cajas y material de empaque usado."""

    num_boxes = fields.Int(required=True, strict=True, validate=_cajas_positivas,
                           error_messages={'required': 'La cantidad de cajas es obligatoria',
                                           'invalid': 'La cantidad de cajas debe ser un número entero.'})
    packaging_materials_used = fields.List(fields.Nested(ItemEntradaSchema), load_default=list)
