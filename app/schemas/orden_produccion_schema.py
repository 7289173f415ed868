from marshmallow import EXCLUDE, Schema, fields, validate
from app.schemas.item_producido_schema import ItemEntradaSchema
from app.utils.estados import OP_ESTADOS


class OrdenProduccionSchema(Schema):
    """
    Schema para la validación de datos de creación de órdenes de producción.
    Las líneas llegan como {material_id, quantity}; el controlador completa
    código, nombre y unidad a partir del catálogo.
    """

    class Meta:
        unknown = EXCLUDE

    order_date = fields.Date(load_default=None)
    production_place = fields.Str(
        required=True,
        validate=validate.Length(min=1),
        error_messages={'required': 'El lugar de producción es obligatorio'}
    )
    labeler_id = fields.Str(
        required=True,
        validate=validate.Length(min=1),
        error_messages={'required': 'El rotulador es obligatorio'}
    )
    produced_materials = fields.List(
        fields.Nested(ItemEntradaSchema),
        required=True,
        validate=validate.Length(min=1, error='Agrega al menos un producto terminado.'),
        error_messages={'required': 'Agrega al menos un producto terminado.'}
    )
    byproducts = fields.List(fields.Nested(ItemEntradaSchema), load_default=list)
    packaging_materials = fields.List(fields.Nested(ItemEntradaSchema), load_default=list)

    # Campos de solo lectura (generados por la base de datos)
    id = fields.Str(dump_only=True)
    consecutive_number = fields.Int(dump_only=True)
    status = fields.Str(dump_only=True)
    creation_date = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)


class EstadoOrdenSchema(Schema):
    """Cambio manual de estado de una orden."""

    class Meta:
        unknown = EXCLUDE

    status = fields.Str(
        required=True,
        validate=validate.OneOf(OP_ESTADOS, error='Estado de orden no válido.'),
        error_messages={'required': 'El estado es obligatorio'}
    )


class GenerarTrasladoSchema(Schema):
    """Datos opcionales para generar el traslado de una orden hacia empaque."""

    class Meta:
        unknown = EXCLUDE

    transfer_employee_id = fields.Str(allow_none=True, load_default=None)
    transfer_date = fields.Date(allow_none=True, load_default=None)
