from marshmallow import EXCLUDE, Schema, fields, validate


class ItemEntradaSchema(Schema):
    """Línea de material tal como llega desde un formulario: id y cantidad."""

    class Meta:
        unknown = EXCLUDE

    material_id = fields.Str(
        required=True,
        validate=validate.Length(min=1),
        error_messages={'required': 'El material es obligatorio'}
    )
    quantity = fields.Float(
        required=True,
        validate=validate.Range(min=0, min_inclusive=False, error="La cantidad debe ser mayor que cero."),
        error_messages={'required': 'La cantidad es obligatoria', 'invalid': 'La cantidad debe ser un número válido.'}
    )
