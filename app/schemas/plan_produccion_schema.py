from marshmallow import EXCLUDE, Schema, fields, validate


class PlanProduccionSchema(Schema):
    """Plan de producción diario para un producto terminado."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Str(dump_only=True)
    material_id = fields.Str(required=True, validate=validate.Length(min=1),
                             error_messages={'required': 'El material es obligatorio'})
    planned_quantity = fields.Float(
        required=True,
        validate=validate.Range(min=0, min_inclusive=False, error="La cantidad a producir debe ser mayor que cero."),
        error_messages={'required': 'La cantidad a producir es obligatoria'}
    )
    planned_date = fields.Date(format='%Y-%m-%d', required=True,
                               error_messages={'required': 'La fecha planificada es obligatoria',
                                               'invalid': 'Formato de fecha inválido. Se esperaba YYYY-MM-DD.'})
    created_at = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)
