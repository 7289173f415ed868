from marshmallow import EXCLUDE, Schema, fields, validate, pre_load


class LugarProduccionSchema(Schema):
    """Esquema para lugares de producción"""

    class Meta:
        unknown = EXCLUDE

    id = fields.Str(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=255),
                      error_messages={'required': 'El nombre del lugar es obligatorio'})
    description = fields.Str(allow_none=True, load_default=None)
    active = fields.Bool(load_default=True)
    created_at = fields.DateTime(dump_only=True)


class RotuladorSchema(Schema):
    """Esquema para rotuladores / empleados"""

    class Meta:
        unknown = EXCLUDE

    id = fields.Str(dump_only=True)
    cedula = fields.Str(required=True, validate=validate.Length(min=1, max=20),
                        error_messages={'required': 'La cédula es obligatoria'})
    name = fields.Str(required=True, validate=validate.Length(min=1, max=255),
                      error_messages={'required': 'El nombre es obligatorio'})
    position = fields.Str(load_default='Rotulador')
    active = fields.Bool(load_default=True)
    created_at = fields.DateTime(dump_only=True)

    @pre_load
    def cedula_como_texto(self, data, **kwargs):
        # Las cédulas llegan como número desde Excel
        if isinstance(data, dict) and isinstance(data.get('cedula'), (int, float)):
            data = dict(data)
            data['cedula'] = str(int(data['cedula']))
        return data
