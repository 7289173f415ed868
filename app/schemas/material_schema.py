from marshmallow import EXCLUDE, Schema, fields, validate, post_load
from app.utils.estados import TIPOS_MATERIAL, UNIDADES_MEDIDA, TIPO_PRODUCTO_TERMINADO


class MaterialSchema(Schema):
    """Esquema para validación de materiales del catálogo"""

    class Meta:
        unknown = EXCLUDE

    id = fields.Str(dump_only=True)
    material_code = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=50),
        error_messages={'required': 'El código de material es obligatorio'}
    )
    material_name = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=255),
        error_messages={'required': 'El nombre del material es obligatorio'}
    )
    unit = fields.Str(
        required=True,
        validate=validate.OneOf(UNIDADES_MEDIDA, error='Unidad de medida no válida.'),
        error_messages={'required': 'La unidad de medida es obligatoria'}
    )
    type = fields.Str(
        required=True,
        validate=validate.OneOf(TIPOS_MATERIAL, error='Tipo de material no válido.'),
        error_messages={'required': 'El tipo de material es obligatorio'}
    )
    recipe = fields.Str(allow_none=True, load_default=None)
    created_at = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)

    @post_load
    def limpiar(self, data, **kwargs):
        """Recorta espacios y descarta la receta si no es producto terminado."""
        data['material_code'] = data['material_code'].strip()
        data['material_name'] = data['material_name'].strip()
        receta = (data.get('recipe') or '').strip()
        data['recipe'] = receta if receta and data['type'] == TIPO_PRODUCTO_TERMINADO else None
        return data
