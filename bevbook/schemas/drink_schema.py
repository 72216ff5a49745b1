from marshmallow import Schema, fields, validate, pre_load, EXCLUDE
from bevbook.utils.enums import DrinkType

class CreateDrinkSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=120))
    type = fields.Str(load_default=DrinkType.BEER.value, validate=validate.OneOf([e.value for e in DrinkType]))
    amount = fields.Float(required=True, validate=validate.Range(min=0, max=1000))

    @pre_load
    def strip_name(self, data, **kwargs):
        if isinstance(data.get("name"), str):
            data = dict(data, name=data["name"].strip())
        return data
