# mainstreet_admin/schemas/base.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire; accepts either on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def reject_null(value):
    """Before-validator for update fields whose column is NOT NULL: omit the field instead of sending null."""
    if value is None:
        raise ValueError("may not be null")
    return value
