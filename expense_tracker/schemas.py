from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

PHONE_PATTERN = r"^\+?[1-9]\d{9,14}$"


class CamelModel(BaseModel):
    """Accepts camelCase JSON keys, exposes snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )
