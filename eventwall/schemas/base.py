from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase on the wire."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "from_attributes": True}

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
