from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SerdeBase(BaseModel):
    """Wire models: camelCase JSON keys, snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
