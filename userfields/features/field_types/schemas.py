from pydantic import BaseModel


class FieldTypeOut(BaseModel):
    group: str
    name: str
    type: str
    icon: str
    order: int

    model_config = {"from_attributes": True}
