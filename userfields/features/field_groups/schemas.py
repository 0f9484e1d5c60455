from typing import Optional
from pydantic import BaseModel, Field as PydField


# ---------- IN / UPDATE ----------

class FieldGroupCreateIn(BaseModel):
    name: str = PydField(..., min_length=1, description="Nom du groupe", examples=["Primary"])
    description: Optional[str] = PydField(None, examples=["Champs affichés à l'inscription"])
    group_order: Optional[int] = PydField(None, description="Ordre d'affichage", examples=[0])


class FieldGroupUpdateIn(BaseModel):
    name: Optional[str] = PydField(None, min_length=1)
    description: Optional[str] = None
    group_order: Optional[int] = None


# ---------- OUT ----------

class FieldGroupOut(BaseModel):
    id: int
    group_order: int
    name: str
    description: Optional[str] = None

    model_config = {"from_attributes": True}


class FieldGroupList(BaseModel):
    items: list[FieldGroupOut]
    total: int
