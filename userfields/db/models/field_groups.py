"""
➡️ But : Définir la table des groupes de champs (ORM).

Un groupe de champs = une collection nommée et ordonnée de champs de profil,
affichés ensemble sur un formulaire.

Pas de created_at / updated_at ici : les colonnes de la table sont exactement
celles manipulées par FieldGroup (id, group_order, name, description).
"""

from typing import Optional
from sqlmodel import SQLModel, Field


class FieldGroupRow(SQLModel, table=True):
    __tablename__ = "field_group"

    id: Optional[int] = Field(default=None, primary_key=True)
    group_order: int = Field(default=0, index=True, description="Ordre d'affichage (croissant)")
    name: str = Field(default="", index=True, description="Nom du groupe")
    description: str = Field(default="", description="Description du groupe")
