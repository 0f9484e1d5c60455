"""
➡️ But : Propriétés communes des tables horodatées (ORM).

Chaque champ = une colonne SQL (avec type, index, clé primaire...).

Les tables « brutes » dont les colonnes sont fixées au plus juste
(ex : field_group) héritent directement de SQLModel.
"""

from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
