"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les utilisateurs dont on affiche le profil et l'avatar.

Chaque champ = une colonne SQL (avec type, index, clé primaire...).
"""

from typing import Optional
from sqlmodel import Field

from .base import BaseModelDB

class User(BaseModelDB, table=True):
    username: str = Field(index=True, unique=True)
    email: str = Field(default="", index=True)
    display_name: Optional[str] = Field(default=None)
