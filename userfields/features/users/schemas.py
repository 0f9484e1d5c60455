"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

UserCreate → corps de requête POST

UserOut → réponse de l’API
"""

from typing import Optional
from sqlmodel import SQLModel

class UserCreate(SQLModel):
    username: str
    email: str = ""
    display_name: Optional[str] = None

class UserOut(SQLModel):
    id: int
    username: str
    email: str
    display_name: Optional[str] = None
