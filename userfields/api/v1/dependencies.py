"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_field_group_service() : crée un FieldGroupService à partir d’une session DB.

pagination() : paramètres communs page et size.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).
"""

from fastapi import Depends, Query
from sqlmodel import Session

from userfields.core.hooks import HookRegistry, hooks
from userfields.db.session import get_session

from userfields.db.repositories.users import UserRepository
from userfields.features.users.services import UserService

from userfields.db.repositories.field_groups import FieldGroupRepository
from userfields.features.field_groups.services import FieldGroupService

from userfields.features.field_types.services import FieldTypeService

def pagination(
    page: int = Query(1, ge=1, description="Numéro de page", examples=[1]),
    size: int = Query(20, ge=1, le=100, description="Taille de page", examples=[20]),
):
    offset = (page - 1) * size
    return {"offset": offset, "limit": size}


def get_hooks() -> HookRegistry:
    return hooks


# -----------------------------
# Users
# -----------------------------
def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(UserRepository(session))


# -----------------------------
# Field groups
# -----------------------------
def get_field_group_repository(session: Session = Depends(get_session)) -> FieldGroupRepository:
    return FieldGroupRepository(session)

def get_field_group_service(
    repo: FieldGroupRepository = Depends(get_field_group_repository),
    registry: HookRegistry = Depends(get_hooks),
) -> FieldGroupService:
    return FieldGroupService(repo=repo, hooks=registry)


# -----------------------------
# Field types
# -----------------------------
def get_field_type_service() -> FieldTypeService:
    return FieldTypeService()
