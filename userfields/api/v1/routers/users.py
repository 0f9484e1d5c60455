"""
➡️ But : Endpoints des utilisateurs (création, lecture, avatar HTML).
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import HTMLResponse

from userfields.api.v1.dependencies import get_user_service
from userfields.core.config import settings
from userfields.features.users.schemas import UserCreate, UserOut
from userfields.features.users.services import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={404: {"description": "Not Found"}},
)

@router.post(
    "",
    summary="Créer un utilisateur",
    status_code=status.HTTP_201_CREATED,
    response_model=UserOut,
)
def create_user(payload: UserCreate, svc: UserService = Depends(get_user_service)):
    return svc.create(username=payload.username, email=payload.email, display_name=payload.display_name)

@router.get(
    "/{user_id}",
    summary="Récupérer un utilisateur",
    response_model=UserOut,
)
def get_user(user_id: int, svc: UserService = Depends(get_user_service)):
    return svc.get(user_id)

@router.get(
    "/{user_id}/avatar",
    summary="Avatar de l'utilisateur (fragment HTML)",
    response_class=HTMLResponse,
)
def get_user_avatar(
    user_id: int,
    size: int = Query(settings.AVATAR_DEFAULT_SIZE, ge=1, le=2048, description="Taille en pixels"),
    svc: UserService = Depends(get_user_service),
):
    return HTMLResponse(svc.avatar_html(user_id, size))
