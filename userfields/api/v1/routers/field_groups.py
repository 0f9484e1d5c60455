"""
➡️ But : Endpoints des groupes de champs.

Les routes ne contiennent ni SQL ni logique métier : elles appellent
FieldGroupService et traduisent ses exceptions en codes HTTP.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from userfields.api.v1.dependencies import get_field_group_service, pagination
from userfields.features.field_groups.schemas import (
    FieldGroupCreateIn,
    FieldGroupUpdateIn,
    FieldGroupOut,
    FieldGroupList,
)
from userfields.features.field_groups.services import FieldGroupService

router = APIRouter(
    prefix="/field-groups",
    tags=["field-groups"],
    responses={404: {"description": "Not Found"}},
)

@router.get(
    "",
    summary="Lister les groupes de champs",
    description="Retourne une liste paginée, triée par group_order.",
    response_model=FieldGroupList,
)
def list_field_groups(p=Depends(pagination), svc: FieldGroupService = Depends(get_field_group_service)):
    data = svc.list(**p)
    return FieldGroupList(
        items=[FieldGroupOut.model_validate(g) for g in data["items"]],
        total=data["total"],
    )

@router.post(
    "",
    summary="Créer un groupe de champs",
    status_code=status.HTTP_201_CREATED,
    response_model=FieldGroupOut,
)
def create_field_group(payload: FieldGroupCreateIn, svc: FieldGroupService = Depends(get_field_group_service)):
    try:
        group = svc.create(payload)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return FieldGroupOut.model_validate(group)

@router.get(
    "/{group_id}",
    summary="Récupérer un groupe de champs",
    response_model=FieldGroupOut,
)
def get_field_group(group_id: int, svc: FieldGroupService = Depends(get_field_group_service)):
    try:
        group = svc.get(group_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FieldGroupOut.model_validate(group)

@router.patch(
    "/{group_id}",
    summary="Mettre à jour un groupe de champs",
    response_model=FieldGroupOut,
)
def update_field_group(
    group_id: int,
    payload: FieldGroupUpdateIn,
    svc: FieldGroupService = Depends(get_field_group_service),
):
    try:
        group = svc.update(group_id, payload)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return FieldGroupOut.model_validate(group)

@router.delete(
    "/{group_id}",
    summary="Supprimer un groupe de champs",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_field_group(group_id: int, svc: FieldGroupService = Depends(get_field_group_service)):
    try:
        svc.delete(group_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return None
