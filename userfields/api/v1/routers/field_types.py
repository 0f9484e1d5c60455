from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from userfields.api.v1.dependencies import get_field_type_service
from userfields.features.field_types.schemas import FieldTypeOut
from userfields.features.field_types.services import FieldTypeService

router = APIRouter(
    prefix="/field-types",
    tags=["field-types"],
    responses={404: {"description": "Not Found"}},
)

@router.get(
    "",
    summary="Lister les types de champs enregistrés",
    response_model=List[FieldTypeOut],
)
def list_field_types(
    group: Optional[str] = Query(None, description="Filtrer par catégorie (default, standard…)"),
    svc: FieldTypeService = Depends(get_field_type_service),
):
    return [FieldTypeOut.model_validate(d) for d in svc.list(group=group)]

@router.get(
    "/{field_type}",
    summary="Récupérer un type de champ",
    response_model=FieldTypeOut,
)
def get_field_type(field_type: str, svc: FieldTypeService = Depends(get_field_type_service)):
    try:
        descriptor = svc.get(field_type)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FieldTypeOut.model_validate(descriptor)
