"""
➡️ But : Contenir la logique métier des groupes de champs : orchestrer repo + FieldGroup, gérer les erreurs.

FieldGroupService lève des exceptions Python (LookupError, ValueError) ;
c'est le router qui les traduit en HTTPException.
"""

from typing import Any, Dict

import structlog

from userfields.core.hooks import HookRegistry, hooks as default_hooks
from userfields.db.repositories.field_groups import FieldGroupRepository
from userfields.features.field_groups.models import FieldGroup, is_empty, sanitize_text_field
from userfields.features.field_groups.schemas import FieldGroupCreateIn, FieldGroupUpdateIn

log = structlog.get_logger(__name__)


class FieldGroupService:
    def __init__(self, repo: FieldGroupRepository, hooks: HookRegistry = default_hooks):
        self.repo = repo
        self.hooks = hooks

    def _group(self, id_or_group: Any = None) -> FieldGroup:
        return FieldGroup(id_or_group, repo=self.repo, hooks=self.hooks)

    # -------- Reads --------

    def list(self, offset: int = 0, limit: int = 100) -> Dict[str, Any]:
        items = [self._group(row) for row in self.repo.list_ordered(offset, limit)]
        return {"items": items, "total": self.repo.count()}

    def get(self, group_id: int) -> FieldGroup:
        group = self._group(group_id)
        if not group.exists():
            raise LookupError("Field group not found.")
        return group

    # -------- Writes --------

    @staticmethod
    def _check_name(changes: Dict[str, Any]) -> None:
        if "name" in changes and is_empty(sanitize_text_field(changes["name"])):
            raise ValueError("Field group name cannot be empty.")

    def create(self, payload: FieldGroupCreateIn) -> FieldGroup:
        changes = payload.model_dump(exclude_none=True)
        self._check_name(changes)
        group = self._group()
        group_id = group.add(changes)
        if not group_id:
            raise ValueError("Field group could not be created.")
        return group

    def update(self, group_id: int, payload: FieldGroupUpdateIn) -> FieldGroup:
        changes = payload.model_dump(exclude_unset=True)
        self._check_name(changes)
        group = self.get(group_id)
        if not group.update(changes):
            raise ValueError("Field group could not be updated.")
        return group

    def delete(self, group_id: int) -> None:
        group = self.get(group_id)
        self.repo.delete(group.id)
        log.info("field_group_deleted", group_id=group_id)
