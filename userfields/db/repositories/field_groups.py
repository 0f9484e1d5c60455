"""
➡️ But : Couche d'accès aux données de la table field_group.

Expose le contrat générique utilisé par FieldGroup :
get(id), insert(args), update(id, args), delete(id), get_columns(), get_column_defaults().

Ne contient aucune logique métier (la sanitisation est faite par FieldGroup) :
on se contente d'ignorer les clés qui ne sont pas des colonnes connues.
"""

from typing import Any, Dict, Mapping, Optional, Sequence

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from userfields.db.repositories.base import BaseRepository
from userfields.db.models.field_groups import FieldGroupRow

log = structlog.get_logger(__name__)

# colonne -> type Python attendu
COLUMNS: Dict[str, type] = {
    "id": int,
    "group_order": int,
    "name": str,
    "description": str,
}

COLUMN_DEFAULTS: Dict[str, Any] = {
    "id": 0,
    "group_order": 0,
    "name": "",
    "description": "",
}


class FieldGroupRepository(BaseRepository[FieldGroupRow]):
    """CRUD field_group + contrat d'accès par identifiant."""
    model = FieldGroupRow
    order_by = ("group_order", "id")

    # ---------- SCHÉMA ----------

    def get_columns(self) -> Dict[str, type]:
        return dict(COLUMNS)

    def get_column_defaults(self) -> Dict[str, Any]:
        return dict(COLUMN_DEFAULTS)

    def _known_columns(self, args: Mapping[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in args.items() if k in COLUMNS and k != "id"}

    # ---------- READ ----------

    def get(self, id_: Any) -> Optional[FieldGroupRow]:
        try:
            group_id = int(id_)
        except (TypeError, ValueError):
            return None
        if group_id <= 0:
            return None
        return self.session.get(self.model, group_id)

    def list_ordered(self, offset: int = 0, limit: int = 100) -> Sequence[FieldGroupRow]:
        return self.list(offset=offset, limit=limit)

    def get_by_name(self, name: str) -> Optional[FieldGroupRow]:
        return self.session.exec(select(self.model).where(self.model.name == name)).first()

    # ---------- WRITE ----------

    def insert(self, args: Mapping[str, Any]) -> int:
        """Insère une ligne et retourne son id (0 en cas d'échec)."""
        values = self.get_column_defaults()
        values.pop("id")
        values.update(self._known_columns(args))
        try:
            row = self.create(**values)
        except (SQLAlchemyError, OverflowError) as e:
            self.session.rollback()
            log.error("field_group_insert_failed", error=str(e))
            return 0
        return row.id or 0

    def update(self, id_: Any, args: Mapping[str, Any]) -> bool:  # type: ignore[override]
        """Met à jour les colonnes connues de la ligne `id_`. False si introuvable."""
        row = self.get(id_)
        if row is None:
            return False
        try:
            super().update(row, **self._known_columns(args))
        except (SQLAlchemyError, OverflowError) as e:
            self.session.rollback()
            log.error("field_group_update_failed", group_id=id_, error=str(e))
            return False
        return True

    def delete(self, id_: Any) -> bool:  # type: ignore[override]
        row = self.get(id_)
        if row is None:
            return False
        super().delete(row)
        return True
