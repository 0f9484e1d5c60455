from typing import List, Optional

from userfields.features.field_types import builtin  # noqa: F401  (enregistre text / username)
from userfields.features.field_types.registry import FieldType, FieldTypeRegistry, registry as default_registry


class FieldTypeService:
    """Lecture du registre des types de champs."""

    def __init__(self, registry: FieldTypeRegistry = default_registry):
        self.registry = registry

    def list(self, group: Optional[str] = None) -> List[FieldType]:
        items = self.registry.all()
        if group is not None:
            items = [d for d in items if d.group == group]
        return items

    def get(self, key: str) -> FieldType:
        descriptor = self.registry.get(key)
        if descriptor is None:
            raise LookupError("Field type not found.")
        return descriptor
