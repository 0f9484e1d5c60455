"""
➡️ But : Registre global des types de champs (text, username…).

Un type de champ est un descripteur immuable : catégorie (group), libellé (name),
clé unique (type), icône (icon) et poids de tri (order).

Ajouter un type = déclarer une sous-classe de FieldType avec sa propre clé `type` :

class EmailField(FieldType):
    group = "standard"
    name = "Email"
    type = "email"
    icon = "dashicons-email"
    order = 4

La sous-classe s'enregistre toute seule dans `registry` à sa création.
Une sous-classe qui ne redéfinit pas `type` (classe intermédiaire) n'est pas enregistrée.
"""

from typing import Any, ClassVar, Dict, Iterator, List, Optional, Type

import structlog

log = structlog.get_logger(__name__)


class FieldTypeRegistry:
    def __init__(self) -> None:
        self._types: Dict[str, "FieldType"] = {}

    def register(self, cls: Type["FieldType"]) -> "FieldType":
        """Instancie le descripteur une fois et l'enregistre sous sa clé `type`."""
        key = cls.type
        if not key:
            raise ValueError(f"{cls.__name__} has no field type key")
        existing = self._types.get(key)
        if existing is not None:
            if type(existing) is cls:
                return existing
            raise ValueError(
                f"Field type {key!r} already registered by {type(existing).__name__}"
            )
        descriptor = cls()
        self._types[key] = descriptor
        log.debug("field_type_registered", type=key, cls=cls.__name__)
        return descriptor

    def unregister(self, key: str) -> bool:
        return self._types.pop(key, None) is not None

    def get(self, key: str) -> Optional["FieldType"]:
        return self._types.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator["FieldType"]:
        return iter(self.all())

    def all(self) -> List["FieldType"]:
        return sorted(self._types.values(), key=lambda d: (d.order, d.type))

    def grouped(self) -> Dict[str, List["FieldType"]]:
        groups: Dict[str, List["FieldType"]] = {}
        for descriptor in self.all():
            groups.setdefault(descriptor.group, []).append(descriptor)
        return groups


# Registre global importable partout
registry = FieldTypeRegistry()


class FieldType:
    group: ClassVar[str] = "default"
    name: ClassVar[str] = ""
    type: ClassVar[str] = ""
    icon: ClassVar[str] = "dashicons-editor-textcolor"
    order: ClassVar[int] = 0

    def __init_subclass__(cls, register: bool = True, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if register and "type" in cls.__dict__ and cls.type:
            registry.register(cls)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"Field type {self.type!r} is read-only ({key})")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} type={self.type!r}>"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group": self.group,
            "name": self.name,
            "type": self.type,
            "icon": self.icon,
            "order": self.order,
        }
