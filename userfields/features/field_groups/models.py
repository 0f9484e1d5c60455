"""
➡️ But : Objet « enregistrement » d'un groupe de champs (lecture / ajout / mise à jour / sanitisation).

FieldGroup(3, repo=repo)        → charge la ligne 3 (vide si introuvable)
FieldGroup(other, repo=repo)    → copie l'état d'un FieldGroup existant
FieldGroup(repo=repo)           → nouveau groupe, non sauvegardé

Les entrées malformées ne lèvent jamais d'exception : chaque colonne retombe
sur sa valeur par défaut. Les échecs de persistance sont signalés par un
retour None / False.

Points d'extension (voir userfields.core.hooks) :
- filtres : insert_field_group(args), update_field_group(args, group_id)
- actions : pre_insert_field_group(args), post_insert_field_group(args, group_id),
            pre_update_field_group(args, group_id), post_update_field_group(args, group_id)
"""

import json
import math
import re
from typing import Any, Dict, Mapping, Optional

import structlog

from userfields.core.hooks import HookRegistry, hooks as default_hooks
from userfields.db.models.field_groups import FieldGroupRow
from userfields.db.repositories.field_groups import FieldGroupRepository

log = structlog.get_logger(__name__)


class InvalidPropertyError(AttributeError):
    code = "field-group-invalid-property"

    def __init__(self, key: str):
        super().__init__(f"Can't get property {key}")
        self.key = key


# -----------------------------
# Sanitisation
# -----------------------------

_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*?>")
_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_WHITESPACE_RE = re.compile(r"[\r\n\t ]+")
_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

# bornes d'une colonne INTEGER (entier signé 64 bits)
INT_MAX = 2 ** 63 - 1


def sanitize_text_field(value: Any) -> str:
    """Texte « propre » sur une ligne : sans balises, sans octets encodés, espaces réduits."""
    if value is None:
        return ""
    text = str(value)
    text = _SCRIPT_STYLE_RE.sub("", text)
    text = _TAG_RE.sub("", text)
    while _OCTET_RE.search(text):
        text = _OCTET_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def is_numeric(value: Any) -> bool:
    # les booléens sont des int en Python mais pas des nombres ici
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        # "1e400" a la forme d'un nombre mais vaut l'infini
        return bool(_NUMERIC_RE.match(value)) and math.isfinite(float(value))
    return False


def intval(value: Any) -> int:
    """Partie entière d'une valeur quelconque, 0 si elle n'en a pas."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if is_numeric(value) else 0
    if isinstance(value, str):
        if is_numeric(value):
            try:
                return int(value.strip())
            except ValueError:
                return int(float(value))
        match = _LEADING_INT_RE.match(value)
        return int(match.group(1)) if match else 0
    return 0


def absint(value: Any) -> int:
    return abs(intval(value))


def is_empty(value: Any) -> bool:
    """None, "", "0", 0, False et collections vides comptent comme vides."""
    if isinstance(value, str):
        return value in ("", "0")
    return not value


# -----------------------------
# Enregistrement
# -----------------------------

class FieldGroup:
    def __init__(
        self,
        id_or_group: Any = None,
        *,
        repo: FieldGroupRepository,
        hooks: HookRegistry = default_hooks,
    ):
        self._repo = repo
        self._hooks = hooks

        self._id: int = 0
        self._group_order: int = 0
        self._name: Optional[str] = None
        self._description: Optional[str] = None

        if not id_or_group:
            return

        if isinstance(id_or_group, FieldGroup):
            group: Any = id_or_group.to_dict()
        elif isinstance(id_or_group, (FieldGroupRow, Mapping)):
            group = id_or_group
        else:
            group = self._repo.get(intval(id_or_group))

        if group is not None:
            self._setup(group)

    def __getattr__(self, key: str) -> Any:
        # appelé uniquement quand l'attribut n'existe pas
        if key.startswith("_"):
            raise AttributeError(key)
        raise InvalidPropertyError(key)

    def __repr__(self) -> str:
        return f"<FieldGroup id={self._id} name={self._name!r}>"

    # ---------- LECTURE ----------

    @property
    def id(self) -> int:
        return self._id

    @property
    def group_order(self) -> int:
        return self._group_order

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    def exists(self) -> bool:
        return self._id > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "group_order": self._group_order,
            "name": self._name,
            "description": self._description,
        }

    # ---------- HYDRATATION ----------

    def _setup(self, group: Any) -> bool:
        if isinstance(group, Mapping):
            values = dict(group)
        else:
            values = {key: getattr(group, key, None) for key in self._repo.get_columns()}
        self._assign(values)
        return self._id > 0

    def _assign(self, values: Mapping[str, Any]) -> None:
        for key, kind in self._repo.get_columns().items():
            if key in values:
                value = values[key]
                setattr(self, f"_{key}", intval(value) if kind is int else value)

    def _reload(self) -> None:
        row = self._repo.get(self._id)
        if row is not None:
            self._setup(row)

    # ---------- ÉCRITURE ----------

    def add(self, args: Mapping[str, Any]) -> Optional[int]:
        """
        Ajoute le groupe, ou le met à jour s'il existe déjà.
        Retourne l'id du groupe, ou None (nom absent / échec d'enregistrement).
        """
        if is_empty(args.get("name")):
            return None

        if self._id and self.exists():
            return self._id if self.update(args) else None

        args = self._hooks.apply_filters("insert_field_group", dict(args))
        args = self.sanitize_columns(args)

        # un nom fait uniquement de balises ou d'espaces est vide une fois nettoyé
        if is_empty(args.get("name")):
            log.warning("field_group_insert_refused", reason="empty_name")
            return None

        self._hooks.do_action("pre_insert_field_group", args)

        self._assign({k: v for k, v in args.items() if k != "id"})

        group_id = self._repo.insert(args)
        if group_id:
            self._id = group_id
            self._reload()
            log.info("field_group_inserted", group_id=group_id, name=self._name)
        else:
            log.warning("field_group_insert_refused", name=args.get("name"))

        self._hooks.do_action("post_insert_field_group", args, self._id)

        return group_id or None

    def update(self, args: Mapping[str, Any]) -> bool:
        """
        Met à jour les colonnes connues fournies dans `args`.
        Sans aucune colonne connue : rien à écrire, on recharge l'état et on renvoie True.
        """
        ret = False
        args = self._hooks.apply_filters("update_field_group", dict(args), self._id)
        args = self.sanitize_columns(args)

        self._hooks.do_action("pre_update_field_group", args, self._id)

        columns = self._repo.get_columns()
        if "name" in args and is_empty(args["name"]):
            log.warning("field_group_update_refused", group_id=self._id, reason="empty_name")
        elif any(key in columns for key in args):
            if self._repo.update(self._id, args):
                self._reload()
                ret = True
                log.info("field_group_updated", group_id=self._id, columns=sorted(k for k in args if k in columns))
            else:
                log.warning("field_group_update_refused", group_id=self._id)
        else:
            self._reload()
            ret = True
            log.debug("field_group_update_noop", group_id=self._id)

        self._hooks.do_action("post_update_field_group", args, self._id)

        return ret

    def sanitize_columns(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Nettoie les colonnes fournies selon leur type ; les autres clés sont laissées telles quelles."""
        columns = self._repo.get_columns()
        defaults = self._repo.get_column_defaults()
        data = dict(data)

        for key, kind in columns.items():
            # Only sanitize data that we were provided
            if key not in data:
                continue

            value = data[key]
            if kind is str:
                if isinstance(value, (list, tuple, dict)):
                    data[key] = json.dumps(value)
                else:
                    data[key] = sanitize_text_field(value)
            elif kind is int:
                if not is_numeric(value) or intval(value) != absint(value) or absint(value) > INT_MAX:
                    data[key] = defaults[key]
                else:
                    data[key] = absint(value)
            else:
                data[key] = sanitize_text_field(value)

        return data
