from pathlib import Path
from typing import Any, Dict, List

import structlog
import yaml
from sqlmodel import Session

from userfields.core.hooks import HookRegistry, hooks as default_hooks
from userfields.db.repositories.field_groups import FieldGroupRepository
from userfields.db.repositories.users import UserRepository
from userfields.features.field_groups.models import FieldGroup

log = structlog.get_logger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seeders
# -----------------------------
def seed_field_groups(
    session: Session,
    groups_yaml: List[Dict[str, Any]],
    *,
    hooks: HookRegistry = default_hooks,
) -> int:
    """Crée les groupes absents (recherche par nom). Retourne le nombre de groupes créés."""
    repo = FieldGroupRepository(session)
    created = 0
    for g in groups_yaml:
        name = g.get("name")
        if not name:
            continue
        if repo.get_by_name(name) is not None:
            continue
        group = FieldGroup(repo=repo, hooks=hooks)
        if group.add(g):
            created += 1
    return created


def seed_users(session: Session, users_yaml: List[Dict[str, Any]]) -> int:
    repo = UserRepository(session)
    created = 0
    for u in users_yaml:
        username = u.get("username")
        if not username or repo.get_by_username(username) is not None:
            continue
        repo.create(
            username=username,
            email=u.get("email", ""),
            display_name=u.get("display_name"),
        )
        created += 1
    return created


def seed_all(session: Session, seed_path: str | Path, *, hooks: HookRegistry = default_hooks) -> Dict[str, int]:
    data = load_seed_yaml(seed_path)
    counts = {
        "field_groups": seed_field_groups(session, data.get("field_groups") or [], hooks=hooks),
        "users": seed_users(session, data.get("users") or []),
    }
    log.info("seed_done", path=str(seed_path), **counts)
    return counts
