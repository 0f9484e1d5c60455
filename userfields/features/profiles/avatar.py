"""
➡️ But : Rendre l'avatar d'un utilisateur (image + lien vers son profil).

get_profile_url(user)        → URL publique du profil
get_avatar_url(email, size)  → URL de l'image (compatible Gravatar)
get_avatar(user, size)       → balise <img>
render_avatar(AvatarContext) → fragment HTML complet (templates/profiles/avatar.html)

Toutes les valeurs sont échappées par Jinja2 (autoescape).
"""

import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import quote, urlencode

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from userfields.core.config import settings

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)


@dataclass(frozen=True)
class AvatarContext:
    user: Any
    size: int = settings.AVATAR_DEFAULT_SIZE


def _size(size: Any) -> int:
    try:
        value = int(size)
    except (TypeError, ValueError):
        return settings.AVATAR_DEFAULT_SIZE
    return value if value > 0 else settings.AVATAR_DEFAULT_SIZE


def get_profile_url(user: Any) -> str:
    return f"{settings.PROFILE_BASE_URL}/{quote(str(user.username), safe='')}"


def get_avatar_url(email: str | None, size: int) -> str:
    digest = hashlib.md5((email or "").strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": _size(size), "d": settings.AVATAR_DEFAULT, "r": settings.AVATAR_RATING})
    return f"{settings.AVATAR_BASE_URL}/{digest}?{query}"


def get_avatar(user: Any, size: int) -> Markup:
    size = _size(size)
    email = getattr(user, "email", None)
    html = env.get_template("profiles/avatar_img.html").render(
        alt=getattr(user, "display_name", None) or user.username,
        src=get_avatar_url(email, size),
        src_2x=get_avatar_url(email, size * 2),
        size=size,
    )
    return Markup(html.strip())


def render_avatar(context: AvatarContext) -> str:
    size = _size(context.size)
    return env.get_template("profiles/avatar.html").render(
        profile_url=get_profile_url(context.user),
        avatar=get_avatar(context.user, size),
    )
