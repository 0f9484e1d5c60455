"""
➡️ But : Configurer les logs structurés (structlog) une seule fois au démarrage.

Chaque module récupère son logger :

import structlog
log = structlog.get_logger(__name__)
log.info("field_group_inserted", group_id=3)

Rendu console lisible en dev, JSON en prod (LOG_JSON).
"""

import logging

import structlog

from userfields.core.config import settings

_configured = False


def configure_logging(level: str | None = None, *, json: bool | None = None) -> None:
    global _configured
    if _configured:
        return

    level_name = (level or settings.LOG_LEVEL).upper()
    as_json = settings.LOG_JSON if json is None else json

    logging.basicConfig(format="%(message)s", level=getattr(logging, level_name, logging.INFO))

    renderer = structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_name, logging.INFO)
        ),
        cache_logger_on_first_use=True,
    )
    _configured = True
