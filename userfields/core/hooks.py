"""
➡️ But : Points d’extension explicites (filtres + actions) autour du cycle de vie des entités.

Filtre : transforme une valeur (ex : les arguments d’un insert) et la renvoie.
Action : notifie des observateurs, la valeur de retour est ignorée.

hooks.add_filter("insert_field_group", lambda args: {**args, "group_order": 1})
hooks.add_action("post_insert_field_group", lambda args, group_id: ...)

Les callbacks sont exécutés par priorité croissante, puis par ordre d’enregistrement.
Une exception levée par un callback remonte à l’appelant.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

import structlog

log = structlog.get_logger(__name__)

DEFAULT_PRIORITY = 10


@dataclass(order=True)
class _Callback:
    priority: int
    seq: int
    fn: Callable[..., Any] = field(compare=False)


class HookRegistry:
    def __init__(self) -> None:
        self._filters: Dict[str, List[_Callback]] = {}
        self._actions: Dict[str, List[_Callback]] = {}
        self._seq = 0

    # ---------- INTERNAL ----------

    def _add(self, table: Dict[str, List[_Callback]], name: str, fn: Callable[..., Any], priority: int) -> None:
        if not callable(fn):
            raise TypeError(f"Hook callback for {name!r} must be callable")
        self._seq += 1
        callbacks = table.setdefault(name, [])
        callbacks.append(_Callback(priority, self._seq, fn))
        callbacks.sort()

    @staticmethod
    def _remove(table: Dict[str, List[_Callback]], name: str, fn: Callable[..., Any]) -> bool:
        callbacks = table.get(name, [])
        for cb in callbacks:
            if cb.fn is fn:
                callbacks.remove(cb)
                return True
        return False

    # ---------- FILTERS ----------

    def add_filter(self, name: str, fn: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        self._add(self._filters, name, fn, priority)

    def remove_filter(self, name: str, fn: Callable[..., Any]) -> bool:
        return self._remove(self._filters, name, fn)

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Passe `value` dans chaque filtre enregistré et renvoie le résultat final."""
        for cb in list(self._filters.get(name, [])):
            value = cb.fn(value, *args)
        return value

    # ---------- ACTIONS ----------

    def add_action(self, name: str, fn: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        self._add(self._actions, name, fn, priority)

    def remove_action(self, name: str, fn: Callable[..., Any]) -> bool:
        return self._remove(self._actions, name, fn)

    def has_action(self, name: str) -> bool:
        return bool(self._actions.get(name))

    def do_action(self, name: str, *args: Any) -> None:
        callbacks = list(self._actions.get(name, []))
        if callbacks:
            log.debug("hook_action", hook=name, callbacks=len(callbacks))
        for cb in callbacks:
            cb.fn(*args)

    def clear(self) -> None:
        self._filters.clear()
        self._actions.clear()


# Registre global importable partout
hooks = HookRegistry()
