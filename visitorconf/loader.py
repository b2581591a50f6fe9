from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .models import VISITOR_ROLE
from .visitor import VisitorConf, new_visitor_conf_from_ini

logger = logging.getLogger(__name__)

COMMON_SECTION = "common"


def visitor_prefix(user: str) -> str:
    """Proxy names of a client are namespaced by ``<user>.`` when a user is set."""
    user = (user or "").strip()
    if not user:
        return ""
    return f"{user}."


def load_visitor_confs(
    prefix: str,
    sections: Mapping[str, Mapping[str, Any]],
    start: Optional[Iterable[str]] = None,
) -> Dict[str, VisitorConf]:
    """Build every visitor section, keyed by decorated proxy name.

    Sections that are not visitors (including ``[common]``) are skipped.
    When ``start`` is non-empty only the listed section names are built.
    The first invalid section aborts the whole load.
    """
    only = {s.strip() for s in (start or []) if s and s.strip()}

    confs: Dict[str, VisitorConf] = {}
    for name, section in sections.items():
        if name == COMMON_SECTION:
            continue
        if only and name not in only:
            continue
        if str(section.get("role") or "") != VISITOR_ROLE:
            continue
        conf = new_visitor_conf_from_ini(prefix, name, section)
        confs[conf.get_base_info().proxy_name] = conf

    logger.info("loaded %d visitor(s) prefix=%r", len(confs), prefix)
    return confs


@dataclass
class VisitorDiff:
    # to stop: gone, or changed
    removed: List[str] = field(default_factory=list)
    # to start: new, or changed
    added: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.removed or self.added)


def diff_visitor_confs(old: Mapping[str, VisitorConf], new: Mapping[str, VisitorConf]) -> VisitorDiff:
    diff = VisitorDiff()
    for name, conf in old.items():
        cur = new.get(name)
        if cur is None or not conf.compare(cur):
            diff.removed.append(name)

    for name, conf in new.items():
        prev = old.get(name)
        if prev is None or not prev.compare(conf):
            diff.added.append(name)
        else:
            diff.unchanged.append(name)

    diff.removed.sort()
    diff.added.sort()
    diff.unchanged.sort()
    if diff.changed:
        logger.info("visitor reload: removed=%s added=%s", diff.removed, diff.added)
    return diff
