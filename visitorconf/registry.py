from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Dict, Mapping, Optional, Type

if TYPE_CHECKING:
    from .visitor import VisitorConf

_VISITOR_CONF_TYPES: Dict[str, Type["VisitorConf"]] = {}

# Read-only view. Registration only happens while modules are imported.
VISITOR_CONF_TYPES: Mapping[str, Type["VisitorConf"]] = MappingProxyType(_VISITOR_CONF_TYPES)


def register_visitor_type(visitor_type: str) -> Callable[[Type["VisitorConf"]], Type["VisitorConf"]]:
    """
    A class decorator registering a visitor conf class under its ``type`` value.
    """
    if not visitor_type:
        raise ValueError("visitor type shouldn't be empty")

    def decorator(conf_cls: Type["VisitorConf"]) -> Type["VisitorConf"]:
        if visitor_type in _VISITOR_CONF_TYPES:
            raise ValueError(f"visitor type [{visitor_type}] is already registered")
        _VISITOR_CONF_TYPES[visitor_type] = conf_cls
        return conf_cls

    return decorator


def resolve_visitor_type(visitor_type: str) -> Optional[Type["VisitorConf"]]:
    return _VISITOR_CONF_TYPES.get(visitor_type)


def default_visitor_conf(visitor_type: str) -> Optional["VisitorConf"]:
    """Create an empty conf object for ``visitor_type``, or None if it is unknown."""
    conf_cls = resolve_visitor_type(visitor_type)
    if conf_cls is None:
        return None
    return conf_cls()
