from .errors import (
    ConfigError,
    DecodeError,
    MissingTypeError,
    UnknownTypeError,
    ValidationError,
    VisitorConfError,
)
from .models import BaseVisitorConf
from .registry import VISITOR_CONF_TYPES, default_visitor_conf, register_visitor_type, resolve_visitor_type
from .visitor import (
    STCPVisitorConf,
    SUDPVisitorConf,
    VisitorConf,
    XTCPVisitorConf,
    new_visitor_conf_from_ini,
)
from .loader import VisitorDiff, diff_visitor_confs, load_visitor_confs, visitor_prefix
from .ini import load_ini_sections, parse_ini_sections
from .config import CFG, VisitorSettings
from .logging_setup import configure_runtime_logging, get_runtime_log_file

__all__ = [
    "BaseVisitorConf",
    "CFG",
    "ConfigError",
    "DecodeError",
    "MissingTypeError",
    "STCPVisitorConf",
    "SUDPVisitorConf",
    "UnknownTypeError",
    "VISITOR_CONF_TYPES",
    "ValidationError",
    "VisitorConf",
    "VisitorConfError",
    "VisitorDiff",
    "VisitorSettings",
    "XTCPVisitorConf",
    "configure_runtime_logging",
    "default_visitor_conf",
    "diff_visitor_confs",
    "get_runtime_log_file",
    "load_ini_sections",
    "load_visitor_confs",
    "new_visitor_conf_from_ini",
    "parse_ini_sections",
    "register_visitor_type",
    "resolve_visitor_type",
    "visitor_prefix",
]
