from __future__ import annotations

import logging
from typing import Any, Mapping

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigError, DecodeError, MissingTypeError, UnknownTypeError, ValidationError
from .models import BaseVisitorConf, describe_decode_error, present_values
from .registry import register_visitor_type, resolve_visitor_type

logger = logging.getLogger(__name__)


class VisitorConf(BaseModel):
    """A built visitor: the common fields in ``base`` plus per-type fields.

    Callers go through ``get_base_info``, ``compare``, ``check`` and
    ``unmarshal_from_ini`` and never branch on the concrete class.
    Instances are frozen.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    base: BaseVisitorConf = Field(default_factory=BaseVisitorConf)

    def get_base_info(self) -> BaseVisitorConf:
        return self.base

    @classmethod
    def unmarshal_from_ini(cls, prefix: str, name: str, section: Mapping[str, Any]) -> VisitorConf:
        """Decode ``section``, decorate the common fields once, then decode per-type fields."""
        base = BaseVisitorConf.decode(section, name=name)
        base = base.decorate(prefix, name, section)

        raw = present_values(section)
        raw["base"] = base
        try:
            return cls.model_validate(raw)
        except pydantic.ValidationError as e:
            raise DecodeError(describe_decode_error(e), name=name, visitor_type=base.proxy_type) from e

    def check(self) -> None:
        self.base.check()

    def compare(self, cmp: VisitorConf) -> bool:
        if type(cmp) is not type(self):
            return False
        if not self.base.compare(cmp.base):
            return False
        # per-type fields, if a subclass declares any
        for f in type(self).model_fields:
            if f == "base":
                continue
            if getattr(self, f) != getattr(cmp, f):
                return False
        return True


@register_visitor_type("stcp")
class STCPVisitorConf(VisitorConf):
    """Secret TCP visitor."""


@register_visitor_type("sudp")
class SUDPVisitorConf(VisitorConf):
    """Secret UDP visitor."""


@register_visitor_type("xtcp")
class XTCPVisitorConf(VisitorConf):
    """P2P (NAT hole punching) TCP visitor."""


def new_visitor_conf_from_ini(prefix: str, name: str, section: Mapping[str, Any]) -> VisitorConf:
    visitor_type = str(section.get("type") or "")
    if visitor_type == "":
        logger.warning("visitor [%s] rejected: empty type", name)
        raise MissingTypeError(name)

    conf_cls = resolve_visitor_type(visitor_type)
    if conf_cls is None:
        logger.warning("visitor [%s] rejected: unknown type [%s]", name, visitor_type)
        raise UnknownTypeError(name, visitor_type)

    try:
        conf = conf_cls.unmarshal_from_ini(prefix, name, section)
    except DecodeError as e:
        logger.warning("visitor [%s] type [%s] decode failed: %s", name, visitor_type, e)
        raise ConfigError(name, visitor_type, cause=e) from e

    try:
        conf.check()
    except ValidationError as e:
        # report the section name, like the other construction errors
        e.name = name
        e.visitor_type = visitor_type
        logger.warning("visitor [%s] type [%s] invalid %s: %s", name, visitor_type, e.field, e)
        raise

    base = conf.get_base_info()
    logger.debug(
        "visitor [%s] type [%s] server_name=%s bind=%s:%d",
        base.proxy_name,
        visitor_type,
        base.server_name,
        base.bind_addr,
        base.bind_port,
    )
    return conf
