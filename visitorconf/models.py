from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Tuple

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import DecodeError, ValidationError


VISITOR_ROLE = "visitor"
DEFAULT_BIND_ADDR = "127.0.0.1"

_INT_TEXT = re.compile(r"[+-]?\d+")

# fields taking part in compare(), in declaration order
BASE_COMPARE_FIELDS: Tuple[str, ...] = (
    "proxy_name",
    "proxy_type",
    "use_encryption",
    "use_compression",
    "role",
    "sk",
    "server_name",
    "bind_addr",
    "bind_port",
)


def present_values(section: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None or an empty string.

    An INI line like ``bind_port =`` means "unset", so it must fall back to
    the zero value instead of failing int/bool conversion.
    """
    out: Dict[str, Any] = {}
    for k, v in section.items():
        if v is None:
            continue
        if isinstance(v, str) and v == "":
            continue
        out[str(k)] = v
    return out


def describe_decode_error(e: pydantic.ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", ())) or "?"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


class BaseVisitorConf(BaseModel):
    """Fields shared by every visitor type.

    Keys of the raw section map onto fields through their aliases, so
    ``name`` fills ``proxy_name`` and ``type`` fills ``proxy_type``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    proxy_name: str = Field("", alias="name", description="prefix + section name")
    proxy_type: str = Field("", alias="type", description="stcp | sudp | xtcp")

    use_encryption: bool = False
    use_compression: bool = False

    role: str = ""
    sk: str = Field("", repr=False)

    server_name: str = Field("", description="proxy name on the server side")
    bind_addr: str = ""
    bind_port: int = 0

    @field_validator("bind_port", mode="before")
    @classmethod
    def bind_port_int_text(cls, v: Any) -> Any:
        # "6000.0" or "6e3" is not a port
        if isinstance(v, str) and not _INT_TEXT.fullmatch(v.strip()):
            raise ValueError(f"invalid integer [{v}]")
        if isinstance(v, str):
            return int(v.strip())
        return v

    @classmethod
    def decode(cls, section: Mapping[str, Any], name: str = "") -> BaseVisitorConf:
        try:
            return cls.model_validate(present_values(section))
        except pydantic.ValidationError as e:
            raise DecodeError(
                describe_decode_error(e), name=name, visitor_type=str(section.get("type") or "")
            ) from e

    def decorate(self, prefix: str, name: str, section: Mapping[str, Any]) -> BaseVisitorConf:
        """Return the normalized copy of a freshly decoded record.

        Must be applied exactly once: the prefix is prepended again on every
        call.
        """
        return self.model_copy(
            update={
                "proxy_name": prefix + name,
                "server_name": prefix + self.server_name,
                "bind_addr": self.bind_addr or DEFAULT_BIND_ADDR,
            }
        )

    def check(self) -> None:
        if self.role != VISITOR_ROLE:
            raise ValidationError(
                "role",
                f"visitor [{self.proxy_name}] invalid role [{self.role}]",
                name=self.proxy_name,
                visitor_type=self.proxy_type,
            )
        if not self.bind_addr:
            raise ValidationError(
                "bind_addr",
                f"visitor [{self.proxy_name}] bind_addr shouldn't be empty",
                name=self.proxy_name,
                visitor_type=self.proxy_type,
            )
        if self.bind_port <= 0:
            raise ValidationError(
                "bind_port",
                f"visitor [{self.proxy_name}] bind_port is required",
                name=self.proxy_name,
                visitor_type=self.proxy_type,
            )

    def compare(self, cmp: BaseVisitorConf) -> bool:
        for f in BASE_COMPARE_FIELDS:
            if getattr(self, f) != getattr(cmp, f):
                return False
        return True
