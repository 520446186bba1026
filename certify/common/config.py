# certify/common/config.py
"""
Pydantic models describing one certificate request.

Defaults for the output path, validity and key length may be overridden
through CERTIFY_OUT, CERTIFY_DAYS and CERTIFY_KEY_BITS.
"""
import os
from enum import Enum
from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from certify.common.utils import unique_names

DEFAULT_OUT = "certify.pem"
DEFAULT_DAYS = 3650
DEFAULT_BITS = 2048
MAX_COMMON_NAME = 64


def env_value(name: str, default: int):
    # raw string when set; pydantic coerces and reports bad values
    return os.environ.get(name, default)


class Role(str, Enum):
    CA = "ca"
    SERVER = "server"
    CLIENT = "client"


class GenerateKey(BaseModel):
    model_config = ConfigDict(validate_default=True)

    kind: Literal["generate"] = "generate"
    bits: int = Field(default_factory=lambda: env_value("CERTIFY_KEY_BITS", DEFAULT_BITS), gt=0)


class LoadKey(BaseModel):
    kind: Literal["load"] = "load"
    path: str


class CertifyConfig(BaseModel):
    model_config = ConfigDict(validate_default=True)

    common_name: str = "localhost"
    alt_names: List[str] = Field(default_factory=list)
    key_source: Union[GenerateKey, LoadKey] = Field(default_factory=GenerateKey, discriminator="kind")
    days: int = Field(default_factory=lambda: env_value("CERTIFY_DAYS", DEFAULT_DAYS), ge=1)
    role: Role = Role.SERVER
    out: str = Field(default_factory=lambda: os.environ.get("CERTIFY_OUT", DEFAULT_OUT))

    @field_validator("common_name")
    @classmethod
    def _common_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("common name must not be empty")
        if len(v) > MAX_COMMON_NAME:
            raise ValueError(f"common name must be at most {MAX_COMMON_NAME} characters, got {len(v)}")
        return v

    @field_validator("alt_names")
    @classmethod
    def _alt_names(cls, v: List[str]) -> List[str]:
        return unique_names(v)
