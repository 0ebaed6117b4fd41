"""Decoder configuration using pydantic-settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class DecoderSettings(BaseSettings):
    """Query decoder configuration."""

    model_config = {"env_prefix": "QUERYBIND_"}

    list_separator: str = Field(default=",", min_length=1)
    # Fail closed on keys no field consumed. Also read from
    # QUERYBIND_REJECT_UNKNOWN_KEYS, so a false value there turns the check off
    # for every decoder built from default settings in the process.
    reject_unknown_keys: bool = True
