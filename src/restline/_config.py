import codecs
import os

from pydantic import BaseModel, field_validator

PREFIX = "RESTLINE_"


class ContractConfig(BaseModel):
    body_charset: str = "utf-8"
    legacy_names: bool = True

    @field_validator("body_charset")
    @classmethod
    def validate_charset(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown body charset: {value}") from e
        return value

    @classmethod
    def from_env(cls) -> "ContractConfig":
        """Build a configuration from ``RESTLINE_*`` environment variables."""
        values: dict[str, object] = {}

        charset = os.getenv(f"{PREFIX}BODY_CHARSET")
        if charset:
            values["body_charset"] = charset

        legacy_names = os.getenv(f"{PREFIX}LEGACY_NAMES")
        if legacy_names is not None and legacy_names != "":
            values["legacy_names"] = legacy_names.strip().lower() not in (
                "0",
                "false",
                "no",
                "off",
            )

        return cls(**values)
