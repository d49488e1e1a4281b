from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .declarations import type_repr
from .template import RequestTemplate


class MethodMetadata(BaseModel):
    """Compiled, immutable description of how to build one method's request."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    config_key: str
    template: RequestTemplate
    form_params: tuple[str, ...] = ()
    index_to_name: Mapping[int, tuple[str, ...]] = Field(default_factory=dict)
    body_index: Optional[int] = None
    body_type: Any = None
    url_index: Optional[int] = None
    return_type: Any = None

    @field_validator("index_to_name", mode="after")
    @classmethod
    def freeze_index_to_name(
        cls, value: Mapping[int, tuple[str, ...]]
    ) -> Mapping[int, tuple[str, ...]]:
        return MappingProxyType(dict(value))

    def __hash__(self) -> int:
        return hash(
            (
                self.config_key,
                self.template,
                self.form_params,
                tuple(self.index_to_name.items()),
                self.body_index,
                self.url_index,
            )
        )

    def arguments_by_name(self, args: Sequence[Any]) -> dict[str, Any]:
        """Map positional call arguments to their binding names.

        Raises:
            ValueError: If fewer arguments than bound positions are given.
        """
        if self.index_to_name and max(self.index_to_name) >= len(args):
            raise ValueError(
                f"{self.config_key} expects at least {max(self.index_to_name) + 1} "
                f"arguments, got {len(args)}"
            )
        arguments: dict[str, Any] = {}
        for index, names in self.index_to_name.items():
            for name in names:
                arguments[name] = args[index]
        return arguments

    def describe(self) -> dict[str, Any]:
        """JSON-friendly view, used by the CLI and for logging."""
        template = self.template
        return {
            "configKey": self.config_key,
            "method": template.method,
            "url": template.url,
            "queries": {key: list(values) for key, values in template.queries.items()},
            "headers": {
                name: list(values) for name, values in template.headers.items()
            },
            "body": template.body.decode("utf-8", errors="replace")
            if template.body is not None
            else None,
            "bodyTemplate": template.body_template,
            "formParams": list(self.form_params),
            "indexToName": {
                str(index): list(names) for index, names in self.index_to_name.items()
            },
            "bodyIndex": self.body_index,
            "bodyType": type_repr(self.body_type)
            if self.body_index is not None
            else None,
            "urlIndex": self.url_index,
        }
