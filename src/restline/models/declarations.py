from typing import Any, Optional, get_origin

from pydantic import BaseModel, ConfigDict


def type_name(annotation: Any) -> str:
    """Short, stable name of a declared type, e.g. ``str`` or ``list``."""
    if annotation is None or annotation is type(None):
        return "None"
    origin = get_origin(annotation)
    if origin is not None:
        annotation = origin
    name = getattr(annotation, "__name__", None)
    if name:
        return name
    return str(annotation).replace("typing.", "")


def type_repr(annotation: Any) -> str:
    """Full rendering of a declared type, keeping generic arguments."""
    if get_origin(annotation) is not None:
        return str(annotation).replace("typing.", "")
    return type_name(annotation)


class ParameterDeclaration(BaseModel):
    """Static description of one method parameter and its binding markers."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    index: int
    name: str
    annotation: Any = None
    param_name: Optional[str] = None
    legacy_name: Optional[str] = None
    is_url: bool = False


class MethodDeclaration(BaseModel):
    """Static description of one interface method.

    This is the only input of the contract parser; it is built from the
    decorators at registration time by :func:`restline.describe_method`
    or written by hand.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    declaring_type: str
    method_name: str
    request_line: Optional[str] = None
    class_headers: tuple[str, ...] = ()
    method_headers: tuple[str, ...] = ()
    body: Optional[str] = None
    parameters: tuple[ParameterDeclaration, ...] = ()
    return_type: Any = None

    @property
    def config_key(self) -> str:
        """``Type#method(ptype,...)``, unique per method of an interface."""
        parameter_types = ",".join(
            type_name(parameter.annotation) for parameter in self.parameters
        )
        return f"{self.declaring_type}#{self.method_name}({parameter_types})"

    @property
    def headers(self) -> tuple[str, ...]:
        """Class-level header declarations followed by method-level ones."""
        return self.class_headers + self.method_headers
