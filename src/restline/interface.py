"""Declaration surface for service interfaces.

An interface is a plain class. Its methods carry the request line, headers
and body through decorators, and each parameter carries its binding name
through ``typing.Annotated``::

    @headers("Accept: application/json")
    class Route53:
        @request_line("GET /domains/{domainId}/records?name={name}")
        def records(
            self,
            domain_id: Annotated[int, Param("domainId")],
            name: Annotated[str, Param("name")],
        ) -> list: ...

The decorators only record data. :func:`describe_interface` turns that
data into :class:`~restline.models.MethodDeclaration` values, which is all
the contract parser ever looks at.
"""

import inspect
from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    Callable,
    Protocol,
    TypeVar,
    get_args,
    get_origin,
    get_type_hints,
)

import httpx

from .models.declarations import MethodDeclaration, ParameterDeclaration
from .models.errors import InterfaceDeclarationError

T = TypeVar("T")

_DECLARATION_ATTRIBUTE = "__restline__"


@dataclass(frozen=True)
class Param:
    """Binds a parameter to a placeholder or form field name."""

    value: str


@dataclass(frozen=True)
class Named:
    """Legacy alias of :class:`Param`, kept for older interface declarations."""

    value: str


def _declaration_data(target: Any) -> dict[str, Any]:
    # look in the target's own namespace so that subclasses never write
    # into a base class's declaration
    data = target.__dict__.get(_DECLARATION_ATTRIBUTE)
    if data is None:
        data = {}
        setattr(target, _DECLARATION_ATTRIBUTE, data)
    return data


def request_line(line: str) -> Callable[[T], T]:
    """Declare the verb and path of a method, e.g. ``"GET /users/{id}"``."""

    def decorator(func: T) -> T:
        _declaration_data(func)["request_line"] = line
        return func

    return decorator


def headers(*declarations: str) -> Callable[[T], T]:
    """Declare ``"Name: value"`` headers on an interface class or a method.

    Applying the decorator more than once accumulates the declarations.
    """

    def decorator(target: T) -> T:
        data = _declaration_data(target)
        # decorators apply bottom-up; keep the top one first
        data["headers"] = tuple(declarations) + data.get("headers", ())
        return target

    return decorator


def body(template: str) -> Callable[[T], T]:
    """Declare a literal body, or a body template holding ``{name}`` placeholders."""

    def decorator(func: T) -> T:
        _declaration_data(func)["body"] = template
        return func

    return decorator


def _is_url_type(annotation: Any) -> bool:
    return inspect.isclass(annotation) and issubclass(annotation, httpx.URL)


def _describe_parameter(
    index: int, parameter: inspect.Parameter, annotation: Any
) -> ParameterDeclaration:
    param_name = None
    legacy_name = None
    if get_origin(annotation) is Annotated:
        annotation, *markers = get_args(annotation)
        for marker in markers:
            if isinstance(marker, Param):
                param_name = marker.value
            elif isinstance(marker, Named):
                legacy_name = marker.value

    return ParameterDeclaration(
        index=index,
        name=parameter.name,
        annotation=annotation,
        param_name=param_name,
        legacy_name=legacy_name,
        is_url=_is_url_type(annotation),
    )


def describe_method(
    func: Callable[..., Any],
    declaring_type: str,
    class_headers: tuple[str, ...] = (),
) -> MethodDeclaration:
    """Build the static declaration of one interface method.

    Args:
        func: The function as defined on the interface class, ``self`` included.
        declaring_type: Name of the interface, used in the method's config key.
        class_headers: Header declarations inherited from the interface class.
    """
    data = func.__dict__.get(_DECLARATION_ATTRIBUTE, {})
    hints = get_type_hints(func, include_extras=True)

    parameters: list[ParameterDeclaration] = []
    signature = inspect.signature(func)
    for position, parameter in enumerate(list(signature.parameters.values())[1:]):
        if parameter.kind in (
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
        ):
            raise InterfaceDeclarationError(
                f"Variadic parameter '{parameter.name}' unsupported on "
                f"{declaring_type}.{func.__name__}"
            )
        parameters.append(
            _describe_parameter(position, parameter, hints.get(parameter.name, Any))
        )

    return MethodDeclaration(
        declaring_type=declaring_type,
        method_name=func.__name__,
        request_line=data.get("request_line"),
        class_headers=class_headers,
        method_headers=data.get("headers", ()),
        body=data.get("body"),
        parameters=tuple(parameters),
        return_type=hints.get("return"),
    )


def _interface_classes(cls: type) -> list[type]:
    """The interface and its bases, most basic first."""
    return [
        klass
        for klass in reversed(cls.__mro__)
        if klass not in (object, Protocol) and klass.__module__ != "typing"
    ]


def describe_interface(cls: type) -> list[MethodDeclaration]:
    """Describe every exposed method of an interface class.

    Public functions defined on the class and its bases are exposed;
    private names, static methods and class methods are skipped.

    Raises:
        InterfaceDeclarationError: For generic interfaces, multiple
            inheritance, or a method redefined somewhere in the hierarchy.
    """
    if getattr(cls, "__parameters__", ()):
        raise InterfaceDeclarationError(
            f"Parameterized types unsupported: {cls.__name__}"
        )

    bases = [base for base in cls.__bases__ if base not in (object, Protocol)]
    if len(bases) > 1:
        raise InterfaceDeclarationError(
            f"Only single inheritance supported: {cls.__name__}"
        )

    classes = _interface_classes(cls)
    class_headers: tuple[str, ...] = ()
    for klass in classes:
        class_headers += klass.__dict__.get(_DECLARATION_ATTRIBUTE, {}).get(
            "headers", ()
        )

    declarations: dict[str, MethodDeclaration] = {}
    for klass in classes:
        for name, member in klass.__dict__.items():
            if name.startswith("_") or not inspect.isfunction(member):
                continue
            declaration = describe_method(member, cls.__name__, class_headers)
            if name in declarations:
                raise InterfaceDeclarationError(
                    "Overrides unsupported", declaration.config_key
                )
            declarations[name] = declaration

    return list(declarations.values())
