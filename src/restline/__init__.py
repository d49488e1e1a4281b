"""Declarative request-template compiler for Python HTTP clients."""

from ._config import ContractConfig
from ._utils._resolver import ParameterNameResolver
from .contract import Contract
from .expansion import build_request, expand
from .interface import (
    Named,
    Param,
    body,
    describe_interface,
    describe_method,
    headers,
    request_line,
)
from .models import (
    ContractError,
    ExpansionError,
    FormParamsWithBodyError,
    InterfaceDeclarationError,
    MalformedHeaderError,
    MethodDeclaration,
    MethodMetadata,
    MissingRequestLineError,
    ParameterDeclaration,
    RequestTemplate,
    RequestTemplateBuilder,
    ResolvedRequest,
    TemplateBuilderConsumedError,
    TooManyBodyParametersError,
    UnresolvedPlaceholderError,
)

__all__ = [
    "Contract",
    "ContractConfig",
    "ContractError",
    "ExpansionError",
    "FormParamsWithBodyError",
    "InterfaceDeclarationError",
    "MalformedHeaderError",
    "MethodDeclaration",
    "MethodMetadata",
    "MissingRequestLineError",
    "Named",
    "Param",
    "ParameterDeclaration",
    "ParameterNameResolver",
    "RequestTemplate",
    "RequestTemplateBuilder",
    "ResolvedRequest",
    "TemplateBuilderConsumedError",
    "TooManyBodyParametersError",
    "UnresolvedPlaceholderError",
    "body",
    "build_request",
    "describe_interface",
    "describe_method",
    "expand",
    "headers",
    "request_line",
]
