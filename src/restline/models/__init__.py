from .declarations import MethodDeclaration, ParameterDeclaration
from .errors import (
    ContractError,
    ExpansionError,
    FormParamsWithBodyError,
    InterfaceDeclarationError,
    MalformedHeaderError,
    MissingRequestLineError,
    TemplateBuilderConsumedError,
    TooManyBodyParametersError,
    UnresolvedPlaceholderError,
)
from .metadata import MethodMetadata
from .resolved import ResolvedRequest
from .template import RequestTemplate, RequestTemplateBuilder

__all__ = [
    "ContractError",
    "ExpansionError",
    "FormParamsWithBodyError",
    "InterfaceDeclarationError",
    "MalformedHeaderError",
    "MethodDeclaration",
    "MethodMetadata",
    "MissingRequestLineError",
    "ParameterDeclaration",
    "RequestTemplate",
    "RequestTemplateBuilder",
    "ResolvedRequest",
    "TemplateBuilderConsumedError",
    "TooManyBodyParametersError",
    "UnresolvedPlaceholderError",
]
