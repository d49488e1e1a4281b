from typing import Optional


class ContractError(Exception):
    """Raised when a declared interface method cannot be compiled.

    Every contract error is a permanent defect in the declaration: the
    method (and the interface it belongs to) must not be registered.
    """

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        self.message = f"{message} (at {config_key})" if config_key else message
        super().__init__(self.message)


class MissingRequestLineError(ContractError):
    def __init__(self, method_name: str, config_key: Optional[str] = None):
        self.method_name = method_name
        super().__init__(
            f"Method {method_name} not annotated with HTTP method type (ex. GET, POST)",
            config_key,
        )


class MalformedHeaderError(ContractError):
    def __init__(self, header: str, config_key: Optional[str] = None):
        self.header = header
        super().__init__(
            f"Header must be in the form 'Name: value', got {header!r}", config_key
        )


class TooManyBodyParametersError(ContractError):
    def __init__(
        self, method_name: str, parameter_count: int, config_key: Optional[str] = None
    ):
        self.method_name = method_name
        self.parameter_count = parameter_count
        super().__init__(
            f"Method has too many Body parameters: {method_name} "
            f"declares {parameter_count} parameters",
            config_key,
        )


class UnresolvedPlaceholderError(ContractError):
    def __init__(self, placeholder: str, config_key: Optional[str] = None):
        self.placeholder = placeholder
        super().__init__(
            f"Placeholder {{{placeholder}}} is not bound to any parameter", config_key
        )


class FormParamsWithBodyError(ContractError):
    def __init__(self, form_params: tuple[str, ...], config_key: Optional[str] = None):
        self.form_params = form_params
        super().__init__(
            "Body parameters cannot be used with form parameters: "
            f"{', '.join(form_params)}",
            config_key,
        )


class InterfaceDeclarationError(ContractError):
    """Raised for interface-level problems found while walking its methods."""


class TemplateBuilderConsumedError(RuntimeError):
    """Raised when a request template builder is used after ``build()``."""

    def __init__(self, operation: str):
        self.operation = operation
        self.message = f"Cannot {operation}: the template builder was already built"
        super().__init__(self.message)


class ExpansionError(Exception):
    """Raised at call time when a template placeholder has no argument value."""

    def __init__(self, placeholders: list[str]):
        self.placeholders = placeholders
        self.message = (
            "Missing values for placeholders: "
            + ", ".join(f"{{{name}}}" for name in placeholders)
        )
        super().__init__(self.message)
