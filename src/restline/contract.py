from logging import getLogger
from typing import Any, Optional

from ._config import ContractConfig
from ._utils._logs import LOGGER_NAME
from ._utils._request_line import parse_header, split_request_line
from ._utils._resolver import ParameterNameResolver
from .interface import describe_interface
from .models.declarations import MethodDeclaration
from .models.errors import (
    ContractError,
    FormParamsWithBodyError,
    MalformedHeaderError,
    MissingRequestLineError,
    TooManyBodyParametersError,
    UnresolvedPlaceholderError,
)
from .models.metadata import MethodMetadata
from .models.template import RequestTemplateBuilder


class Contract:
    """Compiles declared interface methods into :class:`MethodMetadata`.

    Compilation is pure: it only reads the method declarations, so the
    same declaration always yields equal metadata. Callers are expected to
    compile each method once and cache the result.
    """

    def __init__(
        self,
        config: Optional[ContractConfig] = None,
        resolver: Optional[ParameterNameResolver] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or ContractConfig()
        self._resolver = resolver or ParameterNameResolver.default(
            legacy_names=self._config.legacy_names
        )

    def parse_and_validate_interface(self, cls: type) -> dict[str, MethodMetadata]:
        """Compile every exposed method of an interface class.

        Returns:
            Metadata keyed by config key, in declaration order.

        Raises:
            ContractError: On the first method that fails to compile; no
                partial result is returned.
        """
        result: dict[str, MethodMetadata] = {}
        for declaration in describe_interface(cls):
            metadata = self.parse_and_validate_metadata(declaration)
            result[metadata.config_key] = metadata

        self._logger.debug(f"Compiled {len(result)} methods of {cls.__name__}")
        return result

    def parse_and_validate_metadata(
        self, declaration: MethodDeclaration
    ) -> MethodMetadata:
        """Compile one method declaration.

        Raises:
            MissingRequestLineError: No request line, or it lacks a verb.
            MalformedHeaderError: A header is not in ``Name: value`` form.
            TooManyBodyParametersError: More than one unbound parameter.
            UnresolvedPlaceholderError: A placeholder names no parameter.
            FormParamsWithBodyError: A raw body parameter next to form parameters.
        """
        config_key = declaration.config_key
        builder = RequestTemplateBuilder(charset=self._config.body_charset)

        self._process_request_line(declaration, builder)
        for header in declaration.headers:
            parsed = parse_header(header)
            if parsed is None:
                raise MalformedHeaderError(header, config_key)
            builder.add_header(*parsed)
        if declaration.body is not None:
            builder.body(declaration.body)

        # placeholders that make a name an http parameter rather than a form one
        http_names = set(builder.snapshot().http_placeholders())

        index_to_name: dict[int, tuple[str, ...]] = {}
        form_params: list[str] = []
        body_index: Optional[int] = None
        body_type: Any = None
        url_index: Optional[int] = None
        unbound = 0

        for parameter in declaration.parameters:
            if parameter.is_url:
                if url_index is not None:
                    raise ContractError(
                        "Method has more than one URL parameter", config_key
                    )
                url_index = parameter.index
                continue

            name = self._resolver.resolve(parameter)
            if name:
                ignored = [
                    other
                    for other in self._resolver.candidates(parameter)
                    if other != name
                ]
                if ignored:
                    self._logger.warning(
                        f"{config_key}: parameter '{parameter.name}' is bound as "
                        f"'{name}', ignoring {', '.join(ignored)}"
                    )
                index_to_name[parameter.index] = (name,)
                if name not in http_names and name not in form_params:
                    form_params.append(name)
                continue

            unbound += 1
            if unbound > 1:
                raise TooManyBodyParametersError(
                    declaration.method_name, len(declaration.parameters), config_key
                )
            if builder.has_body:
                self._logger.warning(
                    f"{config_key}: parameter '{parameter.name}' is ignored "
                    "because the method declares a body"
                )
                continue
            body_index = parameter.index
            body_type = parameter.annotation

        template = builder.build()

        bound_names = {name for names in index_to_name.values() for name in names}
        for placeholder in template.placeholders():
            if placeholder not in bound_names:
                raise UnresolvedPlaceholderError(placeholder, config_key)

        if body_index is not None and form_params:
            raise FormParamsWithBodyError(tuple(form_params), config_key)

        metadata = MethodMetadata(
            config_key=config_key,
            template=template,
            form_params=tuple(form_params),
            index_to_name=index_to_name,
            body_index=body_index,
            body_type=body_type,
            url_index=url_index,
            return_type=declaration.return_type,
        )
        self._logger.debug(
            f"Compiled {config_key}: {template.method} {template.url or '<no path>'}"
        )
        return metadata

    def _process_request_line(
        self, declaration: MethodDeclaration, builder: RequestTemplateBuilder
    ) -> None:
        if declaration.request_line is None:
            raise MissingRequestLineError(
                declaration.method_name, declaration.config_key
            )
        parsed = split_request_line(declaration.request_line)
        if parsed is None:
            raise MissingRequestLineError(
                declaration.method_name, declaration.config_key
            )
        verb, path_and_query = parsed
        builder.method(verb).append(path_and_query)
