"""Resolution of a parameter's binding name from its annotation sources."""

from typing import Callable, Optional, Sequence

from ..models.declarations import ParameterDeclaration

NameStrategy = Callable[[ParameterDeclaration], Optional[str]]


def primary_name(parameter: ParameterDeclaration) -> Optional[str]:
    return parameter.param_name or None


def legacy_name(parameter: ParameterDeclaration) -> Optional[str]:
    # TODO: drop together with the Named marker once callers moved to Param
    return parameter.legacy_name or None


class ParameterNameResolver:
    """Tries naming strategies in order; the first non-empty name wins.

    Names produced by later strategies are only reported by
    :meth:`candidates`; identical names collapse into one.
    """

    def __init__(self, strategies: Sequence[NameStrategy]) -> None:
        self._strategies = tuple(strategies)

    @classmethod
    def default(cls, legacy_names: bool = True) -> "ParameterNameResolver":
        if legacy_names:
            return cls([primary_name, legacy_name])
        return cls([primary_name])

    def candidates(self, parameter: ParameterDeclaration) -> tuple[str, ...]:
        """All distinct names found for ``parameter``, in strategy order."""
        names: dict[str, None] = {}
        for strategy in self._strategies:
            name = strategy(parameter)
            if name:
                names.setdefault(name, None)
        return tuple(names)

    def resolve(self, parameter: ParameterDeclaration) -> Optional[str]:
        for strategy in self._strategies:
            name = strategy(parameter)
            if name:
                return name
        return None
