"""Parameter records for method and setter signatures."""

from typing import Generic, List, Tuple, TypeVar

from .entities import ParamEntry
from .exceptions import InvalidSignatureError
from .oracle import BaseTypeOracle

N = TypeVar("N")


class ParameterExtractor(Generic[N]):
    """
    Build ParamEntry records in declaration order.

    An optional parameter's type is widened with ``undefined``; a rest
    parameter keeps its declared array type unchanged.
    """

    def __init__(self, oracle: BaseTypeOracle[N]) -> None:
        self._oracle = oracle

    def extract(self, signature: N, member_name: str = "") -> Tuple[ParamEntry, ...]:
        """
        Extract the parameters of one signature.

        Args:
            signature: Method or setter node.
            member_name: Name used in error details.

        Returns:
            Parameters in declaration order.

        Raises:
            InvalidSignatureError: If a rest parameter is not last or is optional.
        """
        params = self._oracle.get_parameters(signature)
        entries: List[ParamEntry] = []

        for index, param in enumerate(params):
            name = self._oracle.get_parameter_name(param)
            is_rest = self._oracle.is_rest_parameter(param)
            is_optional = self._oracle.is_optional(param)

            if is_rest and index != len(params) - 1:
                raise InvalidSignatureError(
                    member_name=member_name,
                    reason=f"rest parameter '{name}' must be the last parameter",
                )
            if is_rest and is_optional:
                raise InvalidSignatureError(
                    member_name=member_name,
                    reason=f"rest parameter '{name}' cannot be optional",
                )

            if is_optional:
                type_text = self._oracle.render_optional_type(param)
            else:
                type_text = self._oracle.render_type(param)

            entries.append(
                ParamEntry(
                    name=name,
                    type=type_text,
                    is_optional=is_optional,
                    is_rest_param=is_rest,
                )
            )

        return tuple(entries)


__all__ = ["ParameterExtractor"]
