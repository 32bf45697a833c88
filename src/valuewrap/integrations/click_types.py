"""Click parameter type for wrapper types.

Command-line arguments are bound the same way as URL path segments, so a
wrapper type gets identical parsing and error messages on both surfaces.
"""

from __future__ import annotations

from typing import Any

import click

from valuewrap.converters.protocols import PathBindable
from valuewrap.derivation import path_bindable
from valuewrap.domain.result import Err
from valuewrap.domain.wrapper import ValueWrapper


class WrappedParamType(click.ParamType):
    """Click ParamType that binds through a derived path binder."""

    def __init__(
        self,
        rule: ValueWrapper[Any, Any],
        binder: PathBindable[Any],
        *,
        wrapper_type: type | None = None,
        name: str | None = None,
    ) -> None:
        self.binder = path_bindable(rule, binder)
        self.wrapper_type = wrapper_type
        self.name = name or rule.name

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if self.wrapper_type is not None and isinstance(value, self.wrapper_type):
            return value
        key = param.name if param is not None and param.name else self.name
        result = self.binder.bind(key, str(value))
        if isinstance(result, Err):
            self.fail(result.message, param, ctx)
        return result.value
