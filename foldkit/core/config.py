from __future__ import annotations

"""Config resolution at the public call boundary.

Public functions accept a config model, a plain mapping, keyword overrides,
or a mix. Everything goes through one pydantic validation so defaults are
applied in exactly one place.
"""

from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from foldkit.errors import InvalidConfigurationError

M = TypeVar("M", bound=BaseModel)


def resolve_config(
    model_cls: Type[M],
    options: Union[M, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> M:
    """Validate ``options`` (+ ``overrides``) into ``model_cls``.

    Raises
    ------
    InvalidConfigurationError
        If validation fails; the pydantic error is chained.
    """
    if isinstance(options, model_cls) and not overrides:
        return options

    payload: dict[str, Any] = {}
    if isinstance(options, BaseModel):
        payload.update(options.model_dump(by_alias=False, exclude_unset=True))
    elif options is not None:
        if not isinstance(options, Mapping):
            raise InvalidConfigurationError(
                f"{model_cls.__name__}: options must be a mapping or {model_cls.__name__}; "
                f"got {type(options).__name__}"
            )
        payload.update(options)
    payload.update(overrides)

    try:
        return model_cls.model_validate(payload)
    except ValidationError as e:
        raise InvalidConfigurationError(f"{model_cls.__name__}: {e}") from e
