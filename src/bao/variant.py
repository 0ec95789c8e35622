# src/bao/variant.py
from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from bao.errors import ConfigurationError

V = TypeVar("V", bound="Variant")


class Variant:
    """
    Common base of flows and runners: a registered type tag plus a typed config.

    Subclasses set ``type_tag`` (the className written to the manifest) and
    ``config_model`` (a pydantic model validating the constructor arguments).
    """

    type_tag: ClassVar[str] = "Variant"
    config_model: ClassVar[Type[BaseModel]]

    def __init__(self, config: Union[BaseModel, Mapping[str, Any], None] = None) -> None:
        if not isinstance(config, BaseModel):
            config = self._validate(config)
        self.config: Any = config

    @classmethod
    def _validate(cls, config: Optional[Mapping[str, Any]]) -> BaseModel:
        try:
            return cls.config_model.model_validate(dict(config or {}))
        except ValidationError as e:
            raise ConfigurationError(f"invalid config for {cls.type_tag}: {e}") from e

    @classmethod
    def from_config(cls: Type[V], config: Optional[Mapping[str, Any]]) -> V:
        return cls(cls._validate(config))

    def to_config(self) -> Optional[Dict[str, Any]]:
        """Constructor arguments as stored in the manifest; None when there are none."""
        return self.config.model_dump(by_alias=True, exclude_none=True) or None

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.config == self.config  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), repr(self.to_config())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_config()!r})"
