"""Target shape compilation and value coercion.

A ShapePlan records the fields of a target class once (name, annotation,
whether a value is required) together with how instances are constructed.
Plans are cached per class so mapping does no per-call introspection.

Supported shapes:
1. Pydantic BaseModel -> model_validate(values), keyed by field alias
2. dataclass -> target_class(**values)
3. Plain class with named __init__ parameters -> target_class(**values)
4. Plain class with a no-argument __init__ (inherited or its own) ->
   target_class(), then setattr for each annotated class attribute
"""

from __future__ import annotations

import dataclasses
import inspect
import typing
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, PydanticUserError, TypeAdapter

from table_mapper.core.exceptions import InvalidInputError
from table_mapper.core.logging import get_logger

logger = get_logger(__name__)

_COERCION_CONFIG = ConfigDict(coerce_numbers_to_str=True, arbitrary_types_allowed=True)

_PARAMETER_KINDS = (
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


@dataclass(frozen=True)
class FieldPlan:
    """A single settable field of a target shape."""

    name: str
    annotation: Any = Any
    required: bool = False


@dataclass(frozen=True)
class ShapePlan:
    """Compiled, cached description of a target class."""

    target_class: type
    fields: tuple[FieldPlan, ...]
    by_attributes: bool = False
    by_validation: bool = False

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def build(self, values: dict[str, Any]) -> Any:
        """Construct a target instance from field values."""
        if self.by_validation:
            return self.target_class.model_validate(values)  # type: ignore[attr-defined]
        if not self.by_attributes:
            return self.target_class(**values)
        instance = self.target_class()
        for name, value in values.items():
            setattr(instance, name, value)
        return instance


def _resolve_hints(obj: Any) -> dict[str, Any]:
    """Resolve annotations, tolerating forward references that do not resolve."""
    try:
        return typing.get_type_hints(obj)
    except (NameError, TypeError):
        raw = getattr(obj, "__annotations__", {})
        # Unresolvable string annotations are treated as untyped
        return {k: (Any if isinstance(v, str) else v) for k, v in raw.items()}


def _pydantic_fields(cls: type[BaseModel]) -> tuple[FieldPlan, ...]:
    """Fields keyed by the name model_validate expects (the alias, if any)."""
    plans = []
    for name, info in cls.model_fields.items():
        key = info.validation_alias if isinstance(info.validation_alias, str) else None
        annotation = info.annotation if info.annotation is not None else Any
        plans.append(FieldPlan(key or info.alias or name, annotation, info.is_required()))
    return tuple(plans)


def _dataclass_fields(cls: type) -> tuple[FieldPlan, ...]:
    hints = _resolve_hints(cls)
    plans = []
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        required = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        plans.append(FieldPlan(f.name, hints.get(f.name, Any), required))
    return tuple(plans)


def _init_fields(cls: type) -> tuple[FieldPlan, ...]:
    """Fields from the named parameters of a plain class __init__."""
    try:
        sig = inspect.signature(cls)
    except (ValueError, TypeError):
        return ()
    hints = _resolve_hints(cls.__init__)
    plans = []
    for name, param in sig.parameters.items():
        if param.kind not in _PARAMETER_KINDS:
            continue
        plans.append(
            FieldPlan(name, hints.get(name, Any), param.default is inspect.Parameter.empty)
        )
    return tuple(plans)


def _attribute_fields(cls: type) -> tuple[FieldPlan, ...]:
    """Fields from the annotated class attributes of a plain class."""
    plans = []
    for name, annotation in _resolve_hints(cls).items():
        if name.startswith("_") or typing.get_origin(annotation) is typing.ClassVar:
            continue
        plans.append(FieldPlan(name, annotation, not hasattr(cls, name)))
    return tuple(plans)


@lru_cache(maxsize=256)
def compile_shape(target_class: type) -> ShapePlan:
    """Compile (and cache) the mapping plan for a target class."""
    if not isinstance(target_class, type):
        raise InvalidInputError("target_class", f"expected a class, got {target_class!r}")

    if issubclass(target_class, BaseModel):
        plan = ShapePlan(target_class, _pydantic_fields(target_class), by_validation=True)
    elif dataclasses.is_dataclass(target_class):
        plan = ShapePlan(target_class, _dataclass_fields(target_class))
    else:
        init_fields = () if target_class.__init__ is object.__init__ else _init_fields(target_class)
        if init_fields:
            plan = ShapePlan(target_class, init_fields)
        else:
            # No named constructor parameters: construct bare, assign attributes
            plan = ShapePlan(target_class, _attribute_fields(target_class), by_attributes=True)

    logger.debug(
        "Compiled shape for %s: fields=%s by_attributes=%s",
        target_class.__name__,
        plan.field_names,
        plan.by_attributes,
    )
    return plan


def _build_adapter(annotation: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(annotation, config=_COERCION_CONFIG)
    except PydanticUserError:
        # Models, dataclasses and TypedDicts carry their own config
        return TypeAdapter(annotation)


@lru_cache(maxsize=512)
def _cached_adapter(annotation: Any) -> TypeAdapter[Any]:
    return _build_adapter(annotation)


def adapter_for(annotation: Any) -> TypeAdapter[Any]:
    """Get the validating adapter for an annotation, cached when hashable."""
    try:
        hash(annotation)
    except TypeError:
        return _build_adapter(annotation)
    return _cached_adapter(annotation)


def coerce_value(value: Any, annotation: Any) -> Any:
    """Convert a raw column value to the declared annotation.

    Lax conversion: lossless changes succeed ("42" -> 42, 3.0 -> 3, 7 -> "7"),
    lossy ones raise pydantic.ValidationError. Untyped fields pass through.
    """
    if annotation is Any or annotation is inspect.Parameter.empty:
        return value
    return adapter_for(annotation).validate_python(value)
