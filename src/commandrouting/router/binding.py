"""Model properties and raw-value conversion to their declared types."""
from __future__ import annotations

import dataclasses
import types
from typing import Any, ClassVar, Union, get_args, get_origin, get_type_hints

from commandrouting.core.errors import ModelBindingError

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def model_properties(model_type: type) -> dict[str, Any]:
    """
    Settable named properties of a model: name -> declared type.
    Dataclass fields (init or not) for dataclasses, annotated class attributes otherwise,
    then any @property with a setter (typed by the getter's return annotation).
    Names starting with '_' and ClassVars are skipped.
    """
    hints = get_type_hints(model_type)
    if dataclasses.is_dataclass(model_type):
        names = [f.name for f in dataclasses.fields(model_type)]
    else:
        names = [n for n in hints if get_origin(hints[n]) is not ClassVar and hints[n] is not ClassVar]
    props = {n: hints.get(n, Any) for n in names if not n.startswith("_")}
    for cls in model_type.__mro__:
        for name, attr in vars(cls).items():
            if isinstance(attr, property) and attr.fset is not None and not name.startswith("_"):
                props.setdefault(name, get_type_hints(attr.fget).get("return", Any) if attr.fget else Any)
    return props


def zero_value(target: Any) -> Any:
    """Default for a property nothing supplied and the model never set: int() for int, None for Optional."""
    if _unwrap_optional(target) is not target:
        return None
    if target in (int, float, str, bool):
        return target()
    origin = get_origin(target) or target
    if origin in (list, dict, set, tuple):
        return origin()
    return None


def _unwrap_optional(target: Any) -> Any:
    origin = get_origin(target)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(target) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return target


def convert_value(name: str, raw: Any, target: Any) -> Any:
    """Convert raw (string from a parser, or decoded JSON from the body) to target."""
    target = _unwrap_optional(target)
    if raw is None or target is Any:
        return raw
    if target is bool:
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str) and raw.strip().lower() in _TRUE | _FALSE:
            return raw.strip().lower() in _TRUE
        raise ModelBindingError(name, raw, target)
    if target is int:
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        if isinstance(raw, str):
            try:
                return int(raw.strip(), 10)
            except ValueError:
                raise ModelBindingError(name, raw, target) from None
        raise ModelBindingError(name, raw, target)
    if target is float:
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return float(raw)
        if isinstance(raw, str):
            try:
                return float(raw.strip())
            except ValueError:
                raise ModelBindingError(name, raw, target) from None
        raise ModelBindingError(name, raw, target)
    if target is str:
        if isinstance(raw, str):
            return raw
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return str(raw)
        raise ModelBindingError(name, raw, target)
    check = get_origin(target) or target
    if isinstance(check, type) and isinstance(raw, check):
        return raw
    raise ModelBindingError(name, raw, target)
