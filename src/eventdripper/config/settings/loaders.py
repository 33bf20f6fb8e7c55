"""Config settings – EnvSettingsLoader, DotenvSettingsLoader.

Each dataclass field ``name`` of a :class:`Settings` subclass is read from
``<PREFIX>_<NAME>`` (``EVENTDRIPPER_API_KEY`` and so on).
"""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from eventdripper.config.settings.base import Settings
from eventdripper.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _to_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError("expected a boolean (1/0, true/false, yes/no, on/off)")


def _to_int(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError("expected an integer") from None


def _to_float(raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ValueError("expected a number") from None


# Keyed by annotation text; settings modules use postponed annotations.
_COERCERS: dict[str, Callable[[str], Any]] = {
    "bool": _to_bool,
    "int": _to_int,
    "float": _to_float,
    "bool | None": _to_bool,
    "int | None": _to_int,
    "float | None": _to_float,
}


def env_key(settings_class: type[Settings], field_name: str) -> str:
    """Environment variable name for *field_name* on *settings_class*."""
    prefix = getattr(settings_class, "_prefix", "")
    return f"{prefix}_{field_name}".upper().lstrip("_")


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


def _is_optional(field: dataclasses.Field[Any]) -> bool:
    hint = field.type if isinstance(field.type, str) else repr(field.type)
    return hint.replace(" ", "").endswith("|None") or "Optional[" in hint


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` instance from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables.

    Args:
        environ: Variables to read from; ``os.environ`` when omitted.

    An empty value for an optional field (``EVENTDRIPPER_WEBHOOK_SECRET=``)
    reads as ``None``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = env_key(settings_class, field.name)
            raw = environ.get(key)
            if raw is None:
                if _is_required(field):
                    raise MissingRequiredSettingError(key)
                continue
            kwargs[field.name] = self._coerce(key, raw, field)
        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"could not build {settings_class.__name__}: {exc}") from exc

    def _coerce(self, key: str, raw: str, field: dataclasses.Field[Any]) -> Any:
        if raw == "" and _is_optional(field):
            return None
        hint = field.type if isinstance(field.type, str) else getattr(field.type, "__name__", "")
        coerce = _COERCERS.get(hint)
        if coerce is None:
            return raw
        try:
            return coerce(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(key, raw, str(exc)) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file layered under the process environment.

    Variables already in the environment win unless ``override`` is set. The
    file is read with ``dotenv_values``; ``os.environ`` is left untouched.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        try:
            from dotenv import dotenv_values  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError("Install 'event-dripper[dotenv]' to use DotenvSettingsLoader") from exc
        from_file = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            environ = {**os.environ, **from_file}
        else:
            environ = {**from_file, **os.environ}
        return EnvSettingsLoader(environ).load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "env_key"]
