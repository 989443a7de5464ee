"""
Конфигурация движка и её загрузчик из YAML.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Literal

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError

# Что делать с break/continue, дошедшими до верхнего уровня
StraySignalPolicy = Literal["ignore", "error"]

_STRAY_SIGNAL_POLICIES = ("ignore", "error")

_yaml = YAML(typ="safe")


@dataclass(frozen=True)
class EngineConfig:
    """Переключатели поведения рендера для Engine."""
    stray_signal: StraySignalPolicy = "ignore"
    strict_variables: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> EngineConfig:
        """
        Создает EngineConfig из YAML словаря.

        Raises:
            ConfigError: При неизвестных ключах или значениях неверного типа
        """
        if not isinstance(data, dict):
            raise ConfigError(f"expected mapping, got {type(data).__name__}")

        allowed = {f.name for f in fields(cls)}
        extras = set(data.keys()) - allowed
        if extras:
            raise ConfigError(f"unexpected keys: {sorted(extras)!r}")

        stray_signal = data.get("stray_signal", "ignore")
        if stray_signal not in _STRAY_SIGNAL_POLICIES:
            raise ConfigError(
                f"expected one of {', '.join(_STRAY_SIGNAL_POLICIES)}, got {stray_signal!r}",
                ("stray_signal",),
            )

        strict_variables = data.get("strict_variables", False)
        if not isinstance(strict_variables, bool):
            raise ConfigError(
                f"expected boolean, got {type(strict_variables).__name__}",
                ("strict_variables",),
            )

        return cls(stray_signal=stray_signal, strict_variables=strict_variables)

    def to_dict(self) -> Dict[str, Any]:
        """Сериализует в словарь для YAML/JSON."""
        return {"stray_signal": self.stray_signal, "strict_variables": self.strict_variables}


DEFAULT_CONFIG = EngineConfig()


def load_config(path: Path) -> EngineConfig:
    """
    Загружает конфигурацию движка из YAML файла.

    Отсутствующий файл дает конфигурацию по умолчанию.

    Raises:
        ConfigError: Если файл не является корректным YAML словарем известных ключей
    """
    if not path.is_file():
        return DEFAULT_CONFIG
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8"))
    except YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    if raw is None:
        return DEFAULT_CONFIG
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return EngineConfig.from_dict(raw)


__all__ = ["StraySignalPolicy", "EngineConfig", "DEFAULT_CONFIG", "load_config"]
