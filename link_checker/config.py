# === FILE: link_checker/config.py ===
"""
Модуль для загрузки и валидации конфигурации LinkChecker.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
import re
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
)

from link_checker import __version__
from link_checker.crawler.scope import Scope, ScopeMode


class CheckerConfig(BaseModel):
    """Конфигурация для одного запуска проверки ссылок."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_url: HttpUrl = Field(..., description="Стартовый URL обхода.")
    scope_mode: ScopeMode = Field(
        ScopeMode.PATH_PREFIX,
        description="path-prefix: только страницы под путём стартового URL; domain: весь домен.",
    )
    skip_pattern: Optional[str] = Field(
        None, description="Регулярное выражение: битые URL, которые не попадают в отчёт."
    )
    add_trailing_slash: bool = Field(
        True, description="Добавлять '/' к путям без расширения файла."
    )
    workers: int = Field(8, ge=1, description="Число параллельных потоков-загрузчиков.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field(
        f"LinkChecker/{__version__}", min_length=1, description="Заголовок User-Agent."
    )

    @field_validator("skip_pattern")
    @classmethod
    def _check_regex(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                re.compile(v)
            except re.error as exc:
                raise ValueError(f"Неправильное регулярное выражение {v!r}: {exc}") from exc
        return v

    def scope(self) -> Scope:
        """Строит неизменяемый Scope из стартового URL и флагов."""
        return Scope.from_seed(
            str(self.seed_url),
            mode=self.scope_mode,
            skip_pattern=self.skip_pattern,
            add_trailing_slash=self.add_trailing_slash,
        )


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CheckerConfig:
    """
    Читает YAML или JSON (если указан путь), накладывает overrides
    (значения None пропускаются) и возвращает проверенный CheckerConfig.
    При отсутствии файла конфига бросает FileNotFoundError.
    """
    data: dict[str, Any] = {}
    if path is not None:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

        suffix = path_obj.suffix.lower()
        if suffix in (".yaml", ".yml"):
            data = _read_yaml(path_obj)
        elif suffix == ".json":
            data = _read_json(path_obj)
        else:
            raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    data.update({k: v for k, v in overrides.items() if v is not None})
    return CheckerConfig(**data)
