# === FILE: link_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации краулера LinkScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field


class CrawlerConfig(BaseModel):
    """Ограничения и таймауты одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_concurrent_internal: int = Field(
        10, ge=1, description="Сколько внутренних страниц загружается одновременно."
    )
    max_concurrent_external: int = Field(
        20, ge=1, description="Сколько внешних ссылок одной страницы проверяется одновременно."
    )
    max_crawling_depth: int = Field(5, ge=0, description="Максимальная глубина от исходной страницы.")
    max_pages: int = Field(1000, ge=1, description="Жесткий лимит по числу страниц.")
    fetch_timeout: float = Field(5.0, gt=0, description="Таймаут загрузки страницы (секунд).")
    validate_timeout: float = Field(5.0, gt=0, description="Таймаут HEAD-проверки ссылки (секунд).")
    max_redirects: int = Field(5, ge=0, description="Максимум переходов по 301 при проверке ссылки.")
    user_agent: str = Field("LinkScout/1.0", min_length=1, description="Заголовок User-Agent.")
    skip_self_links: bool = Field(
        False, description="Отбрасывать ссылки, ведущие на ту же страницу (host + path)."
    )

    def with_overrides(self, **overrides: Any) -> CrawlerConfig:
        """Returns a re-validated copy; ``None`` values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return CrawlerConfig(**{**self.model_dump(), **changes})


_DEFAULT_CFG = Path("configs/default.yaml")


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


def load_config(path: Union[str, Path, None] = None) -> CrawlerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CrawlerConfig.
    Без пути берётся configs/default.yaml, а если его нет — значения по умолчанию.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return CrawlerConfig()
        path_obj = _DEFAULT_CFG
    else:
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

    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "load_config"]
