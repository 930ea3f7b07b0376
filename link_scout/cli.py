# === FILE: link_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера LinkScout через командную строку.

Использование:
  link-scout ORIGIN [OPTIONS]

Опции:
  --config PATH               Путь к YAML/JSON-конфигу (configs/default.yaml, если есть)
  --max-pages INT             Макс. число страниц (override max_pages)
  --max-depth INT             Макс. глубина обхода (override max_crawling_depth)
  --internal-concurrency INT  Сколько страниц загружать одновременно
  --external-concurrency INT  Сколько внешних ссылок страницы проверять одновременно
  --timeout SEC               Таймаут одного запроса (загрузка и проверка)
  --skip-self-links           Не учитывать ссылки страницы на саму себя
  --log-level LEVEL           Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH             Файл для логов (только stdout, если не указан)
  --log-format FORMAT         Формат логирования
  --debug                     Отладочный вывод (или LINK_SCOUT_DEBUG=1)
  --version, -v               Показать версию LinkScout

Пример:
  link-scout https://example.com --max-pages 200 --debug
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_scout import __version__
from link_scout.config import load_config
from link_scout.engine import start_scan
from link_scout.errors import InvalidOriginError
from link_scout.logger import DEFAULT_FORMAT, init_logging
from link_scout.reporter import Reporter

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
@click.argument('origin')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option('--max-pages', 'max_pages', type=int, default=None, help='Макс. число страниц для обхода')
@click.option('--max-depth', 'max_depth', type=int, default=None, help='Макс. глубина от исходной страницы')
@click.option(
    '--internal-concurrency', 'internal_concurrency',
    type=int, default=None,
    help='Сколько внутренних страниц загружать одновременно'
)
@click.option(
    '--external-concurrency', 'external_concurrency',
    type=int, default=None,
    help='Сколько внешних ссылок страницы проверять одновременно'
)
@click.option('--timeout', 'timeout', type=float, default=None, help='Таймаут одного запроса (секунд)')
@click.option('--skip-self-links', is_flag=True, help='Не учитывать ссылки страницы на саму себя')
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.option('--debug', is_flag=True, envvar='LINK_SCOUT_DEBUG', help='Отладочный вывод')
def cli(
    origin,
    config_path,
    max_pages,
    max_depth,
    internal_concurrency,
    external_concurrency,
    timeout,
    skip_self_links,
    log_level,
    log_file,
    log_format,
    debug,
):
    """Обходит сайт начиная с ORIGIN и проверяет все внешние ссылки."""
    init_logging(
        level='DEBUG' if debug else log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
    )
    try:
        cfg = load_config(config_path)
        cfg = cfg.with_overrides(
            max_pages=max_pages,
            max_crawling_depth=max_depth,
            max_concurrent_internal=internal_concurrency,
            max_concurrent_external=external_concurrency,
            fetch_timeout=timeout,
            validate_timeout=timeout,
            skip_self_links=skip_self_links or None,
        )
    except ValidationError as e:
        print_error(f'Неверная конфигурация: {e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    try:
        asyncio.run(start_scan(origin, cfg, Reporter(debug=debug)))
    except InvalidOriginError:
        print_error(f"[ERROR]: '{origin}' is not a valid URL.")


if __name__ == "__main__":
    cli()
