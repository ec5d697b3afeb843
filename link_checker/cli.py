# === FILE: link_checker/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска LinkChecker через командную строку.

Команды:
  check URL   Обойти сайт от URL, сохранить bad_urls.json и url_map.json, вывести сводку
  config URL  Показать итоговую конфигурацию (файл + флаги) в JSON

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (значения флагов имеют приоритет)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Опции обхода (check, config):
  --domain-match/--path-prefix         Обходить весь домен или только путь стартового URL
  --skip REGEX                         Не включать в отчёт битые URL, совпадающие с REGEX
  --trailing-slash/--no-trailing-slash Добавлять '/' к путям без расширения
  --workers N                          Число потоков-загрузчиков
  --timeout SEC                        Таймаут одного запроса

Команда check опции:
  --output-dir DIR    Каталог для bad_urls.json и url_map.json (default: .)
  --html PATH         Сохранить HTML-отчёт в файл
  --pretty/--compact  Отступы в JSON-файлах

Дополнительно:
  --version, -v       Показать версию LinkChecker

Пример:
  link-checker check https://example.com/docs/ --skip '\\.pdf$' --output-dir reports
"""
import sys
import time
from pathlib import Path

import click
from pydantic import ValidationError

from link_checker import __version__
from link_checker.config import CheckerConfig, load_config
from link_checker.crawler.scope import ScopeMode
from link_checker.engine import start_check
from link_checker.logger import DEFAULT_FORMAT, configure
from link_checker.report.html_report import render_html
from link_checker.report.json_report import render_json
from link_checker.report.summary import render_summary

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def crawl_options(func):
    """Опции, общие для check и config."""
    decorators = [
        click.argument('url'),
        click.option(
            '--domain-match/--path-prefix', 'domain_match', default=None,
            help='Обходить все URL домена или только под путём стартового URL (по умолчанию путь)'
        ),
        click.option(
            '--skip', 'skip_pattern', default=None, metavar='REGEX',
            help='Не включать в отчёт битые URL, совпадающие с регулярным выражением'
        ),
        click.option(
            '--trailing-slash/--no-trailing-slash', 'add_trailing_slash', default=None,
            help="Добавлять '/' к путям без расширения (по умолчанию включено)"
        ),
        click.option('--workers', '-w', type=click.IntRange(min=1), default=None, help='Число потоков-загрузчиков'),
        click.option('--timeout', type=float, default=None, help='Таймаут одного запроса (секунд)'),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


# --domain-match / --path-prefix; None keeps the config file value
_SCOPE_FLAGS = {True: ScopeMode.DOMAIN, False: ScopeMode.PATH_PREFIX}


def build_config(ctx, url, domain_match, skip_pattern, add_trailing_slash, workers, timeout) -> CheckerConfig:
    try:
        return load_config(
            ctx.obj.get('config_path'),
            seed_url=url,
            scope_mode=_SCOPE_FLAGS.get(domain_match),
            skip_pattern=skip_pattern,
            add_trailing_slash=add_trailing_slash,
            workers=workers,
            timeout=timeout,
        )
    except (ValidationError, OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkChecker, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
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
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд LinkChecker CLI."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@crawl_options
@click.option(
    '--output-dir', '-o', 'output_dir',
    default='.',
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help='Каталог для bad_urls.json и url_map.json'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--pretty/--compact', default=True,
    help='Отступ 2 в JSON-файлах'
)
@click.pass_context
def check(ctx, url, domain_match, skip_pattern, add_trailing_slash, workers, timeout,
          output_dir, html_output, pretty):
    """Проверить ссылки сайта начиная с URL."""
    cfg = build_config(ctx, url, domain_match, skip_pattern, add_trailing_slash, workers, timeout)
    click.echo(f'Starting link check: {cfg.seed_url}')
    start = time.monotonic()
    try:
        report = start_check(cfg)
    except Exception as e:
        print_error(f'Ошибка при проверке: {e}')
    elapsed = time.monotonic() - start

    try:
        bad_path, map_path = render_json(report, output_dir, pretty=pretty)
    except OSError as e:
        print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

    click.echo(render_summary(report, elapsed))
    click.echo(f'Results saved to {bad_path} and {map_path}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@crawl_options
@click.pass_context
def show_config(ctx, url, domain_match, skip_pattern, add_trailing_slash, workers, timeout):
    """Показать текущую конфигурацию в JSON."""
    cfg = build_config(ctx, url, domain_match, skip_pattern, add_trailing_slash, workers, timeout)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
