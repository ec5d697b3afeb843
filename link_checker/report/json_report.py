# link_checker/report/json_report.py

"""
Генерация JSON-отчётов для проекта LinkChecker.

Пишет два файла: ``bad_urls.json`` и ``url_map.json``.
"""
import json
from pathlib import Path
from typing import Any, Tuple

from link_checker.aggregator import CrawlReport

BAD_URLS_FILE = "bad_urls.json"
URL_MAP_FILE = "url_map.json"


def _dump(data: Any, path: Path, pretty: bool) -> None:
    with path.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2 if pretty else None)


def render_json(report: CrawlReport, output_dir: Path | str, pretty: bool = True) -> Tuple[Path, Path]:
    """
    Сохраняет report в каталог output_dir.

    :param report: объект CrawlReport с результатами обхода
    :param output_dir: каталог для bad_urls.json и url_map.json
    :param pretty: отступ 2 пробела
    :return: пути сохранённых файлов (bad_urls, url_map)

    Пример:
    ```python
    from link_checker.report.json_report import render_json
    bad_path, map_path = render_json(report, 'reports')
    print(f"Broken links saved to: {bad_path}")
    ```
    """
    # Приводим к Path
    output = Path(output_dir)
    output.mkdir(parents=True, exist_ok=True)

    bad_path = output / BAD_URLS_FILE
    map_path = output / URL_MAP_FILE
    _dump(report.bad_urls, bad_path, pretty)
    _dump(report.url_map, map_path, pretty)

    return bad_path, map_path
