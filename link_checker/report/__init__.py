"""link_checker.report: Сохранение отчётов (JSON, HTML) и текстовая сводка для CLI."""

from __future__ import annotations

from link_checker.report.html_report import render_html
from link_checker.report.json_report import render_json
from link_checker.report.summary import render_summary

__all__ = ["render_json", "render_html", "render_summary"]
