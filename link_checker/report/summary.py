"""Text summary printed by the CLI at the end of a run."""
from __future__ import annotations

from typing import List, Optional

from link_checker.aggregator import CrawlReport
from link_checker.report.json_report import BAD_URLS_FILE
from link_checker.utils import format_bytes

#: longer lists are only written to bad_urls.json
MAX_LISTED_BAD_URLS = 20


def render_summary(report: CrawlReport, elapsed: Optional[float] = None) -> str:
    lines: List[str] = []
    broken = len(report.bad_urls)
    found = {0: "found no broken links", 1: "found 1 broken link"}.get(broken, f"found {broken} broken links")
    prefix = "Crawl interrupted! " if report.interrupted else ""
    lines.append(
        f"{prefix}Crawled {report.pages_crawled} pages, checked {report.unique_urls} unique URLs, {found}."
    )

    if 0 < broken <= MAX_LISTED_BAD_URLS:
        lines.append("")
        lines.append("Broken links:")
        for bad in report.bad_urls:
            if bad["referenced_from"]:
                lines.append(f"  - {bad['url']} [{bad['status_detail']}] (found on: {bad['referenced_from'][0]})")
            else:
                lines.append(f"  - {bad['url']} [{bad['status_detail']}] (starting URL)")
    elif broken:
        lines.append("")
        lines.append(f"See {BAD_URLS_FILE} for the complete list of broken links.")

    lines.append(f"Total data downloaded: {report.bytes_downloaded} bytes ({format_bytes(report.bytes_downloaded)})")
    if elapsed is not None:
        verb = "interrupted after" if report.interrupted else "completed in"
        lines.append(f"Crawling {verb} {elapsed:.2f} s")
    return "\n".join(lines)
