"""Extraction-to-backend pipeline for a single food page."""

import asyncio
import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from bs4 import BeautifulSoup

from nutrition_scraper.adapters.page_client import PageClient
from nutrition_scraper.adapters.sink_client import RecordSink, SinkError
from nutrition_scraper.domain.records import NutritionRecord
from nutrition_scraper.services.extraction import PageExtractor, parse_html
from nutrition_scraper.services.portions import (
    DEFAULT_SECTION_KEYWORDS,
    extract_portion_rows,
    resolve_portions,
)
from nutrition_scraper.services.records import assemble_record, single_portion

_logger = logging.getLogger(__name__)


@dataclass
class ScraperPipeline:
    """Extracts a record from a page and submits it to the backend."""

    extractor: PageExtractor
    sink: RecordSink
    portion_keywords: Sequence[str] = DEFAULT_SECTION_KEYWORDS
    page_client: PageClient | None = None
    debug: bool = False

    def build_record(
        self, html: str | BeautifulSoup, page_url: str | None = None
    ) -> NutritionRecord | None:
        """Build the record for a page without submitting it."""
        soup = parse_html(html)
        extractor = (
            replace(self.extractor, base_url=page_url) if page_url else self.extractor
        )
        page = extractor.extract(soup)
        if page is None:
            return None

        rows = extract_portion_rows(soup, self.portion_keywords)
        _logger.info("Portions found: %s", len(rows))
        portions = resolve_portions(rows, fallback=single_portion(page))
        return assemble_record(page, portions)

    async def run(
        self, html: str | BeautifulSoup, page_url: str | None = None
    ) -> object | None:
        """Extract and submit a page; return None when nothing was extracted."""
        _logger.info("Starting nutrition data extraction")
        record = self.build_record(html, page_url=page_url)
        if record is None:
            _logger.error("Failed to process nutrition data, nothing submitted")
            return None

        payload = record.to_payload()
        if self.debug:
            _logger.info(
                "Processed record: %s", json.dumps(payload, ensure_ascii=False)
            )

        try:
            result = await self.sink.submit(payload)
        except SinkError:
            _logger.exception("Failed to save record on the backend")
            raise
        _logger.info("Record saved on the backend: %s", result)
        return result

    async def run_url(self, url: str) -> object | None:
        """Fetch a page and run the pipeline on it."""
        if self.page_client is None:
            raise RuntimeError("No page client configured")
        html = await self.page_client.fetch_html(url)
        return await self.run(html, page_url=url)

    def submit_in_background(self, html: str | BeautifulSoup) -> asyncio.Task:
        """Schedule `run` on the running loop; failures are logged."""
        task = asyncio.get_running_loop().create_task(self.run(html))
        task.add_done_callback(_log_task_failure)
        return task


def _log_task_failure(task: asyncio.Task) -> None:
    """Log the outcome of a background submission that failed."""
    if task.cancelled():
        _logger.warning("Background submission cancelled")
        return
    exc = task.exception()
    if exc is not None:
        _logger.error("Background submission failed: %s", exc, exc_info=exc)
