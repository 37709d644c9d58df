"""Dependency container wiring for the scraper."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_scraper.adapters.page_client import HttpxPageClient, PageClient
from nutrition_scraper.adapters.sink_client import HttpxRecordSink, RecordSink
from nutrition_scraper.config import Settings, parse_keywords
from nutrition_scraper.services.extraction import PageExtractor
from nutrition_scraper.services.pipeline import ScraperPipeline
from nutrition_scraper.services.portions import DEFAULT_SECTION_KEYWORDS


@dataclass
class AppContainer:
    """Holds scraper-wide dependencies."""

    settings: Settings
    sink: RecordSink
    page_client: PageClient
    pipeline: ScraperPipeline
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    sink = HttpxRecordSink.create(
        base_url=resolved_settings.sink_base_url,
        region=resolved_settings.sink_region,
        language=resolved_settings.sink_language,
        source=resolved_settings.sink_source,
        timeout_seconds=resolved_settings.sink_timeout_seconds,
    )
    page_client = HttpxPageClient.create(resolved_settings.page_user_agent)
    pipeline = ScraperPipeline(
        extractor=PageExtractor(),
        sink=sink,
        portion_keywords=parse_keywords(resolved_settings.portion_section_keywords)
        or DEFAULT_SECTION_KEYWORDS,
        page_client=page_client,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await sink.close()
        await page_client.close()

    return AppContainer(
        settings=resolved_settings,
        sink=sink,
        page_client=page_client,
        pipeline=pipeline,
        close_resources=close_resources,
    )
