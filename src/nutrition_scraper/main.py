"""Top-level entry points for scraping a food page."""

from nutrition_scraper.app_logging import configure_logging
from nutrition_scraper.config import Settings
from nutrition_scraper.containers import build_container


async def scrape_page(
    html: str, page_url: str | None = None, settings: Settings | None = None
) -> object | None:
    """Extract a page's nutrition record and submit it to the backend."""
    resolved_settings = settings or Settings()
    configure_logging(debug=resolved_settings.debug)
    container = build_container(resolved_settings)
    try:
        return await container.pipeline.run(html, page_url=page_url)
    finally:
        await container.close_resources()


async def scrape_url(url: str, settings: Settings | None = None) -> object | None:
    """Fetch a food page, then extract and submit its nutrition record."""
    resolved_settings = settings or Settings()
    configure_logging(debug=resolved_settings.debug)
    container = build_container(resolved_settings)
    try:
        return await container.pipeline.run_url(url)
    finally:
        await container.close_resources()
