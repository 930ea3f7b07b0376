"""link_scout.crawler: обход сайта, извлечение и проверка ссылок."""
from link_scout.crawler.crawler import AsyncCrawler
from link_scout.crawler.models import CrawlJob, CrawlStats

__all__ = ["AsyncCrawler", "CrawlJob", "CrawlStats"]
