#!/usr/bin/env python3
"""Recompute the denormalized like/reply counters of one or more articles.

Usage:
    python scripts/reconcile_counters.py ARTICLE_ID [ARTICLE_ID ...]

Each article runs in its own request scope, so it commits on its own.
"""

import asyncio
import sys

import logfire

from talkback.config import Settings
from talkback.domain.error import NotFoundError
from talkback.domain.service import ReconciliationService
from talkback.domain.value import ArticleId
from talkback.util.di.container import create_container
from talkback.util.logging import get_logger, setup_logging
from talkback.util.observability import configure_logfire

logger = get_logger(__name__)


async def reconcile(article_ids: list[str]) -> int:
    """Reconcile each article, returning the number that could not be found."""
    container = create_container()
    missing = 0

    try:
        for article_id in article_ids:
            async with container() as request_container:
                service = await request_container.get(ReconciliationService)
                try:
                    report = await service.reconcile_article(ArticleId(article_id))
                except NotFoundError:
                    logger.warning(f"No article or comments for {article_id}")
                    missing += 1
                    continue

            logger.info(
                f"{article_id}: corrected={report.corrected} orphans={report.orphans} "
                f"comments={report.article.comments_count} "
                f"replies={report.article.replies_count}"
            )
    finally:
        await container.close()

    return missing


def main() -> int:
    """Run reconciliation for the article IDs given on the command line."""
    article_ids = sys.argv[1:]
    if not article_ids:
        print(__doc__)
        return 2

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("reconcile_counters", articles=len(article_ids)):
        missing = asyncio.run(reconcile(article_ids))

    return 1 if missing else 0


if __name__ == "__main__":
    sys.exit(main())
