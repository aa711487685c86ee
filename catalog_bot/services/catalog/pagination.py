"""Since-id pagination over the product catalog."""

import logging
from typing import Iterator, List, Optional, Sequence

from catalog_bot.schemas.catalog import Product

logger = logging.getLogger(__name__)


def iter_product_pages(
    client,
    limit: int,
    fields: Optional[Sequence[str]] = None
) -> Iterator[List[Product]]:
    """
    Yield pages of products ordered by id, starting from the beginning of the catalog.

    The cursor moves to the highest id seen in the previous page and the
    sequence ends at the first empty page. A page whose items were all
    dropped as malformed yields nothing but still moves the cursor. Nothing
    is checkpointed: every call rescans the whole catalog.

    Args:
        client: Anything with `list_products(limit, since_id, fields)`
        limit: Page size requested from the store
        fields: Optional field projection

    Yields:
        Non-empty lists of products
    """
    since_id = 0
    while True:
        page = client.list_products(limit=limit, since_id=since_id, fields=fields)
        products = page.products
        logger.debug(
            f"Fetched {len(products)} products after since_id={since_id} "
            f"({page.skipped} skipped)"
        )
        if page.max_id is None:
            if page.skipped:
                logger.warning(f"Stopping after since_id={since_id}: page has no usable ids")
            return
        if page.max_id <= since_id:
            logger.warning(f"Stopping: store returned ids at or below since_id={since_id}")
            return
        if products:
            yield products
        since_id = page.max_id
