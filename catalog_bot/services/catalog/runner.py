"""Paginate -> decide -> write -> aggregate, shared by every bulk operation."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List

from pydantic import BaseModel, Field

from catalog_bot.schemas.results import DescriptionPreviewItem
from catalog_bot.services.catalog.pagination import iter_product_pages
from catalog_bot.services.catalog.planners import MutationPlanner, WriteIntent

logger = logging.getLogger(__name__)


class RunTally(BaseModel):
    """Counters for one traversal. Discarded if the run fails."""
    pages: int = 0
    products: int = 0
    writes: int = 0
    previews: List[DescriptionPreviewItem] = Field(default_factory=list)


class BatchRunner:
    """
    Drive one full traversal of the catalog for a planner.

    Writes go out in windows of `write_concurrency` calls; with the default of
    1 they are strictly sequential. The first failed call propagates
    immediately, no later window is started and earlier writes stay in place.
    """

    def __init__(self, client, write_concurrency: int = 1):
        if write_concurrency < 1:
            raise ValueError("write_concurrency must be at least 1")
        self.client = client
        self.write_concurrency = write_concurrency

    def run(self, planner: MutationPlanner, apply: bool = True) -> RunTally:
        """
        Args:
            planner: Decides which writes each product needs
            apply: When False nothing is written; intents are recorded as previews

        Returns:
            RunTally for the completed traversal
        """
        tally = RunTally()
        start_time = time.time()
        logger.info(
            f"Starting {planner.name} run (apply={apply}, page_size={planner.page_size})"
        )

        pages = iter_product_pages(self.client, planner.page_size, planner.fields)
        for products in pages:
            tally.pages += 1
            tally.products += len(products)
            intents: List[WriteIntent] = []
            for product in products:
                intents.extend(planner.plan(product))

            if not apply:
                tally.previews.extend(intent.preview() for intent in intents)
                continue
            self._write(intents, tally)

        logger.info(
            f"Finished {planner.name} run: {tally.products} products in {tally.pages} pages, "
            f"{tally.writes} writes, {len(tally.previews)} previews "
            f"({round(time.time() - start_time, 2)}s)"
        )
        return tally

    def _write(self, intents: List[WriteIntent], tally: RunTally) -> None:
        if self.write_concurrency == 1:
            for intent in intents:
                intent.apply(self.client)
                tally.writes += 1
            return

        with ThreadPoolExecutor(max_workers=self.write_concurrency) as pool:
            for start in range(0, len(intents), self.write_concurrency):
                window = intents[start:start + self.write_concurrency]
                futures = [pool.submit(intent.apply, self.client) for intent in window]
                for future in futures:
                    # Re-raises the first failure of the window
                    future.result()
                    tally.writes += 1
