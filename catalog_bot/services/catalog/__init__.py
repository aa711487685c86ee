"""Bulk catalog traversal and mutation engine."""

from catalog_bot.services.catalog.operations import (
    hide_out_of_stock,
    simple_reprice,
    update_all_descriptions,
)
from catalog_bot.services.catalog.runner import BatchRunner, RunTally

__all__ = [
    'BatchRunner',
    'RunTally',
    'update_all_descriptions',
    'hide_out_of_stock',
    'simple_reprice',
]
