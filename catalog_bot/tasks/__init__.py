"""Celery tasks for the bulk catalog operations."""

from catalog_bot.tasks.catalog_tasks import (
    hide_out_of_stock_task,
    reprice_task,
    update_descriptions_task,
)

__all__ = [
    'update_descriptions_task',
    'hide_out_of_stock_task',
    'reprice_task',
]
