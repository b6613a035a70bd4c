"""Application bootstrap.

Usage:
    from rolodex.app import application

    with application() as logic:
        outcome = logic.execute(ListCommand())
"""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from dishka import Container

from rolodex.application.logic import LogicManager
from rolodex.config import Settings
from rolodex.util.di.container import create_container
from rolodex.util.logging import setup_logging
from rolodex.util.observability import configure_logfire


@contextmanager
def application(container: Container | None = None) -> Iterator[LogicManager]:
    """Start the application and yield its logic manager.

    On exit the address book is flushed to storage and the container closed.

    Args:
        container: Prebuilt container, the production container if None
    """
    container = container or create_container()
    settings = container.get(Settings)
    setup_logging(settings)
    configure_logfire(settings)

    logic = container.get(LogicManager)
    logfire.info(
        "Application started",
        path=str(logic.get_address_book_file_path()),
        persons=logic.model.get_total_number_of_persons(),
    )
    try:
        yield logic
    finally:
        warning = logic.flush()
        if warning:
            logfire.warn("Address book not flushed on shutdown", warning=warning)
        container.close()
        logfire.info("Application stopped")
