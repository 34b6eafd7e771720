# restock/main.py
import asyncio
import logging
import sys

import click

from restock.core.config import load_settings
from restock.core.exceptions import ConfigError
from restock.core.logging_config import configure_logging
from restock.scheduler import run_forever
from restock.services.restock_service import RestockService

logger = logging.getLogger(__name__)


@click.command()
@click.option('--once', is_flag=True, help='Run a single restock cycle and exit')
def main(once):
    """Force-set eBay inventory quantities on a fixed interval"""
    try:
        settings = load_settings()
    except ConfigError as e:
        click.echo(f"[FATAL] {str(e)}", err=True)
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL)

    logger.info("eBay Trading API restock bot starting...")
    logger.info(f"Environment: {'SANDBOX' if settings.is_sandbox else 'PRODUCTION'} (site={settings.site_id})")

    service = RestockService(settings)

    if once:
        asyncio.run(service.process_items())
        return

    logger.info(f"Polling every {settings.poll_interval_seconds:g} seconds")
    try:
        asyncio.run(run_forever(service, settings.poll_interval_seconds))
    except KeyboardInterrupt:
        logger.info("Restock bot stopped")


if __name__ == "__main__":
    main()
