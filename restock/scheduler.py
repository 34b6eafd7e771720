"""
Fixed-interval scheduling for the restock cycle.

One interval job drives RestockService.process_items. The job is single-slot
(max_instances=1), so a tick is skipped while the previous cycle is still
running.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional

from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED, EVENT_JOB_MAX_INSTANCES
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from restock.services.restock_service import RestockService

logger = logging.getLogger(__name__)

RESTOCK_JOB_ID = "restock_poll"


async def restock_poll_task(service: RestockService):
    """Task to run one restock cycle"""
    try:
        await service.process_items()
    except Exception as e:
        logger.exception(f"[FATAL] processItems error: {str(e)}")


def job_listener(event):
    """Listen to job events for logging"""
    if event.code == EVENT_JOB_MAX_INSTANCES:
        logger.warning(f"Job {event.job_id} skipped: previous cycle still running")
    elif getattr(event, "exception", None):
        logger.error(f"Job {event.job_id} crashed: {event.exception}")
    else:
        logger.debug(f"Job {event.job_id} executed successfully at {datetime.now()}")


def create_scheduler(
    service: RestockService,
    interval_seconds: float,
    run_immediately: bool = True,
) -> AsyncIOScheduler:
    """Create and configure the scheduler"""
    scheduler = AsyncIOScheduler()
    scheduler.add_listener(job_listener, EVENT_JOB_EXECUTED | EVENT_JOB_ERROR | EVENT_JOB_MAX_INSTANCES)

    job_options = {}
    if run_immediately:
        job_options["next_run_time"] = datetime.now()

    scheduler.add_job(
        restock_poll_task,
        IntervalTrigger(seconds=interval_seconds),
        args=[service],
        id=RESTOCK_JOB_ID,
        name="Restock Poll",
        replace_existing=True,
        max_instances=1,  # Only one cycle at a time
        coalesce=True,
        **job_options,
    )
    logger.debug(f"Restock job added with interval: {interval_seconds}s")

    return scheduler


async def run_forever(service: RestockService, interval_seconds: float, stop_event: Optional[asyncio.Event] = None):
    """Start the scheduler and block until stop_event is set (or forever)."""
    scheduler = create_scheduler(service, interval_seconds)
    scheduler.start()
    logger.debug("Scheduler started successfully")

    try:
        await (stop_event or asyncio.Event()).wait()
    finally:
        if scheduler.running:
            scheduler.shutdown(wait=False)
            logger.debug("Scheduler stopped")
