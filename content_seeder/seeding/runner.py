"""
Seed driver: auth bootstrap -> hierarchy build -> record -> summary.

Linear pipeline; the first failed step ends the run with a failure banner.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import httpx

from content_seeder.client import ContentApiClient
from content_seeder.config import Settings
from content_seeder.console import SeedConsole
from content_seeder.errors import SeedAbortedError, StepFailure
from content_seeder.logging_config import get_logger, new_run_id
from content_seeder.seeding.auth_bootstrap import bootstrap_auth, generate_admin_credentials
from content_seeder.seeding.catalog import MEDICINE_CATALOG, ContentCatalog
from content_seeder.seeding.context import SeedContext
from content_seeder.seeding.hierarchy_builder import HierarchyBuilder
from content_seeder.seeding.recorder import save_record

logger = get_logger(__name__)


@dataclass
class SeedOutcome:
    """What a seed run produced."""
    ok: bool
    context: SeedContext
    requests_sent: int
    failure: Optional[StepFailure] = None
    output_path: Optional[Path] = None


async def run_seed(
    settings: Settings,
    *,
    output_file: Optional[str] = None,
    catalog: ContentCatalog = MEDICINE_CATALOG,
    console: Optional[SeedConsole] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    clock: Callable[[], float] = time.time,
    raise_on_failure: bool = False,
) -> SeedOutcome:
    """
    Seed a fresh backend with `catalog` and record the generated IDs.

    Args:
        settings: Target API and account settings
        output_file: Overrides settings.output_file
        catalog: Content tree to create
        console: Banner sink (a default rich console when omitted)
        transport: Optional httpx transport (tests route this in-process)
        clock: Time source for generated credentials
        raise_on_failure: Raise SeedAbortedError instead of returning a failed outcome

    Returns:
        SeedOutcome; ok=False carries the failure that stopped the run
    """
    console = console or SeedConsole()
    run_id = new_run_id()
    logger.info("Seeding %s", settings.api_root, extra={"target": settings.api_root})

    console.header(
        "🏥 MEDICAL CONTENT POPULATION SCRIPT",
        f"Creating comprehensive medical content hierarchy...\nTarget: {settings.api_root}\nRun: {run_id}",
    )

    ctx = SeedContext(credentials=generate_admin_credentials(settings, clock=clock))
    async with ContentApiClient(settings.api_root, timeout=settings.request_timeout, transport=transport) as client:
        failure = await bootstrap_auth(client, ctx, console=console)
        if failure is None:
            builder = HierarchyBuilder(
                client,
                catalog=catalog,
                visibility=settings.content_visibility,
                console=console,
            )
            outcome = await builder.build(ctx)
            failure = outcome.failure
        requests_sent = client.request_count

    if failure is not None:
        console.step_failed(failure)
        console.aborted(failure)
        logger.error("Seed run aborted at '%s': %s", failure.step, failure.message)
        if raise_on_failure:
            raise SeedAbortedError(failure)
        return SeedOutcome(ok=False, context=ctx, requests_sent=requests_sent, failure=failure)

    counts = ctx.content_ids.counts()
    console.summary(
        "✅ DATABASE POPULATION COMPLETE!",
        {
            "Subjects": f"{counts['subjects']} ({catalog.subject.name})",
            "Chapters": f"{counts['chapters']} ({catalog.chapter.name})",
            "Lectures": f"{counts['lectures']} ({catalog.lecture.name})",
            "Sections": counts["sections"],
            "Points": counts["points"],
            "SPoints": counts["spoints"],
            "Requests": requests_sent,
        },
        footer="Content is ready for Story feature testing!",
    )

    path = save_record(ctx.to_record(), output_file or settings.output_file)
    console.note(f"\n📝 Content IDs saved to {path}")
    return SeedOutcome(ok=True, context=ctx, requests_sent=requests_sent, output_path=path)
