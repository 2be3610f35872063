"""
Hierarchy builder - ordered creation of the content tree.

Subject -> Chapter (+ link to subject) -> Lecture -> Sections -> Points -> SPoints.
A child is never created before its parent's ID is known, and the first
failed call stops the build; nothing already created is rolled back.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from content_seeder.client import ApiResult, ContentApiClient
from content_seeder.console import SeedConsole
from content_seeder.errors import StepFailure
from content_seeder.logging_config import get_logger
from content_seeder.schemas.content import (
    ChapterCreate,
    LectureCreate,
    PointCreate,
    SectionCreate,
    SPointCreate,
    SubjectCreate,
    Visibility,
)
from content_seeder.seeding.catalog import MEDICINE_CATALOG, ContentCatalog, PointDef
from content_seeder.seeding.context import SeedContext

logger = get_logger(__name__)

SPOINT_LABEL_CHARS = 30


@dataclass
class BuildOutcome:
    """Result of one build: either complete, or stopped at `failure`."""
    ok: bool
    steps_completed: int
    failure: Optional[StepFailure] = None


class HierarchyBuilder:
    """
    Creates a ContentCatalog through the content API.

    Each stage returns None or the StepFailure that stopped it; build()
    short-circuits on the first failure.
    """

    def __init__(
        self,
        client: ContentApiClient,
        catalog: ContentCatalog = MEDICINE_CATALOG,
        visibility: Visibility = Visibility.PERSONAL,
        console: Optional[SeedConsole] = None,
    ):
        self.client = client
        self.catalog = catalog
        self.visibility = visibility
        self.console = console
        self.steps_completed = 0

    async def build(self, ctx: SeedContext) -> BuildOutcome:
        if not ctx.authenticated:
            raise ValueError("HierarchyBuilder.build requires an authenticated context")

        stages = (
            self._create_subject,
            self._create_chapter,
            self._create_lecture,
            self._create_sections,
            self._create_points,
        )
        for stage in stages:
            failure = await stage(ctx)
            if failure is not None:
                logger.warning(
                    "Build stopped at '%s' after %d successful steps",
                    failure.step,
                    self.steps_completed,
                )
                return BuildOutcome(ok=False, steps_completed=self.steps_completed, failure=failure)

        logger.info("Content tree created", extra={"counts": ctx.content_ids.counts()})
        return BuildOutcome(ok=True, steps_completed=self.steps_completed)

    def _record(self, result: ApiResult) -> ApiResult:
        if result.ok:
            self.steps_completed += 1
            if self.console:
                self.console.step_ok(result.step, result.data)
        return result

    async def _create(self, path: str, payload: Dict[str, Any], step: str) -> ApiResult:
        return self._record(await self.client.create(path, payload, step))

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    async def _create_subject(self, ctx: SeedContext) -> Optional[StepFailure]:
        node = self.catalog.subject
        payload = SubjectCreate(
            name=node.name,
            description=node.description,
            order_index=node.order_index,
            visibility=self.visibility,
        ).to_payload()
        result = await self._create("/subjects", payload, f"Create {node.name} subject")
        if not result.ok:
            return result.failure
        ctx.content_ids.subjects[node.key] = result.resource_id
        return None

    async def _create_chapter(self, ctx: SeedContext) -> Optional[StepFailure]:
        node = self.catalog.chapter
        subject = self.catalog.subject
        payload = ChapterCreate(
            name=node.name,
            description=node.description,
            order_index=node.order_index,
            visibility=self.visibility,
        ).to_payload()
        result = await self._create("/chapters", payload, f"Create {node.name} chapter")
        if not result.ok:
            return result.failure
        ctx.content_ids.chapters[node.key] = result.resource_id

        link = self._record(
            await self.client.link_chapter_to_subject(
                ctx.content_ids.subjects[subject.key],
                ctx.content_ids.chapters[node.key],
                step=f"Link {node.name} to {subject.name}",
            )
        )
        return link.failure

    async def _create_lecture(self, ctx: SeedContext) -> Optional[StepFailure]:
        node = self.catalog.lecture
        payload = LectureCreate(
            name=node.name,
            description=node.description,
            order_index=node.order_index,
            visibility=self.visibility,
            chapter_id=ctx.content_ids.chapters[self.catalog.chapter.key],
        ).to_payload()
        result = await self._create("/lectures", payload, f"Create {node.name} lecture")
        if not result.ok:
            return result.failure
        ctx.content_ids.lectures[node.key] = result.resource_id
        return None

    async def _create_sections(self, ctx: SeedContext) -> Optional[StepFailure]:
        lecture_id = ctx.content_ids.lectures[self.catalog.lecture.key]
        for section in self.catalog.sections:
            payload = SectionCreate(
                name=section.name,
                description=section.description,
                order_index=section.order_index,
                visibility=self.visibility,
                lecture_id=lecture_id,
            ).to_payload()
            result = await self._create("/sections", payload, f"Create section: {section.name}")
            if not result.ok:
                return result.failure
            ctx.content_ids.sections[section.name] = result.resource_id
        return None

    async def _create_points(self, ctx: SeedContext) -> Optional[StepFailure]:
        for section in self.catalog.sections:
            for point in self.catalog.points_for(section.name):
                failure = await self._create_point(ctx, ctx.content_ids.sections[section.name], point)
                if failure is not None:
                    return failure
        return None

    async def _create_point(self, ctx: SeedContext, section_id: str, point: PointDef) -> Optional[StepFailure]:
        payload = PointCreate(
            name=point.name,
            description=point.description,
            order_index=point.order_index,
            visibility=self.visibility,
            section_id=section_id,
        ).to_payload()
        result = await self._create("/points", payload, f"Create point: {point.name}")
        if not result.ok:
            return result.failure
        point_id = result.resource_id
        ctx.content_ids.points[point.name] = point_id

        # Order indices are 1-based, in catalog order
        for index, text in enumerate(point.sub_points, start=1):
            payload = SPointCreate(
                default_content=text,
                order_index=index,
                visibility=self.visibility,
                point_id=point_id,
            ).to_payload()
            result = await self._create("/spoints", payload, f"Create spoint: {text[:SPOINT_LABEL_CHARS]}...")
            if not result.ok:
                return result.failure
            ctx.content_ids.spoints.append(result.resource_id)
        return None
