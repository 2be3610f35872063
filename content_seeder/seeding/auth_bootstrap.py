"""
Auth bootstrap: generate a fresh admin account, register it, log in.
"""

import time
from typing import Callable, Optional

from pydantic import ValidationError

from content_seeder.client import ApiResult, ContentApiClient
from content_seeder.config import Settings
from content_seeder.console import SeedConsole
from content_seeder.errors import FailureKind, StepFailure
from content_seeder.logging_config import get_logger
from content_seeder.schemas.auth import LoginData, LoginRequest, RegisterData, RegisterRequest
from content_seeder.seeding.context import SeedContext

logger = get_logger(__name__)


def generate_admin_credentials(
    settings: Settings,
    clock: Callable[[], float] = time.time,
) -> RegisterRequest:
    """Build a unique admin account from the current time in milliseconds."""
    stamp = int(clock() * 1000)
    return RegisterRequest(
        email=f"admin{stamp}@{settings.admin_email_domain}",
        username=f"admin{stamp}",
        password=settings.admin_password,
        first_name=settings.admin_first_name,
        last_name=settings.admin_last_name,
    )


def _malformed(result: ApiResult, exc: ValidationError) -> StepFailure:
    return StepFailure(
        kind=FailureKind.API,
        step=result.step,
        message="Unexpected response data",
        status_code=result.status_code,
        details={"data": result.data, "errors": exc.errors(include_url=False)},
    )


async def bootstrap_auth(
    client: ContentApiClient,
    ctx: SeedContext,
    console: Optional[SeedConsole] = None,
) -> Optional[StepFailure]:
    """
    Register ctx.credentials, log in and attach the token to the client.

    Returns:
        None on success, otherwise the failure that stopped the bootstrap
    """
    result = await client.register(ctx.credentials, step="Admin registration")
    if not result.ok:
        return result.failure
    try:
        registered = RegisterData.model_validate(result.data)
    except ValidationError as exc:
        return _malformed(result, exc)
    ctx.user_id = registered.user.id
    if console:
        console.step_ok(result.step, result.data)

    result = await client.login(
        LoginRequest(email_or_username=ctx.credentials.email, password=ctx.credentials.password),
        step="Admin login",
    )
    if not result.ok:
        return result.failure
    try:
        login = LoginData.model_validate(result.data)
    except ValidationError as exc:
        return _malformed(result, exc)
    ctx.token = login.token
    client.authenticate(login.token)
    if console:
        console.step_ok(result.step, result.data)

    logger.info("Authenticated as %s", ctx.credentials.username, extra={"user_id": ctx.user_id})
    return None
