"""Login probe: log in as the probe user and print the token."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ValidationError

from content_seeder.client import ContentApiClient
from content_seeder.config import Settings
from content_seeder.console import SeedConsole
from content_seeder.logging_config import get_logger
from content_seeder.schemas.auth import LoginData, LoginRequest

logger = get_logger(__name__)


class LoginProbeResult(BaseModel):
    status_code: Optional[int] = None
    success: bool = False
    token: Optional[str] = None
    user: Optional[Dict[str, Any]] = None
    message: Optional[str] = None


async def probe_login(
    client: ContentApiClient,
    settings: Settings,
    console: Optional[SeedConsole] = None,
) -> LoginProbeResult:
    result = await client.login(
        LoginRequest(email_or_username=settings.probe_username, password=settings.probe_password),
        step="Login",
    )
    probe = LoginProbeResult(status_code=result.status_code)

    if result.ok:
        try:
            data = LoginData.model_validate(result.data)
        except ValidationError:
            probe.message = "Login succeeded without a token"
        else:
            probe.success = True
            probe.token = data.token
            probe.user = data.user.model_dump() if data.user else None
    else:
        probe.message = result.failure.message if result.failure else None

    logger.info("Login probe: status=%s success=%s", probe.status_code, probe.success)

    if console:
        console.note(f"Response status: {probe.status_code}")
        if result.envelope is not None:
            console.json(result.envelope.model_dump())
        if probe.success:
            console.note("✅ Login successful!")
            console.note(f"Token: {probe.token}")
            console.note(f"User: {probe.user}")
        else:
            console.note(f"❌ Login failed: {probe.message}")
    return probe
