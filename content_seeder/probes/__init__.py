"""
Manual probes of the auth endpoints.

Each probe is a one- or two-request diagnostic returning a result model;
run_probe() wires one up with a client and reports whether the server
behaved as expected.
"""

from typing import Optional, Tuple

import httpx
from pydantic import BaseModel

from content_seeder.client import ContentApiClient
from content_seeder.config import Settings
from content_seeder.console import SeedConsole
from content_seeder.logging_config import new_run_id
from content_seeder.probes.duplicate import DuplicateProbeResult, probe_duplicate_registration
from content_seeder.probes.login import LoginProbeResult, probe_login
from content_seeder.probes.password_length import (
    PasswordAttempt,
    PasswordPolicyReport,
    make_password,
    probe_password_length,
)

PROBES = ("duplicate", "login", "password-length")


async def run_probe(
    name: str,
    settings: Settings,
    *,
    expected_min: Optional[int] = None,
    client_min: Optional[int] = None,
    console: Optional[SeedConsole] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Tuple[bool, BaseModel]:
    """
    Run one probe by name.

    Returns:
        (passed, result) where passed means the server behaved as expected
    """
    if name not in PROBES:
        raise ValueError(f"Unknown probe '{name}', expected one of {', '.join(PROBES)}")

    new_run_id()
    async with ContentApiClient(settings.api_root, timeout=settings.request_timeout, transport=transport) as client:
        if name == "duplicate":
            duplicate = await probe_duplicate_registration(client, settings, console=console)
            return duplicate.conflict_detected, duplicate
        if name == "login":
            login = await probe_login(client, settings, console=console)
            return login.success, login
        report = await probe_password_length(
            client,
            settings,
            expected_min=expected_min,
            client_min=client_min,
            console=console,
        )
        return report.server_matches_expected, report


__all__ = [
    "PROBES",
    "run_probe",
    "DuplicateProbeResult",
    "probe_duplicate_registration",
    "LoginProbeResult",
    "probe_login",
    "PasswordAttempt",
    "PasswordPolicyReport",
    "make_password",
    "probe_password_length",
]
