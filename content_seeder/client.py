"""
Async HTTP client for the content API.

Wraps httpx.AsyncClient with bearer authentication and decoding of the
{ success, data, error } envelope. Calls never raise for API or transport
failures; they return an ApiResult carrying either data or a StepFailure.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from content_seeder.errors import FailureKind, StepFailure
from content_seeder.logging_config import get_logger
from content_seeder.schemas.auth import LoginRequest, RegisterRequest
from content_seeder.schemas.common import ApiEnvelope, CreatedResource

logger = get_logger(__name__)


@dataclass
class ApiResult:
    """Outcome of one API call."""
    step: str
    status_code: Optional[int] = None
    envelope: Optional[ApiEnvelope] = None
    failure: Optional[StepFailure] = None
    resource_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def data(self) -> Any:
        return self.envelope.data if self.envelope else None


class ContentApiClient:
    """Sequential client for the auth and content endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.request_count = 0
        self._token: Optional[str] = None
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def __aenter__(self) -> "ContentApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    @property
    def token(self) -> Optional[str]:
        return self._token

    def authenticate(self, token: str) -> None:
        """Attach a bearer token to every subsequent request."""
        self._token = token

    def _headers(self) -> Dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    async def request(
        self,
        method: str,
        path: str,
        step: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> ApiResult:
        """Send one request and decode the response envelope."""
        self.request_count += 1
        logger.debug("%s %s (%s)", method, path, step)
        try:
            response = await self._client.request(method, path, json=json, headers=self._headers())
        except httpx.TransportError as exc:
            failure = StepFailure(
                kind=FailureKind.TRANSPORT,
                step=step,
                message=str(exc) or exc.__class__.__name__,
            )
            logger.error("%s: transport error: %s", step, failure.message)
            return ApiResult(step=step, failure=failure)

        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            failure = StepFailure(
                kind=FailureKind.TRANSPORT,
                step=step,
                message=f"Response is not a JSON object (HTTP {response.status_code})",
                status_code=response.status_code,
                details={"body": response.text[:500]},
            )
            logger.error("%s: %s", step, failure.message)
            return ApiResult(step=step, status_code=response.status_code, failure=failure)

        try:
            envelope = ApiEnvelope.model_validate(body)
        except ValidationError as exc:
            failure = StepFailure(
                kind=FailureKind.TRANSPORT,
                step=step,
                message="Malformed response envelope",
                status_code=response.status_code,
                details={"body": body, "errors": exc.errors(include_url=False)},
            )
            logger.error("%s: %s", step, failure.message)
            return ApiResult(step=step, status_code=response.status_code, failure=failure)

        if not envelope.success:
            failure = StepFailure(
                kind=FailureKind.API,
                step=step,
                message=envelope.error_message or "Request failed",
                status_code=response.status_code,
                details=(envelope.error.details or {}) if envelope.error else {},
            )
            logger.error(
                "%s: API error: %s",
                step,
                failure.message,
                extra={"status_code": response.status_code, "error_details": failure.details},
            )
            return ApiResult(
                step=step,
                status_code=response.status_code,
                envelope=envelope,
                failure=failure,
            )

        return ApiResult(step=step, status_code=response.status_code, envelope=envelope)

    async def post(self, path: str, step: str, json: Optional[Dict[str, Any]] = None) -> ApiResult:
        return await self.request("POST", path, step, json=json)

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    async def register(self, body: RegisterRequest, step: str = "Register") -> ApiResult:
        return await self.post("/auth/register", step, json=body.to_payload())

    async def login(self, body: LoginRequest, step: str = "Login") -> ApiResult:
        return await self.post("/auth/login", step, json=body.to_payload())

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    async def create(self, path: str, payload: Dict[str, Any], step: str) -> ApiResult:
        """POST a creation payload and extract the new resource's ID."""
        result = await self.post(path, step, json=payload)
        if not result.ok:
            return result
        try:
            created = CreatedResource.model_validate(result.data)
        except ValidationError:
            result.failure = StepFailure(
                kind=FailureKind.API,
                step=step,
                message="Success envelope did not contain a resource id",
                status_code=result.status_code,
                details={"data": result.data},
            )
            logger.error("%s: %s", step, result.failure.message)
            return result
        result.resource_id = created.id
        return result

    async def link_chapter_to_subject(self, subject_id: str, chapter_id: str, step: str) -> ApiResult:
        return await self.post(f"/subjects/{subject_id}/chapters/{chapter_id}", step)
