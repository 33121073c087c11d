"""
Remote Analysis Backend Client

Async client for the optional remote analysis service. The local engine
always produces the report; the backend is only called for a side-by-side
comparison, so an unavailable backend is logged and never fails a request.

Endpoint:
    POST {base_url}/api/documents/analyze-text  {"text": "..."}
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ..analysis.errors import InvalidInput
from ..output.converter import BackendResponseConverter, ConversionResult

logger = logging.getLogger(__name__)


class BackendComparisonError(Exception):
    """Custom exception for remote backend errors."""

    def __init__(self, message: str, status_code: int = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


@dataclass
class BackendComparison:
    """Normalized backend result, ready to show next to the local report."""
    conversion: ConversionResult
    status_code: int
    elapsed_ms: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "report": self.conversion.report.to_dict(),
            "shape": self.conversion.shape,
            "fieldsFromBackend": list(self.conversion.fields_from_payload),
            "fieldsDefaulted": list(self.conversion.fields_defaulted),
            "statusCode": self.status_code,
            "elapsedMs": round(self.elapsed_ms, 1),
        }


class BackendComparisonClient:
    """
    Async client for the remote analysis backend.

    Usage:
        async with BackendComparisonClient("http://localhost:8080") as client:
            comparison = await client.compare(text)
            if comparison:
                print(comparison.conversion.report.summary)
    """

    ANALYZE_PATH = "/api/documents/analyze-text"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        converter: Optional[BackendResponseConverter] = None,
    ):
        """
        Initialize backend client.

        Args:
            base_url: Backend root URL (e.g. "http://localhost:8080")
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
            converter: Optional response converter
        """
        self.base_url = base_url.rstrip("/")
        self.converter = converter or BackendResponseConverter()
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )
        self._closed = False

    async def _post(self, text: str) -> httpx.Response:
        if self._closed:
            raise BackendComparisonError("Client is closed")

        logger.debug(f"POST {self.ANALYZE_PATH} ({len(text)} chars)")
        try:
            response = await self._client.post(self.ANALYZE_PATH, json={"text": text})
        except httpx.TimeoutException as e:
            raise BackendComparisonError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise BackendComparisonError(f"HTTP error: {e}") from e

        if not response.is_success:
            raise BackendComparisonError(
                f"Backend request failed: {response.status_code}",
                status_code=response.status_code,
                response=response.text[:500] if response.content else None,
            )
        return response

    async def analyze(self, text: str) -> Dict[str, Any]:
        """
        Send text to the backend and return the raw JSON body.

        Raises:
            BackendComparisonError: On transport errors, non-2xx status or non-JSON body
        """
        response = await self._post(text)
        try:
            return response.json()
        except ValueError as e:
            raise BackendComparisonError(
                f"Backend returned invalid JSON: {e}",
                status_code=response.status_code,
            ) from e

    async def compare(self, text: str) -> Optional[BackendComparison]:
        """
        Analyze text remotely and normalize the result.

        Returns:
            BackendComparison, or None when the backend is unavailable
            or answers with something unusable
        """
        started = time.perf_counter()
        try:
            response = await self._post(text)
            conversion = self.converter.convert(response.json(), text=text)
        except BackendComparisonError as e:
            logger.info(f"Backend not available, using local analysis only: {e}")
            return None
        except (ValueError, InvalidInput) as e:
            logger.warning(f"Backend returned an unusable body: {e}")
            return None
        except Exception as e:
            logger.error(f"Unexpected error in backend comparison: {e}")
            return None

        logger.info(
            f"Backend comparison received ({conversion.shape}), "
            f"industry={conversion.report.detected_industry.id}"
        )
        return BackendComparison(
            conversion=conversion,
            status_code=response.status_code,
            elapsed_ms=(time.perf_counter() - started) * 1000,
        )

    async def close(self):
        """Close the HTTP client."""
        if not self._closed:
            await self._client.aclose()
            self._closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
