"""
Tax-rate service client.

Carts shipped to a taxable jurisdiction get their tax from a remote
tax-rate service; everywhere else the tax is zero and no request is made.

Wire format:
    POST {TAX_SERVICE_URL}
    request:  {"subtotal": <number>}
    response: {"amount": <number>}
"""
import httpx
import logging
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from cart_summary.config import Settings
from cart_summary.core.interfaces import ITaxCalculator
from cart_summary.domain.value_objects import TaxRequest, TaxResult, to_decimal

logger = logging.getLogger(__name__)


class TaxServiceResponse(BaseModel):
    """Response body from the tax-rate service"""
    amount: Decimal = Field(..., ge=0, description="Tax owed on the submitted subtotal")

    @field_validator("amount", mode="before")
    @classmethod
    def amount_must_be_json_number(cls, value: Any) -> Any:
        # JSON numbers only: int, or Decimal via parse_float
        if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
            raise ValueError(f"amount must be a JSON number, got {value!r}")
        return value


class TaxServiceError(Exception):
    """Exception raised when a tax lookup cannot produce a result"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_body: Optional[Any] = None):
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(self.message)


class TaxServiceUnavailableError(TaxServiceError):
    """Transport failure or non-2xx status from the tax-rate service"""
    pass


class InvalidTaxResponseError(TaxServiceError):
    """Tax-rate service answered, but the body is not a valid tax response"""
    pass


class TaxCalculator(ITaxCalculator):
    """
    HTTP-backed tax calculator.

    The HTTP client is injected so tests can hand in a mock transport
    instead of reaching the network.

    Usage:
        async with httpx.AsyncClient() as http_client:
            calculator = TaxCalculator(http_client, settings)
            result = await calculator.calculate(Decimal("300"), "CA")
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: Settings,
        logger_instance: logging.Logger = logger
    ):
        """
        Initialize tax calculator.

        Args:
            http_client: httpx AsyncClient for making HTTP requests
            settings: Application settings (endpoint, timeout, taxable jurisdictions)
            logger_instance: Logger for tracking tax lookups
        """
        self._http_client = http_client
        self._settings = settings
        self._logger = logger_instance

    def is_taxable(self, jurisdiction: Optional[str]) -> bool:
        """Check whether a jurisdiction needs a remote tax lookup."""
        if not jurisdiction:
            return False
        return jurisdiction.strip().upper() in self._settings.taxable_jurisdictions

    async def calculate(self, subtotal: Decimal, jurisdiction: str) -> TaxResult:
        """
        Calculate tax for a subtotal.

        Args:
            subtotal: Cart subtotal before tax
            jurisdiction: Jurisdiction code, e.g. "CA"

        Returns:
            TaxResult.zero() for non-taxable jurisdictions (no request sent),
            otherwise the amount reported by the tax-rate service

        Raises:
            ValueError: If subtotal is negative or not a number
            TaxServiceUnavailableError: If the service can't be reached or returns non-2xx
            InvalidTaxResponseError: If the response body is malformed
        """
        subtotal = to_decimal(subtotal, "subtotal")

        if not self.is_taxable(jurisdiction):
            self._logger.debug(f"No tax lookup for non-taxable jurisdiction {jurisdiction!r}")
            return TaxResult.zero()

        tax_request = TaxRequest(subtotal=subtotal, jurisdiction=jurisdiction.strip().upper())
        response = await self._send(tax_request)
        result = self._parse_response(response)

        self._logger.info(
            f"✅ Tax calculated - "
            f"jurisdiction: {tax_request.jurisdiction}, subtotal: {subtotal}, amount: {result.amount}"
        )
        return result

    async def _send(self, tax_request: TaxRequest) -> httpx.Response:
        url = self._settings.tax_service_url

        self._logger.info(
            f"📤 Requesting tax - "
            f"jurisdiction: {tax_request.jurisdiction}, subtotal: {tax_request.subtotal}"
        )

        try:
            response = await self._http_client.post(
                url,
                json=tax_request.to_payload(),
                timeout=self._settings.tax_service_timeout
            )
        except httpx.TimeoutException as e:
            self._logger.warning(f"⚠️ Tax service timeout - url: {url}")
            raise TaxServiceUnavailableError(f"Tax service timeout: {e}") from e
        except httpx.RequestError as e:
            self._logger.warning(f"⚠️ Failed to reach tax service - url: {url}, error: {e}")
            raise TaxServiceUnavailableError(f"Tax service request error: {e}") from e

        if not 200 <= response.status_code < 300:
            self._logger.warning(
                f"⚠️ Tax service returned non-2xx status - "
                f"status: {response.status_code}, url: {url}"
            )
            raise TaxServiceUnavailableError(
                message=f"Tax service returned status {response.status_code}",
                status_code=response.status_code,
                response_body=response.text
            )

        return response

    def _parse_response(self, response: httpx.Response) -> TaxResult:
        try:
            body = response.json(parse_float=Decimal)
        except ValueError as e:
            self._logger.error(f"❌ Tax service returned non-JSON body - status: {response.status_code}")
            raise InvalidTaxResponseError(
                message="Tax service response is not valid JSON",
                status_code=response.status_code,
                response_body=response.text
            ) from e

        try:
            parsed = TaxServiceResponse.model_validate(body)
            return TaxResult(amount=parsed.amount)
        except (ValidationError, ValueError) as e:
            self._logger.error(f"❌ Invalid tax service response - body: {body!r}")
            raise InvalidTaxResponseError(
                message=f"Invalid tax service response: {e}",
                status_code=response.status_code,
                response_body=body
            ) from e
