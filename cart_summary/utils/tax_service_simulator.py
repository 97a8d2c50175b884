"""
Tax Service Simulator Utility

Fakes the remote tax-rate service on top of httpx.MockTransport so that tax
lookups can be exercised locally without a network call.
"""

import json
from decimal import Decimal
from typing import Any, List, Optional, Type, Union

import httpx


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class TaxServiceSimulator:
    """
    Generate tax-rate service responses for local testing.

    Usage:
        simulator = TaxServiceSimulator(rate="0.10")
        async with simulator.client() as http_client:
            calculator = TaxCalculator(http_client, settings)
            result = await calculator.calculate(Decimal("100"), "CA")

        assert result.amount == Decimal("10")
        assert simulator.call_count == 1
        assert simulator.last_payload() == {"subtotal": 100}
    """

    def __init__(
        self,
        amount: Optional[Union[int, str, Decimal]] = None,
        rate: Optional[Union[int, str, Decimal]] = None,
        status_code: int = 200,
        body: Optional[Union[dict, list, str, bytes]] = None,
        error: Optional[Type[httpx.RequestError]] = None
    ):
        """
        Initialize with the behaviour of the fake service.

        Args:
            amount: Canned amount, replies {"amount": amount}
            rate: Replies {"amount": subtotal * rate} using the request body
            status_code: HTTP status of every reply
            body: Raw reply body (dict/list sent as JSON, str/bytes sent as-is)
            error: httpx transport exception class raised instead of replying

        With none of amount, rate or body given the service replies
        {"amount": 0}.
        """
        self.amount = amount
        self.rate = rate
        self.status_code = status_code
        self.body = body
        self.error = error
        self.requests: List[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def client(self, **kwargs) -> httpx.AsyncClient:
        """httpx AsyncClient whose requests all go to this simulator."""
        return httpx.AsyncClient(transport=self.transport, **kwargs)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_payload(self) -> Optional[dict]:
        """Decoded JSON body of the most recent request, or None if never called."""
        if not self.requests:
            return None
        return json.loads(self.requests[-1].content)

    def handle(self, request: httpx.Request) -> httpx.Response:
        """MockTransport handler: record the request and build a reply."""
        self.requests.append(request)

        if self.error is not None:
            raise self.error("Simulated tax service failure", request=request)

        if self.body is not None:
            if isinstance(self.body, (dict, list)):
                content = json.dumps(self.body, default=_json_default)
            else:
                content = self.body
            return httpx.Response(self.status_code, content=content)

        payload = {"amount": self._amount_for(request)}
        return httpx.Response(
            self.status_code,
            content=json.dumps(payload, default=_json_default),
            headers={"Content-Type": "application/json"}
        )

    def _amount_for(self, request: httpx.Request) -> Decimal:
        if self.amount is not None:
            return Decimal(str(self.amount))
        if self.rate is not None:
            subtotal = json.loads(request.content, parse_float=Decimal)["subtotal"]
            return Decimal(str(subtotal)) * Decimal(str(self.rate))
        return Decimal("0")
