"""REST helper for the charge point endpoints.

Every method returns the raw httpx.Response; status and body interpretation
belong to the calling scenario.
"""
import json
import logging
from collections.abc import Iterable
from typing import Any, Optional

import httpx

LOG = logging.getLogger(__name__)

CHARGE_POINT_PATH = "/charge-point"
JSON_CONTENT_TYPE = "application/json"


class ChargePointApiClient:
    """Thin async transport for create, delete and list charge point calls.

    Pass ``client`` to reuse an existing httpx.AsyncClient (for example one
    built on httpx.ASGITransport to talk to an in-process app); otherwise one
    is created for ``base_url`` and closed by ``aclose``.
    """

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()

    async def __aenter__(self) -> "ChargePointApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _url(self, path: str = "") -> str:
        return f"{self.base_url}{CHARGE_POINT_PATH}{path}"

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        LOG.debug("%s %s headers=%s", method, url, kwargs.get("headers"))
        response = await self._client.request(method, url, **kwargs)
        LOG.info("%s %s -> %d", method, url, response.status_code)
        return response

    async def add_charge_point(self, serial_number: str) -> httpx.Response:
        """POST a charge point with the given serial number."""
        return await self._send(
            "POST",
            self._url(),
            json={"serialNumber": serial_number},
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    async def add_charge_point_without_body(self) -> httpx.Response:
        """POST an empty JSON object (serialNumber omitted)."""
        return await self._send(
            "POST",
            self._url(),
            json={},
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    async def add_charge_point_without_headers(self, serial_number: str) -> httpx.Response:
        """POST the JSON body with no Content-Type header."""
        body = json.dumps({"serialNumber": serial_number}).encode()
        return await self._send("POST", self._url(), content=body)

    async def delete_charge_point(self, charge_point_id: str) -> httpx.Response:
        """DELETE a charge point by id. An empty id requests ``/charge-point/``."""
        return await self._send(
            "DELETE",
            self._url(f"/{charge_point_id}"),
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    async def get_all_charge_points(self) -> httpx.Response:
        """GET every charge point."""
        return await self._send(
            "GET",
            self._url(),
            headers={"Accept": JSON_CONTENT_TYPE},
        )


def find_charge_point_id(charge_points: Iterable[dict], serial_number: str) -> Optional[str]:
    """Return the id of the listed charge point with this serial number, or None."""
    return next(
        (cp.get("id") for cp in charge_points if cp.get("serialNumber") == serial_number),
        None,
    )
