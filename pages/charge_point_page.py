"""Page object for the charge point installation form."""
import asyncio
import json
import logging
import re
import time
from typing import Optional

from playwright.async_api import Locator, Page, expect

from utils.errors import (
    AmbiguousRowError,
    ListNotEmptyError,
    PageUnavailableError,
    RowNotFoundError,
)

LOG = logging.getLogger(__name__)

SERIAL_LIST_SELECTOR = ".list-text"
SERIAL_INPUT_SELECTOR = "input[name='input-serial-number']"
DELETE_BUTTON_SELECTOR = ".list-button"
ADD_BUTTON_SELECTOR = "button.addButton"
ROW_ID_ATTRIBUTE = "data-id"

POLL_INTERVAL_S = 0.1


class ChargePointPage:
    """Named operations over the installation form, hiding its selectors.

    Rows are addressed by their ``data-id`` when the caller knows the charge
    point id; otherwise by an exact match on the serial number text. A text
    match that hits more than one row is an AmbiguousRowError.
    """

    def __init__(self, page: Page, base_url: str, timeout_s: float = 10.0):
        self.page = page
        self.base_url = base_url
        self.timeout_s = timeout_s
        self.serial_list = page.locator(SERIAL_LIST_SELECTOR)
        self.serial_number_input = page.locator(SERIAL_INPUT_SELECTOR)
        self.delete_buttons = page.locator(DELETE_BUTTON_SELECTOR)

    def add_button(self) -> Locator:
        return self.page.locator(ADD_BUTTON_SELECTOR)

    def serial_entries(self, serial: str) -> Locator:
        """List entries whose whole text is exactly ``serial``."""
        return self.serial_list.filter(has_text=re.compile(rf"^{re.escape(serial)}$"))

    def row_by_id(self, charge_point_id: str) -> Locator:
        return self.page.locator(f"[{ROW_ID_ATTRIBUTE}={json.dumps(charge_point_id)}]")

    async def navigate(self) -> None:
        """Open the installation form; HTTP error responses raise PageUnavailableError."""
        response = await self.page.goto(self.base_url)
        if response is not None and not response.ok:
            raise PageUnavailableError(self.base_url, response.status)

    async def add_serial_number(self, serial: str) -> None:
        """Fill the serial number and click Add. Does not check the outcome."""
        await self.serial_number_input.fill(serial)
        await self.add_button().click()

    async def verify_serial_in_list(self, serial: str) -> None:
        entries = self.serial_entries(serial)
        await expect(entries).to_have_count(1)
        await expect(entries).to_be_visible()

    async def verify_serial_not_in_list(self, serial: str) -> None:
        await expect(self.serial_entries(serial)).to_have_count(0)

    async def _single_entry(self, serial: str) -> Locator:
        entries = self.serial_entries(serial)
        count = await entries.count()
        if count == 0:
            raise RowNotFoundError(f"no row with serial number {serial!r}")
        if count > 1:
            raise AmbiguousRowError(serial, count)
        return entries

    async def get_charge_point_id(self, serial: str) -> Optional[str]:
        """Return the data-id of the row showing ``serial``, or None if the row has none."""
        entry = await self._single_entry(serial)
        return await entry.locator("xpath=..").get_attribute(ROW_ID_ATTRIBUTE)

    async def delete_serial(self, serial: str, charge_point_id: Optional[str] = None) -> None:
        """Click the delete control of the row for ``serial``.

        With ``charge_point_id`` the row is found by its data-id; without it,
        by exact serial text and then the sibling button.
        """
        if charge_point_id is not None:
            row = self.row_by_id(charge_point_id)
            if await row.count() == 0:
                raise RowNotFoundError(f"no row with {ROW_ID_ATTRIBUTE}={charge_point_id!r}")
            await row.locator(DELETE_BUTTON_SELECTOR).click()
            return
        entry = await self._single_entry(serial)
        await entry.locator("xpath=..").get_by_role("button").click()

    async def clear_input_field(self) -> None:
        await self.serial_number_input.fill("")

    async def is_add_button_disabled(self) -> None:
        """Assert the Add button is disabled."""
        await expect(self.add_button()).to_be_disabled()

    async def get_total_serial_number_count(self, serial: str) -> int:
        return await self.serial_entries(serial).count()

    async def get_serial_entries_count(self) -> int:
        return await self.serial_list.count()

    async def delete_all_serial_entries(self) -> None:
        """Delete the first entry until the list is empty.

        After each click the list is polled until it shrinks, so removals that
        complete asynchronously are not double-counted. Raises
        ListNotEmptyError if entries remain after ``timeout_s``.
        """
        deadline = time.monotonic() + self.timeout_s
        remaining = await self.serial_list.count()
        while remaining > 0:
            if time.monotonic() >= deadline:
                raise ListNotEmptyError(remaining, self.timeout_s)
            await self.delete_buttons.first.click()
            remaining = await self._wait_for_fewer_entries(remaining, deadline)
        LOG.info("Serial number list is empty")

    async def _wait_for_fewer_entries(self, before: int, deadline: float) -> int:
        while True:
            count = await self.serial_list.count()
            if count < before or time.monotonic() >= deadline:
                return count
            await asyncio.sleep(POLL_INTERVAL_S)
