"""Scenarios: changes made in the UI are visible through the API."""
import pytest

from clients.charge_point_api import find_charge_point_id
from utils.serial_numbers import generate_serial_number

pytestmark = [pytest.mark.e2e, pytest.mark.ui]


@pytest.mark.asyncio
async def test_ui_added_serial_number_listed_by_api(charge_point_page, charge_point_api):
    serial_number = generate_serial_number()
    await charge_point_page.add_serial_number(serial_number)
    await charge_point_page.verify_serial_in_list(serial_number)

    response = await charge_point_api.get_all_charge_points()
    assert response.status_code == 200
    assert find_charge_point_id(response.json(), serial_number) is not None


@pytest.mark.asyncio
async def test_ui_deleted_serial_number_gone_from_api(charge_point_page, charge_point_api):
    serial_number = generate_serial_number()
    await charge_point_page.add_serial_number(serial_number)
    await charge_point_page.verify_serial_in_list(serial_number)
    await charge_point_page.delete_serial(serial_number)
    await charge_point_page.verify_serial_not_in_list(serial_number)

    response = await charge_point_api.get_all_charge_points()
    assert response.status_code == 200
    assert find_charge_point_id(response.json(), serial_number) is None
