"""Scenario fixtures: API client and browser page for the configured target.

E2E_TARGET=stub (the default) runs API scenarios in-process against the
reference service and skips UI scenarios. E2E_TARGET=local serves the
reference service with uvicorn on a loopback port, so UI scenarios drive the
installation form it renders. E2E_TARGET=live uses API_BASE_URL and UI_BASE_URL.
"""
import logging
import socket
import threading
import time

import httpx
import pytest
import pytest_asyncio
import uvicorn
from playwright.async_api import async_playwright

from clients.charge_point_api import ChargePointApiClient
from main import app
from pages.charge_point_page import ChargePointPage

LOG = logging.getLogger(__name__)

IN_PROCESS_BASE_URL = "http://reference"
LOCAL_HOST = "127.0.0.1"


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((LOCAL_HOST, 0))
        return sock.getsockname()[1]


@pytest.fixture(scope="session")
def local_base_url(settings, engine):
    """Base URL of the reference service served for this run, or None unless E2E_TARGET=local."""
    if settings.target != "local":
        yield None
        return
    port = _free_port()
    config = uvicorn.Config(app, host=LOCAL_HOST, port=port, log_level="warning")
    server = uvicorn.Server(config)
    thread = threading.Thread(target=server.run, name="reference-service", daemon=True)
    thread.start()
    deadline = time.monotonic() + settings.ui_timeout_s
    while not server.started:
        if not thread.is_alive() or time.monotonic() > deadline:
            server.should_exit = True
            raise RuntimeError(f"Reference service did not start on {LOCAL_HOST}:{port}")
        time.sleep(0.05)
    base_url = f"http://{LOCAL_HOST}:{port}"
    LOG.info("Reference service listening on %s", base_url)
    try:
        yield base_url
    finally:
        server.should_exit = True
        thread.join(timeout=settings.ui_timeout_s)


@pytest.fixture(scope="session")
def api_base_url(settings, local_base_url):
    return local_base_url or settings.api_base_url


@pytest.fixture(scope="session")
def ui_base_url(settings, local_base_url):
    return local_base_url or settings.ui_base_url


@pytest_asyncio.fixture
async def charge_point_api(settings, engine, api_base_url):
    """ChargePointApiClient for the target; closed after the test."""
    if settings.target != "stub":
        async with ChargePointApiClient(api_base_url) as api:
            yield api
        return
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport) as http_client:
        yield ChargePointApiClient(IN_PROCESS_BASE_URL, client=http_client)


@pytest_asyncio.fixture
async def browser_page(settings):
    """Fresh Chromium page per test; closed after the test."""
    if not settings.uses_browser:
        pytest.skip("UI scenarios need E2E_TARGET=local or E2E_TARGET=live")
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=settings.headless)
        try:
            page = await browser.new_page()
            page.set_default_timeout(settings.ui_timeout_s * 1000)
            yield page
            await page.close()
        finally:
            await browser.close()


@pytest_asyncio.fixture
async def charge_point_page(settings, browser_page, ui_base_url):
    """ChargePointPage already navigated to the installation form."""
    charge_point_page = ChargePointPage(browser_page, ui_base_url, settings.ui_timeout_s)
    await charge_point_page.navigate()
    return charge_point_page
