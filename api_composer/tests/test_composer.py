"""
Tests for the submission flow and display region state.
"""

import asyncio

import httpx

from api_composer.config import Settings
from api_composer.http_client import create_http_client
from api_composer.schemas.compose import RequestInput
from api_composer.schemas.outcome import SuccessOutcome
from api_composer.services.composer import submit, submit_to_region
from api_composer.services.display import DisplayRegion, IdleView, LoadingView, ShowingView


TEST_SETTINGS = Settings(base_url="http://api.test/api", auth_supported=True)


def _submit(request_input: RequestInput, handler):
    async def run():
        async with create_http_client(httpx.MockTransport(handler)) as client:
            return await submit(request_input, client, TEST_SETTINGS)

    return asyncio.run(run())


class TestSubmit:
    """A submission always ends in exactly one outcome."""

    def test_success(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert str(request.url) == "http://api.test/api/user/login"
            return httpx.Response(200, json={"token": "abc"})

        outcome = _submit(
            RequestInput(method="POST", path_suffix="/user/login", raw_body='{"userName": "testuser"}'),
            handler
        )

        assert outcome.kind == "success"
        assert outcome.display_text == '{\n  "token": "abc"\n}'

    def test_invalid_body_never_reaches_transport(self):
        """Scenario C: an invalid body short-circuits before sending."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200)

        outcome = _submit(RequestInput(method="POST", raw_body="{invalid"), handler)

        assert outcome.kind == "validation-error"
        assert outcome.message == "Invalid JSON in request body"
        assert calls == []

    def test_error_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "invalid credentials"})

        outcome = _submit(RequestInput(method="POST", raw_body="{}"), handler)

        assert outcome.kind == "transport-error"
        assert outcome.display_text == (
            "Request failed with status code 401\n"
            '{\n  "error": "invalid credentials"\n}'
        )

    def test_network_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        outcome = _submit(RequestInput(method="GET", path_suffix="/user/profile"), handler)

        assert outcome.kind == "transport-error"
        assert outcome.display_text == "Failed to connect to server: connection refused"

    def test_non_ascii_token_becomes_transport_error(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200)

        outcome = _submit(
            RequestInput(method="GET", path_suffix="/user/profile", auth_enabled=True, auth_token="t\u00f6k\u00e9n"),
            handler
        )

        assert outcome.kind == "transport-error"
        assert outcome.display_text.startswith("An unexpected error occurred")
        assert calls == []


class TestAmbientCookies:
    """Only the caller's own cookies go upstream."""

    def test_upstream_cookie_not_replayed(self):
        seen_cookies = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen_cookies.append(request.headers.get("Cookie"))
            if request.url.path.endswith("/login"):
                return httpx.Response(200, json={}, headers={"Set-Cookie": "session=alice; Path=/"})
            return httpx.Response(200, json={})

        async def run():
            async with create_http_client(httpx.MockTransport(handler)) as client:
                await submit(RequestInput(method="POST", path_suffix="/login", raw_body="{}"), client, TEST_SETTINGS)
                await submit(RequestInput(method="GET", path_suffix="/profile"), client, TEST_SETTINGS)

        asyncio.run(run())

        assert seen_cookies == [None, None]

    def test_caller_cookie_is_forwarded(self):
        seen_cookies = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen_cookies.append(request.headers.get("Cookie"))
            return httpx.Response(200, json={})

        async def run():
            async with create_http_client(httpx.MockTransport(handler)) as client:
                await submit(
                    RequestInput(method="GET", path_suffix="/profile"),
                    client,
                    TEST_SETTINGS,
                    cookie_header="session=bob"
                )

        asyncio.run(run())

        assert seen_cookies == ["session=bob"]


class TestDisplayRegion:
    """A region shows one thing at a time and ignores stale results."""

    def test_initial_state_is_idle(self):
        assert isinstance(DisplayRegion().view, IdleView)

    def test_begin_clears_previous_outcome(self):
        region = DisplayRegion()
        ticket = region.begin()
        region.resolve(ticket, SuccessOutcome(display_text="{}"))

        region.begin()

        assert isinstance(region.view, LoadingView)

    def test_stale_outcome_is_discarded(self):
        region = DisplayRegion()
        first = region.begin()
        second = region.begin()

        assert region.resolve(second, SuccessOutcome(display_text="new")) is True
        assert region.resolve(first, SuccessOutcome(display_text="old")) is False
        assert region.view.outcome.display_text == "new"

    def test_overlapping_submissions_keep_latest(self):
        async def run():
            release = asyncio.Event()

            async def handler(request: httpx.Request) -> httpx.Response:
                if request.url.path.endswith("/slow"):
                    await release.wait()
                    return httpx.Response(200, json={"which": "slow"})
                return httpx.Response(200, json={"which": "fast"})

            region = DisplayRegion()
            async with create_http_client(httpx.MockTransport(handler)) as client:
                slow = asyncio.create_task(
                    submit_to_region(region, RequestInput(method="GET", path_suffix="/slow"), client, TEST_SETTINGS)
                )
                await asyncio.sleep(0)
                fast_outcome = await submit_to_region(
                    region, RequestInput(method="GET", path_suffix="/fast"), client, TEST_SETTINGS
                )
                release.set()
                slow_outcome = await slow
            return region, slow_outcome, fast_outcome

        region, slow_outcome, fast_outcome = asyncio.run(run())

        assert '"slow"' in slow_outcome.display_text
        assert isinstance(region.view, ShowingView)
        assert region.view.outcome == fast_outcome
