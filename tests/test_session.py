"""Tests for the session state controller."""

import asyncio
import json
from unittest.mock import AsyncMock

import pytest

from careerpilot.llm import LLMConnectionError, LLMResponse
from careerpilot.models import CareerPlan, CareerProfile
from careerpilot.services import PlanGenerationClient, SessionBusyError
from careerpilot.session import (
    GENERATION_ERROR_MESSAGE,
    PLAN_KEY,
    PROFILE_KEY,
    JSONFileStorage,
    MemoryStorage,
    SessionController,
    SessionState,
    build_share_url,
)

BASE_URL = "https://careerpilot.example/app"


class TestInitialize:
    def test_cold_start_is_empty(self, session) -> None:
        assert session.initialize() is SessionState.EMPTY
        assert session.profile is None
        assert session.plan is None
        assert session.error is None
        assert session.loading is False

    def test_persisted_profile_seeds_editing(self, session, memory_storage, full_profile) -> None:
        memory_storage.set_item(PROFILE_KEY, full_profile.to_json())

        assert session.initialize() is SessionState.EDITING
        assert session.profile == full_profile
        assert session.plan is None

    def test_persisted_plan_seeds_ready(
        self, session, memory_storage, sample_profile, plan_json
    ) -> None:
        memory_storage.set_item(PROFILE_KEY, sample_profile.to_json())
        memory_storage.set_item(PLAN_KEY, plan_json)

        assert session.initialize() is SessionState.READY
        assert session.plan.clarity_score == 72
        assert session.profile == sample_profile

    def test_corrupt_plan_keeps_profile(self, session, memory_storage, sample_profile) -> None:
        # Scenario D
        memory_storage.set_item(PROFILE_KEY, sample_profile.to_json())
        memory_storage.set_item(PLAN_KEY, "this is not json")

        assert session.initialize() is SessionState.EDITING
        assert session.profile == sample_profile
        assert session.plan is None
        assert session.error is None

    def test_corrupt_profile_treated_as_absent(self, session, memory_storage) -> None:
        memory_storage.set_item(PROFILE_KEY, '{"education": ')

        assert session.initialize() is SessionState.EMPTY
        assert session.profile is None

    def test_share_link_seeds_editing_and_is_stripped(self, session, full_profile) -> None:
        # Scenario C
        link = build_share_url(BASE_URL, full_profile)

        assert session.initialize(link) is SessionState.EDITING
        assert session.profile == full_profile
        assert session.plan is None
        assert "share=" not in session.location
        assert session.location == BASE_URL

    def test_share_link_wins_over_storage(
        self, session, memory_storage, sample_profile, full_profile, plan_json
    ) -> None:
        memory_storage.set_item(PROFILE_KEY, sample_profile.to_json())
        memory_storage.set_item(PLAN_KEY, plan_json)

        state = session.initialize(build_share_url(BASE_URL, full_profile))

        assert state is SessionState.EDITING
        assert session.profile == full_profile
        assert session.plan is None

    def test_invalid_share_falls_back_to_storage(
        self, session, memory_storage, sample_profile
    ) -> None:
        memory_storage.set_item(PROFILE_KEY, sample_profile.to_json())
        link = f"{BASE_URL}?share=%%%garbage"

        assert session.initialize(link) is SessionState.EDITING
        assert session.profile == sample_profile
        assert session.error is None

    def test_submitted_profile_survives_file_storage(
        self, mock_provider, special_profile, tmp_path
    ) -> None:
        path = tmp_path / "storage.json"
        first = SessionController(
            client=PlanGenerationClient(provider=mock_provider),
            storage=JSONFileStorage(path),
            location=BASE_URL,
        )
        asyncio.run(first.submit(special_profile))

        second = SessionController(
            client=PlanGenerationClient(provider=mock_provider),
            storage=JSONFileStorage(path),
            location=BASE_URL,
        )

        assert second.initialize() is SessionState.READY
        assert second.profile == special_profile
        assert second.plan == first.plan


class TestSubmit:
    def test_success_persists_profile_and_plan(
        self, session, mock_provider, memory_storage, sample_profile, plan_json
    ) -> None:
        # Scenario A
        observed: dict = {}

        async def respond(prompt, schema):
            observed["state"] = session.state
            observed["loading"] = session.loading
            observed["stored_profile"] = memory_storage.get_item(PROFILE_KEY)
            return LLMResponse(content=plan_json, model="m")

        mock_provider.agenerate = AsyncMock(side_effect=respond)
        session.initialize()

        plan = asyncio.run(session.submit(sample_profile))

        assert observed["state"] is SessionState.GENERATING
        assert observed["loading"] is True
        assert observed["stored_profile"] == sample_profile.to_json()
        assert session.state is SessionState.READY
        assert session.loading is False
        assert plan.clarity_score == 72
        assert session.plan == plan
        assert CareerProfile.from_json(memory_storage.get_item(PROFILE_KEY)) == sample_profile
        assert CareerPlan.from_json(memory_storage.get_item(PLAN_KEY)) == plan

    def test_network_failure(self, session, mock_provider, memory_storage, sample_profile) -> None:
        # Scenario B
        mock_provider.agenerate = AsyncMock(side_effect=LLMConnectionError("Network down"))
        session.initialize()

        result = asyncio.run(session.submit(sample_profile))

        assert result is None
        assert session.state is SessionState.FAILED
        assert session.error == GENERATION_ERROR_MESSAGE
        assert session.profile == sample_profile
        assert memory_storage.get_item(PROFILE_KEY) == sample_profile.to_json()
        assert memory_storage.get_item(PLAN_KEY) is None
        assert session.loading is False

    @pytest.mark.parametrize("field", ["clarityScore", "resources", "closingMotivation"])
    def test_invalid_response_fails_with_same_message(
        self, session, mock_provider, sample_profile, plan_payload, field
    ) -> None:
        del plan_payload[field]
        mock_provider.agenerate = AsyncMock(
            return_value=LLMResponse(content=json.dumps(plan_payload))
        )

        asyncio.run(session.submit(sample_profile))

        assert session.state is SessionState.FAILED
        assert session.error == GENERATION_ERROR_MESSAGE
        assert session.profile == sample_profile

    def test_unexpected_error_still_recoverable(self, sample_profile) -> None:
        client = PlanGenerationClient(provider=None)
        client.generate = AsyncMock(side_effect=RuntimeError("boom"))  # type: ignore[method-assign]
        broken = SessionController(client=client, storage=MemoryStorage(), location=BASE_URL)

        asyncio.run(broken.submit(sample_profile))

        assert broken.state is SessionState.FAILED
        assert broken.profile == sample_profile

    def test_resubmit_after_failure_clears_error(
        self, session, mock_provider, sample_profile, plan_json
    ) -> None:
        mock_provider.agenerate = AsyncMock(
            side_effect=[LLMConnectionError("down"), LLMResponse(content=plan_json)]
        )

        asyncio.run(session.submit(sample_profile))
        assert session.state is SessionState.FAILED

        asyncio.run(session.submit(sample_profile))
        assert session.state is SessionState.READY
        assert session.error is None

    def test_concurrent_submit_rejected(
        self, session, mock_provider, sample_profile, full_profile, plan_json
    ) -> None:
        async def scenario():
            release = asyncio.Event()

            async def slow(prompt, schema):
                await release.wait()
                return LLMResponse(content=plan_json)

            mock_provider.agenerate = AsyncMock(side_effect=slow)
            first = asyncio.create_task(session.submit(sample_profile))
            await asyncio.sleep(0)
            await asyncio.sleep(0)

            assert session.state is SessionState.GENERATING
            assert session.pending is not None
            with pytest.raises(SessionBusyError):
                await session.submit(full_profile)
            with pytest.raises(SessionBusyError):
                session.reset()

            release.set()
            return await first

        plan = asyncio.run(scenario())

        assert plan is not None
        assert session.profile == sample_profile
        assert session.pending is None
        assert mock_provider.agenerate.await_count == 1

    def test_cancelled_generation_is_recoverable(
        self, session, mock_provider, sample_profile, plan_json
    ) -> None:
        async def scenario():
            async def hang(prompt, schema):
                await asyncio.Event().wait()

            mock_provider.agenerate = AsyncMock(side_effect=hang)
            submission = asyncio.create_task(session.submit(sample_profile))
            await asyncio.sleep(0)
            await asyncio.sleep(0)

            session.pending.cancel()
            with pytest.raises(asyncio.CancelledError):
                await submission

        asyncio.run(scenario())

        assert session.state is SessionState.FAILED
        assert session.loading is False
        assert session.pending is None
        assert session.error == GENERATION_ERROR_MESSAGE
        assert session.profile == sample_profile

        mock_provider.agenerate = AsyncMock(return_value=LLMResponse(content=plan_json))
        assert asyncio.run(session.submit(sample_profile)) is not None
        assert session.state is SessionState.READY


class TestReset:
    def test_reset_keeps_profile(self, session, memory_storage, sample_profile) -> None:
        asyncio.run(session.submit(sample_profile))
        assert session.state is SessionState.READY

        assert session.reset() is SessionState.EDITING
        assert session.plan is None
        assert session.profile == sample_profile
        assert memory_storage.get_item(PLAN_KEY) is None
        assert memory_storage.get_item(PROFILE_KEY) == sample_profile.to_json()

    def test_reset_is_idempotent(self, session, memory_storage, sample_profile) -> None:
        asyncio.run(session.submit(sample_profile))

        session.reset()
        once = (session.state, session.plan, session.profile, dict(memory_storage.items))
        session.reset()
        twice = (session.state, session.plan, session.profile, dict(memory_storage.items))

        assert once == twice
        assert twice[0] is SessionState.EDITING

    def test_reset_without_profile_is_empty(self, session) -> None:
        session.initialize()
        assert session.reset() is SessionState.EMPTY


class TestShareLink:
    def test_encodes_profile_not_plan(self, session, sample_profile) -> None:
        asyncio.run(session.submit(sample_profile))

        link = session.build_share_link()

        assert link is not None
        assert link.startswith(f"{BASE_URL}?share=")
        fresh = SessionController(
            client=PlanGenerationClient(provider=None), storage=MemoryStorage()
        )
        assert fresh.initialize(link) is SessionState.EDITING
        assert fresh.profile == sample_profile
        assert fresh.plan is None

    def test_no_profile_returns_none(self, session) -> None:
        session.initialize()
        assert session.build_share_link() is None

    def test_encoding_failure_does_not_raise(self, session, sample_profile, monkeypatch) -> None:
        asyncio.run(session.submit(sample_profile))

        def broken(*args, **kwargs):
            raise ValueError("cannot encode")

        monkeypatch.setattr("careerpilot.session.controller.build_share_url", broken)

        assert session.build_share_link() is None
