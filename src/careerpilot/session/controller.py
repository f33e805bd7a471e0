"""Session state controller.

Owns the active profile and plan and moves the session through its states:

    EMPTY -> EDITING -> GENERATING -> READY | FAILED

READY, FAILED and EDITING can all resubmit; reset() moves READY back to
EDITING keeping the profile. Only one generation may be in flight.
"""

import asyncio
from enum import Enum
from typing import TypeVar

from pydantic import ValidationError

from ..config import settings
from ..models.plan import CareerPlan
from ..models.profile import CareerProfile
from ..services.exceptions import GenerationFailedError, InvalidResponseError, SessionBusyError
from ..services.plan_service import PlanGenerationClient
from ..utils.logging import get_logger
from .share import build_share_url, decode_profile, extract_share_payload
from .storage import JSONFileStorage, Storage

logger = get_logger(__name__)

T = TypeVar("T", CareerProfile, CareerPlan)

PROFILE_KEY = "careerPilot_input"
PLAN_KEY = "careerPilot_plan"

# Single user-facing message for every generation failure
GENERATION_ERROR_MESSAGE = (
    "Failed to generate roadmap. Please check your connection and API Key and try again."
)


class SessionState(str, Enum):
    """Lifecycle states of a session."""

    EMPTY = "empty"
    EDITING = "editing"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


class SessionController:
    """Orchestrates generation, persistence and sharing for one session."""

    def __init__(
        self,
        client: PlanGenerationClient | None = None,
        storage: Storage | None = None,
        location: str | None = None,
    ) -> None:
        """Initialize an empty session.

        Args:
            client: Plan generation client. Defaults to the configured provider.
            storage: Persisted slot storage. Defaults to the user's storage file.
            location: Current location URL. Defaults to the configured app URL.
        """
        self._client = client or PlanGenerationClient()
        self._storage: Storage = (
            storage if storage is not None else JSONFileStorage(settings.storage_path)
        )
        self.location = location or settings.app_url

        self._state = SessionState.EMPTY
        self._profile: CareerProfile | None = None
        self._plan: CareerPlan | None = None
        self._error: str | None = None
        self._pending: asyncio.Task[CareerPlan] | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def profile(self) -> CareerProfile | None:
        return self._profile

    @property
    def plan(self) -> CareerPlan | None:
        return self._plan

    @property
    def error(self) -> str | None:
        """User-facing message of the last failed generation."""
        return self._error

    @property
    def loading(self) -> bool:
        return self._state is SessionState.GENERATING

    @property
    def pending(self) -> "asyncio.Task[CareerPlan] | None":
        """The in-flight generation task, if any."""
        return self._pending

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def initialize(self, location: str | None = None) -> SessionState:
        """Seed the session from a share link or from persisted storage.

        A decodable share payload wins over storage and is stripped from the
        location afterwards. Corrupt data is logged and treated as absent.

        Args:
            location: Current location URL. Defaults to the session's location.

        Returns:
            The resulting state
        """
        if location is not None:
            self.location = location

        self._plan = None
        self._error = None

        payload, stripped_location = extract_share_payload(self.location)
        if payload is not None:
            shared = decode_profile(payload)
            if shared is not None:
                logger.info("Session seeded from share link")
                self._profile = shared
                self.location = stripped_location
                self._state = SessionState.EDITING
                return self._state
            logger.warning("Invalid share data found in location, falling back to storage")

        self._profile = self._load_slot(PROFILE_KEY, CareerProfile)
        self._plan = self._load_slot(PLAN_KEY, CareerPlan)

        if self._plan is not None:
            self._state = SessionState.READY
        elif self._profile is not None:
            self._state = SessionState.EDITING
        else:
            self._state = SessionState.EMPTY
        return self._state

    def _load_slot(self, key: str, model: type[T]) -> T | None:
        raw = self._storage.get_item(key)
        if raw is None:
            return None
        try:
            return model.from_json(raw)
        except ValidationError as e:
            logger.warning("Failed to parse saved %s: %d error(s)", key, e.error_count())
            return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def submit(self, profile: CareerProfile) -> CareerPlan | None:
        """Generate a plan for profile.

        The profile is persisted before the provider is called. On failure
        the session moves to FAILED with a generic message; the profile is
        kept for editing and resubmission.

        Args:
            profile: Profile already validated by the presentation layer

        Returns:
            The new plan, or None if generation failed

        Raises:
            SessionBusyError: If a generation is already in flight
            asyncio.CancelledError: If the pending task is cancelled; the session
                is left FAILED
        """
        if self._state is SessionState.GENERATING:
            raise SessionBusyError("A plan is already being generated")

        self._state = SessionState.GENERATING
        self._error = None
        self._profile = profile
        self._persist(PROFILE_KEY, profile.to_json())

        self._pending = asyncio.create_task(self._client.generate(profile))
        try:
            plan = await self._pending
        except InvalidResponseError as e:
            logger.error("Generation returned an invalid response: %s", e)
            return self._fail()
        except GenerationFailedError as e:
            logger.error("Generation failed (%s): %s", e.kind, e)
            return self._fail()
        except Exception:
            logger.exception("Unexpected error during plan generation")
            return self._fail()
        except asyncio.CancelledError:
            logger.warning("Plan generation was cancelled")
            self._fail()
            raise
        finally:
            self._pending = None

        self._plan = plan
        self._persist(PLAN_KEY, plan.to_json())
        self._state = SessionState.READY
        return plan

    def _fail(self) -> None:
        self._error = GENERATION_ERROR_MESSAGE
        self._state = SessionState.FAILED

    def reset(self) -> SessionState:
        """Discard the plan, keeping the profile for re-editing.

        Raises:
            SessionBusyError: If a generation is in flight
        """
        if self._state is SessionState.GENERATING:
            raise SessionBusyError("Cannot reset while a plan is being generated")

        self._plan = None
        self._error = None
        try:
            self._storage.remove_item(PLAN_KEY)
        except OSError as e:
            logger.warning("Could not clear saved plan: %s", e)

        self._state = SessionState.EDITING if self._profile is not None else SessionState.EMPTY
        return self._state

    def build_share_link(self) -> str | None:
        """Encode the current profile into a share link.

        Never raises; returns None when there is nothing to share or the
        link cannot be built.
        """
        if self._profile is None:
            logger.warning("No profile to share")
            return None
        try:
            return build_share_url(self.location, self._profile)
        except (ValueError, TypeError) as e:
            logger.error("Failed to generate share link: %s", e)
            return None

    def _persist(self, key: str, value: str) -> None:
        try:
            self._storage.set_item(key, value)
        except OSError as e:
            logger.warning("Could not save %s: %s", key, e)
