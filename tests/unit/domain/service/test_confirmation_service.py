"""Unit tests for ConfirmationService."""

import pytest

from roster.domain.error import (
    InvalidStatusTransitionError,
    NotFoundError,
    PersistenceError,
)
from roster.domain.model import Confirmation
from roster.domain.repository import ConfirmationRepository
from roster.domain.service import ConfirmationService
from roster.domain.value import (
    ClinicId,
    ConfirmationKey,
    ConfirmationStatus,
    ConfirmationType,
    TemplateName,
    UserId,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _pending(key: str, email: str = "clinician@example.org", **extra) -> Confirmation:
    return Confirmation(
        key=ConfirmationKey(key),
        type=ConfirmationType.CLINICIAN_INVITE,
        template_name=TemplateName.CLINICIAN_INVITE,
        email=email,
        clinic_id=ClinicId("clinic-1"),
        creator_id=UserId("admin-1"),
        **extra,
    )


class TestFindPending:
    @pytest.mark.asyncio
    async def test_finds_pending_invite_by_key(self, unit_env):
        # Arrange
        service = await unit_env.get(ConfirmationService)
        await service.save(_pending("k1"), "test")

        # Act
        result = await service.find_pending(ConfirmationKey("k1"))

        # Assert
        assert result is not None
        assert result.key == "k1"

    @pytest.mark.asyncio
    async def test_ignores_terminal_invites(self, unit_env):
        service = await unit_env.get(ConfirmationService)
        await service.save(
            _pending("k1", status=ConfirmationStatus.CANCELED), "test"
        )

        assert await service.find_pending(ConfirmationKey("k1")) is None

    @pytest.mark.asyncio
    async def test_ignores_other_confirmation_types(self, unit_env):
        repo = await unit_env.get(ConfirmationRepository)
        service = await unit_env.get(ConfirmationService)
        await repo.save(
            _pending("k1").model_copy(
                update={"type": ConfirmationType.CARETEAM_INVITATION}
            )
        )

        assert await service.find_pending(ConfirmationKey("k1")) is None

    @pytest.mark.asyncio
    async def test_user_constraint_must_match(self, unit_env):
        service = await unit_env.get(ConfirmationService)
        await service.save(_pending("k1", user_id=UserId("clinician-7")), "test")

        assert (
            await service.find_pending(ConfirmationKey("k1"), user_id=UserId("other"))
            is None
        )
        assert await service.find_pending(
            ConfirmationKey("k1"), user_id=UserId("clinician-7")
        )

    @pytest.mark.asyncio
    async def test_get_pending_raises_not_found(self, unit_env):
        service = await unit_env.get(ConfirmationService)

        with pytest.raises(NotFoundError):
            await service.get_pending(ConfirmationKey("missing"))


class TestListPendingForEmail:
    @pytest.mark.asyncio
    async def test_lists_only_pending_invites_for_email_in_order(self, unit_env):
        # Arrange
        service = await unit_env.get(ConfirmationService)
        await service.save(_pending("a"), "test")
        await service.save(_pending("b", email="other@example.org"), "test")
        await service.save(
            _pending("c", status=ConfirmationStatus.COMPLETED), "test"
        )
        await service.save(_pending("d"), "test")

        # Act
        invites = await service.list_pending_for_email("clinician@example.org")

        # Assert
        assert [invite.key for invite in invites] == ["a", "d"]

    @pytest.mark.asyncio
    async def test_empty_when_nothing_pending(self, unit_env):
        service = await unit_env.get(ConfirmationService)

        assert await service.list_pending_for_email("nobody@example.org") == []


class TestSaveAndTransition:
    @pytest.mark.asyncio
    async def test_store_failure_becomes_persistence_error(self, unit_env):
        repo = await unit_env.get(ConfirmationRepository)
        service = await unit_env.get(ConfirmationService)
        repo.fail_saves = True

        with pytest.raises(PersistenceError):
            await service.save(_pending("k1"), "test")

    @pytest.mark.asyncio
    async def test_transition_persists_terminal_status(self, unit_env):
        service = await unit_env.get(ConfirmationService)
        saved = await service.save(_pending("k1"), "test")

        await service.transition(saved, ConfirmationStatus.DECLINED, "test")

        assert await service.find_pending(ConfirmationKey("k1")) is None

    @pytest.mark.asyncio
    async def test_transition_from_terminal_is_rejected(self, unit_env):
        service = await unit_env.get(ConfirmationService)
        saved = await service.save(
            _pending("k1", status=ConfirmationStatus.COMPLETED), "test"
        )

        with pytest.raises(InvalidStatusTransitionError):
            await service.transition(saved, ConfirmationStatus.CANCELED, "test")

    @pytest.mark.asyncio
    async def test_closed_invite_is_never_reopened(self, unit_env):
        service = await unit_env.get(ConfirmationService)
        saved = await service.save(_pending("k1"), "test")
        await service.transition(saved, ConfirmationStatus.CANCELED, "test")

        with pytest.raises(InvalidStatusTransitionError):
            await service.save(_pending("k1"), "test")

        stored = await service.find_by_key(ConfirmationKey("k1"))
        assert stored.status == ConfirmationStatus.CANCELED


class TestFindByKey:
    @pytest.mark.asyncio
    async def test_finds_invite_in_any_status(self, unit_env):
        service = await unit_env.get(ConfirmationService)
        await service.save(_pending("k1", status=ConfirmationStatus.DECLINED), "test")

        found = await service.find_by_key(ConfirmationKey("k1"))

        assert found is not None
        assert found.status == ConfirmationStatus.DECLINED

    @pytest.mark.asyncio
    async def test_missing_key_is_none(self, unit_env):
        service = await unit_env.get(ConfirmationService)

        assert await service.find_by_key(ConfirmationKey("missing")) is None
