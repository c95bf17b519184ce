"""Integration tests for PostgresConfirmationRepository.

Requires a migrated PostgreSQL database reachable via DATABASE__URL.
"""

from uuid import uuid4

import pytest

from roster.domain.error import InvalidStatusTransitionError
from roster.domain.model import Confirmation, Creator, Profile
from roster.domain.repository import ConfirmationFilter, ConfirmationRepository
from roster.domain.value import (
    ClinicId,
    ConfirmationKey,
    ConfirmationStatus,
    ConfirmationType,
    TemplateName,
    UserId,
)
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.integration


def _invite(email: str, **extra) -> Confirmation:
    return Confirmation(
        key=ConfirmationKey(uuid4().hex),
        type=ConfirmationType.CLINICIAN_INVITE,
        template_name=TemplateName.CLINICIAN_INVITE,
        email=email,
        clinic_id=ClinicId("clinic-1"),
        creator_id=UserId("admin-1"),
        creator=Creator(
            clinic_id=ClinicId("clinic-1"),
            clinic_name="Northside",
            profile=Profile(full_name="Dr. Admin"),
        ),
        **extra,
    )


class TestConfirmationRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_save_and_find_round_trips_creator_snapshot(self, integration_env):
        # Arrange
        repo = await integration_env.get(ConfirmationRepository)
        email = f"{uuid4().hex}@example.org"
        invite = _invite(email)

        # Act
        await repo.save(invite)
        found = await repo.find_one(
            ConfirmationFilter(type=ConfirmationType.CLINICIAN_INVITE, key=invite.key)
        )

        # Assert
        assert found is not None
        assert found.email == email
        assert found.status == ConfirmationStatus.PENDING
        assert found.creator.clinic_name == "Northside"
        assert found.creator.profile.full_name == "Dr. Admin"

    @pytest.mark.asyncio
    async def test_save_updates_existing_key(self, integration_env):
        repo = await integration_env.get(ConfirmationRepository)
        invite = _invite(f"{uuid4().hex}@example.org")
        await repo.save(invite)

        await repo.save(invite.with_status(ConfirmationStatus.CANCELED))

        [found] = await repo.find(
            ConfirmationFilter(type=ConfirmationType.CLINICIAN_INVITE, key=invite.key)
        )
        assert found.status == ConfirmationStatus.CANCELED
        assert found.modified is not None

    @pytest.mark.asyncio
    async def test_find_filters_by_status_and_type(self, integration_env):
        repo = await integration_env.get(ConfirmationRepository)
        email = f"{uuid4().hex}@example.org"
        pending = _invite(email)
        declined = _invite(email, status=ConfirmationStatus.DECLINED)
        other_type = _invite(email).model_copy(
            update={"type": ConfirmationType.CARETEAM_INVITATION}
        )
        for confirmation in (pending, declined, other_type):
            await repo.save(confirmation)

        found = await repo.find(
            ConfirmationFilter(
                type=ConfirmationType.CLINICIAN_INVITE,
                email=email,
                status=ConfirmationStatus.PENDING,
            )
        )

        assert [c.key for c in found] == [pending.key]

    @pytest.mark.asyncio
    async def test_closed_row_is_not_overwritten(self, integration_env):
        repo = await integration_env.get(ConfirmationRepository)
        invite = _invite(f"{uuid4().hex}@example.org")
        await repo.save(invite)
        await repo.save(invite.with_status(ConfirmationStatus.CANCELED))

        with pytest.raises(InvalidStatusTransitionError):
            await repo.save(invite)
