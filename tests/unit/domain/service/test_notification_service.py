"""Unit tests for NotificationService."""

from datetime import datetime, timezone

import pytest

from roster.domain.model import Confirmation, Creator, Profile
from roster.domain.service import EmailSender, NotificationService, ProfileClient
from roster.domain.service.notification_service import build_content
from roster.domain.value import (
    ClinicId,
    ConfirmationKey,
    ConfirmationType,
    TemplateName,
    UserId,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _invite(**overrides) -> Confirmation:
    confirmation = Confirmation(
        key=ConfirmationKey("invite-123"),
        type=ConfirmationType.CLINICIAN_INVITE,
        template_name=TemplateName.CLINICIAN_INVITE,
        email="clinician@example.org",
        clinic_id=ClinicId("clinic-1"),
        creator_id=UserId("admin-1"),
        creator=Creator(clinic_id=ClinicId("clinic-1"), clinic_name="Northside"),
        created=datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc),
    )
    return confirmation.model_copy(update=overrides)


class TestBuildContent:
    def test_unknown_recipient_is_sent_to_signup(self):
        content = build_content(_invite())

        assert content["WebPath"] == "signup"
        assert content["ClinicName"] == "Northside"
        assert content["Email"] == "clinician@example.org"

    def test_known_recipient_is_sent_to_login(self):
        content = build_content(_invite(user_id=UserId("clinician-7")))

        assert content["WebPath"] == "login"


class TestAttachProfile:
    @pytest.mark.asyncio
    async def test_attaches_creator_full_name(self, unit_env):
        service = await unit_env.get(NotificationService)
        profiles = await unit_env.get(ProfileClient)
        profiles.add_profile("admin-1", "Dr. Admin")

        result = await service.attach_profile(_invite())

        assert result.creator.profile.full_name == "Dr. Admin"
        assert result.creator.clinic_name == "Northside"

    @pytest.mark.asyncio
    async def test_profile_failure_leaves_invite_unchanged(self, unit_env):
        service = await unit_env.get(NotificationService)
        profiles = await unit_env.get(ProfileClient)
        profiles.fail = True
        invite = _invite()

        assert await service.attach_profile(invite) == invite


class TestDeliver:
    @pytest.mark.asyncio
    async def test_sends_rendered_invite_with_creator_profile(self, unit_env):
        # Arrange
        service = await unit_env.get(NotificationService)
        profiles = await unit_env.get(ProfileClient)
        sender = await unit_env.get(EmailSender)
        profiles.add_profile("admin-1", "Dr. Admin")

        # Act
        result = await service.deliver(_invite())

        # Assert
        assert result.creator.profile.full_name == "Dr. Admin"
        [email] = sender.sent.values()
        assert email["to"] == "clinician@example.org"
        assert "Northside" in email["subject"]
        assert "Dr. Admin" in email["html"]
        assert "/signup?inviteId=invite-123" in email["html"]

    @pytest.mark.asyncio
    async def test_repeated_delivery_of_same_version_sends_once(self, unit_env):
        service = await unit_env.get(NotificationService)
        sender = await unit_env.get(EmailSender)
        invite = _invite()

        await service.deliver(invite)
        await service.deliver(invite)

        assert len(sender.sent) == 1

    @pytest.mark.asyncio
    async def test_modified_invite_sends_again(self, unit_env):
        service = await unit_env.get(NotificationService)
        sender = await unit_env.get(EmailSender)
        invite = _invite()

        await service.deliver(invite)
        await service.deliver(
            invite.model_copy(
                update={"modified": datetime(2026, 3, 2, tzinfo=timezone.utc)}
            )
        )

        assert len(sender.sent) == 2

    @pytest.mark.asyncio
    async def test_email_failure_is_swallowed(self, unit_env):
        service = await unit_env.get(NotificationService)
        sender = await unit_env.get(EmailSender)
        sender.fail = True

        result = await service.deliver(_invite())

        assert result.key == "invite-123"
        assert sender.sent == {}

    def test_idempotency_key_uses_latest_timestamp(self):
        invite = _invite()
        modified = datetime(2026, 3, 2, tzinfo=timezone.utc)

        assert NotificationService.idempotency_key(invite) == (
            f"invite-123:{invite.created.isoformat()}"
        )
        assert NotificationService.idempotency_key(
            invite.model_copy(update={"modified": modified})
        ) == f"invite-123:{modified.isoformat()}"

    @pytest.mark.asyncio
    async def test_attached_profile_is_not_fetched_again(self, unit_env):
        service = await unit_env.get(NotificationService)
        profiles = await unit_env.get(ProfileClient)
        sender = await unit_env.get(EmailSender)
        profiles.fail = True
        invite = _invite().with_profile(Profile(full_name="Dr. Stored"))

        await service.deliver(invite)

        [email] = sender.sent.values()
        assert "Dr. Stored" in email["html"]

    @pytest.mark.asyncio
    async def test_profile_failure_skips_email(self, unit_env):
        service = await unit_env.get(NotificationService)
        profiles = await unit_env.get(ProfileClient)
        sender = await unit_env.get(EmailSender)
        profiles.fail = True

        result = await service.deliver(_invite())

        assert result.creator.profile is None
        assert sender.sent == {}
