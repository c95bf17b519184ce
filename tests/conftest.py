"""Test configuration and fixtures."""

from roster.adapter.clinic.client import MockClinicClient
from roster.adapter.identity.client import MockIdentityClient
from roster.application.usecase.invite import SendInviteRequest, SendInviteUseCase
from roster.domain.service import ClinicClient, IdentityClient
from roster.domain.value import ClinicId, TokenData, UserId

ADMIN_ID = "admin-1"
CLINIC_ID = "clinic-1"
CLINIC_NAME = "Northside Diabetes Clinic"
RECIPIENT_ID = "clinician-7"
RECIPIENT_EMAIL = "clinician@example.org"


def make_token(user_id: str, is_server: bool = False) -> TokenData:
    """Build a verified caller identity without minting a JWT."""
    return TokenData(
        user_id=UserId(user_id),
        is_server=is_server,
        session_token=f"session-{user_id}",
    )


def seed_clinic(
    clinic_client: MockClinicClient,
    clinic_id: str = CLINIC_ID,
    admin_id: str = ADMIN_ID,
) -> None:
    """Register a clinic with one admin clinician."""
    clinic_client.add_clinic(clinic_id, CLINIC_NAME)
    clinic_client.add_clinician(clinic_id, admin_id, ["CLINIC_ADMIN"])


def seed_recipient(
    identity_client: MockIdentityClient,
    user_id: str = RECIPIENT_ID,
    email: str = RECIPIENT_EMAIL,
) -> None:
    """Register the invite recipient's account."""
    identity_client.add_account(user_id, email)


async def send_invite(env, email: str = RECIPIENT_EMAIL):
    """Send an invite from the clinic admin to a registered recipient."""
    clinic = await env.get(ClinicClient)
    if CLINIC_ID not in clinic.clinics:
        seed_clinic(clinic)
    identity = await env.get(IdentityClient)
    if RECIPIENT_ID not in identity.accounts:
        seed_recipient(identity)

    use_case = await env.get(SendInviteUseCase)
    return await use_case.execute(
        SendInviteRequest(
            clinic_id=ClinicId(CLINIC_ID),
            email=email,
            roles=["CLINIC_MEMBER"],
            token=make_token(ADMIN_ID),
        )
    )
