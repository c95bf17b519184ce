"""Clinic service client interface."""

from roster.domain.model import ClinicResponse
from roster.domain.value import ClinicId, UserId


class ClinicClient:
    """Client for the clinic service.

    Every call forwards the caller's session token. Non-success statuses are
    returned in the ClinicResponse so callers can relay them; transport
    failures raise ProviderError.
    """

    async def get_clinic(
        self, clinic_id: ClinicId, session_token: str
    ) -> ClinicResponse:
        """Fetch a clinic by id.

        Args:
            clinic_id: Clinic to fetch
            session_token: Caller credential

        Returns:
            Response with a Clinic body on success
        """
        raise NotImplementedError

    async def get_clinician(
        self, clinic_id: ClinicId, user_id: UserId, session_token: str
    ) -> ClinicResponse:
        """Fetch a user's clinician record (including roles) at a clinic.

        Args:
            clinic_id: Clinic the user belongs to
            user_id: User to look up
            session_token: Caller credential

        Returns:
            Response with a Clinician body on success
        """
        raise NotImplementedError

    async def create_clinician_invite(
        self,
        clinic_id: ClinicId,
        invite_id: str,
        email: str,
        roles: list[str],
        session_token: str,
    ) -> ClinicResponse:
        """Create a pending clinician invite.

        Args:
            clinic_id: Clinic the invite is for
            invite_id: Correlation id shared with the local confirmation
            email: Recipient email
            roles: Roles granted once the invite is accepted
            session_token: Caller credential

        Returns:
            Response with the created Clinician body on success
        """
        raise NotImplementedError

    async def get_invited_clinician(
        self, clinic_id: ClinicId, invite_id: str, session_token: str
    ) -> ClinicResponse:
        """Fetch a pending clinician invite.

        Args:
            clinic_id: Clinic the invite is for
            invite_id: Invite id
            session_token: Caller credential

        Returns:
            Response with a Clinician body on success
        """
        raise NotImplementedError

    async def delete_invited_clinician(
        self, clinic_id: ClinicId, invite_id: str, session_token: str
    ) -> ClinicResponse:
        """Delete a pending clinician invite.

        Args:
            clinic_id: Clinic the invite is for
            invite_id: Invite id
            session_token: Caller credential

        Returns:
            Response; 200 and 404 both mean the invite is gone
        """
        raise NotImplementedError

    async def associate_clinician_to_user(
        self,
        clinic_id: ClinicId,
        invite_id: str,
        user_id: UserId,
        session_token: str,
    ) -> ClinicResponse:
        """Turn an accepted invite into a clinician membership for a user.

        Args:
            clinic_id: Clinic the invite is for
            invite_id: Invite id
            user_id: Account joining the clinic
            session_token: Caller credential

        Returns:
            Response with the resulting Clinician body on success
        """
        raise NotImplementedError
