"""Application layer DI providers."""

from dishka import Scope, provide

from roster.application.usecase.invite import (
    AcceptInviteUseCase,
    CancelInviteUseCase,
    DismissInviteUseCase,
    ListInvitesUseCase,
    ResendInviteUseCase,
    SendInviteUseCase,
)
from roster.domain.service import (
    AuthorizationService,
    ClinicClient,
    ConfirmationService,
    JWTService,
    NotificationService,
)
from roster.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_send_invite_use_case(
        self,
        authorization_service: AuthorizationService,
        confirmation_service: ConfirmationService,
        notification_service: NotificationService,
        clinic_client: ClinicClient,
        jwt_service: JWTService,
    ) -> SendInviteUseCase:
        """Provide send invite use case."""
        return SendInviteUseCase(
            authorization_service=authorization_service,
            confirmation_service=confirmation_service,
            notification_service=notification_service,
            clinic_client=clinic_client,
            jwt_service=jwt_service,
        )

    @provide
    def get_resend_invite_use_case(
        self,
        authorization_service: AuthorizationService,
        confirmation_service: ConfirmationService,
        notification_service: NotificationService,
        clinic_client: ClinicClient,
        jwt_service: JWTService,
    ) -> ResendInviteUseCase:
        """Provide resend invite use case."""
        return ResendInviteUseCase(
            authorization_service=authorization_service,
            confirmation_service=confirmation_service,
            notification_service=notification_service,
            clinic_client=clinic_client,
            jwt_service=jwt_service,
        )

    @provide
    def get_list_invites_use_case(
        self,
        authorization_service: AuthorizationService,
        confirmation_service: ConfirmationService,
    ) -> ListInvitesUseCase:
        """Provide list invites use case."""
        return ListInvitesUseCase(
            authorization_service=authorization_service,
            confirmation_service=confirmation_service,
        )

    @provide
    def get_accept_invite_use_case(
        self,
        authorization_service: AuthorizationService,
        confirmation_service: ConfirmationService,
        clinic_client: ClinicClient,
    ) -> AcceptInviteUseCase:
        """Provide accept invite use case."""
        return AcceptInviteUseCase(
            authorization_service=authorization_service,
            confirmation_service=confirmation_service,
            clinic_client=clinic_client,
        )

    @provide
    def get_dismiss_invite_use_case(
        self,
        authorization_service: AuthorizationService,
        confirmation_service: ConfirmationService,
        clinic_client: ClinicClient,
    ) -> DismissInviteUseCase:
        """Provide dismiss invite use case."""
        return DismissInviteUseCase(
            authorization_service=authorization_service,
            confirmation_service=confirmation_service,
            clinic_client=clinic_client,
        )

    @provide
    def get_cancel_invite_use_case(
        self,
        authorization_service: AuthorizationService,
        confirmation_service: ConfirmationService,
        clinic_client: ClinicClient,
    ) -> CancelInviteUseCase:
        """Provide cancel invite use case."""
        return CancelInviteUseCase(
            authorization_service=authorization_service,
            confirmation_service=confirmation_service,
            clinic_client=clinic_client,
        )
