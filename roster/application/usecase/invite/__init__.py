"""Clinician invite use cases."""

from roster.application.usecase.invite.accept_invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
)
from roster.application.usecase.invite.cancel_invite import (
    CancelInviteRequest,
    CancelInviteUseCase,
)
from roster.application.usecase.invite.common import ConfirmationItem
from roster.application.usecase.invite.dismiss_invite import (
    DismissInviteRequest,
    DismissInviteUseCase,
)
from roster.application.usecase.invite.list_invites import (
    ListInvitesRequest,
    ListInvitesUseCase,
)
from roster.application.usecase.invite.resend_invite import (
    ResendInviteRequest,
    ResendInviteUseCase,
)
from roster.application.usecase.invite.send_invite import (
    SendInviteRequest,
    SendInviteUseCase,
)

__all__ = [
    "AcceptInviteRequest",
    "AcceptInviteResponse",
    "AcceptInviteUseCase",
    "CancelInviteRequest",
    "CancelInviteUseCase",
    "ConfirmationItem",
    "DismissInviteRequest",
    "DismissInviteUseCase",
    "ListInvitesRequest",
    "ListInvitesUseCase",
    "ResendInviteRequest",
    "ResendInviteUseCase",
    "SendInviteRequest",
    "SendInviteUseCase",
]
