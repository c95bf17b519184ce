"""Clinician invite routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status
from pydantic import BaseModel, EmailStr, Field

from roster.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteUseCase,
    CancelInviteRequest,
    CancelInviteUseCase,
    ConfirmationItem,
    DismissInviteRequest,
    DismissInviteUseCase,
    ListInvitesRequest,
    ListInvitesUseCase,
    ResendInviteRequest,
    ResendInviteUseCase,
    SendInviteRequest,
    SendInviteUseCase,
)
from roster.domain.service import JWTService
from roster.interface.api.auth import SESSION_TOKEN_HEADER, authenticate

router = APIRouter(prefix="/confirm", tags=["clinician-invites"], route_class=DishkaRoute)


class SendInviteAPIRequest(BaseModel):
    """API request for sending a clinician invite."""

    email: EmailStr
    roles: list[str] = Field(min_length=1)


@router.post(
    "/send/invite/clinic/{clinic_id}",
    response_model=ConfirmationItem,
    status_code=status.HTTP_200_OK,
)
async def send_clinician_invite(
    clinic_id: str,
    request: SendInviteAPIRequest,
    send_invite_use_case: FromDishka[SendInviteUseCase],
    jwt_service: FromDishka[JWTService],
    session_token: str | None = Header(default=None, alias=SESSION_TOKEN_HEADER),
) -> ConfirmationItem:
    """Invite an email address to join a clinic's staff.

    Requires a clinic admin or a server token. A refusal from the clinic
    service is returned to the caller as-is.
    """
    token = authenticate(jwt_service, session_token)
    return await send_invite_use_case.execute(
        SendInviteRequest(
            clinic_id=clinic_id,
            email=request.email,
            roles=request.roles,
            token=token,
        )
    )


@router.patch(
    "/resend/invite/clinic/{clinic_id}/{invite_id}", response_model=ConfirmationItem
)
async def resend_clinician_invite(
    clinic_id: str,
    invite_id: str,
    resend_invite_use_case: FromDishka[ResendInviteUseCase],
    jwt_service: FromDishka[JWTService],
    session_token: str | None = Header(default=None, alias=SESSION_TOKEN_HEADER),
) -> ConfirmationItem:
    """Send the invite email again for an invite the clinic service still holds."""
    token = authenticate(jwt_service, session_token)
    return await resend_invite_use_case.execute(
        ResendInviteRequest(clinic_id=clinic_id, invite_id=invite_id, token=token)
    )


@router.get(
    "/invitations/clinician/{user_id}", response_model=list[ConfirmationItem]
)
async def get_clinician_invitations(
    user_id: str,
    list_invites_use_case: FromDishka[ListInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    session_token: str | None = Header(default=None, alias=SESSION_TOKEN_HEADER),
) -> list[ConfirmationItem]:
    """List the pending invites addressed to the caller."""
    token = authenticate(jwt_service, session_token)
    return await list_invites_use_case.execute(
        ListInvitesRequest(user_id=user_id, token=token)
    )


@router.put("/accept/invite/clinician/{user_id}/{invite_id}")
async def accept_clinician_invite(
    user_id: str,
    invite_id: str,
    accept_invite_use_case: FromDishka[AcceptInviteUseCase],
    jwt_service: FromDishka[JWTService],
    session_token: str | None = Header(default=None, alias=SESSION_TOKEN_HEADER),
) -> Response:
    """Accept an invite and join the clinic.

    Responds with the clinic service's clinician record.
    """
    token = authenticate(jwt_service, session_token)
    result = await accept_invite_use_case.execute(
        AcceptInviteRequest(user_id=user_id, invite_id=invite_id, token=token)
    )
    return Response(
        content=result.clinician_body,
        status_code=status.HTTP_200_OK,
        media_type="application/json",
    )


@router.put(
    "/dismiss/invite/clinician/{user_id}/{invite_id}", response_model=ConfirmationItem
)
async def dismiss_clinician_invite(
    user_id: str,
    invite_id: str,
    dismiss_invite_use_case: FromDishka[DismissInviteUseCase],
    jwt_service: FromDishka[JWTService],
    session_token: str | None = Header(default=None, alias=SESSION_TOKEN_HEADER),
) -> ConfirmationItem:
    """Decline an invite."""
    token = authenticate(jwt_service, session_token)
    return await dismiss_invite_use_case.execute(
        DismissInviteRequest(user_id=user_id, invite_id=invite_id, token=token)
    )


@router.delete(
    "/cancel/invite/clinic/{clinic_id}/{invite_id}", response_model=ConfirmationItem
)
async def cancel_clinician_invite(
    clinic_id: str,
    invite_id: str,
    cancel_invite_use_case: FromDishka[CancelInviteUseCase],
    jwt_service: FromDishka[JWTService],
    session_token: str | None = Header(default=None, alias=SESSION_TOKEN_HEADER),
) -> ConfirmationItem:
    """Withdraw a pending invite on behalf of the clinic."""
    token = authenticate(jwt_service, session_token)
    return await cancel_invite_use_case.execute(
        CancelInviteRequest(clinic_id=clinic_id, invite_id=invite_id, token=token)
    )
