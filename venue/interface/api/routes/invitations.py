"""Invitation and signup routes (performer facing)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from venue.application.usecase.booking import (
    RedeemInvitationRequest,
    RedeemInvitationResponse,
    RedeemInvitationUseCase,
)
from venue.application.usecase.invitation import (
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from venue.interface.error import raise_for_error

router = APIRouter(tags=["invitations"], route_class=DishkaRoute)


class SignupAPIRequest(BaseModel):
    """Signup form submitted from the invitation link."""

    performer_name: str = Field(min_length=1, max_length=200)
    performer_email: str | None = None
    notes: str | None = Field(default=None, max_length=5000)


@router.get("/invitations/{token}", response_model=ValidateInvitationResponse)
async def validate_invitation(
    token: str,
    validate_invitation_use_case: FromDishka[ValidateInvitationUseCase],
) -> ValidateInvitationResponse:
    """Check an invitation link before showing the signup form.

    Raises:
        HTTPException: 404 unknown link, 410 expired, 409 already used
    """
    response = await validate_invitation_use_case.execute(
        ValidateInvitationRequest(token=token)
    )
    raise_for_error(response)
    return response


@router.post(
    "/signup",
    response_model=RedeemInvitationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    request: SignupAPIRequest,
    redeem_invitation_use_case: FromDishka[RedeemInvitationUseCase],
    token: str = Query(min_length=1),
) -> RedeemInvitationResponse:
    """Redeem an invitation into a pending booking.

    Raises:
        HTTPException: 404 unknown link, 410 expired, 409 already used
    """
    response = await redeem_invitation_use_case.execute(
        RedeemInvitationRequest(token=token, **request.model_dump())
    )
    raise_for_error(response)
    return response
