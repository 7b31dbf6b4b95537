"""
Password reset endpoints.

`POST /api/reset/request` emails a six digit code to a registered address and
`POST /api/reset/confirm` exchanges a live code for a new password.  The
older `/api/forgot-password` and `/api/reset-password` paths are kept as
aliases for existing clients.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from recovery.flow import PasswordResetFlow

from ..schemas import ResetRequest, ResetRequestResponse, ResetConfirm, SuccessResponse
from ..deps import get_reset_flow
from ..audit import log_action


router = APIRouter(prefix="/api", tags=["password-reset"])


@router.post(
    "/reset/request",
    response_model=ResetRequestResponse,
    response_model_exclude_none=True,
)
@router.post(
    "/forgot-password",
    response_model=ResetRequestResponse,
    response_model_exclude_none=True,
    include_in_schema=False,
)
def request_reset(payload: ResetRequest, flow: PasswordResetFlow = Depends(get_reset_flow)):
    """Issue a reset code for a registered email and try to email it."""
    outcome = flow.request_reset(payload.email)
    log_action(
        "password_reset_requested",
        email=payload.email,
        email_sent=outcome.email_sent,
        delivery=outcome.delivery.status.value,
    )
    if outcome.email_sent:
        message = "Reset code sent to your email"
    else:
        message = "Reset code issued but the email could not be sent"
    return ResetRequestResponse(
        accepted=outcome.accepted,
        email_sent=outcome.email_sent,
        message=message,
        dev_code=outcome.dev_code,
    )


@router.post("/reset/confirm", response_model=SuccessResponse)
@router.post("/reset-password", response_model=SuccessResponse, include_in_schema=False)
def confirm_reset(payload: ResetConfirm, flow: PasswordResetFlow = Depends(get_reset_flow)):
    """Replace the password of an account holding a live reset code."""
    flow.confirm_reset(payload.email, payload.code, payload.new_password)
    log_action("password_reset_completed", email=payload.email)
    return SuccessResponse(message="Password reset successful!")
