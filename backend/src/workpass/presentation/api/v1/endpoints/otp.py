"""
OTP Endpoints
Unauthenticated, rate limited per client address
"""
from fastapi import APIRouter, Depends, Request

from workpass.application.services.otp.interfaces import IOtpService
from workpass.core.config import settings
from workpass.core.exceptions import ValidationException
from workpass.presentation.api.v1.container import get_otp_service
from workpass.presentation.api.v1.dependencies import limiter
from workpass.presentation.api.v1.schemas.base import MessageResponse
from workpass.presentation.api.v1.schemas.otp import SendOtpRequest, VerifyOtpRequest


router = APIRouter()


@router.post("/send-otp", response_model=MessageResponse)
@limiter.limit(settings.OTP_SEND_RATE_LIMIT)
async def send_otp(
    request: Request,
    body: SendOtpRequest,
    service: IOtpService = Depends(get_otp_service)
):
    await service.issue(body.identifier, body.type)
    return MessageResponse(message="OTP sent successfully")


@router.post("/verify-otp", response_model=MessageResponse)
@limiter.limit(settings.OTP_SEND_RATE_LIMIT)
async def verify_otp(
    request: Request,
    body: VerifyOtpRequest,
    service: IOtpService = Depends(get_otp_service)
):
    if not await service.verify(body.identifier, body.code, body.type):
        raise ValidationException("code", "Invalid or expired verification code")
    return MessageResponse(message="Verification successful")
