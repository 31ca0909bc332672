"""
API v1 routes.

Defines REST endpoints for the Account Onboarding API. Handlers only
translate requests into service calls; every business rule lives in
AccountLifecycleService.
"""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_account_service, get_app_settings
from src.api.errors import raise_for_failure
from src.api.models import (
    BiometricRequest,
    BiometricResponse,
    ErrorResponse,
    MessageResponse,
    PinSetupRequest,
    PrivacyPolicyRequest,
    RegisterRequest,
    ResendVerificationRequest,
    VerifyRequest,
)
from src.config.settings import Settings
from src.domain.lifecycle import AccountLifecycleService

router = APIRouter(prefix="/accounts", tags=["v1"])

_failure_responses = {
    400: {"model": ErrorResponse, "description": "Onboarding step rejected"},
    422: {"description": "Validation error"},
}


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_failure_responses,
    summary="Register a new account",
    description="Register a customer by national identity number. "
    "A 4-digit verification code is sent to the mobile number and email address.",
)
async def register(
    request_data: RegisterRequest,
    service: AccountLifecycleService = Depends(get_account_service),
) -> MessageResponse:
    """
    Register a new account and send its verification code.

    - **customerName**: Customer's full name
    - **nationalId**: National identity number, unique per account
    - **mobileNumber**: Mobile number receiving the code
    - **emailAddress**: Email address receiving the code
    """
    result = service.register(
        request_data.customer_name,
        request_data.national_id,
        request_data.mobile_number,
        str(request_data.email_address),
    )
    raise_for_failure(result)
    return MessageResponse(message=result.message)


@router.post(
    "/verification/resend",
    response_model=MessageResponse,
    responses=_failure_responses,
    summary="Resend the verification code",
)
async def resend_verification(
    request_data: ResendVerificationRequest,
    service: AccountLifecycleService = Depends(get_account_service),
) -> MessageResponse:
    """Issue a new verification code with a fresh 10 minute window."""
    result = service.resend_verification(request_data.national_id)
    raise_for_failure(result)
    return MessageResponse(message=result.message)


@router.post(
    "/verification",
    response_model=MessageResponse,
    responses=_failure_responses,
    summary="Verify an account",
    description="Submit the 4-digit verification code received by SMS or email.",
)
async def verify(
    request_data: VerifyRequest,
    service: AccountLifecycleService = Depends(get_account_service),
) -> MessageResponse:
    result = service.verify(request_data.national_id, request_data.verification_code)
    raise_for_failure(result)
    return MessageResponse(message=result.message)


@router.post(
    "/privacy-policy",
    response_model=MessageResponse,
    responses=_failure_responses,
    summary="Record privacy-policy consent",
)
async def agree_to_privacy_policy(
    request_data: PrivacyPolicyRequest,
    service: AccountLifecycleService = Depends(get_account_service),
) -> MessageResponse:
    """Store the customer's answer to the privacy policy. Requires a verified account."""
    result = service.agree_to_privacy_policy(request_data.national_id, request_data.agreed)
    raise_for_failure(result)
    return MessageResponse(message=result.message)


@router.post(
    "/pin",
    response_model=MessageResponse,
    responses=_failure_responses,
    summary="Set up a PIN",
)
async def setup_pin(
    request_data: PinSetupRequest,
    service: AccountLifecycleService = Depends(get_account_service),
) -> MessageResponse:
    """Set a 6-digit PIN. Requires a verified account that agreed to the privacy policy."""
    result = service.setup_pin(request_data.national_id, request_data.pin, request_data.confirm_pin)
    raise_for_failure(result)
    return MessageResponse(message=result.message)


@router.post(
    "/biometric",
    response_model=BiometricResponse,
    responses=_failure_responses,
    summary="Set up biometric sign-in",
)
async def setup_biometric(
    request_data: BiometricRequest,
    service: AccountLifecycleService = Depends(get_account_service),
    settings: Settings = Depends(get_app_settings),
) -> BiometricResponse:
    """Enable biometric sign-in and point the client at the post-onboarding page."""
    result = service.setup_biometric(request_data.national_id, request_data.fingerprint_data)
    raise_for_failure(result)
    return BiometricResponse(message=result.message, redirect_to=settings.biometric_redirect_target)
