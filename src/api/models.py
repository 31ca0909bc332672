"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Wire field names are camelCase; Python attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model accepting camelCase JSON and snake_case keyword arguments."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(CamelModel):
    """Request model for account registration."""

    customer_name: str = Field(..., min_length=1, max_length=100)
    national_id: str = Field(..., min_length=1, max_length=20, description="National identity (IC) number")
    mobile_number: str = Field(..., min_length=1, max_length=15)
    email_address: EmailStr = Field(..., max_length=100)


class ResendVerificationRequest(CamelModel):
    """Request model for resending the verification code."""

    national_id: str = Field(..., min_length=1, max_length=20)


class VerifyRequest(CamelModel):
    """Request model for account verification."""

    national_id: str = Field(..., min_length=1, max_length=20)
    verification_code: str = Field(
        ...,
        min_length=4,
        max_length=4,
        pattern=r"^\d{4}$",
        description="4-digit verification code",
    )


class PrivacyPolicyRequest(CamelModel):
    """Request model for privacy-policy consent."""

    national_id: str = Field(..., min_length=1, max_length=20)
    agreed: bool


class PinSetupRequest(CamelModel):
    """Request model for PIN setup."""

    national_id: str = Field(..., min_length=1, max_length=20)
    pin: str = Field(..., min_length=6, max_length=6, pattern=r"^\d{6}$", description="6-digit PIN")
    confirm_pin: str = Field(..., min_length=6, max_length=6, pattern=r"^\d{6}$")


class BiometricRequest(CamelModel):
    """Request model for biometric setup."""

    national_id: str = Field(..., min_length=1, max_length=20)
    fingerprint_data: str = Field(..., min_length=1, description="Opaque fingerprint payload")


class MessageResponse(CamelModel):
    """Response model for successful onboarding steps."""

    message: str


class BiometricResponse(CamelModel):
    """Response model for successful biometric setup."""

    message: str
    redirect_to: str


class ErrorResponse(CamelModel):
    """Standard error response model."""

    message: str
    error: str | None = None
