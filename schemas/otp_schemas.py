"""Request bodies for OTP issuance and verification."""

from .base import RequestSchema, RequiredStr


class SendOtpRequest(RequestSchema):
    email: RequiredStr


class VerifyOtpRequest(RequestSchema):
    email: RequiredStr
    otp: RequiredStr
