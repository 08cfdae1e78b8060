"""Request bodies for registration and login."""

from .base import RequestSchema, RequiredStr, Secret


class RegisterRequest(RequestSchema):
    email: RequiredStr
    phone_number: RequiredStr
    full_name: RequiredStr
    password: Secret
    otp: RequiredStr
    role: RequiredStr


class LoginRequest(RequestSchema):
    identifier: RequiredStr
    password: Secret
