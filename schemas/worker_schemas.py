"""Request bodies for the worker verification workflow."""

from typing import Literal

from pydantic import Field

from .account_schemas import UserIdRequest
from .base import RequestSchema, RequiredStr


class AddSkillRequest(UserIdRequest):
    skill_name: RequiredStr = Field(alias="skillName")
    certificate_url: RequiredStr = Field(alias="certificateUrl")


class SubmitInitialRequest(AddSkillRequest):
    ktp_url: RequiredStr = Field(alias="ktpUrl")
    address: RequiredStr


class VerifySkillRequest(RequestSchema):
    skill_id: int = Field(alias="skillId")
    status: Literal["verified", "rejected", "pending"]


class VerifyAccountRequest(UserIdRequest):
    status: Literal["verified", "rejected"]
