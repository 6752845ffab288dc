"""
Pydantic schemas for signup requests and responses
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class ProvisioningMode(str, Enum):
    """How the tenant database is produced"""
    CREATE = "create"
    CLONE = "clone"


class Country(BaseModel):
    """Country picked on the signup form"""
    model_config = ConfigDict(frozen=True)

    id: int = 0
    code: str = Field(..., min_length=2, max_length=2)
    name: Optional[str] = None


class SignupRequest(BaseModel):
    """Signup form payload"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str = Field(..., min_length=3, max_length=20, pattern=r"^[A-Za-z0-9]+$")
    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: str = Field(..., min_length=1, alias="firstName")
    last_name: str = Field(..., min_length=1, alias="lastName")
    phone: Optional[str] = None
    company_name: str = Field(..., min_length=2, alias="companyName")
    industry: Optional[str] = None
    company_size: Optional[str] = Field(default=None, alias="companySize")
    country: Country
    db_mode: Optional[ProvisioningMode] = Field(default=None, alias="dbMode")
    terms: bool

    @field_validator("terms")
    @classmethod
    def _terms_accepted(cls, value: bool) -> bool:
        if not value:
            raise ValueError("terms must be accepted")
        return value

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class SignupData(BaseModel):
    """Where the new instance lives"""
    model_config = ConfigDict(populate_by_name=True)

    instance_url: str = Field(..., alias="instanceUrl")
    email: str
    database: str


class SignupResponse(BaseModel):
    """Envelope for every /api/signup reply"""
    success: bool
    message: Optional[str] = None
    data: Optional[SignupData] = None


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "healthy"
    timestamp: datetime
