from datetime import datetime, timezone
from typing import List, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator


def utcnow() -> datetime:
    """Current UTC time at the millisecond precision BSON keeps."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class Address(BaseModel):
    landmark: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


class PreviousCompany(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    company_name: Optional[str] = Field(default=None, alias="companyName")
    company_type: Optional[str] = Field(default=None, alias="companyType")
    years_of_experience: Optional[float] = Field(default=None, ge=0, alias="yearsOfExperience")


class Employee(BaseModel):
    """Canonical Employee shape; ``to_document`` gives the stored form."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str
    age: Optional[int] = Field(default=None, ge=0)
    address: Optional[Address] = None
    referral: Optional[str] = Field(default=None, description="_id of the referring employee")
    hobbies: List[str] = Field(default_factory=list)
    designation: Optional[str] = None
    previous_companies: Optional[PreviousCompany] = Field(default=None, alias="previousCompanies")
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=utcnow, alias="updatedAt")

    @field_validator("referral", mode="before")
    @classmethod
    def validate_referral(cls, v):
        if v is None:
            return v
        if isinstance(v, ObjectId):
            return str(v)
        if not ObjectId.is_valid(v):
            raise ValueError("referral must be a 24 character hex ObjectId")
        return v

    def to_document(self) -> dict:
        doc = self.model_dump(by_alias=True, exclude_none=True)
        if self.referral is not None:
            doc["referral"] = ObjectId(self.referral)
        return doc


# Stored names of every Employee field, e.g. "previousCompanies"
EMPLOYEE_FIELDS = [field.alias or name for name, field in Employee.model_fields.items()]
