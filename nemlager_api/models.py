"""
Decode targets for NemLager API responses.

pydantic models validated against the parsed JSON body. Ids and flags use
strict types, so a boolean is never accepted where an integer is expected.
ApiClient turns a ValidationError into DecodeError.
"""

from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator

T = TypeVar("T")


# =============================================================================
# Envelopes
# =============================================================================

class Envelope(BaseModel, Generic[T]):
    """Uniform success wrapper: {"msg": ..., "data": ...}. Use as Envelope[Model]."""
    msg: StrictStr
    data: T


class ErrorEnvelope(BaseModel):
    """Error body: {"msg": ...}. Cron routes use {"error": ...} instead."""
    msg: Optional[str] = None
    error: Optional[str] = None

    def message(self, default: str = "") -> str:
        if self.msg is not None:
            return self.msg
        if self.error is not None:
            return self.error
        return default


# =============================================================================
# Auth
# =============================================================================

class AuthData(BaseModel):
    """Bearer token issued at sign-in."""
    jwt: StrictStr


# =============================================================================
# Customer settings
# =============================================================================

class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class V1CustomerSetting(_Model):
    id: StrictInt
    customer_id: StrictInt = Field(alias="customerID")
    use_reference: StrictBool = Field(alias="useReference")
    use_placement: StrictBool = Field(alias="usePlacement")
    use_batch: StrictBool = Field(alias="useBatch")


class ReferenceSettings(_Model):
    """Per-action reference toggles (v2 settings)."""
    inbound: StrictBool = Field(alias="tilgang")
    outbound: StrictBool = Field(alias="afgang")
    regulation: StrictBool = Field(alias="regulering")
    move: StrictBool = Field(alias="flyt")


class V2CustomerSetting(_Model):
    id: StrictInt
    customer_id: StrictInt = Field(alias="customerID")
    use_reference: ReferenceSettings = Field(alias="useReference")
    use_placement: StrictBool = Field(alias="usePlacement")
    use_batch: StrictBool = Field(alias="useBatch")


# The shape of useReference decides which version validates
CustomerSetting = Union[V2CustomerSetting, V1CustomerSetting]


class SignInUser(BaseModel):
    id: StrictInt


class SignInCustomer(BaseModel):
    settings: Optional[CustomerSetting] = None


class SignInData(BaseModel):
    jwt: StrictStr
    user: SignInUser
    customer: SignInCustomer

    @property
    def user_id(self) -> int:
        return self.user.id

    @property
    def settings(self) -> Optional[CustomerSetting]:
        return self.customer.settings


# =============================================================================
# Products
# =============================================================================

class Product(BaseModel):
    """Only the identifier is consumed."""
    id: StrictInt


# =============================================================================
# Cron mails
# =============================================================================

class CronMail(_Model):
    """A mail job descriptor as listed by /api/v1/cron/mails."""
    id: StrictInt
    email: Optional[StrictStr]
    user_id: Optional[StrictInt] = Field(alias="userID")
    user_email: Optional[StrictStr] = Field(alias="userEmail")
    customer_id: StrictInt = Field(alias="customerID")
    location_id: StrictStr = Field(alias="locationID")
    location_name: StrictStr = Field(alias="locationName")
    inserted: StrictStr
    updated: StrictStr
    send_stock_mail: StrictBool = Field(alias="sendStockMail")
    send_reorder_mail: StrictBool = Field(alias="sendReorderMail")
    send_movements_mail: StrictBool = Field(alias="sendMovementsMail")

    @field_validator("send_stock_mail", "send_reorder_mail", "send_movements_mail", mode="before")
    @classmethod
    def null_flag_is_off(cls, value):
        return False if value is None else value


class CronMailData(BaseModel):
    """Cron listing body: {"mails": [...]} (not enveloped)."""
    mails: List[CronMail]

    def flagged(self, flag: str) -> List[CronMail]:
        """Mails whose flag attribute (e.g. 'send_stock_mail') is set."""
        return [mail for mail in self.mails if getattr(mail, flag)]
