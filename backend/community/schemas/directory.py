from datetime import datetime

from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer

from community.schemas.common import PaginationOut
from community.schemas.occupation import OccupationDetailsOut


class DirectoryMemberOut(BaseModel):
    """Public directory row. When `contact_hidden` is set the phone and
    email keys are left out of the payload entirely."""

    id: int
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    gender: str | None = None
    village_name: str | None = None
    current_address: str | None = None
    occupation_type: str | None = None
    created_at: datetime | None = None
    phone: str | None = None
    email: str | None = None
    contact_hidden: bool = False
    occupation_details: OccupationDetailsOut | None = None

    @model_serializer(mode="wrap")
    def _drop_hidden_contact(self, handler: SerializerFunctionWrapHandler):
        data = handler(self)
        if self.contact_hidden:
            data.pop("phone", None)
            data.pop("email", None)
        return data


class DirectorySearchOut(BaseModel):
    users: list[DirectoryMemberOut]
    pagination: PaginationOut
