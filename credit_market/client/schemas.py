from sqlmodel import Field, SQLModel

from credit_market.utils import MAX_STORED_INTEGER


class ClientBase(SQLModel):
    name: str = Field(min_length=1, description="The display name of the Client.")
    phone: str = Field(description="A contact phone number for the Client.")


class ClientCreate(ClientBase):
    pass


class ClientUpdate(ClientBase):
    pass


class ClientRead(ClientBase):
    id: int
    credits: int = Field(ge=0, le=MAX_STORED_INTEGER)
