from sqlmodel import SQLModel


class MessageResponse(SQLModel):
    message: str


class ErrorResponse(SQLModel):
    error: str
