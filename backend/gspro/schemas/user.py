from pydantic import BaseModel


class CurrentUserResponse(BaseModel):
    id: str
    email: str
    name: str | None = None
    role: str
