from pydantic import BaseModel


class UserLoginReq(BaseModel):
    email: str
    password: str
