from pydantic import BaseModel


class UserStats(BaseModel):
    total: int
    admins: int
    students: int
