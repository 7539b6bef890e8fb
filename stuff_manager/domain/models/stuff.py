from typing import Optional

from pydantic import BaseModel, Field

NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


class Stuff(BaseModel):
    id: Optional[int] = None
    name: str = Field(max_length=NAME_MAX_LENGTH)
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)
