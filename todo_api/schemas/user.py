from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    email: EmailStr
    password: str = Field(min_length=1)


class UserLogin(BaseModel):
    # Plain str: a malformed email must fail like any unknown one
    email: str
    password: str


class UserOut(BaseModel):
    id: str
    username: str
    email: str

    model_config = {
        "from_attributes": True
    }


class UserEnvelope(BaseModel):
    user: UserOut
