from pydantic import BaseModel


class PlatformCreate(BaseModel):
    name: str
    image_size_constraint: str


class PlatformResponse(PlatformCreate):
    id: int

    class Config:
        from_attributes = True
