from pydantic import BaseModel, ConfigDict, field_validator


class Place(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str | None = None
    name: str | None = None
    description: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    opening_hours: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    rating: float | None = None  # 0-5
    category: str | None = None
    price_level: int | None = None  # 1-4
    types: list[str] = []
    image_url: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value):
        # 7.0 and 7 are the same id
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return value

    @field_validator("types", mode="before")
    @classmethod
    def _loose_types(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [str(t) for t in value if t is not None]
        return value
