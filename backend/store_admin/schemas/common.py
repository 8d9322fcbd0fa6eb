from pydantic import AnyHttpUrl, BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

_http_url = TypeAdapter(AnyHttpUrl)


def check_http_url(value: str) -> str:
    """Reject anything that is not an absolute http(s) URL; the string is stored exactly as sent."""
    try:
        _http_url.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Invalid url")
    return value


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class WriteModel(CamelModel):
    class Config:
        str_strip_whitespace = True


class DeleteResult(BaseModel):
    count: int
