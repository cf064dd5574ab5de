from pydantic import BaseModel


class BaseResponse(BaseModel): ...


class CommandResponse(BaseResponse):
    text: str
    """Textual response for the terminal"""
