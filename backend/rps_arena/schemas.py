from typing import Literal, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class FindMatchPayload(BaseModel):
    model_config = ConfigDict(extra='ignore')


class CancelSearchPayload(BaseModel):
    model_config = ConfigDict(extra='ignore')


class MakeMovePayload(BaseModel):
    model_config = ConfigDict(extra='ignore')

    roomId: str = Field(min_length=1, max_length=128)
    move: Literal['rock', 'paper', 'scissors']


P = TypeVar('P', bound=BaseModel)


def parse_payload(model: Type[P], data) -> Optional[P]:
    """Validate an inbound event payload; None means drop it."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return None
    try:
        return model.model_validate(data)
    except ValidationError:
        return None
