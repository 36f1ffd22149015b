from typing import Optional

from openai_rest.schemas.base import Frozen


class Model(Frozen):
    id: str
    object: Optional[str] = None
    owned_by: Optional[str] = None
    created: Optional[int] = None

    def __str__(self) -> str:
        return self.id

    def __contains__(self, part: str) -> bool:
        return part in self.id


def model_id(model, default: str) -> str:
    """Accept a ``Model`` or a plain id string; only ``None`` means ``default``."""
    if model is None:
        return default
    if isinstance(model, Model):
        return model.id
    if not isinstance(model, str):
        raise ValueError(f"model must be a string or Model, got {type(model).__name__}")
    return model
