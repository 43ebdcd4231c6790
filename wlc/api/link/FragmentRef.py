"""A broken in-page anchor reported for a link target."""

from pydantic import BaseModel, ConfigDict


class FragmentRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    hash: str
    lines: str
