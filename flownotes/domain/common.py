"""Shared pieces of the domain models."""

import time

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FlowModel(BaseModel):
    """Base for every persisted record.

    Fields are snake_case in Python and camelCase in JSON. Both spellings are
    accepted on input, and keys the model does not declare are kept so that
    newer frontends can add fields without losing them on the next save.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_json(self) -> str:
        """Serialize to the pretty-printed form written to disk."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


def now_timestamp() -> str:
    """Current Unix time in whole seconds, encoded as a string."""
    return str(int(time.time()))


def later_timestamp(previous: str, current: str) -> str:
    """Return whichever of two timestamps is later, so `updated_at` never moves backwards.

    Digit strings compare numerically. Anything else yields `current`.
    """
    if previous.isdigit() and current.isdigit() and int(previous) > int(current):
        return previous
    return current
