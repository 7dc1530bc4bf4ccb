from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class GitHubModel(BaseModel):
    """
    Base for API records whose fields are all optional.

    ``None`` means the field was absent from the JSON, so a present zero
    value stays distinguishable from a missing one. Validation is strict:
    a present value must already have its field's JSON type.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict holding only the fields that are set."""
        return self.model_dump(mode="json", exclude_none=True)

    def set_fields(self) -> Dict[str, Any]:
        """Field values that are present, in declaration order."""
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if getattr(self, name) is not None
        }

    def __str__(self) -> str:
        rendered = ", ".join(
            f"{name}={value!r}" if not isinstance(value, GitHubModel) else f"{name}={value}"
            for name, value in self.set_fields().items()
        )
        return f"{type(self).__name__}({rendered})"
