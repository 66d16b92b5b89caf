from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Mutable domain entity; assignments are re-validated."""

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)
