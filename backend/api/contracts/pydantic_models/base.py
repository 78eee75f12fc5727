"""
Base Pydantic model for all API param schemas.

Key features:
- frozen=True: Immutable after normalization (prevents downstream mutation)
- populate_by_name=True: Accept both alias and field name
- extra='ignore': Ignore undeclared fields (safe)
- blank query values are dropped so field defaults apply
"""

from pydantic import BaseModel, ConfigDict, model_validator


class BaseParamsModel(BaseModel):
    """
    Base model for all API param schemas.

    All param models inherit from this to ensure consistent behavior:
    - Frozen after creation (immutable)
    - Whitespace stripped from strings
    - Both alias and field name accepted
    - Unknown fields ignored
    - "?period=" behaves exactly like an absent "period"
    """
    model_config = ConfigDict(
        frozen=True,  # Immutable after normalization
        str_strip_whitespace=True,  # Strip whitespace from strings
        populate_by_name=True,  # Accept both alias and field name
        extra='ignore',  # Ignore undeclared fields
    )

    @model_validator(mode='before')
    @classmethod
    def drop_blank_values(cls, data):
        if isinstance(data, dict):
            return {
                key: value for key, value in data.items()
                if not (isinstance(value, str) and value.strip() == '')
            }
        return data
