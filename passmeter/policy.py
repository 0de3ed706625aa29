"""
passmeter.policy

Immutable policy configuration for the strength evaluator:
- Policy: minimum length, requirement flags and the common-pattern denylist
- Policy.from_mapping(data): build a policy from a settings dict
  (snake_case or camelCase keys)
- CRITERIA: the fixed, ordered names of the seven criteria
"""

from typing import Any, Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .exceptions import PolicyError

# Passwords shorter than this are not assessed at all (zero result).
# Independent of Policy.min_length.
MINIMUM_EVALUABLE_LENGTH = 3

COMMON_PATTERNS: Tuple[str, ...] = ("123456", "password", "qwerty", "letmein", "abc123")

CRITERIA: Tuple[str, ...] = (
    "length",
    "uppercase",
    "lowercase",
    "numbers",
    "specialChars",
    "noRepeatedChars",
    "noCommonPatterns",
)


class Policy(BaseModel):
    """Requirement settings; camelCase aliases (minLength, requireUppercase, ...) are accepted."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    min_length: int = 8
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special_chars: bool = True
    prevent_repeated_chars: bool = True
    prevent_common_patterns: bool = True
    common_patterns: Tuple[str, ...] = COMMON_PATTERNS

    @field_validator("min_length", mode="before")
    @classmethod
    def _reject_bool_length(cls, value: Any) -> Any:
        # bool is an int subclass
        if isinstance(value, bool):
            raise ValueError("expected an integer")
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Policy":
        """
        Build a Policy from a dict of settings.
        Keys may be field names or camelCase aliases; when both spellings of a
        field appear, the later key wins. Unknown keys are ignored.
        Raises PolicyError if a value doesn't validate.
        """
        normalized: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            normalized[_FIELD_BY_ALIAS.get(key, key)] = value
        try:
            return cls.model_validate(normalized)
        except ValidationError as e:
            err = e.errors()[0]
            name = err["loc"][0] if err["loc"] else ""
            field = cls.model_fields[name].alias if name in cls.model_fields else str(name)
            raise PolicyError(field, err.get("input"), err["msg"]) from e

    def replace(self, **changes: Any) -> "Policy":
        """Return a copy with the given (snake_case) fields replaced; None values are skipped."""
        merged = self.model_dump()
        merged.update({k: v for k, v in changes.items() if v is not None})
        return Policy.from_mapping(merged)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


_FIELD_BY_ALIAS = {info.alias: name for name, info in Policy.model_fields.items()}

DEFAULT_POLICY = Policy()
