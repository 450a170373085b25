"""propguard — keyed configuration properties and precondition checks."""

from propguard.config.sources import (
    CallablePropertySource,
    EnvironmentPropertySource,
    MappingPropertySource,
    PropertySource,
)
from propguard.domain.messages import format_message
from propguard.domain.property import NoSuchPropertyError, Property
from propguard.domain.validation import (
    ArgumentViolationError,
    StateViolationError,
    check_argument,
    check_not_none,
    check_state,
    validate,
)

__all__ = [
    "ArgumentViolationError",
    "CallablePropertySource",
    "EnvironmentPropertySource",
    "MappingPropertySource",
    "NoSuchPropertyError",
    "Property",
    "PropertySource",
    "StateViolationError",
    "check_argument",
    "check_not_none",
    "check_state",
    "format_message",
    "validate",
]
