# SPDX-License-Identifier: MIT


class EntityValidationError(Exception):
    """Raised when a create or update would break an entity invariant."""

    pass


class EntityNotFoundError(Exception):
    """Raised when an entity id does not exist."""

    pass


def validate_name(kind: str, name: str, min_length: int, max_length: int) -> str:
    """Strip a name and check its length, returning the stripped name."""
    stripped = name.strip()
    if len(stripped) == 0:
        raise EntityValidationError(f"{kind} name is required")
    if len(stripped) < min_length:
        raise EntityValidationError(
            f"{kind} name must be at least {min_length} characters"
        )
    if len(stripped) > max_length:
        raise EntityValidationError(
            f"{kind} name must be at most {max_length} characters"
        )
    return stripped
