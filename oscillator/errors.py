class InvalidParameter(ValueError):
    """Raised when a circuit, path or plot is built from unusable values."""


def require_positive(name, value):
    """Return `value` as a float, raising InvalidParameter unless it is finite and > 0."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} must be a number, got {value!r}") from None
    if not (value > 0.0 and value != float("inf")):
        raise InvalidParameter(f"{name} must be finite and positive, got {value!r}")
    return value
