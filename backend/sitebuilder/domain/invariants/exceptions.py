class InvariantViolation(Exception):
    """Raised when domain state would break a structural rule."""
