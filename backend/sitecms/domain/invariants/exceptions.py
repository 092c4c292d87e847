class InvariantViolation(Exception):
    """A record breaks a domain rule that validation should have caught."""
