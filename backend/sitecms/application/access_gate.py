import hmac
import logging

logger = logging.getLogger(__name__)

# key of the flag kept in the client-side (signed cookie) session
AUTH_FLAG_KEY = "is_authenticated"


class AccessGate:
    """
    One shared secret, equality-compared, no hashing.

    There is no per-user identity, lockout or expiry; a successful check
    only tells the client to set its authenticated flag.
    """

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("AccessGate needs a non-empty secret")
        self._secret = secret.encode("utf-8")

    @classmethod
    def from_config(cls, config) -> "AccessGate":
        return cls(config["ADMIN_PASSWORD"])

    def authenticate(self, password) -> bool:
        if not isinstance(password, str):
            return False
        ok = hmac.compare_digest(password.encode("utf-8"), self._secret)
        if not ok:
            logger.warning("auth.rejected")
        return ok


def login(gate: AccessGate, password, client_state) -> bool:
    """Check the password and record the outcome in ``client_state``."""
    success = gate.authenticate(password)
    if success:
        client_state[AUTH_FLAG_KEY] = True
    return success


def logout(client_state) -> None:
    client_state.pop(AUTH_FLAG_KEY, None)


def is_authenticated(client_state) -> bool:
    return bool(client_state.get(AUTH_FLAG_KEY, False))
