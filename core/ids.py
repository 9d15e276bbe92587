import secrets
import time


def generate_external_id(prefix):
    """Human-readable id, e.g. NOTE_1718035200000_9f86d081e3."""
    return f"{prefix}_{int(time.time() * 1000)}_{secrets.token_hex(5)}"
