import logging
import re
import sys

DOMAIN_AUTH = "auth"
DOMAIN_CHIRPS = "chirps"
DOMAIN_ADMIN = "admin"


def get_domain_logger(name: str, domain: str) -> logging.LoggerAdapter[logging.Logger]:
    """Return a logger that tags every record with an API area (auth, chirps, admin)."""
    return logging.LoggerAdapter(logging.getLogger(name), {"domain": domain})


class DomainDefaultFilter(logging.Filter):
    """Records from uvicorn, SQLAlchemy and plain module loggers carry no domain; tag them "http"."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "domain"):
            record.domain = "http"  # type: ignore[attr-defined]
        return True


# Stored hashes and plaintext passwords are the only secrets this service handles.
_STORED_HASH = re.compile(r"\$pbkdf2-sha256\$[^\s,;'\"]+")
_PASSWORD_FIELD = re.compile(r"(?i)((?:hashed_)?password['\"]?\s*[=:]\s*['\"]?)([^\s,;'\"]+)")


def redact_secrets(message: str) -> str:
    text = _STORED_HASH.sub("[REDACTED]", str(message or ""))
    return _PASSWORD_FIELD.sub(r"\1[REDACTED]", text)


class SecretRedactionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact_secrets(record.getMessage())
        record.args = ()
        return True


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | [%(domain)s] | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(DomainDefaultFilter())
        handler.addFilter(SecretRedactionFilter())
    # Statements logged at INFO carry bound parameters, password hashes included.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.WARNING)
