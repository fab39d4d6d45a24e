"""Best-effort PostgreSQL liveness probe used by the health check.

Nothing here keeps a connection pool alive between requests: every probe
builds a throw-away ``NullPool`` engine, runs ``SELECT 1`` on a single
connection and disposes of the engine again, whatever the outcome.
"""

import asyncio
import logging
import ssl as _ssl
from dataclasses import dataclass
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

logger = logging.getLogger(__name__)

# Hosting platforms hand out libpq-style URLs; SQLAlchemy needs the driver name.
_SCHEME_ALIASES: dict[str, str] = {
    "postgres": "postgresql+asyncpg",
    "postgresql": "postgresql+asyncpg",
}


@dataclass(frozen=True, slots=True)
class DatabaseProbe:
    """Outcome of a single liveness probe."""

    connected: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "DatabaseProbe":
        return cls(connected=True)

    @classmethod
    def failed(cls, message: str) -> "DatabaseProbe":
        return cls(connected=False, error=message)


def _asyncpg_url(url: str) -> tuple[str, dict]:
    """Convert a database URL for asyncpg compatibility.

    ``postgres://`` and ``postgresql://`` schemes are rewritten to
    ``postgresql+asyncpg://``.  asyncpg does not accept ``sslmode`` as a
    query parameter (it expects ``ssl`` to be passed via ``connect_args``),
    so ``sslmode`` is stripped from the URL and translated into the extra
    ``connect_args`` returned alongside the cleaned URL.
    """
    parts = urlsplit(url)
    if parts.scheme in _SCHEME_ALIASES:
        parts = parts._replace(scheme=_SCHEME_ALIASES[parts.scheme])

    qs = parse_qs(parts.query)
    connect_args: dict = {}

    if "sslmode" in qs:
        mode = qs.pop("sslmode")[0]
        if mode in ("require", "verify-ca", "verify-full"):
            connect_args["ssl"] = _ssl.create_default_context()
        parts = parts._replace(query=urlencode(qs, doseq=True))

    return urlunsplit(parts), connect_args


def create_probe_engine(url: str, timeout: float) -> AsyncEngine:
    """Return a non-pooling async engine whose connects give up after *timeout*."""
    clean_url, connect_args = _asyncpg_url(url)
    connect_args.setdefault("timeout", timeout)
    return create_async_engine(
        clean_url,
        poolclass=NullPool,
        connect_args=connect_args,
    )


def _describe(exc: BaseException, timeout: float) -> str:
    if isinstance(exc, TimeoutError):
        return str(exc) or f"database probe timed out after {timeout:g}s"
    return str(exc) or type(exc).__name__


async def probe_database(url: str, timeout: float) -> DatabaseProbe:
    """Open one connection to *url*, run ``SELECT 1`` and close it again.

    Never raises for database problems: a malformed URL, a missing driver, a
    refused connection or a probe exceeding *timeout* seconds all come back
    as ``DatabaseProbe(connected=False, error=...)``.
    """
    engine: AsyncEngine | None = None
    try:
        engine = create_probe_engine(url, timeout)
        async with asyncio.timeout(timeout):
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
    except Exception as exc:
        message = _describe(exc, timeout)
        logger.warning("Database probe failed: %s", message)
        return DatabaseProbe.failed(message)
    finally:
        if engine is not None:
            await engine.dispose()

    return DatabaseProbe.ok()
