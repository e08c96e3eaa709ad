"""Sync transaction engine — full-snapshot replacement of a client's tables.

One call authenticates the client, purges its previous rows and inserts the
new batch inside a single transaction. Rows that fail at the storage layer
are collected instead of aborting the batch. The audit entry is written
afterwards in its own unit of work, so a logging failure never changes the
outcome of a committed sync.
"""

import logging
from collections.abc import Mapping
from typing import Any

from synctool.application.interfaces import UnitOfWork, UnitOfWorkFactory
from synctool.application.services.row_classifier import classify_row
from synctool.domain.entities import (
    CredentialRow,
    MasterRow,
    RowFailure,
    SyncLogEntry,
    SyncOutcome,
    SyncStatus,
)
from synctool.domain.exceptions import BadRequestError, RowWriteError, UnauthorizedError

logger = logging.getLogger(__name__)

MAX_STATUS_LENGTH = 20
MAX_RECORD_COUNT = 2**31 - 1  # sync_logs.records_synced is a 32-bit INTEGER
FAILED_SYNC_MESSAGE = "Sync failed: unexpected server error"


def _require_text(value: Any) -> str | None:
    """Accept non-blank strings and integers (some clients send numeric ids)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class SyncService:
    """Runs sync batches and standalone log reports for client installations."""

    def __init__(self, uow_factory: UnitOfWorkFactory):
        self._uow_factory = uow_factory

    # ── Full sync ────────────────────────────────────────────────────

    async def sync_data(
        self, client_id: Any, access_token: Any, data: Any
    ) -> SyncOutcome:
        """Replace the client's destination tables with ``data``.

        Raises:
            BadRequestError: missing credentials or ``data`` not a list of objects.
            UnauthorizedError: the id/token pair matches no client.
        """
        client_id_text = _require_text(client_id)
        token_text = _require_text(access_token)
        if not client_id_text or not token_text or not isinstance(data, list):
            logger.warning(
                "Sync attempt with missing or invalid fields "
                "(clientId=%s, accessToken=%s, dataIsArray=%s)",
                bool(client_id_text),
                bool(token_text),
                isinstance(data, list),
            )
            raise BadRequestError("Missing required fields")
        if not all(isinstance(row, Mapping) for row in data):
            logger.warning("Sync attempt with non-object rows (client %s)", client_id_text)
            raise BadRequestError("Each data row must be an object")

        authenticated = False
        try:
            async with self._uow_factory() as uow:
                # Row lock: a second sync for this client waits here until the first commits.
                client = await uow.clients.get_by_credentials(
                    client_id_text, token_text, for_update=True
                )
                if client is None:
                    # Identity is unverified, so this stays out of sync_logs.
                    logger.warning("Invalid credentials during sync (client %s)", client_id_text)
                    raise UnauthorizedError()
                authenticated = True
                outcome = await self._replace_rows(uow, client_id_text, data)
        except UnauthorizedError:
            raise
        except Exception:
            logger.exception("Sync transaction rolled back (client %s)", client_id_text)
            if authenticated:
                await self._append_log(
                    client_id_text, SyncStatus.FAILED.value, 0, FAILED_SYNC_MESSAGE
                )
            raise

        await self._append_log(
            client_id_text, outcome.status.value, outcome.record_count, outcome.log_message
        )
        logger.info(
            "Data sync finished (client %s): status=%s records=%d skipped=%d errors=%d",
            client_id_text,
            outcome.status.value,
            outcome.record_count,
            outcome.skipped_count,
            len(outcome.errors),
        )
        return outcome

    async def _replace_rows(
        self, uow: UnitOfWork, client_id: str, rows: list[Mapping[str, Any]]
    ) -> SyncOutcome:
        """Purge then insert, in input order. Runs inside the caller's transaction."""
        purged = await uow.sync_data.delete_for_client(client_id)
        logger.debug("Purged %d previous rows (client %s)", purged, client_id)

        outcome = SyncOutcome(client_id=client_id)
        for position, row in enumerate(rows):
            classified = classify_row(row)
            try:
                if isinstance(classified, CredentialRow):
                    await uow.sync_data.add_credential_row(client_id, classified)
                elif isinstance(classified, MasterRow):
                    await uow.sync_data.add_master_row(client_id, classified)
                else:
                    outcome.skipped_count += 1
                    logger.debug(
                        "Skipped row %d (client %s): %s", position, client_id, classified.reason
                    )
                    continue
            except RowWriteError as exc:
                outcome.errors.append(RowFailure(row=dict(row), error=str(exc)))
                logger.warning("Row %d not stored (client %s): %s", position, client_id, exc)
                continue
            outcome.record_count += 1

        return outcome

    # ── Standalone log report ────────────────────────────────────────

    async def record_client_log(
        self,
        client_id: Any,
        access_token: Any,
        status: Any,
        record_count: Any = None,
        message: Any = None,
    ) -> SyncLogEntry:
        """Append a log entry reported by a client that synced on its own.

        Raises:
            BadRequestError: missing credentials/status or malformed values.
            UnauthorizedError: the id/token pair matches no client.
        """
        client_id_text = _require_text(client_id)
        token_text = _require_text(access_token)
        status_text = status.strip() if isinstance(status, str) else ""
        if not client_id_text or not token_text or not status_text:
            logger.warning(
                "Log attempt with missing fields (clientId=%s, accessToken=%s, status=%s)",
                bool(client_id_text),
                bool(token_text),
                bool(status_text),
            )
            raise BadRequestError("Missing required fields")
        if len(status_text) > MAX_STATUS_LENGTH:
            raise BadRequestError(f"status must be at most {MAX_STATUS_LENGTH} characters")

        if record_count is None:
            records = 0
        elif (
            isinstance(record_count, int)
            and not isinstance(record_count, bool)
            and 0 <= record_count <= MAX_RECORD_COUNT
        ):
            records = record_count
        else:
            raise BadRequestError(
                f"recordCount must be an integer between 0 and {MAX_RECORD_COUNT}"
            )

        async with self._uow_factory() as uow:
            client = await uow.clients.get_by_credentials(client_id_text, token_text)
            if client is None:
                logger.warning("Log attempt with invalid credentials (client %s)", client_id_text)
                raise UnauthorizedError()
            entry = await uow.sync_logs.create(
                SyncLogEntry(
                    client_id=client_id_text,
                    status=status_text,
                    records_synced=records,
                    message=message if isinstance(message, str) else "",
                )
            )

        logger.info("Sync operation logged (client %s, status %s)", client_id_text, status_text)
        return entry

    # ── Helpers ──────────────────────────────────────────────────────

    async def _append_log(
        self, client_id: str, status: str, records_synced: int, message: str
    ) -> None:
        """Write one audit entry in its own transaction; failures are only logged."""
        try:
            async with self._uow_factory() as uow:
                await uow.sync_logs.create(
                    SyncLogEntry(
                        client_id=client_id,
                        status=status,
                        records_synced=records_synced,
                        message=message,
                    )
                )
        except Exception:
            logger.exception("Failed to write sync log (client %s, status %s)", client_id, status)
