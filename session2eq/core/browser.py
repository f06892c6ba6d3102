"""Read-only table browsing for a single channel."""

from session2eq.constants import BROWSABLE_TABLES, DEFAULT_SNAPSHOT_ID


def browse_table(session, table, channel_number, snapshot_id=DEFAULT_SNAPSHOT_ID):
    # Table names cannot be bound parameters, so only known names are accepted.
    if table not in BROWSABLE_TABLES:
        raise ValueError(
            f"unknown table {table!r}; expected one of {', '.join(BROWSABLE_TABLES)}"
        )
    sql = f"SELECT * FROM {table} WHERE channelNumber = ? AND snapshotId = ?"
    return session.query(sql, (channel_number, snapshot_id))
