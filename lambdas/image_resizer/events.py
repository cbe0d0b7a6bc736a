from typing import NamedTuple
from urllib.parse import unquote_plus


class NotificationRecord(NamedTuple):
    bucket: str
    key: str


def _field(entry, name):
    value = entry.get(name) if isinstance(entry, dict) else None
    return value if isinstance(value, str) else ""


def parse_records(event):
    """Yield one record per S3 notification in ``event``.

    A missing or malformed batch is an empty batch and records without an
    ``s3`` entry are skipped. Records whose bucket name or object key is
    missing or of the wrong type come through with an empty field, so the
    failure is raised, and logged, while that record is being processed.
    """
    if not isinstance(event, dict):
        return

    records = event.get("Records") or []
    if not isinstance(records, list):
        return

    for record in records:
        s3 = record.get("s3") if isinstance(record, dict) else None
        if s3 is None:
            continue
        if not isinstance(s3, dict):
            s3 = {}

        bucket = _field(s3.get("bucket"), "name")
        key = unquote_plus(_field(s3.get("object"), "key"))

        yield NotificationRecord(bucket=bucket, key=key)
