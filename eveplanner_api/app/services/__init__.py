"""
Service layer.

Each service wraps the SQL for one record type and receives the
``Database`` (and, where files are involved, the ``UploadStorage``)
in its constructor.  Services raise ``ValueError`` for missing records
and let ``sqlite3.Error`` propagate so handlers can map both to HTTP
statuses.
"""
