"""
Error log data models.

ErrorRecord is the caller-supplied snapshot of one application error.
ErrorDocument wraps it with a generated id for persistence, and
ErrorLogEntry is what reads hand back to the caller.
"""
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ErrorRecord:
    """Snapshot of a single application error event."""

    type: str
    message: str
    source: str
    detail: str
    time: datetime

    # Context captured by the host
    host_name: str = ""
    user: str = ""
    application_name: str = ""
    status_code: int = 0
    web_host_html_message: str = ""
    server_variables: Dict[str, str] = field(default_factory=dict)
    query_string: Dict[str, str] = field(default_factory=dict)
    form: Dict[str, str] = field(default_factory=dict)
    cookies: Dict[str, str] = field(default_factory=dict)
    attributes: Dict[str, Any] = field(default_factory=dict)  # JSON-compatible values

    def sort_key(self) -> int:
        """Microseconds since the epoch, used to order records newest first.

        Naive times are taken as UTC.
        """
        moment = self.time
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        delta = moment - datetime(1970, 1, 1, tzinfo=timezone.utc)
        return (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dict."""
        return {
            "type": self.type,
            "message": self.message,
            "source": self.source,
            "detail": self.detail,
            "time": self.time.isoformat(),
            "host_name": self.host_name,
            "user": self.user,
            "application_name": self.application_name,
            "status_code": self.status_code,
            "web_host_html_message": self.web_host_html_message,
            "server_variables": dict(self.server_variables),
            "query_string": dict(self.query_string),
            "form": dict(self.form),
            "cookies": dict(self.cookies),
            "attributes": dict(self.attributes),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ErrorRecord":
        """Build a record from the output of to_dict()."""
        return cls(
            type=data["type"],
            message=data["message"],
            source=data["source"],
            detail=data["detail"],
            time=datetime.fromisoformat(data["time"]),
            host_name=data.get("host_name", ""),
            user=data.get("user", ""),
            application_name=data.get("application_name", ""),
            status_code=data.get("status_code", 0),
            web_host_html_message=data.get("web_host_html_message", ""),
            server_variables=dict(data.get("server_variables") or {}),
            query_string=dict(data.get("query_string") or {}),
            form=dict(data.get("form") or {}),
            cookies=dict(data.get("cookies") or {}),
            attributes=dict(data.get("attributes") or {}),
        )


@dataclass(frozen=True)
class ErrorDocument:
    """Persisted unit: a generated id paired with the record, stored verbatim."""

    id: str
    error: ErrorRecord

    def to_json(self) -> str:
        return json.dumps({"id": self.id, "error": self.error.to_dict()})

    @classmethod
    def from_json(cls, raw: str) -> "ErrorDocument":
        data = json.loads(raw)
        return cls(id=data["id"], error=ErrorRecord.from_dict(data["error"]))


@dataclass(frozen=True)
class ErrorLogEntry:
    """An error read back from a log, with the id it was stored under."""

    id: str
    error: ErrorRecord
    log_name: Optional[str] = None  # name of the log that produced the entry
