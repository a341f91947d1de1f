"""Logging filters used by the logging.json / logging-dev.json configurations.

- ExtraFieldsFilter adds the request trace id and HTTP details to records
- EndpointFilter drops access-log lines for noisy endpoints such as /health
"""

import logging

from rainharvest.common.tracing import ctx_request, ctx_response, ctx_trace_id


class ExtraFieldsFilter(logging.Filter):
    """Adds ECS-style request fields to log records.

    Enhances log records with:
    - trace_id: Value of the x-request-id header, "-" outside a traced request
    - trace.id: Same value, nested for ECS consumers
    - url.full: Full request URL
    - http.request.method: HTTP method
    - http.response.status_code: Response status code
    """

    def filter(self, record: logging.LogRecord) -> bool:
        trace_id = ctx_trace_id.get()
        req = ctx_request.get()
        resp = ctx_response.get()

        record.trace_id = trace_id or "-"
        if trace_id:
            record.trace = {"id": trace_id}

        http = {}
        if req:
            record.url = {"full": req.get("url")}
            http["request"] = {"method": req.get("method")}
        if resp:
            http["response"] = resp
        if http:
            record.http = http

        return True


class EndpointFilter(logging.Filter):
    """Filters out log messages mentioning a given endpoint path.

    Args:
        path: The endpoint path to filter (e.g., "/health")
    """

    def __init__(self, path: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._path = path

    def filter(self, record: logging.LogRecord) -> bool:
        return record.getMessage().find(self._path) == -1
