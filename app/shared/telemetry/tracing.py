"""Tracing helpers for data-store operations."""

from types import TracebackType

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode


class TracedOperation:
    """Async context manager wrapping one operation in a current span.

    Marks the span ERROR and records the exception when the block raises;
    the exception always propagates.
    """

    def __init__(
        self,
        operation_name: str,
        attributes: dict[str, str | int | float | bool] | None = None,
    ) -> None:
        self.operation_name = operation_name
        self.attributes = attributes or {}
        self.tracer = trace.get_tracer(__name__)
        self._span_cm = None
        self.span: trace.Span | None = None

    async def __aenter__(self) -> "TracedOperation":
        self._span_cm = self.tracer.start_as_current_span(
            self.operation_name,
            attributes=self.attributes,
            record_exception=False,
            set_status_on_exception=False,
        )
        self.span = self._span_cm.__enter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self.span is not None:
            if exc_val is not None:
                self.span.set_status(Status(StatusCode.ERROR, str(exc_val)))
                self.span.record_exception(exc_val)
            else:
                self.span.set_status(Status(StatusCode.OK))
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc_val, exc_tb)
