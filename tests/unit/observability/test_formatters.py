"""Unit tests for the console and structured formatters."""

from __future__ import annotations

import dataclasses
import json
from datetime import UTC, datetime

import pytest
from structlog.testing import capture_logs

from diagnostics.kernel.time import FrozenClock
from diagnostics.observability.logging import (
    ConsoleFormatter,
    Event,
    HttpRequestSnapshot,
    Level,
    StructuredFormatter,
)
from diagnostics.observability.logging.formatters import (
    DATA_FAILURE_MESSAGE,
    ERROR_EVENT_TYPE,
    encode_data,
    level_colors,
)
from diagnostics.observability.tracing import SpanId, parse_trace_id


@dataclasses.dataclass
class Address:
    house_number: int
    street: str
    postcode: str


@dataclasses.dataclass
class Person:
    first_name: str
    last_name: str
    pets: list[str] | None = None
    age: int = 0
    address: Address | None = None


PERSON = Person(first_name="Sue", last_name="Doe", age=45, address=Address(3, "x", "Y"))
PERSON_JSON = (
    '{"first_name":"Sue","last_name":"Doe","pets":null,"age":45,'
    '"address":{"house_number":3,"street":"x","postcode":"Y"}}'
)

HTTP_REQUEST = HttpRequestSnapshot(
    request_method="GET",
    request_url="http://example.org/",
    request_size="132",
    user_agent="abc",
    remote_ip="127.0.0.1",
    referer="google.com",
    protocol="HTTP/1.1",
)


def _raised(exc: Exception) -> Exception:
    try:
        raise exc
    except Exception as caught:  # noqa: BLE001
        return caught


# ---------------------------------------------------------------------------
# StructuredFormatter
# ---------------------------------------------------------------------------


class TestStructuredFormatterBasics:
    @pytest.mark.parametrize(
        ("level", "message"),
        [
            (Level.DEBUG, "debug"),
            (Level.INFO, "info"),
            (Level.NOTICE, "notice"),
            (Level.WARNING, "warning"),
            (Level.ERROR, "error"),
            (Level.CRITICAL, "critical"),
            (Level.ALERT, "alert"),
            (Level.EMERGENCY, "emergency"),
        ],
    )
    def test_bare_event(self, level: Level, message: str) -> None:
        out = StructuredFormatter().format(Event(level=level, message=message))
        assert out == f'{{"severity":"{level.name}","message":"{message}"}}'

    def test_bare_info_event_exact(self) -> None:
        out = StructuredFormatter().format(Event(level=Level.INFO, message="info"))
        assert out == '{"severity":"INFO","message":"info"}'

    def test_message_is_json_escaped(self) -> None:
        out = StructuredFormatter().format(Event(level=Level.INFO, message='say "hi"\n\tbye'))
        assert out == '{"severity":"INFO","message":"say \\"hi\\"\\n\\tbye"}'
        assert json.loads(out)["message"] == 'say "hi"\n\tbye'

    def test_html_and_line_separators_are_escaped(self) -> None:
        out = StructuredFormatter().format(
            Event(level=Level.INFO, message="<a href=\"x\">&</a>\u2028\u2029", labels={"k": "<v>"})
        )
        assert out == (
            r'{"severity":"INFO","message":"\u003ca href=\"x\"\u003e\u0026\u003c/a\u003e\u2028\u2029",'
            r'"logging.googleapis.com/labels":{"k":"\u003cv\u003e"}}'
        )
        assert json.loads(out)["message"] == "<a href=\"x\">&</a>\u2028\u2029"

    def test_non_ascii_kept_verbatim(self) -> None:
        out = StructuredFormatter().format(Event(level=Level.INFO, message="héllo ✓"))
        assert '"message":"héllo ✓"' in out

    def test_unnamed_level_renders_default(self) -> None:
        out = StructuredFormatter().format(Event(level=Level(150), message="x"))
        assert out == '{"severity":"DEFAULT","message":"x"}'

    def test_data_dataclass(self) -> None:
        out = StructuredFormatter().format(Event(level=Level.ALERT, message="foo bar", data=Address(1, "Foo", "Bar")))
        assert out == (
            '{"severity":"ALERT","message":"foo bar",'
            '"data":{"house_number":1,"street":"Foo","postcode":"Bar"}}'
        )

    def test_data_nested_dataclass(self) -> None:
        out = StructuredFormatter().format(Event(level=Level.INFO, message="yada", data=PERSON))
        assert out == f'{{"severity":"INFO","message":"yada","data":{PERSON_JSON}}}'

    def test_data_plain_values(self) -> None:
        out = StructuredFormatter().format(Event(level=Level.INFO, message="m", data={"n": [1, 2.5, True]}))
        assert out.endswith(',"data":{"n":[1,2.5,true]}}')

    def test_data_datetime_and_set(self) -> None:
        ts = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)
        record = json.loads(StructuredFormatter().format(Event(message="m", data={"at": ts, "tags": {"a"}})))
        assert record["data"] == {"at": "2024-06-15T12:00:00+00:00", "tags": ["a"]}


class TestStructuredFormatterFields:
    def test_service_context(self) -> None:
        out = StructuredFormatter().format(
            Event(
                level=Level.INFO,
                message="this is a stupid message",
                service_name="foo-bar",
                service_version="v1.0.0",
                data=PERSON,
            )
        )
        assert out == (
            '{"severity":"INFO","message":"this is a stupid message",'
            '"serviceContext.service":"foo-bar","serviceContext.version":"v1.0.0",'
            f'"data":{PERSON_JSON}}}'
        )

    def test_labels_sorted_ascii(self) -> None:
        out = StructuredFormatter().format(
            Event(level=Level.INFO, message="this is a stupid message", labels={"a": "A", "B": "b"}, data=PERSON)
        )
        assert out == (
            '{"severity":"INFO","message":"this is a stupid message",'
            '"logging.googleapis.com/labels":{"B":"b","a":"A"},'
            f'"data":{PERSON_JSON}}}'
        )

    def test_empty_labels_omitted(self) -> None:
        out = StructuredFormatter().format(Event(level=Level.INFO, message="m", labels={}))
        assert "labels" not in out

    def test_all_fields_in_fixed_order(self) -> None:
        out = StructuredFormatter().format(
            Event(
                level=Level.INFO,
                message="this is a stupid message",
                service_name="foo-bar",
                service_version="v1.0.0",
                http_request=HTTP_REQUEST,
                labels={"a": "A", "B": "b"},
                data=PERSON,
            )
        )
        assert out == (
            '{"severity":"INFO","message":"this is a stupid message",'
            '"serviceContext.service":"foo-bar","serviceContext.version":"v1.0.0",'
            '"logging.googleapis.com/labels":{"B":"b","a":"A"},'
            '"httpRequest":{"requestMethod":"GET","requestUrl":"http://example.org/",'
            '"requestSize":"132","userAgent":"abc","remoteIp":"127.0.0.1","serverIp":"",'
            '"referer":"google.com","protocol":"HTTP/1.1"},'
            f'"data":{PERSON_JSON}}}'
        )

    def test_trace_fields(self) -> None:
        event = Event(
            level=Level.INFO,
            message="m",
            trace_id=parse_trace_id("4bf92f3577b34da6a3ce929d0e0e4736"),
            span_id=SpanId.from_decimal(2205310701640571284),
            service_name="svc",
        )
        assert StructuredFormatter().format(event) == (
            '{"severity":"INFO","message":"m",'
            '"logging.googleapis.com/trace_sampled":"true",'
            '"logging.googleapis.com/trace":"4bf92f3577b34da6a3ce929d0e0e4736",'
            '"logging.googleapis.com/spanId":"2205310701640571284",'
            '"serviceContext.service":"svc"}'
        )

    def test_span_without_trace_is_omitted(self) -> None:
        out = StructuredFormatter().format(Event(message="m", span_id=SpanId.from_decimal(7)))
        assert "spanId" not in out
        assert "trace" not in out

    def test_trace_without_span(self) -> None:
        event = Event(message="m", trace_id=parse_trace_id("4bf92f3577b34da6a3ce929d0e0e4736"))
        out = StructuredFormatter().format(event)
        assert '"logging.googleapis.com/trace":"4bf92f3577b34da6a3ce929d0e0e4736"' in out
        assert "spanId" not in out


class TestStructuredFormatterErrors:
    def test_error_with_message(self) -> None:
        event = Event(level=Level.ERROR, message="boom", exception=_raised(ValueError("kaboom")))
        out = StructuredFormatter().format(event)
        record = json.loads(out)
        assert list(record) == ["severity", "@type", "message"]
        assert record["@type"] == ERROR_EVENT_TYPE
        assert record["message"].startswith("boom\n\nError:\n\nkaboom\n\nTraceback (most recent call last)")
        assert "ValueError: kaboom" in record["message"]

    def test_error_without_message(self) -> None:
        event = Event(level=Level.ERROR, exception=_raised(RuntimeError("bad")))
        record = json.loads(StructuredFormatter().format(event))
        assert record["message"].startswith("bad\n\nTraceback")

    def test_unraised_error_uses_current_stack(self) -> None:
        event = Event(level=Level.ERROR, message="m", exception=KeyError("k"))
        record = json.loads(StructuredFormatter().format(event))
        assert record["message"].startswith("m\n\nError:\n\n'k'\n\n")
        assert "test_unraised_error_uses_current_stack" in record["message"]


class TestStructuredFormatterDataFailures:
    def test_unserialisable_object_becomes_placeholder(self) -> None:
        out = StructuredFormatter().format(Event(level=Level.INFO, message="m", data=object()))
        record = json.loads(out)
        assert record["message"] == "m"
        assert record["data"].startswith(DATA_FAILURE_MESSAGE + "\n\nError: ")

    def test_circular_reference_becomes_placeholder(self) -> None:
        loop: dict = {}
        loop["self"] = loop
        record = json.loads(encode_data(loop))
        assert record.startswith(DATA_FAILURE_MESSAGE)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_floats_become_placeholder(self, value: float) -> None:
        def reject(token: str) -> None:
            raise AssertionError(f"non-standard JSON constant {token}")

        out = StructuredFormatter().format(Event(level=Level.INFO, message="m", data={"ratio": value}))
        record = json.loads(out, parse_constant=reject)
        assert record["data"].startswith(DATA_FAILURE_MESSAGE + "\n\nError: ")

    def test_failing_to_dict_becomes_placeholder(self) -> None:
        class Broken:
            def to_dict(self) -> dict:
                raise KeyError("missing")

        out = StructuredFormatter().format(Event(level=Level.INFO, message="m", data=Broken()))
        record = json.loads(out)
        assert record["message"] == "m"
        assert record["data"].startswith(DATA_FAILURE_MESSAGE)
        assert "missing" in record["data"]

    def test_failure_is_logged(self) -> None:
        with capture_logs() as logs:
            encode_data(object())
        assert logs[0]["event"] == "log.data_serialization_failed"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["code"] == "serialization_error"


# ---------------------------------------------------------------------------
# ConsoleFormatter
# ---------------------------------------------------------------------------


class TestConsoleFormatter:
    def _clock(self) -> FrozenClock:
        return FrozenClock(datetime(2024, 6, 15, 12, 0, 0, 123456, tzinfo=UTC))

    def test_info_line(self) -> None:
        out = ConsoleFormatter(self._clock()).format(Event(level=Level.INFO, message="hello"))
        assert out == (
            "\033[0;34m[2024-06-15 12:00:00.123]\033[0m "
            "\033[0;37m[00000000000000000000000000000000] "
            "\033[0;37m[INF]\033[0m hello\033[0m"
        )

    def test_trace_id_is_shown(self) -> None:
        event = Event(level=Level.INFO, message="m", trace_id=parse_trace_id("4bf92f3577b34da6a3ce929d0e0e4736"))
        out = ConsoleFormatter(self._clock()).format(event)
        assert "[4bf92f3577b34da6a3ce929d0e0e4736]" in out

    def test_timestamp_is_utc(self) -> None:
        from datetime import timedelta, timezone

        local = datetime(2024, 6, 15, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert ConsoleFormatter(FrozenClock(local)).timestamp() == "2024-06-15 12:00:00.000"

    def test_error_appended_after_blank_line(self) -> None:
        event = Event(level=Level.ERROR, message="failed", exception=_raised(ValueError("nope")))
        out = ConsoleFormatter(self._clock()).format(event)
        assert "failed\n\nnope\n\nTraceback (most recent call last)" in out
        assert out.endswith("\033[0m")

    @pytest.mark.parametrize(
        ("level", "severity", "text"),
        [
            (Level.DEBUG, "\033[0;90m", "\033[0;90m"),
            (Level.INFO, "\033[0;37m", "\033[0m"),
            (Level.NOTICE, "\033[0;92m", "\033[0m"),
            (Level.WARNING, "\033[0;93m", "\033[0m"),
            (Level.ERROR, "\033[0;91m", "\033[0m"),
            (Level.CRITICAL, "\033[0;91m", "\033[0;91m"),
            (Level.ALERT, "\033[0;31m", "\033[0m"),
            (Level.EMERGENCY, "\033[0;31m", "\033[0;31m"),
            (Level.DEFAULT, "\033[0;97m", "\033[0m"),
            (Level(450), "\033[0;97m", "\033[0m"),
        ],
    )
    def test_level_colors(self, level: Level, severity: str, text: str) -> None:
        assert level_colors(level) == (severity, text)
        out = ConsoleFormatter(self._clock()).format(Event(level=level, message="m"))
        assert f"{severity}[{level.short}]{text} m" in out
