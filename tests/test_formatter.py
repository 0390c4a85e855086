"""Tests for building and rendering pretty-print formatters."""
from concurrent.futures import ThreadPoolExecutor

import pytest

from gattprint.domain import Characteristic, FieldHolder, FieldSpec, FieldType
from gattprint.errors import TemplateError
from gattprint.logging import create_logger, ring_buffer_events, ring_buffer_failures
from gattprint.parsing.ieee11073 import decode_float
from gattprint.prettyprint import build_formatter, Formatter, FormatterFactory, StringSegment, TextSegment

FAILED = "Pretty-printing failed"


def _fields(**types):
    return [FieldSpec(name=name, type=field_type) for name, field_type in types.items()]


def test_explicit_field():
    formatter = build_formatter("%(x)d", _fields(x=FieldType.UINT))
    assert formatter.render({"x": 42}) == "42"


def test_implicit_field_integer_division():
    formatter = build_formatter("%/2:d", _fields(y=FieldType.UINT))
    assert formatter.render({"y": 9}) == "4"


def test_escape_consumes_no_field():
    formatter = build_formatter("%%literal", [])
    assert formatter.render({}) == "%literal"


def test_time_range_template():
    template = "%(starttime)/60:02d:%(starttime)%60:02d - %(endtime)/60:02d:%(endtime)%60:02d"
    formatter = build_formatter(template, _fields(starttime=FieldType.UINT, endtime=FieldType.UINT))
    assert formatter.render({"starttime": 420, "endtime": 1300}) == "07:00 - 21:40"


def test_mixed_string_and_numeric_fields():
    formatter = build_formatter(
        "%s: %.1d C",
        _fields(location=FieldType.UTF8S, temperature=FieldType.FLOAT_IEEE11073),
    )
    values = [FieldHolder("location", "Ear"), FieldHolder("temperature", 36.6)]
    assert formatter.render(values) == "Ear: 36.6 C"


def test_render_lookup_is_case_insensitive():
    formatter = build_formatter("%(Rate)d bpm", _fields(Rate=FieldType.UINT))
    assert formatter.render({"rate": 61}) == "61 bpm"


def test_too_many_implicit_fields_fails_at_build():
    with pytest.raises(TemplateError):
        build_formatter("%d %d", _fields(a=FieldType.UINT))


def test_numeric_specifier_for_string_field_fails_at_build():
    with pytest.raises(TemplateError):
        build_formatter("%d", _fields(name=FieldType.UTF8S))


def test_missing_field_returns_failure_text():
    formatter = build_formatter("%(x)d and %(y)d", _fields(x=FieldType.UINT, y=FieldType.UINT))
    assert formatter.render({"x": 1}) == FAILED


def test_division_by_zero_returns_failure_text():
    formatter = build_formatter("%/0:d", _fields(x=FieldType.SINT))
    assert formatter.render({"x": 5}) == FAILED


def test_inexact_decimal_division_returns_failure_text():
    formatter = build_formatter("%/3:d", _fields(x=FieldType.FLOAT_IEEE754))
    assert formatter.render({"x": 10.0}) == FAILED


def test_failure_is_reported_to_diagnostics_logger():
    diagnostics = create_logger("tests.gattprint.formatter", ring_size=10)
    formatter = build_formatter("HR %(hr)d", _fields(hr=FieldType.UINT))
    assert formatter.render({}, diagnostics=diagnostics) == FAILED

    events = ring_buffer_events(diagnostics)
    assert events[-1]["level"] == "ERROR"
    details = events[-1]["details"]
    assert details["field_name"] == "hr"
    assert details["segment_index"] == 1
    assert details["error_type"] == "FieldLookupError"


def test_build_formatter_is_cached():
    fields = _fields(x=FieldType.UINT)
    assert build_formatter("%d", fields) is build_formatter("%d", fields)


def test_formatter_from_segments():
    formatter = Formatter("Hi %s", [TextSegment("Hi "), StringSegment("name")], failure_text="n/a")
    assert formatter.render({"name": "Ann"}) == "Hi Ann"
    assert formatter.failure_text == "n/a"


def test_decompose_is_not_implemented():
    formatter = build_formatter("%d", _fields(x=FieldType.UINT))
    with pytest.raises(NotImplementedError):
        formatter.decompose("1")


def test_concurrent_renders_share_formatter():
    formatter = build_formatter("%(x)05d", _fields(x=FieldType.UINT))
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda n: formatter.render({"x": n}), range(50)))
    assert results == [f"{n:05d}" for n in range(50)]


def test_factory_pretty_print_characteristic():
    characteristic = Characteristic.model_validate(
        {
            "name": "Heart Rate Measurement",
            "fields": [{"name": "Flags", "type": "struct"}, {"name": "Heart Rate", "type": "uint"}],
            "pretty_print": "%(Heart Rate)d bpm",
        }
    )
    formatter = FormatterFactory().pretty_print(characteristic)
    assert formatter.render([FieldHolder("Heart Rate", 72)]) == "72 bpm"


def test_factory_without_template_returns_none():
    characteristic = Characteristic(name="Battery Level", fields=_fields(level=FieldType.UINT))
    assert FormatterFactory().pretty_print(characteristic) is None


def test_factory_applies_failure_text_and_diagnostics():
    diagnostics = create_logger("tests.gattprint.factory", ring_size=5)
    factory = FormatterFactory(diagnostics=diagnostics, failure_text="unavailable")
    formatter = factory.create("%d", _fields(x=FieldType.UINT))
    assert formatter.render({}) == "unavailable"
    assert len(ring_buffer_events(diagnostics)) == 1


def test_decimal_zero_operand_returns_failure_text():
    fields = _fields(x=FieldType.FLOAT_IEEE11073)
    assert build_formatter("%(x)/0:d", fields).render({"x": 2.5}) == FAILED
    assert build_formatter("%(x)%0:d", fields).render({"x": 2.5}) == FAILED


def test_modulo_of_large_float_value():
    formatter = build_formatter("%(x)%7:d", _fields(x=FieldType.FLOAT_IEEE11073))
    # exponent 40, mantissa 1
    assert formatter.render({"x": decode_float((40 << 24) | 1)}) == "4"


def test_render_leaves_values_untouched():
    formatter = build_formatter(
        "%(x)/2:d %(name)s %(missing)d",
        _fields(x=FieldType.SINT, name=FieldType.UTF8S, missing=FieldType.SINT),
    )
    values = {"x": 9, "name": "cuff"}
    holders = [FieldHolder("x", 9), FieldHolder("name", "cuff")]
    assert formatter.render(values) == FAILED
    assert formatter.render(holders) == FAILED
    assert values == {"x": 9, "name": "cuff"}
    assert holders == [FieldHolder("x", 9), FieldHolder("name", "cuff")]


def test_decimal_signal_is_readable_in_diagnostics():
    diagnostics = create_logger("tests.gattprint.decimal_signal", ring_size=5)
    formatter = build_formatter("%/3:d", _fields(x=FieldType.FLOAT_IEEE754))
    assert formatter.render({"x": 10.0}, diagnostics=diagnostics) == FAILED
    message = ring_buffer_failures(diagnostics)[-1]["message"]
    assert "Inexact" in message
    assert "<class" not in message


def test_diagnostics_by_name():
    formatter = FormatterFactory(diagnostics="tests.gattprint.named").create("%d", _fields(x=FieldType.UINT))
    assert formatter.render({}) == FAILED
    failures = ring_buffer_failures(formatter.diagnostics)
    assert failures[-1]["error_type"] == "FieldLookupError"
