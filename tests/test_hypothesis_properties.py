"""Hypothesis property-based tests for field extraction.

Properties tested:
- Optional specifiers never report missing fields
- Required specifiers always report missing fields as <section>_missing_<field>
- Excluded value kinds are never sanitized
- Header lookups ignore case, other sections do not
- always_parse entries come first and skip grammar validation
"""

from unittest.mock import MagicMock

from hypothesis import given, settings
from hypothesis import strategies as st

from request_parser import Request, RequestParser

# =============================================================================
# Strategy Definitions
# =============================================================================

field_names = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-",
    min_size=1,
    max_size=20,
)

sections = st.sampled_from([("B", "body"), ("H", "headers"), ("P", "params"), ("Q", "query")])

excluded_values = st.one_of(
    st.booleans(),
    st.integers(min_value=-1_000_000, max_value=1_000_000),
    st.floats(allow_nan=False, allow_infinity=False),
)


# =============================================================================
# Properties
# =============================================================================


@given(section=sections, name=field_names)
@settings(max_examples=100)
def test_optional_missing_field_is_never_an_error(section, name):
    prefix, attr = section
    result = RequestParser().parse_sync(Request(), [f"{prefix}{name}?"])
    assert result.ok is True
    assert getattr(result, attr)[name] is None


@given(section=sections, name=field_names)
@settings(max_examples=100)
def test_required_missing_field_is_always_an_error(section, name):
    prefix, attr = section
    failure = RequestParser().parse_sync(Request(), [f"{prefix}{name}"])
    assert failure.error == "parser_error"
    assert failure.errors == (f"{attr}_missing_{name}",)


@given(section=sections, name=field_names, value=excluded_values)
@settings(max_examples=100)
def test_excluded_kinds_are_never_sanitized(section, name, value):
    prefix, attr = section
    sanitizer = MagicMock(return_value="sanitized")
    lookup = name.lower() if attr == "headers" else name
    request = Request(**{attr: {lookup: value}})

    result = RequestParser(sanitize_function=sanitizer).parse_sync(request, [f"{prefix}*{name}"])

    assert getattr(result, attr)[name] is value
    sanitizer.assert_not_called()


@given(name=field_names, value=st.text(max_size=10))
@settings(max_examples=100)
def test_header_lookup_ignores_case(name, value):
    request = Request(headers={name.lower(): value})
    result = RequestParser().parse_sync(request, [f"H{name.upper()}"])
    assert result.headers[name.upper()] == value


@given(name=field_names.filter(lambda n: n.lower() != n), value=st.text(max_size=10))
@settings(max_examples=100)
def test_body_lookup_is_case_sensitive(name, value):
    request = Request(body={name.lower(): value})
    failure = RequestParser().parse_sync(request, [f"B{name}"])
    assert failure.errors == (f"body_missing_{name}",)


@given(names=st.lists(field_names, min_size=1, max_size=5, unique=True))
@settings(max_examples=50)
def test_always_parse_first_and_unvalidated(names):
    # "Z!" would fail the grammar if it were caller-supplied.
    parser = RequestParser(always_parse=["Z!", *(f"B{n}?" for n in names)])
    failure = parser.parse_sync(Request(), ["Qmissing"])
    assert failure.errors == ("incorrectKey_Z!", "query_missing_missing")
