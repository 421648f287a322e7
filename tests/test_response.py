"""Tests for selecting and checking the STS header of a response."""

from http.client import parse_headers
import io

import httpx
import pytest
from mitmproxy import http

from hstspreload.issues import Code, Issue, Issues
from hstspreload.response import (
    Mode,
    check_response,
    header_values,
    preloadable_response,
    removable_response,
    select_header,
)


def make_response(*values):
    return http.Response.make(
        200,
        b"<div>ABC</div>",
        [(b"Strict-Transport-Security", v.encode()) for v in values],
    )


response_tests = [
    # preloadable_response
    (
        preloadable_response,
        "good header",
        ["max-age=10886400; includeSubDomains; preload"],
        Issues(),
    ),
    (
        preloadable_response,
        "missing preload",
        ["max-age=10886400; includeSubDomains"],
        Issues(errors=[Issue(Code.PRELOADABLE_PRELOAD_MISSING)]),
    ),
    (
        preloadable_response,
        "missing includeSubDomains",
        ["preload; max-age=10886400"],
        Issues(errors=[Issue(Code.PRELOADABLE_INCLUDE_SUB_DOMAINS_MISSING)]),
    ),
    (
        preloadable_response,
        "single header, multiple errors",
        ["includeSubDomains; max-age=100"],
        Issues(
            errors=[
                Issue("header.preloadable.preload.missing"),
                Issue("header.preloadable.max_age.too_low"),
            ]
        ),
    ),
    (
        preloadable_response,
        "empty header",
        [""],
        Issues(
            errors=[
                Issue("header.preloadable.include_sub_domains.missing"),
                Issue("header.preloadable.preload.missing"),
                Issue("header.preloadable.max_age.missing"),
            ],
            warnings=[Issue("header.parse.empty")],
        ),
    ),
    (
        preloadable_response,
        "missing header",
        [],
        Issues(errors=[Issue("response.no_header")]),
    ),
    (
        preloadable_response,
        "multiple headers",
        ["max-age=10", "max-age=20", "max-age=30"],
        Issues(errors=[Issue("response.multiple_headers")]),
    ),
    # removable_response
    (
        removable_response,
        "no preload",
        ["max-age=15768000; includeSubDomains"],
        Issues(),
    ),
    (
        removable_response,
        "preload present",
        ["max-age=15768000; includeSubDomains; preload"],
        Issues(errors=[Issue("header.removable.contains.preload")]),
    ),
    (
        removable_response,
        "preload only",
        ["preload"],
        Issues(
            errors=[
                Issue("header.removable.contains.preload"),
                Issue("header.removable.missing.max_age"),
            ]
        ),
    ),
    (
        removable_response,
        "multiple good headers",
        ["max-age=15768000", "max-age=15768000"],
        Issues(errors=[Issue("response.multiple_headers")]),
    ),
]


@pytest.mark.parametrize(
    "function, description, hsts_headers, expected",
    response_tests,
    ids=[t[1] for t in response_tests],
)
def test_preloadable_and_removable_response(
    function, description, hsts_headers, expected
):
    header, issues = function(make_response(*hsts_headers))

    if len(hsts_headers) == 1:
        assert header == hsts_headers[0]
    else:
        assert header is None
    assert issues == expected


def test_too_low_message_contains_max_age():
    _, issues = preloadable_response(make_response("includeSubDomains; max-age=100"))
    assert issues.errors[1].message == (
        "The max-age must be at least 10886400 seconds (== 18 weeks), "
        "but the header currently only has max-age=100."
    )


def test_multiple_headers_message_counts_headers():
    _, issues = preloadable_response(make_response("max-age=10", "max-age=20"))
    assert "number of HSTS headers: 2" in issues.errors[0].message


def test_select_header():
    assert select_header(["max-age=0"]) == ("max-age=0", None)
    assert select_header([]) == (None, Issue(Code.NO_HEADER))
    assert select_header(["a", "b"]) == (None, Issue(Code.MULTIPLE_HEADERS))


def test_header_name_is_case_insensitive():
    resp = http.Response.make(
        200, b"", [(b"strict-transport-security", b"max-age=10886400; includeSubDomains; preload")]
    )
    header, issues = preloadable_response(resp)
    assert header == "max-age=10886400; includeSubDomains; preload"
    assert issues.passed


def test_other_headers_are_ignored():
    resp = http.Response.make(
        200, b"", [(b"Expect-CT", b"max-age=0"), (b"Content-Type", b"text/html")]
    )
    assert preloadable_response(resp) == (None, Issues(errors=[Issue(Code.NO_HEADER)]))


def test_httpx_response():
    resp = httpx.Response(
        200,
        headers=[
            ("Strict-Transport-Security", "max-age=10"),
            ("strict-transport-security", "max-age=20"),
        ],
    )
    assert header_values(resp) == ["max-age=10", "max-age=20"]
    assert removable_response(resp) == (
        None,
        Issues(errors=[Issue(Code.MULTIPLE_HEADERS)]),
    )

    resp = httpx.Response(200, headers={"Strict-Transport-Security": "max-age=1"})
    assert removable_response(resp) == ("max-age=1", Issues())


def test_http_client_message():
    msg = parse_headers(
        io.BytesIO(b"Strict-Transport-Security: max-age=31536000; preload\r\n\r\n")
    )
    assert header_values(msg) == ["max-age=31536000; preload"]
    empty = parse_headers(io.BytesIO(b"\r\n"))
    assert header_values(empty) == []


def test_unusable_response_object():
    with pytest.raises(TypeError):
        preloadable_response({"Strict-Transport-Security": "max-age=0"})


def test_response_is_not_mutated():
    resp = make_response("max-age=100; preload")
    before = resp.headers.fields
    preloadable_response(resp)
    removable_response(resp)
    assert resp.headers.fields == before


def test_check_response_mode():
    resp = make_response("max-age=10886400; includeSubDomains; preload")
    assert check_response(resp)[1].passed
    assert check_response(resp, Mode.PRELOADABLE)[1].passed
    _, issues = check_response(resp, "removable")
    assert issues == Issues(errors=[Issue(Code.REMOVABLE_CONTAINS_PRELOAD)])
