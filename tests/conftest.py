"""
Pytest configuration and shared fixtures for request_parser tests.

Requests are real Request objects, collaborators are plain functions.
No mocks unless a test needs to count calls.
"""

import os

import pytest

from request_parser import Request

# Grammar validation is on by default in tests regardless of the shell environment.
os.environ.pop("REQUEST_PARSER_DISABLE_REGEX", None)

USER_MAP = {
    "8439235fe34abc37c832fadd21": "max",
    "8439235fe34abc37c832faddff": "monika",
}


async def lookup_user(headers):
    """Auth function resolving the cookie header to a user name."""
    cookie = headers.get("cookie")
    if not cookie:
        raise LookupError("no cookie header found")
    if cookie not in USER_MAP:
        raise LookupError("no username to cookie found")
    return USER_MAP[cookie]


@pytest.fixture
def complete_request() -> Request:
    """Request with every section populated, including markup to sanitize."""
    return Request(
        body={
            "id": 42,
            "user": {"name": "Max Mustermann", "age": 21},
            "bool": True,
        },
        params={
            "id": -2,
            "malicious": "This is<html> a <script>You are doomed!</script>sanitize </html>test!",
        },
        query={
            "bool": False,
            "malicious": "This string is <html><script>You are doomed!</script>not </html>malicious!",
        },
        headers={
            "cookie": "8439235fe34abc37c832fadd21",
            "lang": "de",
        },
    )


@pytest.fixture
def missing_request() -> Request:
    """Request lacking most of the fields the tests ask for."""
    return Request(
        body={"id": 42},
        params={},
        query={"bool": False},
        headers={"lang": "de"},
    )


@pytest.fixture
def auth_function():
    return lookup_user
