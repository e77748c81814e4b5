# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket

import httpx

from form3 import config
from form3.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from form3.errors import (
    ApiError,
    DecodeError,
    ErrorCategory,
    Form3Error,
    InvalidURLError,
    SerializationError,
    TransportError,
    categorize_exception,
)
from form3.http.models import HttpRequest, HttpResponse


def test_client_settings_defaults():
    settings = config.ClientSettings()
    assert settings.base_url == DEFAULT_BASE_URL == "http://localhost:8080"
    assert settings.user_agent == DEFAULT_USER_AGENT == "form3"
    assert settings.verify_ssl is True


def test_client_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("FORM3_BASE_URL", "https://api.staging.example")
    monkeypatch.setenv("FORM3_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("FORM3_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("FORM3_HTTP_VERIFY_SSL", "0")

    settings = config.load_client_settings()

    assert settings.base_url == "https://api.staging.example"
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.timeout == 5.5
    assert settings.verify_ssl is False


def test_client_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("FORM3_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("FORM3_BASE_URL", "")
    assert config.load_client_settings().timeout == config.ClientSettings.timeout
    assert config.load_client_settings().base_url == DEFAULT_BASE_URL

    monkeypatch.setenv("FORM3_HTTP_TIMEOUT", "-1")
    assert config.load_client_settings().timeout == config.ClientSettings.timeout


def test_load_client_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("FORM3_HTTP_TIMEOUT", "7.7")
    assert config.load_client_settings().timeout == 7.7
    monkeypatch.setenv("FORM3_HTTP_TIMEOUT", "8.8")
    assert config.load_client_settings().timeout == 8.8


def test_categorize_exception():
    assert categorize_exception(httpx.ReadTimeout("slow")) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ConnectionResetError()) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(RuntimeError("boom")) == ErrorCategory.UNKNOWN_ERROR

    try:
        try:
            raise socket.gaierror(-2, "Name or service not known")
        except socket.gaierror as inner:
            raise httpx.ConnectError("dns failure") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) == ErrorCategory.DNS_ERROR


def test_error_hierarchy():
    for error_type in (InvalidURLError, SerializationError, TransportError, ApiError, DecodeError):
        assert issubclass(error_type, Form3Error)
    assert issubclass(InvalidURLError, ValueError)
    assert issubclass(SerializationError, ValueError)


def test_api_error_formats_single_diagnostic_line():
    request = HttpRequest(url="http://localhost:8080/v1/organisation/accounts/abc", method="GET")
    response = HttpResponse(request=request, status_code=404, content=b'{"error_message":"not found"}')
    err = ApiError(response, "not found")

    assert err.method == "GET"
    assert err.url == "http://localhost:8080/v1/organisation/accounts/abc"
    assert err.status_code == 404
    assert err.message == "not found"
    assert str(err) == "GET http://localhost:8080/v1/organisation/accounts/abc: 404 not found"


def test_transport_error_keeps_context():
    cause = httpx.ConnectTimeout("timed out")
    err = TransportError("POST", "http://localhost:8080/v1/organisation/accounts", cause)
    assert err.category == ErrorCategory.TIMEOUT
    assert err.error_type == "ConnectTimeout"
    assert err.method == "POST"
    assert "timed out" in str(err)


def test_decode_error_keeps_response():
    request = HttpRequest(url="http://localhost:8080/x", method="GET")
    response = HttpResponse(request=request, status_code=200, content=b"<html>")
    err = DecodeError(response, "malformed JSON")
    assert err.response is response
    assert err.response.text == "<html>"
    assert "200" in str(err)


def test_api_error_reports_final_url_after_redirect():
    request = HttpRequest(url="http://localhost:8080/v1/organisation/accounts/abc", method="GET")
    response = HttpResponse(
        request=request,
        status_code=404,
        url="http://localhost:8080/v2/organisation/accounts/abc",
    )
    err = ApiError(response, "gone")
    assert err.url == "http://localhost:8080/v2/organisation/accounts/abc"
    assert str(err) == "GET http://localhost:8080/v2/organisation/accounts/abc: 404 gone"
