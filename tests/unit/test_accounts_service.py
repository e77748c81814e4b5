# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from form3 import Form3Client
from form3.errors import ApiError, DecodeError, InvalidURLError, SerializationError, TransportError
from form3.http.adapters import StubHttpClient
from form3.http.models import HttpRequest, HttpResponse
from form3.models import AccountAttributes, AccountData

BASE = "http://localhost:8080"
ACCOUNT_ID = "ad27e265-9605-4b4b-a0e5-3003ea9cc4dc"
ACCOUNT_URL = f"{BASE}/v1/organisation/accounts/{ACCOUNT_ID}"


def sample_account(account_id: str = ACCOUNT_ID) -> AccountData:
    return AccountData(
        id=account_id,
        organisation_id="055fff08-76a7-11ec-90d6-0242ac120003",
        type="accounts",
        version=0,
        attributes=AccountAttributes(
            account_classification="Personal",
            account_matching_opt_out=False,
            bank_id="400300",
            bank_id_code="GBDSC",
            bic="NWBKGB22",
            country="GB",
            name=["Hugo Boss"],
            status="pending",
            switched=False,
        ),
    )


def envelope_body(account: AccountData) -> str:
    return json.dumps({"data": account.to_dict(), "links": {"self": f"/v1/organisation/accounts/{account.id}"}})


def make_client(stub: StubHttpClient) -> Form3Client:
    return Form3Client(http_client=stub)


def test_fetch_issues_get_and_decodes_envelope():
    stub = StubHttpClient()
    stub.add("GET", ACCOUNT_URL, 200, envelope_body(sample_account()), {"Content-Type": "application/json"})

    envelope, response = make_client(stub).accounts.fetch(ACCOUNT_ID)

    assert envelope.data == sample_account()
    assert envelope.links.self_url == f"/v1/organisation/accounts/{ACCOUNT_ID}"
    assert response.status_code == 200
    sent = stub.requests[0]
    assert sent.method == "GET"
    assert sent.url == ACCOUNT_URL
    assert sent.body is None
    assert sent.headers["Accept"] == "application/json"
    assert sent.headers["User-Agent"] == "form3"
    assert "Content-Type" not in sent.headers


def test_fetch_is_idempotent():
    stub = StubHttpClient()
    stub.add("GET", ACCOUNT_URL, 200, envelope_body(sample_account()))
    client = make_client(stub)

    first, _ = client.accounts.fetch(ACCOUNT_ID)
    second, _ = client.accounts.fetch(ACCOUNT_ID)

    assert first == second
    assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())
    assert first is not second


def test_fetch_escapes_account_id_in_path():
    stub = StubHttpClient()
    stub.add("GET", f"{BASE}/v1/organisation/accounts/a%2Fb", 200, '{"data": {"id": "a/b"}}')
    envelope, _ = make_client(stub).accounts.fetch("a/b")
    assert envelope.data.id == "a/b"


def test_fetch_not_found_raises_api_error():
    stub = StubHttpClient()
    stub.add("GET", ACCOUNT_URL, 404, f'{{"error_message": "record {ACCOUNT_ID} does not exist"}}')

    with pytest.raises(ApiError) as excinfo:
        make_client(stub).accounts.fetch(ACCOUNT_ID)

    assert excinfo.value.status_code == 404
    assert str(excinfo.value) == f"GET {ACCOUNT_URL}: 404 record {ACCOUNT_ID} does not exist"


def test_fetch_with_bad_payload_raises_decode_error():
    stub = StubHttpClient()
    stub.add("GET", ACCOUNT_URL, 200, "<html>maintenance</html>")

    with pytest.raises(DecodeError) as excinfo:
        make_client(stub).accounts.fetch(ACCOUNT_ID)

    assert excinfo.value.response.status_code == 200
    assert excinfo.value.response.text == "<html>maintenance</html>"


def test_create_posts_data_envelope():
    account = sample_account()
    stub = StubHttpClient()
    stub.add("POST", f"{BASE}/v1/organisation/accounts", 201, envelope_body(account))

    envelope, response = make_client(stub).accounts.create(account)

    assert response.status_code == 201
    assert envelope.data == account
    sent = stub.requests[0]
    assert sent.method == "POST"
    assert sent.headers["Content-Type"] == "application/json"
    assert json.loads(sent.body) == {"data": account.to_dict()}


def test_create_with_invalid_uuid_surfaces_validation_message():
    message = 'id in body must be of type uuid: "invalid uuid"'
    stub = StubHttpClient()
    stub.add(
        "POST",
        f"{BASE}/v1/organisation/accounts",
        422,
        json.dumps({"error_message": message}),
    )

    with pytest.raises(ApiError) as excinfo:
        make_client(stub).accounts.create(sample_account("invalid uuid"))

    assert excinfo.value.message == message
    assert excinfo.value.status_code == 422
    assert excinfo.value.method == "POST"


def test_create_rejects_unencodable_account():
    account = sample_account()
    account.attributes.name = [object()]
    stub = StubHttpClient()

    with pytest.raises(SerializationError):
        make_client(stub).accounts.create(account)
    assert stub.requests == []


def test_delete_with_version_returns_204():
    stub = StubHttpClient()
    stub.add("DELETE", f"{ACCOUNT_URL}?version=0", 204)

    response = make_client(stub).accounts.delete(ACCOUNT_ID, 0)

    assert response.status_code == 204
    assert response.content == b""
    sent = stub.requests[0]
    assert sent.method == "DELETE"
    assert sent.url == f"{ACCOUNT_URL}?version=0"
    assert sent.body is None
    assert "Content-Type" not in sent.headers


def test_delete_conflict_raises_api_error():
    stub = StubHttpClient()
    stub.add("DELETE", f"{ACCOUNT_URL}?version=3", 409, '{"error_message": "invalid version"}')

    with pytest.raises(ApiError) as excinfo:
        make_client(stub).accounts.delete(ACCOUNT_ID, 3)

    assert excinfo.value.message == "invalid version"


def test_transport_errors_propagate_unchanged():
    stub = StubHttpClient()
    with pytest.raises(TransportError):
        make_client(stub).accounts.fetch(ACCOUNT_ID)


def test_invalid_path_raises_before_sending():
    stub = StubHttpClient()
    client = make_client(stub)
    with pytest.raises(InvalidURLError):
        client.do(client.get("/v1/%zz"))
    assert stub.requests == []


def test_timeout_is_passed_through():
    stub = StubHttpClient()
    stub.add("DELETE", f"{ACCOUNT_URL}?version=1", 204)
    make_client(stub).accounts.delete(ACCOUNT_ID, 1, timeout=2.5)
    assert stub.requests[0].timeout == 2.5


def test_create_echoes_account_through_responder():
    stub = StubHttpClient()

    def echo(request: HttpRequest) -> HttpResponse:
        payload = json.loads(request.body)
        payload["data"]["version"] = 1
        payload["links"] = {"self": f"/v1/organisation/accounts/{payload['data']['id']}"}
        return HttpResponse(request=request, status_code=201, content=json.dumps(payload).encode("utf-8"))

    stub.add_responder("post", f"{BASE}/v1/organisation/accounts", echo)

    envelope, response = make_client(stub).accounts.create(sample_account())

    assert response.status_code == 201
    assert envelope.data.version == 1
    assert envelope.data.attributes == sample_account().attributes
    assert envelope.links.self_url == f"/v1/organisation/accounts/{ACCOUNT_ID}"
