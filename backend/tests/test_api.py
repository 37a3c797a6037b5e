"""REST endpoints through the FastAPI app with the in-memory backend."""

from src.application.services import EscalationChannel


def open_thread(client, headers, recipient="bob", **form):
    data = {
        "subject": "Invoice question",
        "recipientId": recipient,
        "department": "payment",
        "content": "Where is my invoice?",
    }
    data.update(form)
    return client.post("/threads", data=data, headers=headers)


def drain_emails(client, app):
    escalation = client.portal.call(app.state.dishka_container.get, EscalationChannel)
    client.portal.call(escalation.drain)


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_requests_without_token_are_unauthorized(client):
    response = client.get("/threads")

    assert response.status_code == 401
    assert "error" in response.json()


def test_create_and_read_thread(client, alice_headers, bob_headers):
    response = open_thread(client, alice_headers)

    assert response.status_code == 201
    body = response.json()
    thread_id = body["thread"]["id"]
    assert body["thread"]["isOpen"] is True
    assert body["thread"]["participants"] == ["alice", "bob"]
    assert body["message"]["content"] == "Where is my invoice?"

    detail = client.get(f"/threads/{thread_id}", headers=bob_headers).json()
    assert [m["content"] for m in detail["messages"]] == ["Where is my invoice?"]

    listed = client.get("/threads", headers=bob_headers).json()
    assert [t["id"] for t in listed["threads"]] == [thread_id]


def test_create_thread_with_attachment(client, alice_headers, storage):
    response = client.post(
        "/threads",
        data={
            "subject": "Scan",
            "recipientId": "bob",
            "department": "tech",
            "content": "See attached",
        },
        files=[("attachments", ("scan.png", b"\x89PNG", "image/png"))],
        headers=alice_headers,
    )

    assert response.status_code == 201
    assert response.json()["message"]["attachments"] == [
        {"filename": "scan.png", "url": "https://files.test/attachments/scan.png"}
    ]
    assert storage.uploaded == ["scan.png"]


def test_create_thread_validation(client, alice_headers):
    assert open_thread(client, alice_headers, department="sales").status_code == 400
    assert open_thread(client, alice_headers, content="  ").status_code == 400
    assert open_thread(client, alice_headers, recipient="alice").status_code == 400
    assert open_thread(client, alice_headers, recipient="ghost").status_code == 404

    missing = client.post(
        "/threads",
        data={"subject": "No dept", "recipientId": "bob", "content": "Hi"},
        headers=alice_headers,
    )
    assert missing.status_code == 400


def test_outsider_cannot_read_thread(client, alice_headers, admin_headers):
    thread_id = open_thread(client, alice_headers).json()["thread"]["id"]

    assert client.get(f"/threads/{thread_id}", headers=admin_headers).status_code == 403


def test_unknown_thread_is_not_found(client, alice_headers):
    assert client.get("/threads/not-a-uuid", headers=alice_headers).status_code == 404


def test_reply_and_toggle(client, app, mailer, alice_headers, bob_headers):
    thread_id = open_thread(client, alice_headers).json()["thread"]["id"]

    reply = client.post(
        f"/threads/{thread_id}/messages", data={"content": "On its way"}, headers=bob_headers
    )
    assert reply.status_code == 201
    assert reply.json()["recipientId"] == "alice"

    empty = client.post(
        f"/threads/{thread_id}/messages", data={"content": ""}, headers=bob_headers
    )
    assert empty.status_code == 400

    closed = client.patch(f"/threads/{thread_id}/toggle-status", headers=alice_headers)
    assert closed.json()["isOpen"] is False
    reopened = client.patch(f"/threads/{thread_id}/toggle-status", headers=alice_headers)
    assert reopened.json()["isOpen"] is True

    drain_emails(client, app)
    assert [e.to for e in mailer.outbox] == [
        "alice@example.com",
        "bob@example.com",
        "bob@example.com",
    ]


def test_read_on_open(client, alice_headers, bob_headers):
    message_id = open_thread(client, alice_headers).json()["message"]["id"]

    assert client.get(f"/messages/{message_id}", headers=alice_headers).json()["isRead"] is False
    assert client.get(f"/messages/{message_id}", headers=bob_headers).json()["isRead"] is True

    listed = client.get("/messages", headers=bob_headers).json()
    assert [m["id"] for m in listed] == [message_id]


def test_notification_endpoints(client, alice_headers, bob_headers):
    open_thread(client, alice_headers)
    open_thread(client, alice_headers, subject="Second")

    assert client.get("/notifications/unread-count", headers=bob_headers).json() == {"count": 2}

    page = client.get("/notifications?page=1&limit=1", headers=bob_headers).json()
    assert page["totalCount"] == 2
    assert page["totalPages"] == 2
    newest = page["notifications"][0]
    assert newest["type"] == "new_message"
    assert newest["subject"] == "Second"

    toggled = client.patch(f"/notifications/{newest['id']}/toggle", headers=bob_headers).json()
    assert toggled["notification"]["isRead"] is True
    assert toggled["unreadCount"] == 1

    assert client.patch(f"/notifications/{newest['id']}/toggle", headers=alice_headers).status_code == 404

    read = client.patch(f"/notifications/{newest['id']}/read", headers=bob_headers).json()
    assert read["unreadCount"] == 1

    assert client.patch("/notifications/read-all", headers=bob_headers).json() == {"modified": 1}
    assert client.get("/notifications/unread-count", headers=bob_headers).json() == {"count": 0}


def test_mark_order_read_endpoint(client, bob_headers):
    response = client.patch("/notifications/orders/o-1/read", headers=bob_headers)

    assert response.json() == {"modified": 0}


def test_admin_endpoints_require_admin(client, alice_headers):
    assert client.get("/admin/threads", headers=alice_headers).status_code == 403


def test_admin_panel(client, alice_headers, admin_headers):
    thread_id = open_thread(client, alice_headers).json()["thread"]["id"]
    open_thread(client, alice_headers, recipient="admin-1", subject="Help")

    page = client.get("/admin/threads?page=1&limit=10", headers=admin_headers).json()
    assert page["totalCount"] == 2
    assert page["totalPages"] == 1

    detail = client.get(f"/admin/threads/{thread_id}", headers=admin_headers)
    assert detail.status_code == 200

    toggled = client.patch(f"/admin/threads/{thread_id}/toggle-status", headers=admin_headers)
    assert toggled.json()["isOpen"] is False

    # The admin is not a participant of the alice/bob thread.
    reply = client.post(
        f"/admin/threads/{thread_id}/messages", data={"content": "Hi"}, headers=admin_headers
    )
    assert reply.status_code == 403


def test_metrics_endpoint(client):
    response = client.get("/metrics")

    assert response.status_code == 200
    assert "threadline_live_pushes_total" in response.text


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "req-42"})

    assert response.headers["X-Correlation-ID"] == "req-42"


def test_sender_adds_attachment_to_message(client, alice_headers, bob_headers, storage):
    message_id = open_thread(client, alice_headers).json()["message"]["id"]
    upload = [("file", ("invoice.pdf", b"%PDF", "application/pdf"))]

    denied = client.post(f"/messages/{message_id}/attachments", files=upload, headers=bob_headers)
    assert denied.status_code == 403

    response = client.post(
        f"/messages/{message_id}/attachments", files=upload, headers=alice_headers
    )
    assert response.status_code == 200
    assert response.json()["attachments"] == [
        {"filename": "invoice.pdf", "url": "https://files.test/attachments/invoice.pdf"}
    ]
    assert storage.uploaded == ["invoice.pdf"]


def test_add_attachment_errors(client, alice_headers):
    message_id = open_thread(client, alice_headers).json()["message"]["id"]

    missing_file = client.post(f"/messages/{message_id}/attachments", headers=alice_headers)
    assert missing_file.status_code == 400

    upload = [("file", ("a.pdf", b"x", "application/pdf"))]
    unknown = client.post(
        "/messages/00000000-0000-0000-0000-000000000000/attachments",
        files=upload,
        headers=alice_headers,
    )
    assert unknown.status_code == 404
    malformed = client.post("/messages/not-a-uuid/attachments", files=upload, headers=alice_headers)
    assert malformed.status_code == 404


def test_admin_messages(client, alice_headers, bob_headers, admin_headers):
    first = open_thread(client, alice_headers).json()
    thread_id = first["thread"]["id"]
    reply = client.post(
        f"/threads/{thread_id}/messages", data={"content": "On its way"}, headers=bob_headers
    ).json()

    assert client.get("/admin/messages", headers=alice_headers).status_code == 403

    page = client.get("/admin/messages?page=1&limit=10", headers=admin_headers).json()
    assert page["totalCount"] == 2
    assert page["totalPages"] == 1
    assert [m["id"] for m in page["messages"]] == [reply["id"], first["message"]["id"]]

    detail = client.get(f"/admin/messages/{reply['id']}", headers=admin_headers)
    assert detail.json()["content"] == "On its way"
    assert detail.json()["isRead"] is False

    deleted = client.delete(f"/admin/messages/{reply['id']}", headers=admin_headers)
    assert deleted.status_code == 204
    assert client.get(f"/admin/messages/{reply['id']}", headers=admin_headers).status_code == 404
    assert client.delete(f"/admin/messages/{reply['id']}", headers=admin_headers).status_code == 404

    thread = client.get(f"/threads/{thread_id}", headers=alice_headers).json()
    assert [m["content"] for m in thread["messages"]] == ["Where is my invoice?"]
