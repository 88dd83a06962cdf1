"""Response builders shared by the PayMongo SDK tests."""

import json
from typing import Any
from unittest.mock import MagicMock


def mock_response(status_code: int = 200, body: Any = None) -> MagicMock:
    """A stand-in for ``httpx.Response`` carrying a JSON body."""
    response = MagicMock()
    response.status_code = status_code
    response.content = json.dumps(body).encode() if body is not None else b""
    response.text = response.content.decode()
    response.json.return_value = body
    return response


def mock_text_response(status_code: int, text: str) -> MagicMock:
    """A stand-in for ``httpx.Response`` whose body is not JSON."""
    response = MagicMock()
    response.status_code = status_code
    response.content = text.encode()
    response.text = text
    response.json.side_effect = ValueError("Expecting value")
    return response


def envelope(resource: dict[str, Any]) -> dict[str, Any]:
    return {"data": resource}


def list_envelope(resources: list[dict[str, Any]], has_more: bool = False) -> dict[str, Any]:
    return {"data": resources, "has_more": has_more}


def payment_intent_data(id: str = "pi_123", **attributes: Any) -> dict[str, Any]:
    return {
        "id": id,
        "type": "payment_intent",
        "attributes": {
            "amount": 10000,
            "currency": "PHP",
            "status": "awaiting_payment_method",
            "client_key": f"{id}_client_abc",
            "payment_method_allowed": ["card", "gcash"],
            "payments": [],
            "livemode": False,
            "created_at": 1700000000,
            "updated_at": 1700000000,
            **attributes,
        },
    }


def payment_method_data(id: str = "pm_123", **attributes: Any) -> dict[str, Any]:
    return {
        "id": id,
        "type": "payment_method",
        "attributes": {
            "type": "card",
            "billing": {"name": "Juan dela Cruz", "email": "juan@example.com"},
            "details": {"last4": "4345", "exp_month": 12, "exp_year": 2030},
            "livemode": False,
            **attributes,
        },
    }


def payment_data(id: str = "pay_123", **attributes: Any) -> dict[str, Any]:
    return {
        "id": id,
        "type": "payment",
        "attributes": {
            "amount": 10000,
            "currency": "PHP",
            "status": "paid",
            "fee": 350,
            "net_amount": 9650,
            "refunds": [],
            "livemode": False,
            **attributes,
        },
    }


def customer_data(id: str = "cus_123", **attributes: Any) -> dict[str, Any]:
    return {
        "id": id,
        "type": "customer",
        "attributes": {
            "first_name": "Juan",
            "last_name": "dela Cruz",
            "email": "juan@example.com",
            "phone": "+639170000000",
            "livemode": False,
            **attributes,
        },
    }


def refund_data(id: str = "ref_123", **attributes: Any) -> dict[str, Any]:
    return {
        "id": id,
        "type": "refund",
        "attributes": {
            "amount": 5000,
            "currency": "PHP",
            "payment_id": "pay_123",
            "reason": "requested_by_customer",
            "status": "pending",
            "livemode": False,
            **attributes,
        },
    }


def webhook_data(id: str = "hook_123", **attributes: Any) -> dict[str, Any]:
    return {
        "id": id,
        "type": "webhook",
        "attributes": {
            "url": "https://example.com/webhooks/paymongo",
            "events": ["payment.paid", "payment.failed"],
            "status": "enabled",
            "secret_key": "whsk_abc",
            "livemode": False,
            **attributes,
        },
    }


def checkout_session_data(id: str = "cs_123", **attributes: Any) -> dict[str, Any]:
    return {
        "id": id,
        "type": "checkout_session",
        "attributes": {
            "checkout_url": f"https://checkout.paymongo.com/{id}",
            "status": "active",
            "line_items": [
                {"name": "T-shirt", "amount": 50000, "currency": "PHP", "quantity": 2}
            ],
            "payment_method_types": ["card", "gcash"],
            "success_url": "https://example.com/success",
            "payments": [],
            "livemode": False,
            **attributes,
        },
    }


def sent_request(mock_http_client: Any) -> tuple[str, Any, Any]:
    """Return ``(method, url, json_body)`` of the last request made."""
    call = mock_http_client.request.call_args
    method, url = call.args
    return method, url, call.kwargs.get("json")
