from __future__ import annotations

import pytest

from cashly.coordination import clean_params, request_key


def test_request_key_is_independent_of_param_order():
    first = request_key("dashboard/charts", {"chart_type": "pie", "wallet_id": "42"})
    second = request_key("dashboard/charts", {"wallet_id": "42", "chart_type": "pie"})
    assert first == second


def test_request_key_drops_unset_values():
    assert request_key("transactions", {"wallet_id": None, "type": ""}) == "transactions"
    assert request_key("transactions", {"page": 2, "type": None}) == request_key(
        "transactions", {"page": 2}
    )


def test_request_key_distinguishes_values_and_endpoints():
    assert request_key("budgets", {"wallet_id": "1"}) != request_key(
        "budgets", {"wallet_id": "2"}
    )
    assert request_key("budgets", {"page": 1}) != request_key("budgets", {"page": "1"})
    assert request_key("budgets") != request_key("reminders")


def test_request_key_rejects_blank_endpoint():
    with pytest.raises(ValueError, match="non-empty"):
        request_key("   ", {"page": 1})


def test_clean_params_keeps_falsy_but_set_values():
    assert clean_params({"page": 0, "archived": False, "q": ""}) == {
        "page": 0,
        "archived": False,
    }
    assert clean_params(None) == {}
