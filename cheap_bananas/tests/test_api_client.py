import pytest

from cheap_bananas.api_client import ApiError, DuplicateShopError, PriceApiClient
from cheap_bananas.payload import SubmitRequest


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("Expecting value")
        return self._payload


class FakeHttp:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def _next(self, *call):
        self.calls.append(call)
        return self.responses.pop(0)

    def get(self, path, *, params=None):
        return self._next("GET", path, params)

    def post(self, path, *, json=None):
        return self._next("POST", path, json)

    def delete(self, path):
        return self._next("DELETE", path)


def _client(*responses):
    http = FakeHttp(responses)
    return PriceApiClient(api_url="http://test", http=http), http


def test_submit_returns_id():
    client, http = _client(FakeResponse(201, {"id": "abc"}))
    new_id = client.submit(SubmitRequest("/products", {"name": "banana"}))
    assert new_id == "abc"
    assert http.calls == [("POST", "/products", {"name": "banana"})]


def test_submit_without_id_fails():
    client, _ = _client(FakeResponse(201, {}))
    with pytest.raises(ApiError):
        client.create_product({"name": "banana"})


def test_http_error_carries_status():
    client, _ = _client(FakeResponse(400, None, "Invalid shop JSON"))
    with pytest.raises(ApiError) as exc:
        client.create_shop({"name": None})
    assert exc.value.status_code == 400
    assert "Invalid shop JSON" in str(exc.value)


def test_bad_json_raises_api_error():
    client, _ = _client(FakeResponse(200, None, "<html>"))
    with pytest.raises(ApiError):
        client.filter_products(name="banana")


def test_filter_drops_none_params():
    client, http = _client(FakeResponse(200, [{"id": "p1", "name": "banana", "tags": ["fruit"]}]))
    products = client.filter_products(name="banana", tag=None)
    assert http.calls == [("GET", "/products/filter", {"name": "banana"})]
    assert products[0].id == "p1"
    assert products[0].tags == ["fruit"]
    assert products[0].notes is None


def test_filter_product_entries_parses_rows():
    rows = [
        {"id": "e1", "product_id": "p1", "price": 20, "product_volume": 0.5,
         "unit": "kg", "shop_name": "lidl", "notes": None},
        {"id": "e2", "product_id": "p1", "price": "broken", "unit": "kg"},
    ]
    client, _ = _client(FakeResponse(200, rows))
    entries = client.filter_product_entries(product_id="p1")
    assert len(entries) == 1
    assert entries[0].price == 20.0
    assert entries[0].product_volume == 0.5
    assert entries[0].shop_name == "lidl"


def test_filter_expects_list():
    client, _ = _client(FakeResponse(200, {"error": "boom"}))
    with pytest.raises(ApiError):
        client.filter_shops(name="lidl")


def test_delete_product_entry():
    client, http = _client(FakeResponse(204, None))
    client.delete_product_entry("e1")
    assert http.calls == [("DELETE", "/product-entries/e1")]


def test_duplicate_shop_rejected():
    client, http = _client(FakeResponse(200, [{"id": "s1", "name": "Lidl"}]))
    with pytest.raises(DuplicateShopError):
        client.create_shop_unique({"name": "lidl"})
    assert len(http.calls) == 1


def test_unique_shop_created():
    client, http = _client(FakeResponse(200, []), FakeResponse(201, {"id": "s2"}))
    assert client.create_shop_unique({"name": "billa"}) == "s2"
    assert http.calls[1] == ("POST", "/shops", {"name": "billa"})
