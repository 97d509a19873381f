from chargily_pay.schemas import ClientRequestHeader, HttpMethod, RequestDescriptor, ResourcePath


def test_resource_only():
    assert ResourcePath(resource="balance").render() == "balance"


def test_resource_with_id_and_action():
    path = ResourcePath(resource="checkouts", resource_id="ch1", action="expire")
    assert path.render() == "checkouts/ch1/expire"


def test_query_is_urlencoded():
    path = ResourcePath(resource="customers", query={"per_page": 10, "q": "a b&c"})
    assert path.render() == "customers?per_page=10&q=a+b%26c"


def test_id_cannot_add_segments():
    path = ResourcePath(resource="customers", resource_id="../balance")
    assert path.render() == "customers/..%2Fbalance"


def test_str_renders():
    assert str(ResourcePath(resource="prices", resource_id="p 1")) == "prices/p%201"


def test_header_model_dumps_wire_names():
    headers = ClientRequestHeader.for_api_key("sk_123").model_dump(by_alias=True)
    assert headers == {"Content-Type": "application/json", "Authorization": "Bearer sk_123"}


def test_header_repr_hides_key():
    assert "sk_123" not in repr(ClientRequestHeader.for_api_key("sk_123"))


def test_descriptor_defaults_to_get():
    descriptor = RequestDescriptor(path="balance")
    assert descriptor.method is HttpMethod.GET
    assert descriptor.body is None
