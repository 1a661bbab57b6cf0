import httpx
import pytest

from agent.tools import ImageSearchClient, ImageSearchError, TextGenerationClient, TextGenerationError


IMAGE_URL = "https://images.test/pinterest"
TEXT_URL = "https://llm.test/llama3"


def _image_client(handler):
    return ImageSearchClient(IMAGE_URL, transport=httpx.MockTransport(handler))


def _text_client(handler):
    return TextGenerationClient(TEXT_URL, transport=httpx.MockTransport(handler))


def test_image_search_returns_urls():
    def handler(request):
        assert request.url.params["query"] == "cat images"
        return httpx.Response(200, json={"data": ["https://a", "https://b"]})

    assert _image_client(handler).search("cat images") == ["https://a", "https://b"]


def test_image_search_empty_result_is_an_error():
    client = _image_client(lambda request: httpx.Response(200, json={"data": []}))
    with pytest.raises(ImageSearchError, match="No images found"):
        client.search("cats")


def test_image_search_bad_status():
    client = _image_client(lambda request: httpx.Response(502, text="bad gateway"))
    with pytest.raises(ImageSearchError):
        client.search("cats")


def test_image_search_malformed_payload():
    client = _image_client(lambda request: httpx.Response(200, json={"items": []}))
    with pytest.raises(ImageSearchError, match="Invalid response"):
        client.search("cats")


def test_image_search_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ImageSearchError, match="connection refused"):
        _image_client(handler).search("cats")


def test_text_generation_success():
    def handler(request):
        assert request.url.params["prompt"] == "hello"
        return httpx.Response(200, json={"response": "hi"})

    assert _text_client(handler).generate("hello") == "hi"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"response": "oops"}),
        httpx.Response(201, json={"response": "hi"}),
        httpx.Response(200, json={"response": ""}),
        httpx.Response(200, json={"other": "hi"}),
        httpx.Response(200, text="not json"),
    ],
)
def test_text_generation_failures(response):
    client = _text_client(lambda request: response)
    with pytest.raises(TextGenerationError):
        client.generate("hello")


def test_text_generation_network_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(TextGenerationError):
        _text_client(handler).generate("hello")


def test_text_generation_follows_redirects():
    def handler(request):
        if request.url.host == "llm.test":
            return httpx.Response(302, headers={"Location": "https://mirror.test/llama3?prompt=hello"})
        return httpx.Response(200, json={"response": "hi"})

    assert _text_client(handler).generate("hello") == "hi"


def test_image_search_follows_redirects():
    def handler(request):
        if request.url.host == "images.test":
            return httpx.Response(301, headers={"Location": "https://cdn.test/pinterest?query=cats"})
        return httpx.Response(200, json={"data": ["https://a"]})

    assert _image_client(handler).search("cats") == ["https://a"]
