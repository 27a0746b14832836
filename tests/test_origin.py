import pytest

from sysprog.origin import (
    RequestLine,
    build_response,
    handle_request,
    parse_request_line,
)


def _split(response: str):
    head, body = response.split("\n\n", 1)
    return head.split("\n"), body


def _content_length(headers):
    for header in headers:
        if header.startswith("Content-Length:"):
            return int(header[len("Content-Length:"):])
    raise AssertionError("no Content-Length header")


def test_parse_full_request_line():
    line = parse_request_line("GET /order/status/42 HTTP/1.1")
    assert line == RequestLine("GET", "/order/status/42", "HTTP/1.1")


def test_parse_empty_request_line():
    assert parse_request_line("") == RequestLine(None, None, None)


def test_parse_handles_tabs_and_missing_protocol():
    assert parse_request_line("GET\t/x") == RequestLine("GET", "/x", None)


def test_order_number_is_last_segment():
    assert RequestLine("GET", "/order/status/42", "HTTP/1.1").order_number() == "42"
    assert RequestLine().order_number() == ""


def test_ok_response():
    response = build_response(parse_request_line("GET /order/status/42 HTTP/1.1"))
    headers, body = _split(response)
    assert headers[0] == "HTTP/1.1 200 OK"
    assert headers[1] == "Content-Type: text/html"
    assert body == "Order status for order number 42 is: Shipped\n"
    assert _content_length(headers) == len(body.encode())


def test_wrong_method_is_not_found():
    headers, body = _split(build_response(parse_request_line("POST /order/status/42 HTTP/1.1")))
    assert headers[0] == "HTTP/1.1 404 Not Found"
    assert body == "Sorry,this page is not found"
    assert _content_length(headers) == len(body.encode())


def test_wrong_path_is_not_found():
    _, body = _split(build_response(parse_request_line("GET /other/5 HTTP/1.1")))
    assert body == "Sorry,this page is not found"


@pytest.mark.parametrize("line", ["GET /order/status/ HTTP/1.1", ""])
def test_missing_order_number(line):
    headers, body = _split(build_response(parse_request_line(line)))
    assert headers[0] == "HTTP/1.1 404 Not Found"
    assert body == "Please provide valid order number"


def test_handle_request_uses_first_line():
    data = b"GET /order/status/7 HTTP/1.1\r\nHost: example.com\r\n\r\n"
    response = handle_request(data).decode()
    assert response.startswith("HTTP/1.1 200 OK\n")
    assert response.endswith("Order status for order number 7 is: Shipped\n")


def test_handle_empty_request(capsys):
    response = handle_request(b"").decode()
    assert response.endswith("Please provide valid order number")
    assert "Invalid request line received" in capsys.readouterr().out