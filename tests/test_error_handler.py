from yapee.error_handler import ErrorHandler


def test_production_hides_error_details():
    eh = ErrorHandler(production=True)
    out = eh.handle_exception(Exception("boom"), context={"method": "GET", "url": "http://x/api"})
    assert out == {"error": "Internal server error"}


def test_development_includes_error_details():
    eh = ErrorHandler(production=False)
    try:
        raise ValueError("boom")
    except ValueError as e:
        out = eh.handle_exception(e, context={"url": "http://x/api"})
    assert out["error"] == "boom"
    assert out["url"] == "http://x/api"
    assert "ValueError" in out["stack"]
    assert out["timestamp"]


def test_not_found_payload():
    assert ErrorHandler.not_found("POST", "/x") == {"error": "Route not found", "path": "/x", "method": "POST"}
