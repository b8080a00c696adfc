"""
HTTP contract of the five /api endpoints.

Verifies:
✔ each endpoint answers with exactly its own result field
✔ fix / convert answers are stripped of fences, reports are verbatim
✔ missing or blank code -> 400 {"error"}
✔ convert without languages -> 400 {"error"}
✔ gateway failure -> 500 {"error": <message>}
"""

import logging

import pytest

from services.model_gateway import ModelGateway

RESULT_FIELDS = {
    "review": "review",
    "fix": "fixedCode",
    "complexity": "analysis",
    "document": "documentation",
    "convert": "convertedCode",
}

CONVERT_LANGS = {"sourceLanguage": "JavaScript", "targetLanguage": "Python"}


def body_for(operation, code="x = 1"):
    body = {"code": code}
    if operation == "convert":
        body.update(CONVERT_LANGS)
    return body


class TestSuccess:

    @pytest.mark.parametrize("operation,field", RESULT_FIELDS.items())
    def test_only_contracted_field(self, api, operation, field):
        resp = api.post(f"/api/{operation}", json=body_for(operation))
        assert resp.status_code == 200
        assert resp.json() == {field: "model says hi"}

    def test_complexity_is_verbatim(self, api, stub_model):
        stub_model.reply = "```\nO(1)\n```  "
        resp = api.post("/api/complexity", json={"code": "print('hi')"})
        assert resp.status_code == 200
        assert resp.json() == {"analysis": "```\nO(1)\n```  "}
        assert len(stub_model.prompts) == 1
        assert "print('hi')" in stub_model.prompts[0]

    def test_fix_is_normalized(self, api, stub_model):
        stub_model.reply = "```js\nconsole.log(1)\n```"
        resp = api.post("/api/fix", json={"code": "console.log(1"})
        assert resp.json() == {"fixedCode": "console.log(1)"}

    def test_convert_is_normalized_and_uses_languages(self, api, stub_model):
        stub_model.reply = "```python\nprint(1)\n```"
        resp = api.post("/api/convert", json={"code": "console.log(1)", **CONVERT_LANGS})
        assert resp.json() == {"convertedCode": "print(1)"}
        assert "Convert the following JavaScript code to Python." in stub_model.prompts[0]

    def test_document_is_verbatim(self, api, stub_model):
        stub_model.reply = "### 📝 Code Summary\n- adds numbers"
        resp = api.post("/api/document", json={"code": "def add(a, b): return a + b"})
        assert resp.json()["documentation"] == "### 📝 Code Summary\n- adds numbers"


class TestValidation:

    @pytest.mark.parametrize("operation", RESULT_FIELDS)
    @pytest.mark.parametrize("code", [None, "", "   \n\t"])
    def test_code_required(self, api, stub_model, operation, code):
        body = body_for(operation, code)
        if code is None:
            del body["code"]
        resp = api.post(f"/api/{operation}", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Code is required."}
        assert stub_model.prompts == []

    @pytest.mark.parametrize(
        "langs",
        [{}, {"sourceLanguage": "Go"}, {"targetLanguage": "Go"}, {"sourceLanguage": "", "targetLanguage": "Go"}],
    )
    def test_convert_languages_required(self, api, stub_model, langs):
        resp = api.post("/api/convert", json={"code": "x", **langs})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Source and target languages are required."}
        assert stub_model.prompts == []

    def test_non_object_body(self, api):
        resp = api.post("/api/review", json=["not", "an", "object"])
        assert resp.status_code == 400
        assert "error" in resp.json()


class TestGatewayFailure:

    def test_error_message_relayed(self, api, stub_model):
        stub_model.error = RuntimeError("quota exceeded")
        resp = api.post("/api/review", json={"code": "x"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "quota exceeded"}

    def test_fallback_message_when_empty(self, api, stub_model):
        stub_model.error = RuntimeError("")
        resp = api.post("/api/convert", json={"code": "x", **CONVERT_LANGS})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to convert code."}

    def test_unconfigured_gateway(self):
        from fastapi.testclient import TestClient
        from app.main import app, get_gateway

        gateway = ModelGateway(None, unavailable_reason="GEMINI_API_KEY is not set")
        app.dependency_overrides[get_gateway] = lambda: gateway
        try:
            resp = TestClient(app).post("/api/fix", json={"code": "x"})
        finally:
            app.dependency_overrides.clear()
        assert resp.status_code == 500
        assert resp.json() == {"error": "GEMINI_API_KEY is not set"}


def test_requests_are_logged_at_info(api, caplog):
    caplog.set_level(logging.INFO, logger="app.main")
    api.post("/api/review", json={"code": "x"})
    assert any(
        r.levelno == logging.INFO and r.getMessage() == "POST /api/review" for r in caplog.records
    )


def test_root_status(api):
    resp = api.get("/")
    assert resp.status_code == 200
    assert "status" in resp.json()
