import json

import pytest
from conftest import json_response

from openai_rest import OpenAIHTTPError
from openai_rest.schemas import ChatRequest, Message, ModerationsRequest, conversation

EMBEDDINGS_BODY = {
    "object": "list",
    "data": [
        {"object": "embedding", "embedding": [0.1, -0.2, 0.3], "index": 0},
        {"object": "embedding", "embedding": [0.4, 0.5, -0.6], "index": 1},
    ],
    "model": "text-embedding-ada-002-v2",
    "usage": {"prompt_tokens": 4, "total_tokens": 4},
}

CHAT_BODY = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1677652288,
    "model": "gpt-3.5-turbo-0301",
    "choices": [
        {"index": 0, "message": {"role": "assistant", "content": "Hello there!"}, "finish_reason": "stop"}
    ],
    "usage": {"prompt_tokens": 9, "completion_tokens": 3, "total_tokens": 12},
}

HEADERS = {
    "openai-organization": "org-test",
    "openai-processing-ms": "42",
    "x-request-id": "req-abc",
}


# -------------------- Embeddings --------------------


@pytest.mark.asyncio
async def test_create_embedding(make_client, requests_seen):
    client = make_client(lambda request: json_response(EMBEDDINGS_BODY, headers=HEADERS))

    response = await client.embeddings.create_embedding(["a", "b"])

    assert [d.index for d in response.data] == [0, 1]
    assert response.data[0].embedding == (0.1, -0.2, 0.3)
    assert response.usage.total_tokens == 4
    assert response.usage.completion_tokens == 0
    assert response.organization == "org-test"
    assert response.processing_time_ms == 42
    assert response.request_id == "req-abc"

    sent = requests_seen[0]
    assert sent.url.path == "/v1/embeddings"
    assert json.loads(sent.content) == {"input": ["a", "b"], "model": "text-embedding-ada-002"}


@pytest.mark.asyncio
async def test_create_embedding_rejects_before_sending(make_client, requests_seen):
    client = make_client(lambda request: json_response(EMBEDDINGS_BODY))
    with pytest.raises(ValueError):
        await client.embeddings.create_embedding("hello", model="gpt-4")
    assert requests_seen == []


# -------------------- Chat --------------------


@pytest.mark.asyncio
async def test_chat_completion(make_client, requests_seen):
    client = make_client(lambda request: json_response(CHAT_BODY))
    request = ChatRequest(
        messages=[
            Message(role="system", content="You are a helpful assistant."),
            Message(role="user", content="Hello"),
        ],
        temperature=0.2,
    )

    response = await client.chat.get_completion(request)

    assert str(response) == "Hello there!"
    assert response.first_choice.finish_reason == "stop"
    assert response.usage.total_tokens == 12

    body = json.loads(requests_seen[0].content)
    assert requests_seen[0].url.path == "/v1/chat/completions"
    assert body["model"] == "gpt-3.5-turbo"
    assert body["temperature"] == 0.2
    assert "max_tokens" not in body
    assert body["messages"][1] == {"role": "user", "content": "Hello"}


def test_chat_request_validation():
    with pytest.raises(ValueError):
        ChatRequest(messages=[])
    with pytest.raises(ValueError):
        ChatRequest(messages=[Message(role="user", content="hi")], temperature=3)
    with pytest.raises(ValueError):
        Message(role="robot", content="hi")

    req = conversation([{"role": "user", "content": "hi"}], model="gpt-4", max_tokens=10)
    assert req.model == "gpt-4"
    assert req.max_tokens == 10


def test_chat_response_without_choices():
    from openai_rest.schemas import ChatResponse

    response = ChatResponse(id="x")
    assert response.first_choice is None
    assert str(response) == ""


# -------------------- Models --------------------


@pytest.mark.asyncio
async def test_get_models(make_client, requests_seen):
    body = {
        "object": "list",
        "data": [
            {"id": "gpt-3.5-turbo", "object": "model", "owned_by": "openai", "created": 1677610602},
            {"id": "text-embedding-ada-002", "object": "model", "owned_by": "openai-internal"},
        ],
    }
    client = make_client(lambda request: json_response(body))

    models = await client.models.get_models()

    assert [str(m) for m in models] == ["gpt-3.5-turbo", "text-embedding-ada-002"]
    assert "text-embedding" in models[1]
    assert requests_seen[0].method == "GET"
    assert requests_seen[0].url.path == "/v1/models"


@pytest.mark.asyncio
async def test_get_model_details(make_client, requests_seen):
    client = make_client(lambda request: json_response({"id": "gpt-4", "object": "model", "owned_by": "openai"}))

    model = await client.models.get_model_details("gpt-4")

    assert model.id == "gpt-4"
    assert model.owned_by == "openai"
    assert requests_seen[0].url.path == "/v1/models/gpt-4"


@pytest.mark.asyncio
async def test_get_model_details_not_found(make_client):
    error = {"error": {"message": "The model 'nope' does not exist", "type": "invalid_request_error"}}
    client = make_client(lambda request: json_response(error, status_code=404))

    with pytest.raises(OpenAIHTTPError) as exc_info:
        await client.models.get_model_details("nope")
    assert exc_info.value.status_code == 404
    assert "does not exist" in str(exc_info.value)


@pytest.mark.asyncio
async def test_get_model_details_blank_id(make_client):
    client = make_client(lambda request: json_response({}))
    with pytest.raises(ValueError):
        await client.models.get_model_details(" ")


# -------------------- Moderations --------------------


@pytest.mark.asyncio
async def test_moderation(make_client, requests_seen):
    body = {
        "id": "modr-1",
        "model": "text-moderation-004",
        "results": [
            {
                "flagged": True,
                "categories": {"violence": True, "hate": False},
                "category_scores": {"violence": 0.97, "hate": 0.01},
            }
        ],
    }
    client = make_client(lambda request: json_response(body))

    assert await client.moderations.get_moderation("I want to kill them.") is True

    response = await client.moderations.create_moderation(ModerationsRequest(input="I want to kill them."))
    assert response.results[0].categories["violence"] is True
    assert response.results[0].category_scores["hate"] == pytest.approx(0.01)
    assert json.loads(requests_seen[0].content) == {
        "input": "I want to kill them.",
        "model": "text-moderation-latest",
    }


@pytest.mark.asyncio
async def test_moderation_not_flagged(make_client):
    client = make_client(lambda request: json_response({"id": "modr-2", "results": [{"flagged": False}]}))
    assert await client.moderations.get_moderation("I love you") is False


def test_moderation_request_validation():
    with pytest.raises(ValueError):
        ModerationsRequest(input="  ")


@pytest.mark.parametrize("model", [123, 4.2, {"id": "gpt-4"}])
def test_chat_and_moderation_reject_non_string_model(model):
    with pytest.raises(ValueError):
        ChatRequest(messages=[Message(role="user", content="hi")], model=model)
    with pytest.raises(ValueError):
        ModerationsRequest(input="hi", model=model)


@pytest.mark.asyncio
async def test_get_model_details_quotes_id(make_client, requests_seen):
    client = make_client(lambda request: json_response({"id": "a/b?c#d"}))

    model = await client.models.get_model_details("a/b?c#d")

    assert model.id == "a/b?c#d"
    assert requests_seen[0].url.raw_path == b"/v1/models/a%2Fb%3Fc%23d"
    assert requests_seen[0].url.query == b""
