from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from present_ai import llm
from present_ai.llm import GenerationError, generate_text


def _keys(**values):
    return lambda name: values.get(name, "")


def test_openai_reply_is_stripped():
    client = MagicMock()
    client.responses.create.return_value = SimpleNamespace(output_text="  [ ]\n")

    with patch.object(llm.config, "api_key", _keys(OPENAI_API_KEY="sk-test")), \
            patch.object(llm, "_openai_client", return_value=client):
        text = generate_text("prompt", model="gpt-test", provider="openai")

    assert text == "[ ]"
    kwargs = client.responses.create.call_args.kwargs
    assert kwargs["model"] == "gpt-test"
    assert kwargs["input"] == [{"role": "user", "content": "prompt"}]


def test_gemini_uses_configured_model():
    client = MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text="Gift 1: Mug")

    with patch.object(llm.config, "api_key", _keys(GEMINI_API_KEY="g-test")), \
            patch.object(llm.config, "GEMINI_MODEL", "gemini-2.5-flash"), \
            patch.object(llm, "_gemini_client", return_value=client):
        text = generate_text("prompt", provider="gemini")

    assert text == "Gift 1: Mug"
    client.models.generate_content.assert_called_once_with(model="gemini-2.5-flash", contents="prompt")


def test_empty_gemini_reply_is_empty_text():
    client = MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text=None)

    with patch.object(llm.config, "api_key", _keys(GEMINI_API_KEY="g-test")), \
            patch.object(llm, "_gemini_client", return_value=client):
        assert generate_text("prompt", provider="gemini") == ""


def test_missing_key_is_a_generation_error():
    with patch.object(llm.config, "api_key", _keys()):
        with pytest.raises(GenerationError, match="OPENAI_API_KEY"):
            generate_text("prompt", provider="openai")


def test_api_errors_are_wrapped():
    client = MagicMock()
    client.responses.create.side_effect = ConnectionError("network down")

    with patch.object(llm.config, "api_key", _keys(OPENAI_API_KEY="sk-test")), \
            patch.object(llm, "_openai_client", return_value=client):
        with pytest.raises(GenerationError) as exc:
            generate_text("prompt", provider="openai")

    assert isinstance(exc.value.__cause__, ConnectionError)
    assert client.responses.create.call_count == 1


def test_unknown_provider():
    with pytest.raises(GenerationError, match="Unknown LLM provider"):
        generate_text("prompt", provider="llama")
