"""
Tests for the OpenAI client wrapper's retry budget
"""
import pytest
from unittest.mock import Mock, patch
from openai import APIConnectionError
from scholarmatch.config import settings
from scholarmatch.services.openai_service import OpenAIService


@pytest.fixture
def openai_client():
    with patch('scholarmatch.services.openai_service.OpenAI') as mock_openai, \
         patch('scholarmatch.services.openai_service.time.sleep'):
        yield mock_openai


class TestOpenAIService:

    def test_unavailable_without_key(self, openai_client):
        service = OpenAIService(api_key="")
        assert service.available is False
        openai_client.assert_not_called()
        with pytest.raises(RuntimeError):
            service.chat_completion([{"role": "user", "content": "hi"}])

    def test_client_does_not_retry_on_its_own(self, openai_client):
        OpenAIService(api_key="sk-test")
        _, kwargs = openai_client.call_args
        assert kwargs["max_retries"] == 0
        assert kwargs["timeout"] == settings.OPENAI_TIMEOUT

    def test_connection_errors_use_configured_retry_budget(self, openai_client):
        create = openai_client.return_value.chat.completions.create
        create.side_effect = APIConnectionError(request=Mock())
        service = OpenAIService(api_key="sk-test")

        with pytest.raises(APIConnectionError):
            service.chat_completion([{"role": "user", "content": "hi"}])

        assert create.call_count == settings.OPENAI_MAX_RETRIES + 1

    def test_recovers_after_transient_error(self, openai_client):
        create = openai_client.return_value.chat.completions.create
        response = Mock()
        create.side_effect = [APIConnectionError(request=Mock()), response]
        service = OpenAIService(api_key="sk-test")

        assert service.chat_completion([{"role": "user", "content": "hi"}], max_retries=1) is response
        assert create.call_count == 2

    def test_structured_completion_sends_strict_schema(self, openai_client):
        create = openai_client.return_value.chat.completions.create
        create.return_value.choices = [Mock(message=Mock(content='{"matches": []}'))]
        service = OpenAIService(api_key="sk-test")

        raw = service.structured_completion("system", "user", schema_name="scholarship_matches", schema={"type": "object"})

        assert raw == '{"matches": []}'
        _, kwargs = create.call_args
        assert kwargs["response_format"]["type"] == "json_schema"
        assert kwargs["response_format"]["json_schema"]["strict"] is True
        assert kwargs["response_format"]["json_schema"]["name"] == "scholarship_matches"
