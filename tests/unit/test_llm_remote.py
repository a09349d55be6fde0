"""
Tests for the LLM router and the remote summarize/answer helpers.
No provider SDK is contacted; call_llm is replaced where needed.
"""

import pytest

import docsum.llm.remote as remote
import docsum.llm.router as router
from docsum.core.config import settings
from docsum.core.errors import RemoteServiceError


class TestParseSummaryResponse:
    """Tests for reading the LLM's summary reply."""
    
    def test_json_block(self):
        """The first JSON object in the reply is used."""
        text = 'Here you go:\n{"summary": "Short version.", "keywords": ["alpha", "beta"]}\nThanks!'
        parsed = remote.parse_summary_response(text)
        assert parsed == {"summary": "Short version.", "keywords": ["alpha", "beta"]}
    
    def test_plain_text_is_used_verbatim(self):
        """A plain reply becomes the summary."""
        parsed = remote.parse_summary_response("  Just a plain summary.  ")
        assert parsed == {"summary": "Just a plain summary.", "keywords": []}
    
    def test_broken_json_is_used_verbatim(self):
        """Unparseable JSON is kept as plain text."""
        parsed = remote.parse_summary_response('{"summary": "unterminated')
        assert parsed["summary"] == '{"summary": "unterminated'
        assert parsed["keywords"] == []
    
    def test_empty_response(self):
        """No reply means an empty summary."""
        assert remote.parse_summary_response(None) == {"summary": "", "keywords": []}


class TestTrimHistory:
    """Tests for chat history trimming."""
    
    def test_keeps_last_turns(self):
        """Only the most recent turns are kept."""
        history = [{"role": "user", "content": f"q{i}"} for i in range(8)]
        trimmed = remote.trim_history(history, 5)
        assert [item["content"] for item in trimmed] == ["q3", "q4", "q5", "q6", "q7"]
    
    def test_drops_malformed_turns(self):
        """Turns without a valid role or content are dropped."""
        history = [
            {"role": "system", "content": "ignore me"},
            {"role": "user", "content": ""},
            {"role": "assistant", "content": "kept"},
            {}
        ]
        assert remote.trim_history(history, 5) == [{"role": "assistant", "content": "kept"}]
    
    def test_empty(self):
        """No history stays empty."""
        assert remote.trim_history(None, 5) == []
        assert remote.trim_history([{"role": "user", "content": "x"}], 0) == []


class TestRouter:
    """Tests for provider selection."""
    
    def test_none_provider_raises(self, monkeypatch):
        """A disabled provider raises instead of answering."""
        monkeypatch.setenv("LLM_PROVIDER", "none")
        assert not router.is_llm_enabled()
        assert not router.is_llm_configured()
        with pytest.raises(RemoteServiceError, match="not enabled"):
            router.call_llm("hello")
    
    def test_unknown_provider_raises(self, monkeypatch):
        """Unknown providers are rejected."""
        monkeypatch.setenv("LLM_PROVIDER", "watson")
        with pytest.raises(RemoteServiceError, match="Unknown LLM provider"):
            router.call_llm("hello")
    
    def test_provider_name_is_case_insensitive(self, monkeypatch):
        """Provider names ignore case."""
        monkeypatch.setenv("LLM_PROVIDER", "Gemini")
        assert router.get_provider() == "gemini"
        assert router.is_llm_enabled()
    
    def test_auto_tries_every_provider(self, monkeypatch):
        """Auto mode tries each provider in order before failing."""
        monkeypatch.setenv("LLM_PROVIDER", "auto")
        attempted = []
        
        def failing(provider, *args):
            attempted.append(provider)
            raise RemoteServiceError(f"{provider} down", provider=provider)
        
        monkeypatch.setattr(router, "_call_specific_provider", failing)
        
        with pytest.raises(RemoteServiceError) as exc_info:
            router.call_llm("hello")
        
        assert attempted == ["gemini", "openai", "ollama"]
        assert exc_info.value.provider == "auto"
    
    def test_auto_stops_at_first_success(self, monkeypatch):
        """Auto mode returns the first successful provider."""
        monkeypatch.setenv("LLM_PROVIDER", "auto")
        
        def flaky(provider, *args):
            if provider == "gemini":
                raise RemoteServiceError("gemini down", provider=provider)
            return {"text": "ok", "provider": provider, "raw": None}
        
        monkeypatch.setattr(router, "_call_specific_provider", flaky)
        
        assert router.call_llm("hello")["provider"] == "openai"


class TestRemoteSummarize:
    """Tests for LLM summaries."""
    
    def test_returns_parsed_summary_and_provider(self, monkeypatch):
        """The parsed summary comes back with the provider name."""
        captured = {}
        
        def fake_call_llm(prompt, system=None, history=None, temperature=0.3):
            captured.update(prompt=prompt, system=system)
            return {"text": '{"summary": "S.", "keywords": ["k"]}', "provider": "openai", "raw": None}
        
        monkeypatch.setattr(remote, "call_llm", fake_call_llm)
        
        result = remote.remote_summarize("Body of the document.", "bullets", "casual", 30)
        
        assert result == {"summary": "S.", "keywords": ["k"], "provider": "openai"}
        assert "Body of the document." in captured["prompt"]
        assert "bulleted list" in captured["prompt"]
        assert captured["system"] == remote.SUMMARY_SYSTEM_PROMPT
    
    def test_empty_output_raises(self, monkeypatch):
        """An empty summary counts as a failure."""
        monkeypatch.setattr(
            remote, "call_llm",
            lambda **kwargs: {"text": "   ", "provider": "gemini", "raw": None}
        )
        with pytest.raises(RemoteServiceError):
            remote.remote_summarize("Body of the document.")


class TestRemoteAnswer:
    """Tests for LLM chat answers."""
    
    def test_call_arguments(self, monkeypatch):
        """Context, history and temperature reach the provider."""
        captured = {}
        
        def fake_call_llm(prompt, system=None, history=None, temperature=0.3):
            captured.update(prompt=prompt, system=system, history=history, temperature=temperature)
            return {"text": " The answer. ", "provider": "gemini", "raw": None}
        
        monkeypatch.setattr(remote, "call_llm", fake_call_llm)
        
        context = "c" * (settings.CHAT_CONTEXT_CHAR_LIMIT + 500)
        history = [{"role": "user", "content": f"turn {i}"} for i in range(7)]
        
        result = remote.remote_answer("What is it?", context, history)
        
        assert result == {"answer": "The answer.", "provider": "gemini"}
        assert captured["prompt"] == "What is it?"
        assert captured["temperature"] == 0.3
        assert captured["system"].startswith(remote.CHAT_SYSTEM_PROMPT)
        assert captured["system"].count("c") >= settings.CHAT_CONTEXT_CHAR_LIMIT
        assert "c" * (settings.CHAT_CONTEXT_CHAR_LIMIT + 1) not in captured["system"]
        assert len(captured["history"]) == settings.CHAT_HISTORY_LIMIT
        assert captured["history"][-1]["content"] == "turn 6"
    
    def test_empty_answer_raises(self, monkeypatch):
        """An empty answer counts as a failure."""
        monkeypatch.setattr(
            remote, "call_llm",
            lambda **kwargs: {"text": "", "provider": "gemini", "raw": None}
        )
        with pytest.raises(RemoteServiceError):
            remote.remote_answer("Question?", "Context.")
