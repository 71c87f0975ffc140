import json

import pytest

import app.infrastructure.adapters.avatar_video_did as did
import app.infrastructure.adapters.script_writer_groq as groq
import app.infrastructure.adapters.speech_synth_elevenlabs as eleven
from app.core.exceptions import UpstreamShapeError, UpstreamTransportError
from app.core.pyd_schemas import RenderStatus
from utils.http_utils import UpstreamResponse


class RecordingSender:
    """Stands in for utils.http_utils.send_request."""

    def __init__(self, *responses: UpstreamResponse) -> None:
        self.responses = list(responses)
        self.calls = []

    async def __call__(self, method, url, *, headers=None, json_body=None, timeout=None):
        self.calls.append(
            {"method": method, "url": url, "headers": headers, "json": json_body}
        )
        return self.responses.pop(0)


def _json_response(payload, status=200):
    return UpstreamResponse(
        status=status,
        body=json.dumps(payload).encode("utf-8"),
        content_type="application/json",
    )


# -------------------- Groq script writer --------------------
@pytest.mark.adapters
@pytest.mark.asyncio
async def test_groq_writer_returns_first_choice(monkeypatch):
    sender = RecordingSender(
        _json_response({"choices": [{"message": {"content": "POV: you found it"}}]})
    )
    monkeypatch.setattr(groq, "send_request", sender)

    writer = groq.GroqScriptWriter(api_key="gsk_test", model="llama3-8b-8192")
    script = await writer.write_script("a standing desk")

    assert script == "POV: you found it"
    call = sender.calls[0]
    assert call["method"] == "POST"
    assert call["headers"]["Authorization"] == "Bearer gsk_test"
    assert call["json"]["model"] == "llama3-8b-8192"
    assert call["json"]["messages"] == [
        {"role": "user", "content": "Write a short UGC ad script for a standing desk"}
    ]


@pytest.mark.adapters
@pytest.mark.asyncio
async def test_groq_writer_passes_error_status_and_body(monkeypatch):
    body = {"error": {"message": "Invalid API Key"}}
    monkeypatch.setattr(groq, "send_request", RecordingSender(_json_response(body, 401)))

    with pytest.raises(UpstreamTransportError) as exc_info:
        await groq.GroqScriptWriter(api_key="").write_script("desk")

    assert exc_info.value.status_code == 401
    assert json.loads(exc_info.value.body) == body
    assert exc_info.value.content_type == "application/json"


@pytest.mark.adapters
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [{"choices": []}, {"object": "chat.completion"}, {"choices": [{"message": {}}]}],
)
async def test_groq_writer_shape_errors(monkeypatch, payload):
    monkeypatch.setattr(groq, "send_request", RecordingSender(_json_response(payload)))

    with pytest.raises(UpstreamShapeError) as exc_info:
        await groq.GroqScriptWriter(api_key="k").write_script("desk")

    assert exc_info.value.status_code == 502
    assert exc_info.value.payload == payload


@pytest.mark.adapters
@pytest.mark.asyncio
async def test_groq_writer_non_json_body(monkeypatch):
    monkeypatch.setattr(
        groq,
        "send_request",
        RecordingSender(UpstreamResponse(status=200, body=b"<html>", content_type="text/html")),
    )

    with pytest.raises(UpstreamShapeError):
        await groq.GroqScriptWriter(api_key="k").write_script("desk")


# -------------------- ElevenLabs speech --------------------
@pytest.mark.adapters
@pytest.mark.asyncio
async def test_elevenlabs_returns_audio_bytes(monkeypatch):
    audio = b"ID3\x04\x00mp3-bytes"
    sender = RecordingSender(
        UpstreamResponse(status=200, body=audio, content_type="audio/mpeg")
    )
    monkeypatch.setattr(eleven, "send_request", sender)

    synth = eleven.ElevenLabsSpeechSynthesizer(
        api_key="xi_test",
        voice_id="VOICE1",
        api_url="https://api.elevenlabs.io/v1/text-to-speech/",
    )
    result = await synth.synthesize("Hello")

    assert result == audio
    call = sender.calls[0]
    assert call["url"] == "https://api.elevenlabs.io/v1/text-to-speech/VOICE1"
    assert call["headers"]["xi-api-key"] == "xi_test"
    assert call["json"] == {
        "text": "Hello",
        "voice_settings": {"stability": 0.5, "similarity_boost": 0.5},
    }


@pytest.mark.adapters
@pytest.mark.asyncio
async def test_elevenlabs_error_is_propagated(monkeypatch):
    monkeypatch.setattr(
        eleven,
        "send_request",
        RecordingSender(_json_response({"detail": {"status": "invalid_api_key"}}, 401)),
    )

    with pytest.raises(UpstreamTransportError) as exc_info:
        await eleven.ElevenLabsSpeechSynthesizer(api_key="").synthesize("Hi")
    assert exc_info.value.status_code == 401


# -------------------- D-ID avatar video --------------------
@pytest.mark.adapters
@pytest.mark.asyncio
async def test_did_create_job_sends_text_script_envelope(monkeypatch):
    sender = RecordingSender(_json_response({"id": "tlk_1", "status": "created"}, 201))
    monkeypatch.setattr(did, "send_request", sender)

    provider = did.DIDAvatarVideoProvider(api_key="ZGlk", api_url="https://api.d-id.com/talks")
    job = await provider.create_job(
        script="Hi there",
        source_url="https://ai-ugcvideo.vercel.app/avatars/male/male1.jpg",
        voice_id="en-US-GuyNeural",
    )

    assert job.id == "tlk_1"
    assert job.status is RenderStatus.created
    call = sender.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://api.d-id.com/talks"
    assert call["headers"]["Authorization"] == "Basic ZGlk"
    assert call["json"] == {
        "source_url": "https://ai-ugcvideo.vercel.app/avatars/male/male1.jpg",
        "script": {
            "type": "text",
            "input": "Hi there",
            "provider": {"type": "microsoft", "voice_id": "en-US-GuyNeural"},
        },
    }


@pytest.mark.adapters
@pytest.mark.asyncio
async def test_did_get_job_reads_status(monkeypatch):
    payload = {"id": "tlk_1", "status": "done", "result_url": "https://cdn/x.mp4"}
    sender = RecordingSender(_json_response(payload))
    monkeypatch.setattr(did, "send_request", sender)

    job = await did.DIDAvatarVideoProvider(api_key="k").get_job("tlk_1")

    assert sender.calls[0]["method"] == "GET"
    assert sender.calls[0]["url"].endswith("/talks/tlk_1")
    assert job.is_done and job.result_url == "https://cdn/x.mp4"


@pytest.mark.adapters
@pytest.mark.asyncio
async def test_did_non_success_raises_transport_error(monkeypatch):
    sender = RecordingSender(
        UpstreamResponse(status=402, body=b'{"kind":"InsufficientCreditsError"}')
    )
    monkeypatch.setattr(did, "send_request", sender)

    with pytest.raises(UpstreamTransportError) as exc_info:
        await did.DIDAvatarVideoProvider(api_key="k").get_job("tlk_1")
    assert exc_info.value.status_code == 402
    assert exc_info.value.body == b'{"kind":"InsufficientCreditsError"}'
