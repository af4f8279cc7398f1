import io
import os
import threading
import wave

from config import AppConfig, ProviderConfig
from exceptions import TranscriptionError
from infrastructure.interfaces import TranscriptionService


def make_config(**upload_overrides):
    config = AppConfig(provider=ProviderConfig(api_key="sk-test"))
    if upload_overrides:
        config = config.model_copy(
            update={"upload": config.upload.model_copy(update=upload_overrides)}
        )
    return config


def make_wav(seconds=3, sample_rate=16000):
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(sample_rate)
        wav.writeframes(b"\x00\x00" * sample_rate * seconds)
    return buffer.getvalue()


class StubTranscriptionService(TranscriptionService):
    """Returns a canned transcript and records what it saw on disk."""

    def __init__(self, text="hello world", error=None, barrier=None):
        self._text = text
        self._error = error
        self._barrier = barrier
        self._lock = threading.Lock()
        self.requests = []
        self.contents = []
        self.existed = []

    def transcribe(self, request):
        with self._lock:
            self.requests.append(request)
            self.existed.append(os.path.exists(request.audio_path))
            self.contents.append(request.audio_path.read_bytes())
        if self._barrier is not None:
            self._barrier.wait()
        if self._error is not None:
            raise TranscriptionError(request.audio_path.name, self._error)
        return self._text


class EchoTranscriptionService(TranscriptionService):
    """Returns the transient file's contents decoded as text."""

    def __init__(self):
        self._lock = threading.Lock()
        self.paths = []

    def transcribe(self, request):
        with self._lock:
            self.paths.append(request.audio_path)
        return request.audio_path.read_bytes().decode("utf-8")
