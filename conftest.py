"""Shared pytest fixtures: a dummy API key and offline fakes of the Gemini client."""
import os
import re
import tempfile
import threading
import time
from io import BytesIO
from types import SimpleNamespace

# Must be set before config is imported anywhere
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="coloring-book-logs-"))
os.environ.setdefault("LOCALE", "en")

import pytest
from PIL import Image


def make_jpeg(width: int = 800, height: int = 600, color: str = "white") -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="JPEG")
    return buffer.getvalue()


def count_pdf_pages(data: bytes) -> int:
    return len(re.findall(rb"/Type /Page\b", data))


class FakeModels:
    """Stands in for client.models; every returned image is tagged with its batch."""

    def __init__(self, width=800, height=600, delays=None, fail_counts=(), returned_counts=None):
        self.width = width
        self.height = height
        self.delays = delays or {}
        self.fail_counts = set(fail_counts)
        self.returned_counts = returned_counts or {}
        self.calls = []
        self._lock = threading.Lock()

    def generate_images(self, model, prompt, config):
        count = config.number_of_images
        with self._lock:
            self.calls.append({"model": model, "prompt": prompt, "config": config})
        time.sleep(self.delays.get(count, 0))
        if count in self.fail_counts:
            raise ConnectionError("network unreachable")

        jpeg = make_jpeg(self.width, self.height)
        returned = self.returned_counts.get(count, count)
        # Trailing marker lets tests tell batches and positions apart; JPEG decoders ignore it
        return SimpleNamespace(generated_images=[
            SimpleNamespace(image=SimpleNamespace(
                image_bytes=jpeg + f"batch{count}-{i}".encode(),
                mime_type="image/jpeg",
            ))
            for i in range(returned)
        ])


class FakeChatSession:
    def __init__(self, fail=False, delay=0):
        self.fail = fail
        self.delay = delay
        self.sent = []

    def send_message(self, message):
        self.sent.append(message)
        time.sleep(self.delay)
        if self.fail:
            raise ConnectionError("network unreachable")
        return SimpleNamespace(text=f"Great question about {message}! 🌟")


class FakeChats:
    def __init__(self, fail=False, delay=0):
        self.fail = fail
        self.delay = delay
        self.created = []
        self.sessions = []

    def create(self, model, config):
        self.created.append({"model": model, "config": config})
        session = FakeChatSession(fail=self.fail, delay=self.delay)
        self.sessions.append(session)
        return session


class FakeGeminiClient:
    def __init__(self, models=None, chats=None):
        self.models = models or FakeModels()
        self.chats = chats or FakeChats()


@pytest.fixture
def jpeg_factory():
    return make_jpeg


@pytest.fixture
def pdf_page_counter():
    return count_pdf_pages


@pytest.fixture
def fake_gemini():
    return FakeGeminiClient()


@pytest.fixture
def failing_gemini():
    return FakeGeminiClient(models=FakeModels(fail_counts={1}), chats=FakeChats(fail=True))


def wait_until(predicate, timeout=5.0):
    """Poll until predicate() is true; used to line up overlapping requests."""
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not reached in time")
        time.sleep(0.01)
