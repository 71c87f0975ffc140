"""
Shared test configuration and fakes for the ad generation service.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Sequence

import pytest

from app.core.pyd_schemas import RenderJob


def setup_logging():
    """Configure logging for the whole test run."""
    log_dir = Path("test/test_output/logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "test_run.log"

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = logging.FileHandler(filename=log_file, mode="a", encoding="utf-8")
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    # Quiet noisy libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)

    logging.getLogger("app").setLevel(logging.DEBUG)

    return log_file


def pytest_configure(config):  # pylint: disable=unused-argument
    log_file = setup_logging()
    logger = logging.getLogger("pytest")
    logger.info("=" * 80)
    logger.info("Test run started, log file: %s", log_file)


@pytest.fixture(autouse=True)
def log_test_name(request):
    """Log test name when test starts and finishes."""
    logger = logging.getLogger(request.node.nodeid)
    logger.info("Starting test: %s", request.node.name)
    start_time = datetime.now()

    def log_test_end():
        duration = (datetime.now() - start_time).total_seconds()
        logger.info("Finished in %.2fs", duration)

    request.addfinalizer(log_test_end)


# -------------------- Fakes for the render orchestration --------------------
class FakeClock:
    """Records requested delays instead of sleeping."""

    def __init__(self) -> None:
        self.sleeps: List[float] = []

    def monotonic(self) -> float:
        return float(sum(self.sleeps))

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)


class FakeAvatarVideoProvider:
    """Scripted IAvatarVideoProvider.

    - create_payload: returned (or raised, if an exception) by create_job
    - poll_payloads: returned (or raised) by successive get_job calls; the last
      entry repeats once the list is exhausted
    """

    def __init__(
        self,
        create_payload: Any,
        poll_payloads: Optional[Sequence[Any]] = None,
    ) -> None:
        self.create_payload = create_payload
        self.poll_payloads = list(poll_payloads or [])
        self.create_calls: List[dict] = []
        self.get_calls: List[str] = []

    async def create_job(self, *, script: str, source_url: str, voice_id: str):
        self.create_calls.append(
            {"script": script, "source_url": source_url, "voice_id": voice_id}
        )
        if isinstance(self.create_payload, Exception):
            raise self.create_payload
        return RenderJob.from_payload(self.create_payload)

    async def get_job(self, job_id: str):
        self.get_calls.append(job_id)
        if not self.poll_payloads:
            raise AssertionError("get_job called but no poll payloads scripted")
        index = min(len(self.get_calls), len(self.poll_payloads)) - 1
        item = self.poll_payloads[index]
        if isinstance(item, Exception):
            raise item
        return RenderJob.from_payload(item)


class FakeScriptWriter:
    def __init__(self, script: Any = "Try it today!") -> None:
        self.script = script
        self.products: List[str] = []

    async def write_script(self, product: str) -> str:
        self.products.append(product)
        if isinstance(self.script, Exception):
            raise self.script
        return self.script


class FakeSpeechSynthesizer:
    def __init__(self, audio: Any = b"ID3fake-mp3") -> None:
        self.audio = audio
        self.texts: List[str] = []

    async def synthesize(self, text: str) -> bytes:
        self.texts.append(text)
        if isinstance(self.audio, Exception):
            raise self.audio
        return self.audio


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def pending_payload():
    return {"id": "tlk_123", "status": "started"}


@pytest.fixture
def done_payload():
    return {
        "id": "tlk_123",
        "status": "done",
        "result_url": "https://d-id-talks.example/tlk_123.mp4",
    }
