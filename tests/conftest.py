import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from container_models import IdenticonImage
from main import app
from settings import Settings, get_settings


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(scope="session")
def banana() -> IdenticonImage:
    """Build the record of the reference input "Banana"."""
    return IdenticonImage.from_text("Banana")


@pytest.fixture(scope="session")
def odd_image() -> IdenticonImage:
    """Build a record whose digest bytes are all odd."""
    return IdenticonImage(hash_bytes=tuple(range(1, 33, 2)))


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "identicons"
    directory.mkdir()
    return directory


@pytest.fixture
def client(output_dir: Path):
    app.dependency_overrides[get_settings] = lambda: Settings(output_dir=output_dir)  # type: ignore
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
