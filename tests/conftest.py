"""Shared fixtures for the relay tests.

The Tinify backend is replaced by ``FakeTinifyClient``, which records the
operations the pipeline chains onto a source and returns canned output.
No test talks to the real service.
"""

import pytest
from fastapi.testclient import TestClient

from tinifier import create_app
from tinifier.config import Settings


class FakeSource:
    """Stand-in for ``tinify.Source``; each call returns a new source."""

    def __init__(self, backend, operations=()):
        self.backend = backend
        self.operations = list(operations)

    def _chain(self, name, options):
        return FakeSource(self.backend, self.operations + [(name, options)])

    def resize(self, **options):
        return self._chain("resize", options)

    def convert(self, **options):
        return self._chain("convert", options)

    def transform(self, **options):
        return self._chain("transform", options)

    def to_buffer(self):
        self.backend.operations = self.operations
        if self.backend.download_error is not None:
            raise self.backend.download_error
        return self.backend.output


class FakeTinifyClient:
    def __init__(self, output=b"compressed!", compression_count=0):
        self.output = output
        self.compression_count = compression_count
        self.uploads = []
        self.operations = None
        self.upload_error = None
        self.download_error = None
        self.validate_error = None

    def from_buffer(self, data):
        if self.upload_error is not None:
            raise self.upload_error
        self.uploads.append(data)
        self.compression_count += 1
        return FakeSource(self)

    def validate(self):
        if self.validate_error is not None:
            raise self.validate_error
        return True


@pytest.fixture
def fake_client():
    return FakeTinifyClient()


@pytest.fixture
def settings():
    return Settings(api_key="test-key", max_upload_size=1024)


@pytest.fixture
def client(settings, fake_client):
    app = create_app(settings=settings, client=fake_client)
    return TestClient(app)
