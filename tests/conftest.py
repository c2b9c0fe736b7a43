from __future__ import annotations

import pytest

import must


class Aborted(Exception):
    """Raised by RecordingPolicy so the wrapper cannot return."""


class RecordingPolicy:
    def __init__(self) -> None:
        self.errors: list[object] = []

    def __call__(self, err: object) -> None:
        self.errors.append(err)
        raise Aborted(err)


@pytest.fixture(autouse=True)
def restore_fatal_policy():
    yield
    must.configure(must.policy.fatal())


@pytest.fixture
def recorder() -> RecordingPolicy:
    return RecordingPolicy()


@pytest.fixture
def m(recorder: RecordingPolicy) -> must.Must:
    return must.Must(recorder)


@pytest.fixture
def panicky() -> must.Must:
    return must.Must(must.policy.panic())
