"""Unit tests for the connect/disconnect toggle (state machine, failure handling, handle ownership)."""

import builtins
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent))
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from fakes import FakeFactory
from mysql_toggle.db.connection import ConnectionConfig, ConnectionError
from mysql_toggle.services.connection_toggle import ConnectionToggleController
from mysql_toggle.services.state import ConnectionState


def _controller(factory: FakeFactory, **kwargs) -> ConnectionToggleController:
    return ConnectionToggleController(ConnectionConfig(host="db.test"), factory, **kwargs)


def test_starts_disconnected() -> None:
    factory = FakeFactory()
    ctrl = _controller(factory)
    assert ctrl.state is ConnectionState.DISCONNECTED
    assert not ctrl.is_connected
    assert ctrl.labels.button_text == "Connect Me"
    assert ctrl.labels.window_title == "Disconnected"
    assert factory.opened == []


def test_connect_then_disconnect() -> None:
    factory = FakeFactory()
    ctrl = _controller(factory)

    assert ctrl.activate() is ConnectionState.CONNECTED
    assert ctrl.labels.button_text == "Disconnect Me"
    assert ctrl.labels.window_title == "Connected"
    assert len(factory.opened) == 1
    assert factory.opened[0].config.host == "db.test"

    assert ctrl.activate() is ConnectionState.DISCONNECTED
    assert ctrl.labels.button_text == "Connect Me"
    assert ctrl.labels.window_title == "Disconnected"
    assert factory.opened[0].close_calls == 1
    assert factory.live == []


@pytest.mark.parametrize("n", range(1, 8))
def test_parity_after_n_activations(n: int) -> None:
    factory = FakeFactory()
    ctrl = _controller(factory)
    for _ in range(n):
        ctrl.activate()
    expected = ConnectionState.CONNECTED if n % 2 else ConnectionState.DISCONNECTED
    assert ctrl.state is expected
    assert len(factory.live) == (1 if n % 2 else 0)


def test_each_connect_opens_a_new_handle() -> None:
    factory = FakeFactory()
    ctrl = _controller(factory)
    for _ in range(4):
        ctrl.activate()
    assert len(factory.opened) == 2
    assert factory.opened[0] is not factory.opened[1]
    assert all(h.close_calls == 1 for h in factory.opened)


def test_open_failure_stays_disconnected() -> None:
    cause = OSError("Can't connect to MySQL server on 'db.test:3306'")
    factory = FakeFactory(fail_open=cause)
    ctrl = _controller(factory)

    with pytest.raises(ConnectionError) as exc_info:
        ctrl.activate()

    assert exc_info.value.operation == "open"
    assert exc_info.value.cause is cause
    assert exc_info.value.__cause__ is cause
    assert ctrl.state is ConnectionState.DISCONNECTED
    assert ctrl.labels.window_title == "Disconnected"
    assert factory.opened == []


def test_open_failure_then_retry_succeeds() -> None:
    factory = FakeFactory(fail_open=OSError("timeout"))
    ctrl = _controller(factory)
    with pytest.raises(ConnectionError):
        ctrl.activate()
    factory.fail_open = None
    assert ctrl.activate() is ConnectionState.CONNECTED
    assert len(factory.live) == 1


def test_close_failure_still_disconnects() -> None:
    factory = FakeFactory()
    ctrl = _controller(factory)
    ctrl.activate()
    handle = factory.opened[0]
    factory.fail_close = RuntimeError("connection already invalid")

    with pytest.raises(ConnectionError) as exc_info:
        ctrl.activate()

    assert exc_info.value.operation == "close"
    assert isinstance(exc_info.value.cause, RuntimeError)
    assert ctrl.state is ConnectionState.DISCONNECTED
    assert ctrl.labels.button_text == "Connect Me"
    assert handle.close_calls == 1

    # Next activation opens a fresh handle; the failed one is not closed again
    factory.fail_close = None
    assert ctrl.activate() is ConnectionState.CONNECTED
    assert handle.close_calls == 1
    assert len(factory.opened) == 2


def test_error_is_builtin_connection_error() -> None:
    ctrl = _controller(FakeFactory(fail_open=ValueError("unknown database 'kccdb'")))
    with pytest.raises(builtins.ConnectionError):
        ctrl.activate()


def test_state_changed_callback() -> None:
    seen: list[ConnectionState] = []
    factory = FakeFactory()
    ctrl = _controller(factory, on_state_changed=seen.append)
    ctrl.activate()
    ctrl.activate()
    assert seen == [ConnectionState.CONNECTED, ConnectionState.DISCONNECTED]


def test_state_changed_not_called_on_failed_open() -> None:
    seen: list[ConnectionState] = []
    ctrl = _controller(FakeFactory(fail_open=OSError("refused")), on_state_changed=seen.append)
    with pytest.raises(ConnectionError):
        ctrl.activate()
    assert seen == []


def test_state_changed_called_on_failed_close() -> None:
    seen: list[ConnectionState] = []
    factory = FakeFactory()
    ctrl = _controller(factory, on_state_changed=seen.append)
    ctrl.activate()
    factory.fail_close = OSError("broken pipe")
    with pytest.raises(ConnectionError):
        ctrl.activate()
    assert seen == [ConnectionState.CONNECTED, ConnectionState.DISCONNECTED]


def test_close_releases_handle() -> None:
    factory = FakeFactory()
    ctrl = _controller(factory)
    ctrl.activate()
    ctrl.close()
    assert ctrl.state is ConnectionState.DISCONNECTED
    assert factory.live == []
    ctrl.close()
    assert factory.opened[0].close_calls == 1


def test_close_swallows_close_failure() -> None:
    factory = FakeFactory()
    ctrl = _controller(factory)
    ctrl.activate()
    factory.fail_close = OSError("gone")
    ctrl.close()
    assert ctrl.state is ConnectionState.DISCONNECTED


def test_close_when_disconnected_does_nothing() -> None:
    factory = FakeFactory()
    ctrl = _controller(factory)
    ctrl.close()
    assert factory.opened == []
