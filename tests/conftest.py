"""
Pytest configuration file for the lazy list tests.

This file ensures that the project directory is in the Python path
so that test files can import lazylist, utils, and models modules.
"""

import sys
import logging
import threading
from pathlib import Path

# Add the parent directory to the Python path
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import pytest

from errors import LazyListError
from lazylist import LazyList
from models import LazyListSettings, get_settings, set_settings
import utils


def interruptible_naturals():
    """
    [0 ..] plus an Event that, once set, makes the list end at whatever it has
    generated so far. Lets a non-terminating call be stopped after the test.
    """
    stop = threading.Event()
    counter = 0

    def step(buffer):
        nonlocal counter
        if stop.is_set():
            return None
        value = counter
        counter += 1
        buffer.append(value)
        return value

    return LazyList.generate(step), stop


def runs_forever(func, stop: threading.Event, timeout: float = 0.3) -> bool:
    """
    Run func on a daemon thread and report whether it was still running after
    timeout seconds. stop is set afterwards so the thread can finish.
    """
    def target():
        try:
            func()
        except LazyListError:
            pass

    worker = threading.Thread(target=target, daemon=True)
    worker.start()
    worker.join(timeout)
    still_running = worker.is_alive()
    stop.set()
    worker.join(timeout)
    return still_running


@pytest.fixture
def naturals():
    """The infinite list [0 ..]"""
    return LazyList.from_(0)


@pytest.fixture
def counted_naturals():
    """[0 ..] together with a list recording every element the step produced"""
    produced = []

    def step(buffer):
        value = len(produced)
        produced.append(value)
        buffer.append(value)
        return value

    return LazyList.generate(step), produced


@pytest.fixture(autouse=True)
def restore_settings():
    """Every test starts from default settings and clean performance metrics"""
    previous = get_settings()
    set_settings(LazyListSettings())
    utils.clear_performance_metrics()
    yield
    set_settings(previous)


@pytest.fixture
def isolated_logging():
    """Restore the root logger after a test that calls setup_logging()"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
