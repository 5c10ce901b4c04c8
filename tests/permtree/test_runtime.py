import time

import hypothesis
import pytest
from hypothesis import strategies as st

from permtree import runtime


@hypothesis.given(st.integers())
def test_run_id(_: int):
    _id = runtime.run_id()
    parts = _id.split("-")
    assert len(parts) == 2
    uuid4_head, timestamp = parts
    assert len(uuid4_head) == 8
    assert uuid4_head.isalnum()
    assert timestamp.isnumeric()
    assert 0 < int(timestamp) <= time.time()


def test_timer():
    timer = runtime.Timer()
    with timer:
        time.sleep(0.01)
    assert timer.elapsed_us >= 10_000

    first = timer.elapsed_us
    with timer:
        pass
    assert timer.elapsed_us < first


def test_timer_without_measurement():
    timer = runtime.Timer()
    with pytest.raises(RuntimeError):
        timer.elapsed_us
