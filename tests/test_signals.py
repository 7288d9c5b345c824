import time
from concurrent.futures import ThreadPoolExecutor
from threading import Event

import pytest

from motorent.signals import shutdown_executor


async def test_shutdown_executor_waits_for_work():
    executor = ThreadPoolExecutor(max_workers=1)
    finished = Event()

    def slow_write():
        time.sleep(0.1)
        finished.set()

    executor.submit(slow_write)

    await shutdown_executor({"executor": executor})

    assert finished.is_set()
    with pytest.raises(RuntimeError):
        executor.submit(print)


async def test_shutdown_without_executor():
    await shutdown_executor({})
