from __future__ import annotations

import threading

from chirpy.application.services.visit_counter import VisitCounter
from chirpy.shared.middleware.visit_counter import count_visits


def test_counter_increments_and_resets() -> None:
    counter = VisitCounter()
    assert counter.value == 0
    assert counter.increment() == 1
    assert counter.increment() == 2
    counter.reset()
    assert counter.value == 0


def test_counter_is_safe_under_concurrent_increments() -> None:
    counter = VisitCounter()

    def worker() -> None:
        for _ in range(1000):
            counter.increment()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert counter.value == 8000


def test_count_visits_wraps_view_and_keeps_name() -> None:
    counter = VisitCounter()

    def index() -> str:
        return "ok"

    wrapped = count_visits(counter)(index)

    assert wrapped() == "ok"
    assert wrapped() == "ok"
    assert counter.value == 2
    assert wrapped.__name__ == "index"
