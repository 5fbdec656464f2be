import threading

from tracko.services.processing_worker import ProcessingWorker, COMPLETED, FAILED, CANCELLED


def test_inline_worker_runs_on_submit():
    calls = []
    worker = ProcessingWorker(run_inline=True)

    job = worker.submit("inline", calls.append, "done", delay=30)

    assert calls == ["done"]
    assert job.status == COMPLETED
    assert worker.pending() == []


def test_jobs_wait_until_run_pending(worker):
    calls = []
    worker.submit("first", calls.append, 1, delay=60)
    worker.submit("second", calls.append, 2, delay=60)

    assert calls == []
    assert len(worker.pending()) == 2

    assert worker.run_pending() == 2
    assert calls == [1, 2]
    assert worker.pending() == []


def test_cancel_scheduled_job(worker):
    calls = []
    job = worker.submit("cancel-me", calls.append, "x", delay=60)

    assert worker.cancel(job.id) is True
    assert job.status == CANCELLED
    assert worker.run_pending() == 0
    assert calls == []


def test_cancel_unknown_or_finished_job(worker):
    job = worker.submit("finished", lambda: None, delay=60)
    worker.run_pending()

    assert worker.cancel(job.id) is False
    assert worker.cancel("missing") is False


def test_failing_job_is_marked_failed_and_others_still_run(worker):
    calls = []

    def explode():
        raise RuntimeError("boom")

    failing = worker.submit("explode", explode, delay=60)
    worker.submit("after", calls.append, "ok", delay=60)

    assert worker.run_pending() == 2
    assert failing.status == FAILED
    assert failing.error == "boom"
    assert calls == ["ok"]


def test_timer_fires_after_delay(worker):
    fired = threading.Event()

    job = worker.submit("timer", fired.set, delay=0.01)

    assert fired.wait(timeout=5)
    assert job.status in ("running", COMPLETED)


def test_shutdown_cancels_pending(worker):
    job = worker.submit("never", lambda: None, delay=60)

    worker.shutdown()

    assert job.status == CANCELLED
    assert worker.pending() == []
