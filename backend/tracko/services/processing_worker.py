"""
Processing Worker - runs the delayed "processing complete" jobs for uploads
and incoming messages.

Jobs are scheduled on daemon timer threads. Every job is tracked until it
finishes, so it can be cancelled while still waiting, and `run_pending()` can
flush all waiting jobs synchronously (tests, shutdown). A job that raises is
logged and marked failed; nothing is retried.
"""
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

SCHEDULED = "scheduled"
RUNNING = "running"
COMPLETED = "completed"
FAILED = "failed"
CANCELLED = "cancelled"


class ProcessingJob:
    """Handle for one submitted job"""

    def __init__(self, name: str, func: Callable[..., Any], args: tuple, delay: float):
        self.id = uuid.uuid4().hex
        self.name = name
        self.func = func
        self.args = args
        self.delay = delay
        self.status = SCHEDULED
        self.error: Optional[str] = None
        self.submitted_at = datetime.now(timezone.utc)
        self.finished_at: Optional[datetime] = None
        self._timer: Optional[threading.Timer] = None

    def __repr__(self) -> str:
        return f"<ProcessingJob {self.name} {self.id[:8]} {self.status}>"


class ProcessingWorker:

    def __init__(self, run_inline: bool = False):
        self.run_inline = run_inline
        self._jobs: Dict[str, ProcessingJob] = {}
        self._lock = threading.Lock()

    def submit(self, name: str, func: Callable[..., Any], *args: Any, delay: float = 0.0) -> ProcessingJob:
        """
        Schedule func(*args) to run after `delay` seconds.

        Args:
            name: Label used in logs (e.g. "document-ocr:3")
            func: Callable to run
            delay: Seconds to wait; ignored when the worker runs inline

        Returns:
            The job handle
        """
        job = ProcessingJob(name, func, args, delay)
        with self._lock:
            self._jobs[job.id] = job

        if self.run_inline:
            self._run(job)
            return job

        job._timer = threading.Timer(delay, self._run, args=(job,))
        job._timer.daemon = True
        job._timer.start()
        logger.info(f"Scheduled job {job.name} ({job.id}) in {delay:.1f}s")
        return job

    def _claim(self, job: ProcessingJob) -> bool:
        with self._lock:
            if job.status != SCHEDULED:
                return False
            job.status = RUNNING
            return True

    def _run(self, job: ProcessingJob) -> None:
        # Timer thread and run_pending() can race for the same job
        if self._claim(job):
            self._execute(job)

    def _execute(self, job: ProcessingJob) -> None:
        try:
            job.func(*job.args)
            job.status = COMPLETED
        except Exception as e:
            job.status = FAILED
            job.error = str(e)
            logger.error(f"Job {job.name} ({job.id}) failed: {str(e)}", exc_info=True)
        finally:
            job.finished_at = datetime.now(timezone.utc)
            with self._lock:
                self._jobs.pop(job.id, None)

    def get(self, job_id: str) -> Optional[ProcessingJob]:
        with self._lock:
            return self._jobs.get(job_id)

    def pending(self) -> List[ProcessingJob]:
        """Jobs still waiting to run, oldest first"""
        with self._lock:
            return [job for job in self._jobs.values() if job.status == SCHEDULED]

    def cancel(self, job_id: str) -> bool:
        """Cancel a job that has not started yet"""
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None or job.status != SCHEDULED:
                return False
            job.status = CANCELLED
            job.finished_at = datetime.now(timezone.utc)
            self._jobs.pop(job_id, None)
        if job._timer is not None:
            job._timer.cancel()
        logger.info(f"Cancelled job {job.name} ({job.id})")
        return True

    def run_pending(self) -> int:
        """Run every waiting job now, in submission order. Returns how many ran."""
        ran = 0
        for job in self.pending():
            if job._timer is not None:
                job._timer.cancel()
            if self._claim(job):
                self._execute(job)
                ran += 1
        return ran

    def shutdown(self) -> None:
        """Cancel everything still waiting"""
        for job in self.pending():
            self.cancel(job.id)
