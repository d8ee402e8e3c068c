"""Tests for background job tracking."""

import pytest

from kb_admin.core.config import get_settings
from kb_admin.core.errors import ErrorCatalog, ErrorKind
from kb_admin.core.jobs import JobState, JobTracker, job_descriptions


class ReportTracker(JobTracker):
    status_endpoint = "/jobs/reports/{job_id}"
    catalog = ErrorCatalog(name="report_job", templates={})
    descriptions = job_descriptions("El reporte", feminine=False)
    label = "report job"


@pytest.fixture
def tracker(client):
    return ReportTracker(client)


# =============================================================================
# Descriptions
# =============================================================================


class TestJobDescriptions:

    def test_gendered_endings(self):
        feminine = job_descriptions("La extracción")
        masculine = job_descriptions("El envío", feminine=False)
        assert feminine[JobState.DELAYED] == "La extracción está retrasada y se procesará más tarde."
        assert masculine[JobState.STUCK].startswith("El envío está atascado y no puede continuar.")

    def test_failed_has_no_description(self):
        assert JobState.FAILED not in job_descriptions("El proceso")


# =============================================================================
# Polling
# =============================================================================


class TestFetchJobStatus:

    def test_formats_endpoint(self, tracker, respond, last_request):
        respond((200, {"message": "Job is still processing", "jobProgress": 25}))

        result = tracker.fetch_job_status(12)

        assert result.value is JobState.ACTIVE
        assert last_request()[1] == "http://api.test/jobs/reports/12"
        assert tracker.message == "El reporte está en curso..."
        assert tracker.progress == 25

    def test_unrecognized_message(self, tracker, respond):
        respond((200, {"message": "Something else"}))
        result = tracker.fetch_job_status(1)
        assert result.ok
        assert tracker.status is None
        assert tracker.message is None

    def test_malformed_status(self, tracker, respond):
        respond((200, {"message": "Job is still processing", "jobProgress": "half"}))

        result = tracker.fetch_job_status(1)

        assert result.kind is ErrorKind.UNEXPECTED_ERROR
        assert tracker.finished

    def test_empty_body(self, tracker, respond):
        respond((200, None))
        result = tracker.fetch_job_status(1)
        assert result.kind is ErrorKind.UNEXPECTED_ERROR


class TestWaitForCompletion:

    def test_until_completed(self, tracker, respond):
        respond(
            (200, {"message": "The job is waiting to be processed"}),
            (200, {"message": "Job is still processing", "jobProgress": 50}),
            (200, {"message": "Job completed successfully", "jobProgress": 100}),
        )
        sleeps = []

        result = tracker.wait_for_completion("job-1", interval=1.5, timeout=60, sleep=sleeps.append)

        assert result.ok
        assert result.value is JobState.COMPLETED
        assert sleeps == [1.5, 1.5]

    def test_stops_on_error(self, tracker, respond):
        respond((200, {"message": "Job is still processing"}), (500, {"message": "boom"}))
        result = tracker.wait_for_completion("job-1", interval=0, timeout=60, sleep=lambda _: None)
        assert result.kind is ErrorKind.SERVER_ERROR

    @pytest.mark.parametrize(
        "message, state",
        [
            ("Job is paused and will be resumed once unpaused", JobState.PAUSED),
            ("Job is stuck and cannot proceed", JobState.STUCK),
            ("Job is in an unknown state", JobState.UNKNOWN),
        ],
    )
    def test_returns_when_stalled(self, tracker, respond, message, state):
        respond((200, {"message": "Job is still processing"}), (200, {"message": message}))
        sleeps = []

        result = tracker.wait_for_completion("job-1", interval=2, timeout=600, sleep=sleeps.append)

        assert result.value is state
        assert tracker.stalled
        assert not tracker.finished
        assert "administradores" in tracker.message
        assert sleeps == [2]

    def test_delayed_keeps_polling(self, tracker, respond):
        respond(
            (200, {"message": "Job is delayed and will be processed later"}),
            (200, {"message": "Job completed successfully"}),
        )
        result = tracker.wait_for_completion("job-1", interval=0, timeout=60, sleep=lambda _: None)
        assert result.value is JobState.COMPLETED

    def test_times_out(self, tracker, session, make_response):
        session.request.side_effect = lambda *a, **k: make_response(200, {"message": "Job is still processing"})
        ticks = iter(range(100))

        with pytest.raises(TimeoutError):
            tracker.wait_for_completion(
                "job-1",
                interval=1,
                timeout=3,
                sleep=lambda _: None,
                clock=lambda: next(ticks),
            )

    def test_defaults_from_settings(self, tracker, respond, monkeypatch):
        monkeypatch.setenv("JOB_POLL_INTERVAL", "0.25")
        get_settings.cache_clear()
        respond((200, {"message": "Job is still processing"}), (200, {"message": "Job failed", "error": "x"}))
        sleeps = []

        tracker.wait_for_completion("job-1", sleep=sleeps.append)

        assert sleeps == [0.25]
