"""Tests for requirement identifications and job tracking."""

import pytest

from kb_admin.core.errors import ErrorKind
from kb_admin.core.jobs import JobState
from kb_admin.req_identification import (
    IdentificationJobTracker,
    IdentificationStatus,
    ReqIdentificationApi,
    ReqIdentificationManager,
)


def identification(id, name=None, status="Activo"):
    return {"id": id, "name": name or f"Identificación {id}", "description": None, "status": status}


@pytest.fixture
def manager(client):
    return ReqIdentificationManager(client, debounce_seconds=60)


@pytest.fixture
def tracker(client):
    return IdentificationJobTracker(client)


# =============================================================================
# Endpoints
# =============================================================================


class TestReqIdentificationApi:

    def test_create(self, client, respond, last_request):
        respond((201, {"reqIdentificationId": 8, "jobId": "job-1"}))

        created = ReqIdentificationApi(client).create("Revisión", ["1", 2], "Descripción", "High")

        assert created.req_identification_id == 8
        assert created.job_id == "job-1"
        _, url, kwargs = last_request()
        assert url == "http://api.test/req-identification"
        assert kwargs["json"] == {
            "reqIdentificationName": "Revisión",
            "reqIdentificationDescription": "Descripción",
            "legalBasisIds": [1, 2],
            "intelligenceLevel": "High",
        }

    def test_get(self, client, respond, last_request):
        respond((200, {"reqIdentification": identification(3)}))
        assert ReqIdentificationApi(client).get(3).id == 3
        assert last_request()[1] == "http://api.test/req-identification/3"

    @pytest.mark.parametrize(
        "call, path, params",
        [
            (lambda api: api.search("name", "Rev"), "/req-identification/search/name", {"name": "Rev"}),
            (lambda api: api.search("status", "Fallido"), "/req-identification/search/status", {"status": "Fallido"}),
            (lambda api: api.find_by_user(4), "/req-identification/search/user/4", None),
            (
                lambda api: api.find_by_created_at("2024-01-01", ""),
                "/req-identification/search/created-at",
                {"from": "2024-01-01"},
            ),
            (lambda api: api.find_by_subject(2), "/req-identification/search/subject/2", None),
            (
                lambda api: api.find_by_subject_and_aspects(2, [5]),
                "/req-identification/search/subject/2/aspects",
                {"aspectIds": [5]},
            ),
            (
                lambda api: api.find_by_state_and_municipalities("Jalisco", ["Zapopan"]),
                "/req-identification/search/state-municipalities",
                {"state": "Jalisco", "municipalities": ["Zapopan"]},
            ),
        ],
    )
    def test_searches(self, client, respond, last_request, call, path, params):
        respond((200, {"reqIdentifications": [identification(1)]}))
        records = call(ReqIdentificationApi(client))
        assert records[0].id == 1
        _, url, kwargs = last_request()
        assert url == f"http://api.test{path}"
        assert kwargs["params"] == params

    def test_update_multipart(self, client, respond, last_request):
        respond((200, {"reqIdentification": identification(3, "Nuevo")}))
        ReqIdentificationApi(client).update(3, req_identification_name="Nuevo", new_user_id=9)
        method, url, kwargs = last_request()
        assert (method, url) == ("PATCH", "http://api.test/req-identification/3")
        assert kwargs["files"] == {
            "reqIdentificationName": (None, "Nuevo"),
            "newUserId": (None, "9"),
        }

    def test_delete_batch(self, client, respond, last_request):
        respond((204, None))
        ReqIdentificationApi(client).delete_batch([1, 2])
        _, url, kwargs = last_request()
        assert url == "http://api.test/req-identification/delete/batch"
        assert kwargs["json"] == {"reqIdentificationIds": [1, 2]}



# =============================================================================
# Manager
# =============================================================================


class TestReqIdentificationManager:

    def test_add_returns_ids_without_touching_list(self, manager, respond):
        respond((201, {"reqIdentificationId": 8, "jobId": "job-1"}))
        result = manager.add_req_identification("Revisión", [1, 2])
        assert result.value.job_id == "job-1"
        assert manager.req_identifications == []

    def test_add_mismatched_subjects(self, manager, respond):
        respond((400, {"message": "All selected legal bases must have the same subject"}))
        result = manager.add_req_identification("Revisión", [1, 2])
        assert result.kind is ErrorKind.SUBJECTS_NOT_MATCH

    def test_fetch_keeps_server_order(self, manager, respond):
        respond((200, {"reqIdentifications": [identification(1), identification(2)]}))
        manager.fetch_req_identifications()
        assert [r.id for r in manager.req_identifications] == [1, 2]

    def test_status_is_typed(self, manager, respond):
        respond((200, {"reqIdentifications": [identification(1, status="Fallido")]}))
        manager.fetch_req_identifications()
        assert manager.req_identifications[0].status is IdentificationStatus.FAILED

    def test_unknown_status_is_unexpected_error(self, manager, respond):
        respond((200, {"reqIdentifications": [identification(1, status="Borrado")]}))

        result = manager.fetch_req_identifications()

        assert result.kind is ErrorKind.UNEXPECTED_ERROR
        assert manager.error.title == "Error inesperado"
        assert manager.loading is False
        assert manager.req_identifications == []

    def test_search_dispatch(self, manager, respond, last_request):
        respond(
            (200, {"reqIdentifications": []}),
            (200, {"reqIdentifications": []}),
            (200, {"reqIdentifications": []}),
        )
        manager.search("user", 4)
        assert last_request()[1] == "http://api.test/req-identification/search/user/4"
        manager.search("created_at", {"date_from": "2024-01-01", "date_to": "2024-02-01"})
        assert last_request()[2]["params"] == {"from": "2024-01-01", "to": "2024-02-01"}
        manager.search("description", "agua")
        assert last_request()[2]["params"] == {"description": "agua"}

    def test_search_unknown(self, manager):
        with pytest.raises(ValueError):
            manager.search("color", "rojo")

    def test_modify_and_remove(self, manager, respond):
        respond(
            (200, {"reqIdentifications": [identification(1), identification(2)]}),
            (200, {"reqIdentification": identification(2, "Editada")}),
            (204, None),
        )
        manager.fetch_req_identifications()
        manager.modify_req_identification(2, req_identification_name="Editada")
        assert manager.req_identifications[1].name == "Editada"
        manager.remove_req_identification(1)
        assert [r.id for r in manager.req_identifications] == [2]

    def test_remove_batch_not_found(self, manager, respond):
        respond((404, {"message": "Not found"}))
        result = manager.remove_req_identifications([1, 2])
        assert result.kind is ErrorKind.MULTIPLE_NOT_FOUND
        assert result.error.title == "Identificaciones no encontradas"


# =============================================================================
# Job tracking
# =============================================================================


class TestIdentificationJobTracker:

    @pytest.mark.parametrize(
        "message, state",
        [
            ("The job is waiting to be processed", JobState.WAITING),
            ("Job is still processing", JobState.ACTIVE),
            ("Job completed successfully", JobState.COMPLETED),
            ("Job is delayed and will be processed later", JobState.DELAYED),
            ("Job is paused and will be resumed once unpaused", JobState.PAUSED),
            ("Job is stuck and cannot proceed", JobState.STUCK),
            ("Job is in an unknown state", JobState.UNKNOWN),
        ],
    )
    def test_states(self, tracker, respond, message, state):
        respond((200, {"message": message, "jobProgress": 10}))
        result = tracker.fetch_job_status("job-1")
        assert result.ok
        assert tracker.status is state
        assert tracker.message.startswith("La identificación de requerimientos")
        assert tracker.progress == 10

    def test_job_reports_error(self, tracker, respond):
        respond((200, {"message": "Job failed", "error": "Unexpected error identifying requirements"}))

        result = tracker.fetch_job_status("job-1")

        assert not result.ok
        assert tracker.status is JobState.FAILED
        assert tracker.error_status is ErrorKind.UNEXPECTED_ERROR
        assert tracker.error.title == "Error inesperado"
        assert tracker.progress is None
        assert tracker.finished

    def test_job_not_found(self, tracker, respond):
        respond((404, {"message": "Job not found"}))
        tracker.fetch_job_status("job-1")
        assert tracker.error_status is ErrorKind.JOB_NOT_FOUND
        assert tracker.error.title == "Identificación de requerimientos cancelada"
        assert tracker.status is None

    def test_invalid_request(self, tracker, respond):
        respond((400, {"message": "Invalid job id"}))
        tracker.fetch_job_status("bad")
        assert tracker.error_status is ErrorKind.INVALID_REQUEST

    def test_clear_error_and_reset(self, tracker, respond):
        respond((500, {}))
        tracker.fetch_job_status("job-1")
        assert tracker.error is not None

        tracker.clear_error()
        assert tracker.error is None and tracker.error_status is None

        tracker.progress = 50
        tracker.reset()
        assert tracker.progress is None and tracker.status is None


    def test_polls_identification_endpoint(self, tracker, respond, last_request):
        respond((200, {"message": "Job is still processing", "jobProgress": 40}))
        tracker.fetch_job_status("job-1")
        assert last_request()[1] == "http://api.test/jobs/req-identification/job-1"
