"""Tests for error classification and user messages."""

import pytest

from kb_admin.articles.errors import ARTICLE_ERRORS, EXTRACT_ARTICLES_ERRORS
from kb_admin.aspects.errors import ASPECT_ERRORS
from kb_admin.core.client import NETWORK_ERROR, ApiRequestError
from kb_admin.core.errors import COMMON_TEMPLATES, ErrorCatalog, ErrorKind, MessageTemplate, UserMessage
from kb_admin.legal_basis.errors import LEGAL_BASIS_ERRORS, SEND_LEGAL_BASIS_ERRORS
from kb_admin.legal_verbs.errors import LEGAL_VERB_ERRORS
from kb_admin.req_identification.errors import REQ_IDENTIFICATION_ERRORS, REQ_IDENTIFY_JOB_ERRORS
from kb_admin.requirement_types.errors import REQUIREMENT_TYPE_ERRORS
from kb_admin.requirements.errors import REQUIREMENT_ERRORS
from kb_admin.subjects.errors import SUBJECT_ERRORS

ALL_CATALOGS = [
    SUBJECT_ERRORS,
    ASPECT_ERRORS,
    LEGAL_BASIS_ERRORS,
    REQUIREMENT_ERRORS,
    REQ_IDENTIFICATION_ERRORS,
    REQ_IDENTIFY_JOB_ERRORS,
    ARTICLE_ERRORS,
    EXTRACT_ARTICLES_ERRORS,
    SEND_LEGAL_BASIS_ERRORS,
    LEGAL_VERB_ERRORS,
    REQUIREMENT_TYPE_ERRORS,
]


# =============================================================================
# Templates
# =============================================================================


class TestMessageTemplate:

    template = MessageTemplate(
        title="T",
        message="generic",
        single="one {item}",
        plural="many {items}",
    )

    def test_single_item(self):
        assert self.template.render(["Agua"]) == UserMessage("T", "one Agua")

    def test_plural_items(self):
        assert self.template.render(["Agua", "Aire"]).message == "many Agua, Aire"

    def test_no_items_generic(self):
        assert self.template.render([]).message == "generic"
        assert self.template.render(None).message == "generic"

    def test_static_template_ignores_items(self):
        static = MessageTemplate(title="T", message="static")
        assert static.render([1, 2]).message == "static"


# =============================================================================
# Classification
# =============================================================================


class TestClassify:
    """Known messages first, then 404 resolution, then status codes."""

    def test_server_message_wins_over_status(self):
        kind = SUBJECT_ERRORS.classify(code=404, error="Subject already exists", items=[1])
        assert kind is ErrorKind.DUPLICATED_NAME

    def test_client_message_used_without_server_message(self):
        assert SUBJECT_ERRORS.classify(http_error=NETWORK_ERROR) is ErrorKind.NETWORK_ERROR

    @pytest.mark.parametrize("catalog", ALL_CATALOGS, ids=lambda c: c.name)
    def test_network_error_everywhere(self, catalog):
        assert catalog.classify(http_error=NETWORK_ERROR) is ErrorKind.NETWORK_ERROR
        assert catalog.handle_error(http_error=NETWORK_ERROR).title == "Error de conexión"

    @pytest.mark.parametrize(
        "code, expected",
        [
            (400, ErrorKind.VALIDATION_ERROR),
            (401, ErrorKind.UNAUTHORIZED),
            (403, ErrorKind.UNAUTHORIZED),
            (500, ErrorKind.SERVER_ERROR),
            (418, ErrorKind.UNEXPECTED_ERROR),
            (None, ErrorKind.UNEXPECTED_ERROR),
        ],
    )
    def test_status_codes(self, code, expected):
        assert SUBJECT_ERRORS.classify(code=code) is expected

    def test_unknown_message_falls_through_to_status(self):
        assert SUBJECT_ERRORS.classify(code=500, error="Something odd") is ErrorKind.SERVER_ERROR

    def test_404_one_item(self):
        assert SUBJECT_ERRORS.classify(code=404, items=[7]) is ErrorKind.NOT_FOUND

    def test_404_several_items(self):
        assert SUBJECT_ERRORS.classify(code=404, items=[7, 8]) is ErrorKind.MULTIPLE_NOT_FOUND

    def test_404_no_items_uses_catalog_default(self):
        assert SUBJECT_ERRORS.classify(code=404) is ErrorKind.MULTIPLE_NOT_FOUND
        assert ASPECT_ERRORS.classify(code=404) is ErrorKind.NOT_FOUND

    def test_409_conflict_where_mapped(self):
        assert LEGAL_BASIS_ERRORS.classify(code=409) is ErrorKind.CONFLICT
        assert REQUIREMENT_ERRORS.classify(code=409) is ErrorKind.CONFLICT
        assert SUBJECT_ERRORS.classify(code=409) is ErrorKind.UNEXPECTED_ERROR


class TestDomainCatalogs:

    @pytest.mark.parametrize("catalog", ALL_CATALOGS, ids=lambda c: c.name)
    def test_every_mapped_kind_has_template(self, catalog):
        kinds = set(catalog.server_messages.values()) | set(catalog.status_kinds.values())
        for kind in kinds:
            assert kind in catalog.templates, kind

    @pytest.mark.parametrize("catalog", ALL_CATALOGS, ids=lambda c: c.name)
    def test_common_entries_present(self, catalog):
        for kind in COMMON_TEMPLATES:
            assert kind in catalog.templates

    def test_subject_batch_association_names_items(self):
        message = SUBJECT_ERRORS.handle_error(
            code=409, error="Subjects are associated with legal bases", items=["Agua", "Aire"]
        )
        assert message.title == "Asociación con Fundamentos legales"
        assert "Las materias Agua, Aire están vinculadas" in message.message

    def test_aspect_single_association(self):
        message = ASPECT_ERRORS.handle_error(
            code=409, error="Aspects are associated with requirements", items=["Emisiones"]
        )
        assert message.message.startswith("El aspecto Emisiones está vinculado")

    def test_aspect_subject_not_found(self):
        message = ASPECT_ERRORS.handle_error(code=404, error="Subject not found", items=[3])
        assert message.title == "Materia no encontrada"

    def test_legal_basis_document_required(self):
        message = LEGAL_BASIS_ERRORS.handle_error(
            code=400, error="A document must be provided if extractArticles is true"
        )
        assert message.title == "Documento requerido"

    def test_legal_basis_pending_jobs_batch(self):
        message = LEGAL_BASIS_ERRORS.handle_error(
            code=409, error="Cannot delete Legal Bases with pending jobs", items=["LGEEPA", "NOM-001"]
        )
        assert message.message.startswith("Los fundamentos legales LGEEPA, NOM-001")

    def test_requirement_validation_message(self):
        assert REQUIREMENT_ERRORS.classify(code=400, error="Validation failed") is ErrorKind.VALIDATION_ERROR

    def test_requirement_not_found_by_message(self):
        kind = REQUIREMENT_ERRORS.classify(code=404, error="Requirement not found", items=[1, 2])
        assert kind is ErrorKind.NOT_FOUND

    def test_req_identification_mismatch(self):
        message = REQ_IDENTIFICATION_ERRORS.handle_error(
            code=400, error="All selected legal bases must have the same jurisdiction"
        )
        assert message.title == "Conflicto de jurisdicción"

    def test_job_errors(self):
        assert REQ_IDENTIFY_JOB_ERRORS.classify(code=400) is ErrorKind.INVALID_REQUEST
        assert REQ_IDENTIFY_JOB_ERRORS.classify(code=404) is ErrorKind.UNEXPECTED_ERROR
        assert REQ_IDENTIFY_JOB_ERRORS.classify(error="Job not found") is ErrorKind.JOB_NOT_FOUND
        assert REQ_IDENTIFY_JOB_ERRORS.render(ErrorKind.SERVER_ERROR).title == "Error del servidor"
        assert REQ_IDENTIFY_JOB_ERRORS.render(ErrorKind.UNAUTHORIZED).title == "No autorizado"


class TestHandle:

    def test_handle_reads_exception(self):
        exc = ApiRequestError(
            "Request failed with status code 409",
            status_code=409,
            server_message="Aspect already exists",
        )
        assert ASPECT_ERRORS.handle(exc).title == "Nombre duplicado"

    def test_render_unknown_kind_falls_back(self):
        catalog = ErrorCatalog(name="bare", templates={})
        assert catalog.render(ErrorKind.JOB_NOT_FOUND).title == "Error inesperado"

    def test_catalog_without_not_found_template_skips_404_resolution(self):
        catalog = ErrorCatalog(name="bare", templates={})
        assert catalog.classify(code=404, items=[1]) is ErrorKind.UNEXPECTED_ERROR
