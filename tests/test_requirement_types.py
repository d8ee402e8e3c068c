"""Tests for the requirement type endpoints and manager."""

import pytest

from kb_admin.core.errors import ErrorKind
from kb_admin.requirement_types import RequirementTypeManager, RequirementTypesApi


def requirement_type(id, name=None):
    return {
        "id": id,
        "name": name or f"Tipo {id}",
        "description": "Descripción",
        "classification": "Obligación",
    }


@pytest.fixture
def manager(client):
    return RequirementTypeManager(client, debounce_seconds=60)


class TestRequirementTypesApi:

    def test_get_all(self, client, respond, last_request):
        respond((200, {"requirementTypes": [requirement_type(1)]}))
        types = RequirementTypesApi(client).get_all()
        assert types[0].classification == "Obligación"
        assert last_request()[1] == "http://api.test/requirement-types"

    def test_get_uses_singular_path(self, client, respond, last_request):
        respond((200, {"requirementType": requirement_type(2)}))
        RequirementTypesApi(client).get(2)
        assert last_request()[1] == "http://api.test/requirement-type/2"

    @pytest.mark.parametrize(
        "method, path, param",
        [
            ("find_by_name", "name", "name"),
            ("find_by_classification", "classification", "classification"),
            ("find_by_description", "search/description", "description"),
        ],
    )
    def test_searches(self, client, respond, last_request, method, path, param):
        respond((200, {"requirementTypes": []}))
        getattr(RequirementTypesApi(client), method)("obl")
        _, url, kwargs = last_request()
        assert url == f"http://api.test/requirement-types/{path}"
        assert kwargs["params"] == {param: "obl"}

    def test_update(self, client, respond, last_request):
        respond((200, {"requirementType": requirement_type(2, "Otro")}))
        RequirementTypesApi(client).update(2, name="Otro")
        method, url, kwargs = last_request()
        assert method == "PATCH"
        assert url == "http://api.test/requirement-type/2"
        assert kwargs["json"]["name"] == "Otro"

    def test_delete_batch(self, client, respond, last_request):
        respond((204, None))
        RequirementTypesApi(client).delete_batch([1, 2])
        _, url, kwargs = last_request()
        assert url == "http://api.test/requirement-types/delete/batch"
        assert kwargs["json"] == {"requirementTypesIds": [1, 2]}


class TestRequirementTypeManager:

    def test_fetch(self, manager, respond):
        respond((200, {"requirementTypes": [requirement_type(1), requirement_type(2)]}))
        assert manager.fetch_requirement_types().ok
        assert [t.id for t in manager.requirement_types] == [1, 2]

    def test_search_by_classification(self, manager, respond, last_request):
        respond((200, {"requirementTypes": [requirement_type(3)]}))
        manager.search("classification", "Obligación")
        assert last_request()[1] == "http://api.test/requirement-types/classification"
        assert [t.id for t in manager.requirement_types] == [3]

    def test_add_prepends(self, manager, respond):
        respond(
            (200, {"requirementTypes": [requirement_type(1)]}),
            (201, {"requirementType": requirement_type(2)}),
        )
        manager.fetch_requirement_types()
        manager.add_requirement_type("Tipo 2", "Descripción", "Obligación")
        assert [t.id for t in manager.requirement_types] == [2, 1]

    def test_duplicated_name(self, manager, respond):
        respond((409, {"message": "Requirement type name already exists"}))
        result = manager.add_requirement_type("Tipo 1", "Descripción", "Obligación")
        assert result.kind is ErrorKind.DUPLICATED_NAME

    def test_remove_associated(self, manager, respond):
        respond(
            (200, {"requirementTypes": [requirement_type(1)]}),
            (409, {"message": "Requirement Type is associated with one or more requirement identifications"}),
        )
        manager.fetch_requirement_types()
        result = manager.remove_requirement_type(1)
        assert result.kind is ErrorKind.ASSOCIATED_TO_REQ_IDENTIFICATIONS
        assert len(manager.requirement_types) == 1

    def test_remove_batch_associated_names_ids(self, manager, respond):
        respond(
            (200, {"requirementTypes": [requirement_type(1), requirement_type(2)]}),
            (409, {"message": "Some Requirement Types are associated with requirement identifications"}),
        )
        manager.fetch_requirement_types()
        result = manager.remove_requirement_types([1, 2])
        assert result.kind is ErrorKind.MULTIPLE_ASSOCIATED_TO_REQ_IDENTIFICATIONS
        assert result.error.message.startswith("Los tipos de requerimiento 1, 2 están vinculados")

    def test_fetch_not_found_without_ids(self, manager, respond):
        respond((404, {}))
        result = manager.fetch_requirement_types()
        assert result.kind is ErrorKind.MULTIPLE_NOT_FOUND
        assert manager.error.message.startswith("Uno o más tipos de requerimiento")

    def test_modify_in_place(self, manager, respond):
        respond(
            (200, {"requirementTypes": [requirement_type(1), requirement_type(2)]}),
            (200, {"requirementType": requirement_type(2, "Nuevo")}),
        )
        manager.fetch_requirement_types()
        manager.modify_requirement_type(2, name="Nuevo")
        assert [t.name for t in manager.requirement_types] == ["Tipo 1", "Nuevo"]
