"""Tests for the legal verb endpoints and manager."""

import pytest

from kb_admin.core.errors import ErrorKind
from kb_admin.legal_verbs import LegalVerbManager, LegalVerbsApi


def legal_verb(id, name=None):
    return {
        "id": id,
        "name": name or f"verbo {id}",
        "description": "Descripción",
        "translation": "shall",
    }


@pytest.fixture
def manager(client):
    return LegalVerbManager(client, debounce_seconds=60)


class TestLegalVerbsApi:

    def test_get_all(self, client, respond, last_request):
        respond((200, {"legalVerbs": [legal_verb(1)]}))
        verbs = LegalVerbsApi(client).get_all()
        assert verbs[0].translation == "shall"
        assert last_request()[1] == "http://api.test/legal-verbs"

    def test_get(self, client, respond, last_request):
        respond((200, {"legalVerb": legal_verb(4, "deberá")}))
        assert LegalVerbsApi(client).get(4).name == "deberá"
        assert last_request()[1] == "http://api.test/legal-verbs/4"

    @pytest.mark.parametrize(
        "method, path, param",
        [
            ("find_by_name", "name", "name"),
            ("find_by_description", "description", "description"),
            ("find_by_translation", "translation", "translation"),
        ],
    )
    def test_searches(self, client, respond, last_request, method, path, param):
        respond((200, {"legalVerbs": []}))
        getattr(LegalVerbsApi(client), method)("deb")
        _, url, kwargs = last_request()
        assert url == f"http://api.test/legal-verbs/search/{path}"
        assert kwargs["params"] == {param: "deb"}

    def test_create(self, client, respond, last_request):
        respond((201, {"legalVerb": legal_verb(5)}))
        LegalVerbsApi(client).create("podrá", "Facultad", "may")
        method, url, kwargs = last_request()
        assert method == "POST"
        assert kwargs["json"] == {"name": "podrá", "description": "Facultad", "translation": "may"}

    def test_delete_batch(self, client, respond, last_request):
        respond((204, None))
        LegalVerbsApi(client).delete_batch([1, 2])
        _, url, kwargs = last_request()
        assert url == "http://api.test/legal-verbs/delete/batch"
        assert kwargs["json"] == {"legalVerbsIds": [1, 2]}


class TestLegalVerbManager:

    def test_fetch_keeps_server_order(self, manager, respond):
        respond((200, {"legalVerbs": [legal_verb(2), legal_verb(1)]}))
        assert manager.fetch_legal_verbs().ok
        assert [v.id for v in manager.legal_verbs] == [2, 1]
        assert not manager.loading

    def test_search_by_translation(self, manager, respond, last_request):
        respond((200, {"legalVerbs": [legal_verb(3)]}))
        manager.search("translation", "shall")
        assert last_request()[1] == "http://api.test/legal-verbs/search/translation"
        assert [v.id for v in manager.legal_verbs] == [3]

    def test_empty_search_reloads(self, manager, respond, last_request):
        respond((200, {"legalVerbs": []}))
        manager.search("name", "")
        assert last_request()[1] == "http://api.test/legal-verbs"

    def test_unsupported_filter(self, manager):
        with pytest.raises(ValueError):
            manager.search("id", 1)

    def test_add_prepends(self, manager, respond):
        respond((200, {"legalVerbs": [legal_verb(1)]}), (201, {"legalVerb": legal_verb(2)}))
        manager.fetch_legal_verbs()
        assert manager.add_legal_verb("verbo 2", "Descripción", "shall").ok
        assert [v.id for v in manager.legal_verbs] == [2, 1]

    def test_duplicated_name(self, manager, respond):
        respond((409, {"message": "LegalVerb already exists"}))
        result = manager.add_legal_verb("deberá", "Obligación", "shall")
        assert result.kind is ErrorKind.DUPLICATED_NAME
        assert result.error.title == "Nombre duplicado"

    def test_modify_in_place(self, manager, respond):
        respond(
            (200, {"legalVerbs": [legal_verb(1), legal_verb(2)]}),
            (200, {"legalVerb": legal_verb(1, "renombrado")}),
        )
        manager.fetch_legal_verbs()
        manager.modify_legal_verb(1, name="renombrado")
        assert [v.name for v in manager.legal_verbs] == ["renombrado", "verbo 2"]

    def test_get_missing(self, manager, respond):
        respond((404, {"message": "LegalVerb not found"}))
        result = manager.fetch_legal_verb_by_id(9)
        assert result.kind is ErrorKind.NOT_FOUND
        assert result.error.message.startswith("Verbo legal no encontrado.")

    def test_remove_batch_missing_uses_names(self, manager, respond):
        respond(
            (200, {"legalVerbs": [legal_verb(1), legal_verb(2)]}),
            (404, {"message": "Legal verbs not found", "errors": {"legalVerbs": [{"id": 1, "name": "verbo 1"}]}}),
        )
        manager.fetch_legal_verbs()
        result = manager.remove_legal_verbs([1, 2])
        assert result.kind is ErrorKind.NOT_FOUND
        assert len(manager.legal_verbs) == 2

    def test_remove_batch(self, manager, respond):
        respond((200, {"legalVerbs": [legal_verb(1), legal_verb(2)]}), (204, None))
        manager.fetch_legal_verbs()
        assert manager.remove_legal_verbs([1]).ok
        assert [v.id for v in manager.legal_verbs] == [2]
