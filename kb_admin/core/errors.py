"""
Error catalogs: map failed API calls to user-facing messages.

Every failure is first classified into an ``ErrorKind`` (from the server's
message, the client message, or the HTTP status) and then rendered through
the domain's message table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Sequence

from .client import NETWORK_ERROR, ApiRequestError


class ErrorKind(str, Enum):
    """Failure categories shared by every domain catalog."""
    NETWORK_ERROR = "NETWORK_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    MULTIPLE_NOT_FOUND = "MULTIPLE_NOT_FOUND"
    SERVER_ERROR = "SERVER_ERROR"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"
    CONFLICT = "CONFLICT"
    DUPLICATED_NAME = "DUPLICATED_NAME"
    ASSOCIATED_BASES = "ASSOCIATED_BASES"
    MULTIPLE_ASSOCIATED_BASES = "MULTIPLE_ASSOCIATED_BASES"
    ASSOCIATED_REQUIREMENTS = "ASSOCIATED_REQUIREMENTS"
    MULTIPLE_ASSOCIATED_REQUIREMENTS = "MULTIPLE_ASSOCIATED_REQUIREMENTS"
    SUBJECT_NOT_FOUND = "SUBJECT_NOT_FOUND"
    ASPECTS_NOT_FOUND = "ASPECTS_NOT_FOUND"
    DOCUMENT_REQUIRED = "DOCUMENT_REQUIRED"
    DOCUMENT_CONFLICT = "DOCUMENT_CONFLICT"
    PENDING_JOBS_CONFLICT = "PENDING_JOBS_CONFLICT"
    MULTIPLE_PENDING_JOBS_CONFLICT = "MULTIPLE_PENDING_JOBS_CONFLICT"
    ARTICLES_EXTRACTION_CONFLICT = "ARTICLES_EXTRACTION_CONFLICT"
    REMOVE_DOCUMENT_PENDING_CONFLICT = "REMOVE_DOCUMENT_PENDING_CONFLICT"
    NEW_DOCUMENT_PENDING_CONFLICT = "NEW_DOCUMENT_PENDING_CONFLICT"
    ASSOCIATED_TO_REQ_IDENTIFICATIONS = "ASSOCIATED_TO_REQ_IDENTIFICATIONS"
    MULTIPLE_ASSOCIATED_TO_REQ_IDENTIFICATIONS = "MULTIPLE_ASSOCIATED_TO_REQ_IDENTIFICATIONS"
    REQ_IDENTIFICATION_JOBS_CONFLICT = "REQ_IDENTIFICATION_JOBS_CONFLICT"
    MULTIPLE_REQ_IDENTIFICATION_JOBS_CONFLICT = "MULTIPLE_REQ_IDENTIFICATION_JOBS_CONFLICT"
    LEGAL_BASIS_NOT_FOUND = "LEGAL_BASIS_NOT_FOUND"
    SUBJECTS_NOT_MATCH = "SUBJECTS_NOT_MATCH"
    JURISDICTIONS_NOT_MATCH = "JURISDICTIONS_NOT_MATCH"
    STATES_NOT_MATCH = "STATES_NOT_MATCH"
    MUNICIPALITIES_NOT_MATCH = "MUNICIPALITIES_NOT_MATCH"
    REQUIREMENTS_NOT_FOUND = "REQUIREMENTS_NOT_FOUND"
    INVALID_REQUEST = "INVALID_REQUEST"
    JOB_NOT_FOUND = "JOB_NOT_FOUND"
    JOB_CANCELED = "JOB_CANCELED"
    INVALID_DOCUMENT = "INVALID_DOCUMENT"
    DOCUMENT_PROCESSING_ERROR = "DOCUMENT_PROCESSING_ERROR"
    INVALID_CLASSIFICATION = "INVALID_CLASSIFICATION"
    ARTICLE_PROCESSING_ERROR = "ARTICLE_PROCESSING_ERROR"
    FAILED_TO_INSERT_ARTICLES = "FAILED_TO_INSERT_ARTICLES"


@dataclass(frozen=True)
class UserMessage:
    """Title and message shown to the user for a failure."""
    title: str
    message: str


@dataclass(frozen=True)
class MessageTemplate:
    """Message table entry.

    ``single`` and ``plural`` name the affected records when they are known:
    ``single`` receives ``{item}``, ``plural`` receives ``{items}`` joined
    with ", ". Without item names the generic ``message`` is used.
    """
    title: str
    message: str
    single: str | None = None
    plural: str | None = None

    def render(self, items: Sequence[object] | None = None) -> UserMessage:
        if items and self.single and len(items) == 1:
            return UserMessage(self.title, self.single.format(item=items[0]))
        if items and self.plural:
            joined = ", ".join(str(item) for item in items)
            return UserMessage(self.title, self.plural.format(items=joined))
        return UserMessage(self.title, self.message)


BASE_STATUS_KINDS: dict[int, ErrorKind] = {
    400: ErrorKind.VALIDATION_ERROR,
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.UNAUTHORIZED,
    500: ErrorKind.SERVER_ERROR,
}

# Entries every catalog carries unless it overrides them.
COMMON_TEMPLATES: dict[ErrorKind, MessageTemplate] = {
    ErrorKind.NETWORK_ERROR: MessageTemplate(
        title="Error de conexión",
        message="Hubo un problema de red. Verifique su conexión a internet e intente nuevamente.",
    ),
    ErrorKind.VALIDATION_ERROR: MessageTemplate(
        title="Error de validación",
        message="Revisa los datos introducidos. Uno o más campos no son válidos.",
    ),
    ErrorKind.UNAUTHORIZED: MessageTemplate(
        title="Acceso no autorizado",
        message="No tiene permisos para realizar esta acción. Verifique su sesión.",
    ),
    ErrorKind.SERVER_ERROR: MessageTemplate(
        title="Error interno del servidor",
        message="Hubo un error en el servidor. Espere un momento e intente nuevamente.",
    ),
    ErrorKind.UNEXPECTED_ERROR: MessageTemplate(
        title="Error inesperado",
        message="Ocurrió un error inesperado. Por favor, intente nuevamente más tarde.",
    ),
}


@dataclass
class ErrorCatalog:
    """Per-domain lookup from failures to ``UserMessage``s.

    Args:
        name: Domain name, used in logs
        templates: Message table; merged over ``COMMON_TEMPLATES``
        server_messages: Exact server/client messages mapped to kinds
        status_kinds: Extra HTTP status mappings merged over the base table
        not_found_default: Kind for a 404 when no item ids are known
    """
    name: str
    templates: Mapping[ErrorKind, MessageTemplate]
    server_messages: Mapping[str, ErrorKind] = field(default_factory=dict)
    status_kinds: Mapping[int, ErrorKind] = field(default_factory=dict)
    not_found_default: ErrorKind = ErrorKind.MULTIPLE_NOT_FOUND

    def __post_init__(self):
        self.templates = {**COMMON_TEMPLATES, **self.templates}
        self.server_messages = {NETWORK_ERROR: ErrorKind.NETWORK_ERROR, **self.server_messages}
        self.status_kinds = {**BASE_STATUS_KINDS, **self.status_kinds}

    def classify(
        self,
        code: int | None = None,
        error: str | None = None,
        http_error: str | None = None,
        items: Sequence[object] | None = None,
    ) -> ErrorKind:
        """Pick the error kind for a failure.

        A known server (or client) message wins over the status code. A 404
        is resolved against the number of affected items when the catalog
        knows about missing records.
        """
        message = error or http_error
        if message and message in self.server_messages:
            return self.server_messages[message]

        if code == 404 and ErrorKind.NOT_FOUND in self.templates:
            if items:
                return ErrorKind.NOT_FOUND if len(items) == 1 else ErrorKind.MULTIPLE_NOT_FOUND
            return self.not_found_default

        return self.status_kinds.get(code, ErrorKind.UNEXPECTED_ERROR)

    def render(self, kind: ErrorKind, items: Sequence[object] | None = None) -> UserMessage:
        template = self.templates.get(kind) or self.templates[ErrorKind.UNEXPECTED_ERROR]
        return template.render(items)

    def handle_error(
        self,
        code: int | None = None,
        error: str | None = None,
        http_error: str | None = None,
        items: Sequence[object] | None = None,
    ) -> UserMessage:
        """Classify and render in one step."""
        kind = self.classify(code=code, error=error, http_error=http_error, items=items)
        return self.render(kind, items)

    def handle(self, exc: ApiRequestError, items: Sequence[object] | None = None) -> UserMessage:
        """Render the message for a failed request."""
        return self.handle_error(
            code=exc.status_code,
            error=exc.server_message,
            http_error=exc.client_message,
            items=items,
        )
