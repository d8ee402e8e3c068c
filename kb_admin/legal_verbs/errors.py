"""Error messages for legal verb operations."""

from kb_admin.core.errors import ErrorCatalog, ErrorKind, MessageTemplate

LEGAL_VERB_ERRORS = ErrorCatalog(
    name="legal_verbs",
    templates={
        ErrorKind.NOT_FOUND: MessageTemplate(
            title="No encontrado",
            message="Verbo legal no encontrado. Verifique su existencia recargando la app e intente de nuevo.",
        ),
        ErrorKind.MULTIPLE_NOT_FOUND: MessageTemplate(
            title="No encontrado",
            message=(
                "Uno o más verbos legales no encontrados. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.DUPLICATED_NAME: MessageTemplate(
            title="Nombre duplicado",
            message="El nombre del verbo legal ya está en uso. Por favor, utilice otro.",
        ),
    },
    server_messages={
        "LegalVerb already exists": ErrorKind.DUPLICATED_NAME,
        "Legal verb name already exists": ErrorKind.DUPLICATED_NAME,
    },
    status_kinds={409: ErrorKind.DUPLICATED_NAME},
    not_found_default=ErrorKind.MULTIPLE_NOT_FOUND,
)
