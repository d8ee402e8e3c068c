"""Error messages for articles and article-extraction jobs."""

from kb_admin.core.errors import ErrorCatalog, ErrorKind, MessageTemplate

_RELOAD = "Verifique su existencia recargando la app e intente de nuevo."

ARTICLE_ERRORS = ErrorCatalog(
    name="articles",
    templates={
        ErrorKind.NOT_FOUND: MessageTemplate(
            title="Artículo no encontrado",
            message=f"El artículo no fue encontrado. {_RELOAD}",
        ),
        ErrorKind.MULTIPLE_NOT_FOUND: MessageTemplate(
            title="Artículos no encontrados",
            message=f"Uno o más artículos no fueron encontrados. {_RELOAD}",
        ),
        ErrorKind.LEGAL_BASIS_NOT_FOUND: MessageTemplate(
            title="Fundamento legal no encontrado",
            message=f"El fundamento legal seleccionado no fue encontrado. {_RELOAD}",
        ),
    },
    server_messages={
        "Validation failed": ErrorKind.VALIDATION_ERROR,
        "Unauthorized": ErrorKind.UNAUTHORIZED,
        "LegalBasis not found": ErrorKind.LEGAL_BASIS_NOT_FOUND,
    },
    not_found_default=ErrorKind.NOT_FOUND,
)

# Job status, job error and cancel failures. A bare 404 is not special-cased;
# a missing job is reported by message.
EXTRACT_ARTICLES_ERRORS = ErrorCatalog(
    name="extract_articles",
    templates={
        ErrorKind.INVALID_REQUEST: MessageTemplate(
            title="Solicitud inválida",
            message="La solicitud es inválida. Por favor, cierre esta ventana e intente nuevamente.",
        ),
        ErrorKind.UNAUTHORIZED: MessageTemplate(
            title="No autorizado",
            message="No tiene autorización para realizar esta acción. Verifique su sesión e intente nuevamente.",
        ),
        ErrorKind.JOB_NOT_FOUND: MessageTemplate(
            title="Extracción de artículos cancelada anteriormente",
            message=(
                "La extracción de artículos fue cancelada anteriormente. Si necesita realizar "
                "esta operación, cierre esta ventana e intente nuevamente."
            ),
        ),
        ErrorKind.JOB_CANCELED: MessageTemplate(
            title="Extracción de artículos cancelada",
            message=(
                "La extracción de artículos fue cancelada. Si necesita realizar esta operación, "
                "cierre esta ventana e intente de nuevo."
            ),
        ),
        ErrorKind.LEGAL_BASIS_NOT_FOUND: MessageTemplate(
            title="Fundamento legal no encontrado",
            message=f"Fundamento legal no encontrado. {_RELOAD}",
        ),
        ErrorKind.SERVER_ERROR: MessageTemplate(
            title="Error interno del servidor",
            message="Hubo un problema en el servidor. Por favor, intente nuevamente más tarde.",
        ),
        ErrorKind.UNEXPECTED_ERROR: MessageTemplate(
            title="Error inesperado",
            message=(
                "Se produjo un error inesperado durante la extracción de artículos. "
                "Por favor, intente nuevamente más tarde."
            ),
        ),
        ErrorKind.INVALID_DOCUMENT: MessageTemplate(
            title="Documento inválido",
            message=(
                "El documento proporcionado no es válido o está incompleto. "
                "Asegúrese de cargar un documento válido."
            ),
        ),
        ErrorKind.DOCUMENT_PROCESSING_ERROR: MessageTemplate(
            title="Error al procesar el documento",
            message="Hubo un problema procesando el documento. Por favor, revise el documento y vuelva a intentarlo.",
        ),
        ErrorKind.INVALID_CLASSIFICATION: MessageTemplate(
            title="Clasificación inválida",
            message=(
                "La clasificación proporcionada no es válida. "
                "Seleccione una clasificación válida e intente nuevamente."
            ),
        ),
        ErrorKind.ARTICLE_PROCESSING_ERROR: MessageTemplate(
            title="Error al procesar los artículos",
            message=(
                "No se pudieron extraer los artículos del documento. "
                "Verifique el documento proporcionado e intente nuevamente."
            ),
        ),
        ErrorKind.FAILED_TO_INSERT_ARTICLES: MessageTemplate(
            title="Error al guardar los artículos",
            message="Hubo un problema al intentar guardar los artículos extraídos. Por favor, intente nuevamente.",
        ),
    },
    server_messages={
        "Job not found": ErrorKind.JOB_NOT_FOUND,
        "LegalBasis not found": ErrorKind.LEGAL_BASIS_NOT_FOUND,
        "Invalid document: missing buffer or mimetype": ErrorKind.INVALID_DOCUMENT,
        "Document Processing Error": ErrorKind.DOCUMENT_PROCESSING_ERROR,
        "Invalid Classification": ErrorKind.INVALID_CLASSIFICATION,
        "Article Processing Error": ErrorKind.ARTICLE_PROCESSING_ERROR,
        "Failed to insert articles": ErrorKind.FAILED_TO_INSERT_ARTICLES,
        "Job was canceled": ErrorKind.JOB_CANCELED,
        "Unexpected error during article processing": ErrorKind.UNEXPECTED_ERROR,
    },
    status_kinds={400: ErrorKind.INVALID_REQUEST},
)
