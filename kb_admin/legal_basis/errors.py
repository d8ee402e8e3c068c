"""Error messages for legal basis operations."""

from kb_admin.core.errors import ErrorCatalog, ErrorKind, MessageTemplate

LEGAL_BASIS_ERRORS = ErrorCatalog(
    name="legal_basis",
    templates={
        ErrorKind.NOT_FOUND: MessageTemplate(
            title="Fundamento legal no encontrado",
            message=(
                "El fundamento legal no fue encontrado. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.MULTIPLE_NOT_FOUND: MessageTemplate(
            title="Varios fundamentos legales no encontrados",
            message=(
                "Uno o más fundamentos legales no fueron encontrados. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.SUBJECT_NOT_FOUND: MessageTemplate(
            title="Materia no encontrada",
            message=(
                "La materia seleccionada no fue encontrada. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.ASPECTS_NOT_FOUND: MessageTemplate(
            title="Aspectos no encontrados",
            message=(
                "Algunos aspectos seleccionados no fueron encontrados. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.DUPLICATED_NAME: MessageTemplate(
            title="Nombre duplicado",
            message="Ya existe un fundamento legal con el mismo nombre. Por favor, utiliza otro.",
        ),
        ErrorKind.DOCUMENT_REQUIRED: MessageTemplate(
            title="Documento requerido",
            message="Debe proporcionarse un documento si se desea extraer artículos.",
        ),
        ErrorKind.DOCUMENT_CONFLICT: MessageTemplate(
            title="Conflicto con el documento",
            message="No se puede proporcionar un documento si desea eliminarlo.",
        ),
        ErrorKind.PENDING_JOBS_CONFLICT: MessageTemplate(
            title="Conflicto con trabajos pendientes",
            message=(
                "El fundamento legal no puede ser eliminado porque en este momento "
                "se están extrayendo artículos de su documento asociado."
            ),
        ),
        ErrorKind.MULTIPLE_PENDING_JOBS_CONFLICT: MessageTemplate(
            title="Conflicto con trabajos pendientes",
            message=(
                "Uno o más fundamentos legales no pueden ser eliminados porque "
                "se están extrayendo artículos de sus documentos asociados."
            ),
            single=(
                "El fundamento legal {item} no puede ser eliminado porque "
                "se están extrayendo artículos de su documento asociado."
            ),
            plural=(
                "Los fundamentos legales {items} no pueden ser eliminados porque "
                "se están extrayendo artículos de sus documentos asociados."
            ),
        ),
        ErrorKind.ARTICLES_EXTRACTION_CONFLICT: MessageTemplate(
            title="Conflicto de extracción de artículos",
            message=(
                "No se pueden extraer artículos en este momento porque ya se están "
                "extrayendo artículos de su documento asociado."
            ),
        ),
        ErrorKind.REMOVE_DOCUMENT_PENDING_CONFLICT: MessageTemplate(
            title="Conflicto al eliminar el documento",
            message=(
                "El documento no puede ser eliminado porque en este momento "
                "se están extrayendo artículos de su documento asociado."
            ),
        ),
        ErrorKind.NEW_DOCUMENT_PENDING_CONFLICT: MessageTemplate(
            title="Conflicto al subir un nuevo documento",
            message=(
                "No se puede subir un nuevo documento porque en este momento "
                "se están extrayendo artículos de su documento asociado."
            ),
        ),
        ErrorKind.CONFLICT: MessageTemplate(
            title="Conflicto detectado",
            message="Ocurrió un conflicto con la operación. Verifique la información e intente nuevamente.",
        ),
    },
    server_messages={
        "LegalBasis already exists": ErrorKind.DUPLICATED_NAME,
        "A document must be provided if extractArticles is true": ErrorKind.DOCUMENT_REQUIRED,
        "Cannot provide a document if removeDocument is true": ErrorKind.DOCUMENT_CONFLICT,
        "The document cannot be removed because there are pending jobs for this Legal Basis": (
            ErrorKind.REMOVE_DOCUMENT_PENDING_CONFLICT
        ),
        "Articles cannot be extracted because there is already a process that does so": (
            ErrorKind.ARTICLES_EXTRACTION_CONFLICT
        ),
        "A new document cannot be uploaded because there are pending jobs for this Legal Basis": (
            ErrorKind.NEW_DOCUMENT_PENDING_CONFLICT
        ),
        "Subject not found": ErrorKind.SUBJECT_NOT_FOUND,
        "Aspects not found for IDs": ErrorKind.ASPECTS_NOT_FOUND,
        "Cannot delete LegalBasis with pending jobs": ErrorKind.PENDING_JOBS_CONFLICT,
        "Cannot delete Legal Bases with pending jobs": ErrorKind.MULTIPLE_PENDING_JOBS_CONFLICT,
    },
    status_kinds={409: ErrorKind.CONFLICT},
    not_found_default=ErrorKind.MULTIPLE_NOT_FOUND,
)

# Status and job errors of the job that sends legal bases out. A 404 means
# the job is gone.
SEND_LEGAL_BASIS_ERRORS = ErrorCatalog(
    name="send_legal_basis",
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
            title="Envío de fundamentos legales cancelado anteriormente",
            message=(
                "El envío de fundamentos legales fue cancelado anteriormente. Si necesita realizar "
                "esta operación, cierre esta ventana e intente nuevamente."
            ),
        ),
        ErrorKind.CONFLICT: MessageTemplate(
            title="Conflicto de datos",
            message="Ocurrió un conflicto con la operación. Verifique la información e intente nuevamente.",
        ),
    },
    server_messages={
        "Job not found": ErrorKind.JOB_NOT_FOUND,
        "Unexpected error sending legal basis": ErrorKind.UNEXPECTED_ERROR,
    },
    status_kinds={
        400: ErrorKind.INVALID_REQUEST,
        404: ErrorKind.JOB_NOT_FOUND,
        409: ErrorKind.CONFLICT,
    },
)
