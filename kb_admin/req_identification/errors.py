"""Error messages for requirement identifications and their jobs."""

from kb_admin.core.errors import ErrorCatalog, ErrorKind, MessageTemplate

_SAME_LEGAL_BASES = "Todos los fundamentos legales seleccionados deben"

REQ_IDENTIFICATION_ERRORS = ErrorCatalog(
    name="req_identification",
    templates={
        ErrorKind.NOT_FOUND: MessageTemplate(
            title="Identificación no encontrada",
            message=(
                "La identificación de requerimientos no fue encontrada. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.MULTIPLE_NOT_FOUND: MessageTemplate(
            title="Identificaciones no encontradas",
            message=(
                "Una o más identificaciones de requerimientos no fueron encontradas. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.DUPLICATED_NAME: MessageTemplate(
            title="Nombre duplicado",
            message=(
                "Ya existe una identificación de requerimientos con el mismo nombre. "
                "Por favor, utilice otro."
            ),
        ),
        ErrorKind.LEGAL_BASIS_NOT_FOUND: MessageTemplate(
            title="Fundamentos legales no encontrados",
            message=(
                "Uno o más fundamentos legales seleccionados no fueron encontrados. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.SUBJECTS_NOT_MATCH: MessageTemplate(
            title="Conflicto de materias",
            message=f"{_SAME_LEGAL_BASES} pertenecer a la misma materia.",
        ),
        ErrorKind.JURISDICTIONS_NOT_MATCH: MessageTemplate(
            title="Conflicto de jurisdicción",
            message=f"{_SAME_LEGAL_BASES} tener la misma jurisdicción.",
        ),
        ErrorKind.STATES_NOT_MATCH: MessageTemplate(
            title="Conflicto de estado",
            message=f"{_SAME_LEGAL_BASES} pertenecer al mismo estado si la jurisdicción es Estatal.",
        ),
        ErrorKind.MUNICIPALITIES_NOT_MATCH: MessageTemplate(
            title="Conflicto de municipio",
            message=f"{_SAME_LEGAL_BASES} pertenecer al mismo municipio si la jurisdicción es Municipal.",
        ),
        ErrorKind.REQUIREMENTS_NOT_FOUND: MessageTemplate(
            title="Requerimientos no encontrados",
            message=(
                "No se encontraron requerimientos aplicables a la materia y aspectos seleccionados. "
                "Por favor, verifique que existen requerimientos registrados para la materia "
                "correspondiente y que los aspectos seleccionados estén correctamente asociados."
            ),
        ),
    },
    server_messages={
        "Requirement Identification name already exists": ErrorKind.DUPLICATED_NAME,
        "LegalBasis not found for IDs": ErrorKind.LEGAL_BASIS_NOT_FOUND,
        "All selected legal bases must have the same subject": ErrorKind.SUBJECTS_NOT_MATCH,
        "All selected legal bases must have the same jurisdiction": ErrorKind.JURISDICTIONS_NOT_MATCH,
        "All selected legal bases must have the same state": ErrorKind.STATES_NOT_MATCH,
        "All selected legal bases must have the same municipality": ErrorKind.MUNICIPALITIES_NOT_MATCH,
        "Requirements not found": ErrorKind.REQUIREMENTS_NOT_FOUND,
    },
    not_found_default=ErrorKind.MULTIPLE_NOT_FOUND,
)

# Job status failures. There is no NOT_FOUND entry: a missing job is
# reported by message ("Job not found"), never resolved from a bare 404.
REQ_IDENTIFY_JOB_ERRORS = ErrorCatalog(
    name="req_identify_job",
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
            title="Identificación de requerimientos cancelada",
            message=(
                "La identificación de requerimientos fue cancelada anteriormente. "
                "Cierre esta ventana e intente nuevamente."
            ),
        ),
        ErrorKind.SERVER_ERROR: MessageTemplate(
            title="Error del servidor",
            message="Hubo un error interno en el servidor. Espere un momento e intente nuevamente.",
        ),
    },
    server_messages={
        "Job not found": ErrorKind.JOB_NOT_FOUND,
        "Unexpected error identifying requirements": ErrorKind.UNEXPECTED_ERROR,
    },
    status_kinds={400: ErrorKind.INVALID_REQUEST},
)
