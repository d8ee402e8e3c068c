"""Error messages for requirement operations."""

from kb_admin.core.errors import ErrorCatalog, ErrorKind, MessageTemplate

_WAIT_FOR_IDENTIFICATION = (
    "Por favor, espere a que se complete la identificación e intente nuevamente."
)

REQUIREMENT_ERRORS = ErrorCatalog(
    name="requirements",
    templates={
        ErrorKind.NOT_FOUND: MessageTemplate(
            title="Requerimiento no encontrado",
            message=(
                "El requerimiento no fue encontrado. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.MULTIPLE_NOT_FOUND: MessageTemplate(
            title="Varios requerimientos legales no encontrados",
            message=(
                "Uno o más requerimientos no fueron encontrados. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.DUPLICATED_NAME: MessageTemplate(
            title="Nombre de Requerimiento duplicado",
            message="Ya existe un requerimiento con el mismo nombre. Por favor, utiliza otro.",
        ),
        ErrorKind.ASSOCIATED_TO_REQ_IDENTIFICATIONS: MessageTemplate(
            title="Requerimiento vinculado a una identificación",
            message=(
                "El requerimiento está vinculado a una o más identificación de requerimientos "
                "y no puede ser eliminado."
            ),
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_TO_REQ_IDENTIFICATIONS: MessageTemplate(
            title="Requerimientos vinculados a identificaciones",
            message=(
                "Uno o más requerimientos están vinculados a identificaciones de requerimientos "
                "y no pueden ser eliminados."
            ),
            single=(
                "El requerimiento {item} está vinculado a una o más identificaciones de requerimientos "
                "y no puede ser eliminado."
            ),
            plural=(
                "Los requerimientos {items} están vinculados a una o más identificaciones de requerimientos "
                "y no pueden ser eliminados."
            ),
        ),
        ErrorKind.REQ_IDENTIFICATION_JOBS_CONFLICT: MessageTemplate(
            title="Conflicto con trabajos pendientes",
            message=(
                "Este requerimiento no puede ser eliminado porque actualmente se están identificando "
                "requerimientos. " + _WAIT_FOR_IDENTIFICATION
            ),
        ),
        ErrorKind.MULTIPLE_REQ_IDENTIFICATION_JOBS_CONFLICT: MessageTemplate(
            title="Conflicto con trabajos pendientes",
            message=(
                "Uno o más requerimientos no pueden ser eliminados porque actualmente se están "
                "identificando requerimientos. " + _WAIT_FOR_IDENTIFICATION
            ),
            single=(
                "El requerimiento {item} no puede ser eliminado porque actualmente se están "
                "identificando requerimientos. " + _WAIT_FOR_IDENTIFICATION
            ),
            plural=(
                "Los requerimientos {items} no pueden ser eliminados porque actualmente se están "
                "identificando requerimientos. " + _WAIT_FOR_IDENTIFICATION
            ),
        ),
        ErrorKind.CONFLICT: MessageTemplate(
            title="Conflicto detectado",
            message="Ocurrió un conflicto con la operación. Verifique la información e intente nuevamente.",
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
    },
    server_messages={
        "Validation failed": ErrorKind.VALIDATION_ERROR,
        "Requirement name already exists": ErrorKind.DUPLICATED_NAME,
        "Requirement not found": ErrorKind.NOT_FOUND,
        "Subject not found": ErrorKind.SUBJECT_NOT_FOUND,
        "Aspects not found for IDs": ErrorKind.ASPECTS_NOT_FOUND,
        "The Requirement is associated with one or more requirement identifications": (
            ErrorKind.ASSOCIATED_TO_REQ_IDENTIFICATIONS
        ),
        "Some Requirements are associated with requirement identifications": (
            ErrorKind.MULTIPLE_ASSOCIATED_TO_REQ_IDENTIFICATIONS
        ),
        "Cannot delete Requirement with pending Requirement Identification jobs": (
            ErrorKind.REQ_IDENTIFICATION_JOBS_CONFLICT
        ),
        "Cannot delete Requirements with pending Requirement Identification jobs": (
            ErrorKind.MULTIPLE_REQ_IDENTIFICATION_JOBS_CONFLICT
        ),
    },
    status_kinds={409: ErrorKind.CONFLICT},
    not_found_default=ErrorKind.MULTIPLE_NOT_FOUND,
)
