"""Error messages for requirement type operations."""

from kb_admin.core.errors import ErrorCatalog, ErrorKind, MessageTemplate

REQUIREMENT_TYPE_ERRORS = ErrorCatalog(
    name="requirement_types",
    templates={
        ErrorKind.NOT_FOUND: MessageTemplate(
            title="No encontrado",
            message=(
                "Tipo de requerimiento no encontrado. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.MULTIPLE_NOT_FOUND: MessageTemplate(
            title="No encontrado",
            message=(
                "Uno o más tipos de requerimiento no encontrados. "
                "Verifique su existencia recargando la app e intente de nuevo."
            ),
        ),
        ErrorKind.ASSOCIATED_TO_REQ_IDENTIFICATIONS: MessageTemplate(
            title="Tipo de requerimiento vinculado a una identificación",
            message=(
                "El tipo de requerimiento está vinculado a una o más identificaciones "
                "de requerimientos y no puede ser eliminado."
            ),
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_TO_REQ_IDENTIFICATIONS: MessageTemplate(
            title="Tipos de requerimiento vinculados a identificaciones",
            message=(
                "Uno o más tipos de requerimiento están vinculados a identificaciones "
                "de requerimientos y no pueden ser eliminados."
            ),
            single=(
                "El tipo de requerimiento {item} está vinculado a una o más identificaciones "
                "de requerimientos y no puede ser eliminado."
            ),
            plural=(
                "Los tipos de requerimiento {items} están vinculados a una o más identificaciones "
                "de requerimientos y no pueden ser eliminados."
            ),
        ),
        ErrorKind.DUPLICATED_NAME: MessageTemplate(
            title="Nombre duplicado",
            message="El nombre del tipo de requerimiento ya está en uso. Por favor, utilice otro.",
        ),
    },
    server_messages={
        "Requirement type name already exists": ErrorKind.DUPLICATED_NAME,
        "Requirement Type is associated with one or more requirement identifications": (
            ErrorKind.ASSOCIATED_TO_REQ_IDENTIFICATIONS
        ),
        "Some Requirement Types are associated with requirement identifications": (
            ErrorKind.MULTIPLE_ASSOCIATED_TO_REQ_IDENTIFICATIONS
        ),
    },
    not_found_default=ErrorKind.MULTIPLE_NOT_FOUND,
)
