"""Error messages for subject operations."""

from kb_admin.core.errors import ErrorCatalog, ErrorKind, MessageTemplate

SUBJECT_ERRORS = ErrorCatalog(
    name="subjects",
    templates={
        ErrorKind.NOT_FOUND: MessageTemplate(
            title="No encontrado",
            message="Materia no encontrada. Verifique su existencia recargando la app e intente de nuevo.",
        ),
        ErrorKind.MULTIPLE_NOT_FOUND: MessageTemplate(
            title="No encontrado",
            message="Una o más materias no encontradas. Verifique su existencia recargando la app e intente de nuevo.",
        ),
        ErrorKind.DUPLICATED_NAME: MessageTemplate(
            title="Nombre duplicado",
            message="El nombre ya está en uso. Por favor, utilice otro.",
        ),
        ErrorKind.ASSOCIATED_BASES: MessageTemplate(
            title="Asociación con Fundamentos legales",
            message=(
                "La materia está vinculada a uno o más fundamentos legales y no puede ser eliminada. "
                "Por favor, verifique e intente de nuevo."
            ),
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_BASES: MessageTemplate(
            title="Asociación con Fundamentos legales",
            message=(
                "Una o más materias están vinculadas a fundamentos legales y no pueden ser eliminadas. "
                "Por favor, verifique e intente de nuevo."
            ),
            single=(
                "La materia {item} está vinculada a uno o más fundamentos legales y no puede ser eliminada. "
                "Por favor, verifique e intente de nuevo."
            ),
            plural=(
                "Las materias {items} están vinculadas a uno o más fundamentos legales y no pueden ser eliminadas. "
                "Por favor, verifique e intente de nuevo."
            ),
        ),
        ErrorKind.ASSOCIATED_REQUIREMENTS: MessageTemplate(
            title="Asociación con Requerimientos",
            message=(
                "La materia está vinculada a uno o más requerimientos legales y no puede ser eliminada. "
                "Por favor, verifique e intente de nuevo."
            ),
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_REQUIREMENTS: MessageTemplate(
            title="Asociación con Requerimientos",
            message=(
                "Una o más materias están vinculadas a requerimientos legales y no pueden ser eliminadas. "
                "Por favor, verifique e intente de nuevo."
            ),
            single=(
                "La materia {item} está vinculada a uno o más requerimientos legales y no puede ser eliminada. "
                "Por favor, verifique e intente de nuevo."
            ),
            plural=(
                "Las materias {items} están vinculadas a uno o más requerimientos legales y no pueden ser eliminadas. "
                "Por favor, verifique e intente de nuevo."
            ),
        ),
    },
    server_messages={
        "Subject already exists": ErrorKind.DUPLICATED_NAME,
        "The subject is associated with one or more legal bases": ErrorKind.ASSOCIATED_BASES,
        "Subjects are associated with legal bases": ErrorKind.MULTIPLE_ASSOCIATED_BASES,
        "The subject is associated with one or more requirements": ErrorKind.ASSOCIATED_REQUIREMENTS,
        "Subjects are associated with requirements": ErrorKind.MULTIPLE_ASSOCIATED_REQUIREMENTS,
    },
    not_found_default=ErrorKind.MULTIPLE_NOT_FOUND,
)
