"""Error messages for aspect operations."""

from kb_admin.core.errors import ErrorCatalog, ErrorKind, MessageTemplate

ASPECT_ERRORS = ErrorCatalog(
    name="aspects",
    templates={
        ErrorKind.NOT_FOUND: MessageTemplate(
            title="No encontrado",
            message="El aspecto no fue encontrado. Verifique su existencia recargando la app e intente de nuevo.",
        ),
        ErrorKind.MULTIPLE_NOT_FOUND: MessageTemplate(
            title="No encontrado",
            message=(
                "Uno o más aspectos no fueron encontrados. "
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
        ErrorKind.DUPLICATED_NAME: MessageTemplate(
            title="Nombre duplicado",
            message="El nombre ya está en uso. Por favor, utilice otro.",
        ),
        ErrorKind.ASSOCIATED_BASES: MessageTemplate(
            title="Asociación con Fundamentos legales",
            message=(
                "El aspecto está vinculado a uno o más fundamentos legales y no puede ser eliminado. "
                "Por favor, verifique e intente de nuevo."
            ),
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_BASES: MessageTemplate(
            title="Asociación con Fundamentos legales",
            message=(
                "Uno o más aspectos están vinculados a fundamentos legales y no pueden ser eliminados. "
                "Por favor, verifique e intente de nuevo."
            ),
            single=(
                "El aspecto {item} está vinculado a uno o más fundamentos legales y no puede ser eliminado. "
                "Por favor, verifique e intente de nuevo."
            ),
            plural=(
                "Los aspectos {items} están vinculados a uno o más fundamentos legales y no pueden ser eliminados. "
                "Por favor, verifique e intente de nuevo."
            ),
        ),
        ErrorKind.ASSOCIATED_REQUIREMENTS: MessageTemplate(
            title="Asociación con Requerimientos",
            message=(
                "El aspecto está vinculado a uno o más requerimientos legales y no puede ser eliminado. "
                "Por favor, verifique e intente de nuevo."
            ),
        ),
        ErrorKind.MULTIPLE_ASSOCIATED_REQUIREMENTS: MessageTemplate(
            title="Asociación con Requerimientos",
            message=(
                "Uno o más aspectos están vinculados a requerimientos legales y no pueden ser eliminados. "
                "Por favor, verifique e intente de nuevo."
            ),
            single=(
                "El aspecto {item} está vinculado a uno o más requerimientos legales y no puede ser eliminado. "
                "Por favor, verifique e intente de nuevo."
            ),
            plural=(
                "Los aspectos {items} están vinculados a uno o más requerimientos legales y no pueden ser eliminados. "
                "Por favor, verifique e intente de nuevo."
            ),
        ),
    },
    server_messages={
        "Aspect already exists": ErrorKind.DUPLICATED_NAME,
        "The aspect is associated with one or more legal bases": ErrorKind.ASSOCIATED_BASES,
        "The aspect is associated with one or more requirements": ErrorKind.ASSOCIATED_REQUIREMENTS,
        "Aspects are associated with legal bases": ErrorKind.MULTIPLE_ASSOCIATED_BASES,
        "Aspects are associated with requirements": ErrorKind.MULTIPLE_ASSOCIATED_REQUIREMENTS,
        "Subject not found": ErrorKind.SUBJECT_NOT_FOUND,
    },
    # A 404 without ids means the aspect itself is gone.
    not_found_default=ErrorKind.NOT_FOUND,
)
