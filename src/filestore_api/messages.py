"""Response messages returned to clients. Existing clients match on these strings."""

FILES_LISTED = "Listado de ficheros"
FILE_SAVED = "Guardado con éxito"
FILE_READ = "Archivo leído con éxito"
FILE_UPDATED = "Actualizado con éxito"
FILE_DELETED = "Eliminado con éxito"

FILE_ALREADY_EXISTS = "El archivo ya existe"
FILE_NOT_FOUND = "Archivo no encontrado"
FILE_DOES_NOT_EXIST = "El archivo no existe"

INVALID_REQUEST = "Los datos proporcionados no son válidos"
INTERNAL_ERROR = "Error interno del servidor"
