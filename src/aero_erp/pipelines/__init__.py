"""Import paths that feed the normalizer."""

from aero_erp.pipelines.importer import (
    ImportResult,
    handle_socket_message,
    import_file,
    import_text,
    merge_by_id,
    save_form,
)

__all__ = [
    "ImportResult",
    "handle_socket_message",
    "import_file",
    "import_text",
    "merge_by_id",
    "save_form",
]
