"""Settings scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-doc-tree.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Settings template for schema-doc-tree.
# Every key is optional; remove the ones you do not need.

session:
  # false (default): dense slugs, every word of a title cut to three letters.
  # true: sparse slugs, titles used verbatim.
  sparse: false
  # Register every nested $id when a document is loaded, so a $ref can reach
  # subschemas that have not been read yet.
  register_identifiers_eagerly: true
"""


def build_placeholder_settings() -> str:
    """Build a YAML settings template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_settings(output_path: Path | str) -> Path:
    """Write the settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Settings file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_settings(), encoding="utf-8")
    return destination.resolve()
