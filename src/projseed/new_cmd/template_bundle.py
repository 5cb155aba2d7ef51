"""Pack the bundled project template directory into an in-memory archive."""

import io
import os
import zipfile
from pathlib import Path

TEMPLATE_DIR = Path(__file__).parent / "template"

_SKIPPED_DIRS = {"__pycache__"}


def bundle_template(template_dir: Path = TEMPLATE_DIR) -> bytes:
    """Return a ZIP archive of *template_dir*'s contents.

    Directories get their own entries (written before their contents) and
    file modes are recorded, so scaffolding reproduces the tree exactly.
    """
    if not template_dir.is_dir():
        raise FileNotFoundError(f"Template directory not found: {template_dir}")

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for root, dirnames, filenames in os.walk(template_dir):
            dirnames[:] = sorted(d for d in dirnames if d not in _SKIPPED_DIRS)
            root_path = Path(root)
            for name in dirnames + sorted(filenames):
                path = root_path / name
                arcname = path.relative_to(template_dir).as_posix()
                archive.write(path, arcname)
    return buffer.getvalue()
