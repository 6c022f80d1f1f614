from pathlib import Path


def find_repo_root(start: Path | None = None, marker: str = "pyproject.toml") -> Path:
    """Walk upwards from ``start`` until a folder containing ``marker`` is found.

    Args:
        start: Optional starting path. Defaults to the location of this file.
        marker: Filename used to identify the repository root.

    Returns:
        The repository root as a :class:`Path`. Falls back to the current
        working directory when no marker is found (e.g. an installed copy).
    """
    p = (start or Path(__file__).resolve()).parent
    for candidate in [p, *p.parents]:
        if (candidate / marker).exists():
            return candidate
    return Path.cwd()


def resolve_data_file(file_name: str | Path, data_dir: str | Path) -> Path:
    """Resolve ``file_name`` against ``data_dir`` unless it is already absolute."""
    path = Path(file_name).expanduser()
    if path.is_absolute():
        return path
    return Path(data_dir).expanduser() / path
