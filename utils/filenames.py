"""Filename helpers for naming reconstructed outputs."""

from utils.errors import EmptyNameError, FilenameError, MissingDelimiterError


def strip_extension(path: str) -> str:
    """Base name of ``path`` without directory, prefix or extension.

    The name starts after the last '_' (or the last '/' when there is no
    '_') and stops at the first '.' or '['. For example
    'images/test_lena[050].png' gives 'lena'.
    """
    cut = path.rfind('_')
    if cut < 0:
        cut = path.rfind('/')
    if cut < 0:
        raise MissingDelimiterError(f"No '_' or '/' in filename: {path!r}")

    name = path[cut + 1:]
    for stop in ('.', '['):
        end = name.find(stop)
        if end >= 0:
            name = name[:end]
    if not name:
        raise EmptyNameError(f"No name left in filename: {path!r}")
    return name


def output_filename(path: str, prefix: str, ext: str, attr: int = 0) -> str:
    """Assemble ``path + prefix [attr] . ext``; attr 0 means no tag.

    >>> output_filename('out/', 'lena', 'png', 50)
    'out/lena[050].png'
    """
    if attr < 0:
        raise FilenameError(f"Attribute must be non-negative, got {attr}")
    if attr:
        return f"{path}{prefix}[{attr:03d}].{ext}"
    return f"{path}{prefix}.{ext}"
