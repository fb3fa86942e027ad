import os

TEXT_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".txt",
        ".c",
        ".h",
        ".cpp",
        ".hpp",
        ".java",
        ".py",
        ".sh",
        ".pl",
        ".js",
        ".css",
        ".html",
        ".xml",
        ".json",
        ".md",
    }
)

SCRIPT_EXTENSIONS: frozenset[str] = frozenset({".sh", ".py", ".pl", ".rb", ".php", ".js", ".lua"})


def extension(name: str) -> str:
    """
    Return the lower-cased extension of the base name of `name`.

    The extension starts at the last dot and includes it, so
    "archive.tar.GZ" gives ".gz". Names without a dot have no
    extension and give an empty string.
    """
    base: str = os.path.basename(name)
    dot: int = base.rfind(".")
    if dot == -1:
        return ""
    return base[dot:].lower()


def is_text(name: str) -> bool:
    return extension(name) in TEXT_EXTENSIONS


def is_script(name: str) -> bool:
    return extension(name) in SCRIPT_EXTENSIONS
