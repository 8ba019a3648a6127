"""
LaTeX fragments for the generated report.

Every function here is pure: it takes a name or a path and returns one line
of markup. File layout and ordering are decided by the renderer.
"""

from pathlib import PurePath

DEFAULT_FIGURE_WIDTH = r"0.65\textwidth"

_SPECIAL_CHARS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}


def escape_text(text: str) -> str:
    """Escape characters that LaTeX treats specially in running text."""
    return "".join(_SPECIAL_CHARS.get(ch, ch) for ch in text)


def _posix(path: PurePath | str) -> str:
    if isinstance(path, PurePath):
        return path.as_posix()
    return PurePath(path).as_posix()


def quote_path(path: PurePath | str) -> str:
    """
    Render *path* as a double-quoted literal.

    Backslashes and double quotes inside the path are escaped, so names with
    spaces, dots or quotes survive the trip through ``\\includegraphics``.
    """
    text = _posix(path)
    text = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def section_heading(name: str) -> str:
    return rf"\section{{{escape_text(name)}}}"


def subsection_heading(name: str) -> str:
    return rf"\subsubsection*{{{escape_text(name)}}}"


def include_directive(path: PurePath | str) -> str:
    return rf"\input{{{_posix(path)}}}"


def figure_directive(path: PurePath | str, width: str = DEFAULT_FIGURE_WIDTH) -> str:
    # the extra brace pair keeps graphicx from splitting the quoted name on dots
    return rf"\includegraphics[width={width}]{{{{{quote_path(path)}}}}}"
