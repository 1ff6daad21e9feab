"""Exception hierarchy shared by the frontmatter, move, and note utilities"""


class BlogToolsError(Exception):
    """Base class for every error raised by blogtools library code."""


class BecauseError(BlogToolsError):
    """Error whose message reads '<what> because <cause>'."""
    what = "Operation failed"

    def __init__(self, cause: object):
        self.cause = cause
        super().__init__(f"{self.what} because {cause}")


# --- frontmatter adapter ---

class AdaptError(BecauseError):
    """Failure while adapting a single file; the batch driver skips the file."""


class SourceOpenError(AdaptError):
    what = "Could not open source file"


class DestinationOpenError(AdaptError):
    what = "Could not open destination file"


class ReadError(AdaptError):
    what = "Failed to read"


class WriteError(AdaptError):
    what = "Failed to write"


# --- mv-files ---

class MoveFilesError(BlogToolsError, ValueError):
    """Invalid arguments for the file mover."""


class EmptySourcesError(MoveFilesError):
    def __init__(self):
        super().__init__("Source directories missing")


class EmptyExtensionsError(MoveFilesError):
    def __init__(self):
        super().__init__("Extensions missing")


class InvalidSizeError(MoveFilesError):
    def __init__(self, arg: str):
        self.arg = arg
        super().__init__(f"Invalid size arg '{arg}'")


class InvalidExtensionsError(MoveFilesError):
    def __init__(self, arg: str):
        self.arg = arg
        super().__init__(f"Invalid extensions list '{arg}'")


class InvalidFileNameError(MoveFilesError):
    def __init__(self, arg: str):
        self.arg = arg
        super().__init__(f"Invalid file name '{arg}'")


# --- new-note ---

class NoteError(BecauseError):
    """Failure while scaffolding a note."""


class DateParseError(NoteError):
    what = "Could not parse publication date"


class NoteCreateError(NoteError):
    what = "Could not create new note"


class EditorError(NoteError):
    what = "Could not exec editor"


class TemplateRenderError(NoteError):
    what = "Could not render frontmatter template"


class NoteWriteError(NoteError):
    what = "Could not write note file"
