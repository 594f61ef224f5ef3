"""Errors raised while turning an upload into a SCORM package.

Every error ends the current conversion. ``user_message`` is what the UI shows;
the exception text itself carries the detail that goes to the log.
"""


class ConversionError(Exception):
    user_message = "An error occurred during conversion."

    def __init__(self, detail=None):
        super().__init__(detail or self.user_message)
        self.detail = detail or self.user_message


class UnsupportedFileType(ConversionError):
    user_message = "Invalid file type. Please upload an HTML file (.html/.htm) or a ZIP."


class NoEntryPointFound(ConversionError):
    user_message = "No HTML files found in uploaded content."


class ArchiveReadError(ConversionError):
    user_message = "Uploaded file is not a valid ZIP."


class EncodingError(ConversionError):
    user_message = "A text file in the upload is not valid UTF-8."


class ConversionFailed(ConversionError):
    user_message = "An error occurred while building the SCORM package."
