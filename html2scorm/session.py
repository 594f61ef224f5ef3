import logging
from dataclasses import dataclass

from .errors import ConversionError, ConversionFailed
from .models import InputArtifact, OutputPackage
from .naming import output_filename
from .repackager import build_package

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    filename: str
    data: bytes
    package: OutputPackage

    @property
    def size_kb(self) -> float:
        return len(self.data) / 1024


class ConversionSession:
    """State for one upload-convert-download cycle.

    Holds the selected file and, once conversion succeeds, the finished zip.
    Selecting a new file or resetting drops the previous result.
    """

    def __init__(self):
        self.artifact = None
        self.result = None
        self.error = None

    def select(self, artifact: InputArtifact):
        self._discard()
        self.artifact = artifact

    def reset(self):
        self._discard()
        self.artifact = None

    def _discard(self):
        self.result = None
        self.error = None

    def convert(self, identifier=None) -> ConversionResult:
        if self.artifact is None:
            raise ConversionError("no file selected")
        self._discard()
        try:
            package, data = build_package(self.artifact, identifier=identifier)
        except ConversionError as exc:
            logger.warning("Conversion of %s failed: %s", self.artifact.name, exc)
            self.error = exc
            raise
        except Exception as exc:
            logger.exception("Unexpected failure converting %s", self.artifact.name)
            self.error = ConversionFailed(str(exc))
            raise self.error from exc

        self.result = ConversionResult(
            filename=output_filename(self.artifact.name),
            data=data,
            package=package,
        )
        return self.result
