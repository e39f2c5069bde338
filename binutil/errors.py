"""Exception hierarchy for codecs, the registry, and pipelines.

WHY: Callers (the CLI, library users) need to tell a malformed input apart
from a misconfigured pipeline without parsing messages. Every failure in
the core is raised as a typed exception derived from BinutilError so the
front end can catch one base class and map it to an exit code.

HOW: Three branches — construction/pipeline errors, registry lookup
errors, and codec errors (decode/encode). Errors coming from an underlying
parser (binascii, uuid, ulid, codecs) are wrapped in DecodeError with the
original exception chained via ``raise ... from``.

RULES:
- The core never logs; it only raises
- StepError always carries the zero-based step index and the cause
- Messages for unknown names include the normalized (lowercase) name
"""

from __future__ import annotations


class BinutilError(Exception):
    """Base class for every error raised by the binutil package."""


# ---------------------------------------------------------------------------
# Codec errors
# ---------------------------------------------------------------------------


class CodecError(BinutilError):
    """A codec could not decode its input or encode its payload."""


class DecodeError(CodecError):
    """Malformed textual input or wrong-length binary input."""


class EncodeError(CodecError):
    """The payload cannot be projected into the requested representation."""


class NoDataError(EncodeError):
    """The codec was never populated by a decode call."""

    def __init__(self, message: str = "data cannot be empty or nil") -> None:
        super().__init__(message)


class UnknownSchemeError(CodecError):
    """The codec's variant tag (base64 scheme, text charset) is unrecognized."""

    def __init__(self, family: str, scheme: object) -> None:
        self.family = family
        self.scheme = scheme
        super().__init__("unknown {} encoding scheme: {!r}".format(family, scheme))


# ---------------------------------------------------------------------------
# Registry errors
# ---------------------------------------------------------------------------


class UnknownCodecError(BinutilError):
    """No codec is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__('no registered codec named "{}"'.format(name))


# ---------------------------------------------------------------------------
# Pipeline errors
# ---------------------------------------------------------------------------


class PipelineError(BinutilError):
    """Base class for pipeline construction and conversion failures."""


class EmptyPipelineError(PipelineError):
    def __init__(self) -> None:
        super().__init__("the pipeline has no transformation steps")


class InvalidStepError(PipelineError):
    """A pipeline step is neither a codec name nor a codec instance."""

    def __init__(self, step: object) -> None:
        self.step = step
        super().__init__(
            "initialize a pipeline with a string or Codec, not {}".format(
                type(step).__name__
            )
        )


class StepError(PipelineError):
    """A single pipeline step failed to decode or encode.

    Attributes:
        index: Zero-based position of the failing step.
        cause: The original exception raised by the codec.
    """

    def __init__(self, index: int, cause: Exception) -> None:
        self.index = index
        self.cause = cause
        super().__init__("step {}: {}".format(index, cause))


class UnknownPipelineError(PipelineError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__('no pipeline named "{}"'.format(name))
