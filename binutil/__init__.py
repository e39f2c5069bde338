"""binutil — convert values between binary and string representations.

WHY: Identifiers and keys move between systems in many shapes: a UUID
is 16 bytes in a database column, a hyphenated string in a log line and
base64 in a URL. binutil converts between those shapes through a
composable pipeline of named codecs (base64 variants, hex, text, UUID,
ULID).

HOW: Three layers — codecs (one module per format), the registry
(name -> codec factory) and pipelines (ordered chains of codecs with
bin/str entry points). The CLI is a thin front end over the pipeline.

RULES:
- Binary is the currency between pipeline steps; strings only appear at
  the boundaries
- Adding a format = one new codec module plus one line in BUILTIN_CODECS
- The library raises BinutilError subclasses and never logs
"""

from binutil.codecs import (
    Base64,
    Base64Scheme,
    Codec,
    Hex,
    Text,
    TextEncoding,
    ULID,
    UUID,
)
from binutil.core.multi import MultiPipeline
from binutil.core.pipeline import Pipeline
from binutil.core.registry import (
    CodecRegistry,
    codec_names,
    default_registry,
    new_codec,
    register,
)
from binutil.errors import (
    BinutilError,
    CodecError,
    DecodeError,
    EmptyPipelineError,
    EncodeError,
    InvalidStepError,
    NoDataError,
    PipelineError,
    StepError,
    UnknownCodecError,
    UnknownPipelineError,
    UnknownSchemeError,
)
from binutil.release import version

__version__ = "1.0.0a1"

__all__ = [
    "Base64",
    "Base64Scheme",
    "BinutilError",
    "Codec",
    "CodecError",
    "CodecRegistry",
    "DecodeError",
    "EmptyPipelineError",
    "EncodeError",
    "Hex",
    "InvalidStepError",
    "MultiPipeline",
    "NoDataError",
    "Pipeline",
    "PipelineError",
    "StepError",
    "Text",
    "TextEncoding",
    "ULID",
    "UUID",
    "UnknownCodecError",
    "UnknownPipelineError",
    "UnknownSchemeError",
    "codec_names",
    "default_registry",
    "new_codec",
    "register",
    "version",
]
