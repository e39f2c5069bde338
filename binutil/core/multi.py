"""Named collection of single-step pipelines.

WHY: Some callers render the same value several ways at once, e.g. the
CLI's pretty view of a fresh ULID shows its hex and base64 bytes side by
side. MultiPipeline builds one independent pipeline per codec name and
dispatches by that name.

HOW: A dict maps each requested name (exactly as given) to a
one-step Pipeline. The four conversions take the target name first.

RULES:
- Construction fails on the first unresolvable name
- Lookup uses the name exactly as passed to the constructor
- An unknown target raises UnknownPipelineError ('no pipeline named "x"')
- must_bin_to_str() is only for call sites where failure is impossible;
  it raises RuntimeError instead of a recoverable BinutilError
"""

from __future__ import annotations

from typing import Dict, List, Optional

from binutil.core.pipeline import Pipeline
from binutil.core.registry import CodecRegistry
from binutil.errors import BinutilError, UnknownPipelineError


class MultiPipeline:
    def __init__(self, *names: str, registry: Optional[CodecRegistry] = None) -> None:
        self._pipes: Dict[str, Pipeline] = {}
        for name in names:
            self._pipes[name] = Pipeline(name, registry=registry)

    @property
    def names(self) -> List[str]:
        return list(self._pipes)

    def __contains__(self, name: object) -> bool:
        return name in self._pipes

    def pipeline(self, name: str) -> Pipeline:
        try:
            return self._pipes[name]
        except KeyError:
            raise UnknownPipelineError(name) from None

    def bin_to_bin(self, name: str, data: bytes) -> bytes:
        return self.pipeline(name).bin_to_bin(data)

    def bin_to_str(self, name: str, data: bytes) -> str:
        return self.pipeline(name).bin_to_str(data)

    def str_to_bin(self, name: str, text: str) -> bytes:
        return self.pipeline(name).str_to_bin(text)

    def str_to_str(self, name: str, text: str) -> str:
        return self.pipeline(name).str_to_str(text)

    def must_bin_to_str(self, name: str, data: bytes) -> str:
        """Like bin_to_str() but any failure is fatal (RuntimeError)."""
        try:
            return self.bin_to_str(name, data)
        except BinutilError as err:
            raise RuntimeError("must_bin_to_str({!r}) failed: {}".format(name, err)) from err
