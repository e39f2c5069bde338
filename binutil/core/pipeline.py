"""Ordered chain of codecs with four conversion entry points.

WHY: Most conversions are multi-hop: a ULID string to base64 means
"parse the ULID text, take its 16 bytes, render them as base64". A
pipeline expresses that as a list of codec names and runs it with one
call, whatever the input and output representations are.

HOW: Each step is an unpopulated codec (the template). A conversion
decodes the current value with the step's template, producing a new
view, then encodes that view to bytes for the next step. Only the
boundary steps touch strings:

  bin_to_bin  decode_binary -> encode_binary at every step
  bin_to_str  as bin_to_bin, but the last step ends with encode_string
  str_to_bin  first step starts with decode_string
  str_to_str  first step starts with decode_string, last ends with
              encode_string; a single step never round-trips via bytes

RULES:
- A pipeline with no steps raises EmptyPipelineError on every conversion
- Steps are resolved at construction; an unknown name fails immediately
- Steps are either codec names (str) or Codec instances, mixed freely
- Every step failure is raised as StepError(index, cause), chained
- Pipelines are immutable after construction and safe to share
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple, TypeVar, Union

from binutil.codecs.base import Codec
from binutil.core.registry import CodecRegistry, default_registry
from binutil.errors import BinutilError, EmptyPipelineError, InvalidStepError, StepError

Step = Union[str, Codec]
T = TypeVar("T")


def resolve_steps(
    steps: Sequence[Step],
    registry: Optional[CodecRegistry] = None,
) -> Tuple[Codec, ...]:
    """Turn a sequence of step specifiers into codec templates.

    Args:
        steps: Codec names and/or Codec instances, in pipeline order.
        registry: Registry used to resolve names (default: process-wide).

    Returns:
        Tuple of codecs, one per step.

    Raises:
        UnknownCodecError: A name is not registered.
        InvalidStepError: A step is neither a str nor a Codec.
    """
    resolved = []
    for step in steps:
        if isinstance(step, Codec):
            resolved.append(step)
        elif isinstance(step, str):
            if registry is None:
                registry = default_registry()
            resolved.append(registry.new_codec(step))
        else:
            raise InvalidStepError(step)
    return tuple(resolved)


class Pipeline:
    """Converts data between representations through an ordered list of codecs.

    Example::

        Pipeline("ulid", "b64").str_to_str("01H3W1T4BNATG1KGP7S817K4BF")
        # -> "AYj4HRF1VqAZwsfKAnmRbw=="
    """

    def __init__(self, *steps: Step, registry: Optional[CodecRegistry] = None) -> None:
        self._steps = resolve_steps(steps, registry)

    @property
    def steps(self) -> Tuple[Codec, ...]:
        return self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return "Pipeline({})".format(", ".join(step.name for step in self._steps))

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def bin_to_bin(self, data: bytes) -> bytes:
        """Feed ``data`` through every step as binary; return the final bytes."""
        self._require_steps()
        return self._bridge(data, 0, len(self._steps))

    def bin_to_str(self, data: bytes) -> str:
        """Binary in, the last step's string encoding out."""
        self._require_steps()
        last = len(self._steps) - 1
        data = self._bridge(data, 0, last)
        view = self._call(last, self._steps[last].decode_binary, data)
        return self._call(last, view.encode_string)

    def str_to_bin(self, text: str) -> bytes:
        """String in (parsed by the first step), final bytes out."""
        self._require_steps()
        view = self._call(0, self._steps[0].decode_string, text)
        data = self._call(0, view.encode_binary)
        return self._bridge(data, 1, len(self._steps))

    def str_to_str(self, text: str) -> str:
        """String in, string out.

        A single-step pipeline returns the step's string projection of
        its own parse, so string-only normalizations are preserved.
        """
        self._require_steps()
        view = self._call(0, self._steps[0].decode_string, text)
        last = len(self._steps) - 1
        if last == 0:
            return self._call(0, view.encode_string)

        data = self._call(0, view.encode_binary)
        data = self._bridge(data, 1, last)
        view = self._call(last, self._steps[last].decode_binary, data)
        return self._call(last, view.encode_string)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_steps(self) -> None:
        if not self._steps:
            raise EmptyPipelineError()

    def _bridge(self, data: bytes, start: int, stop: int) -> bytes:
        """Run steps[start:stop] binary-to-binary."""
        for index in range(start, stop):
            view = self._call(index, self._steps[index].decode_binary, data)
            data = self._call(index, view.encode_binary)
        return data

    @staticmethod
    def _call(index: int, func: Callable[..., T], *args) -> T:
        try:
            return func(*args)
        except (BinutilError, ValueError) as err:
            raise StepError(index, err) from err
