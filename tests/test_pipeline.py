"""Unit tests for Pipeline construction and the four conversions.

WHY: The pipeline decides where strings are allowed and where bytes are
the currency. Getting a boundary wrong (e.g. re-encoding a single-step
string conversion through bytes) changes output for string-only
projections; a swallowed step failure would return garbage.

HOW: Table-driven cases taken from known-good conversions (ULID, UUID,
hex and base64 of the same values), plus error propagation checks.

RULES:
- Every conversion on an empty pipeline raises EmptyPipelineError
- Step failures surface as StepError with the failing step's index
"""

import pytest

from binutil.codecs import Base64, Base64Scheme, Hex, Text, TextEncoding, UUID
from binutil.core.pipeline import Pipeline, resolve_steps
from binutil.core.registry import CodecRegistry
from binutil.errors import (
    DecodeError,
    EmptyPipelineError,
    InvalidStepError,
    StepError,
    UnknownCodecError,
)

# 16 bytes used across the conversion tables
SAMPLE_BYTES = bytes([84, 1, 27, 111, 235, 146, 132, 246, 2, 23, 45, 167, 190, 169, 55, 90])

ULID_TEXT = "01H3W1T4BNATG1KGP7S817K4BF"
UUID_TEXT = "3ecb2f46-0242-4642-bdef-91d191650369"


class TestStrToStr:
    """String in, string out."""

    @pytest.mark.parametrize("steps,text,expected", [
        (["ulid"], ULID_TEXT, ULID_TEXT),
        (["ulid", "b64"], ULID_TEXT, "AYj4HRF1VqAZwsfKAnmRbw=="),
        (["b64", "ulid"], "AYj4HRF1VqAZwsfKAnmRbw==", ULID_TEXT),
        (["ulid", "hex"], ULID_TEXT, "0188f81d117556a019c2c7ca0279916f"),
        (["hex", "ulid"], "0188f81d117556a019c2c7ca0279916f", ULID_TEXT),
        (["hex", "b64"], "a1372ed62623e0037e46c31535a407041e48c21cb240acf5bc8863",
         "oTcu1iYj4AN+RsMVNaQHBB5IwhyyQKz1vIhj"),
        (["b64", "hex"], "oTcu1iYj4AN+RsMVNaQHBB5IwhyyQKz1vIhj",
         "a1372ed62623e0037e46c31535a407041e48c21cb240acf5bc8863"),
        (["uuid", "b64"], UUID_TEXT, "PssvRgJCRkK975HRkWUDaQ=="),
        (["b64", "uuid"], "PssvRgJCRkK975HRkWUDaQ==", UUID_TEXT),
        (["uuid", "hex"], UUID_TEXT, "3ecb2f4602424642bdef91d191650369"),
        (["hex", "uuid"], "3ecb2f4602424642bdef91d191650369", UUID_TEXT),
        (["ulid", "uuid"], ULID_TEXT, "0188f81d-1175-56a0-19c2-c7ca0279916f"),
        (["uuid", "ulid"], "0188f81d-1175-56a0-19c2-c7ca0279916f", ULID_TEXT),
        (["uuid", "hex", "b64", "uuid"], UUID_TEXT, UUID_TEXT),
        (["text", "b64"], "hello", "aGVsbG8="),
        (["b64", "text"], "aGVsbG8=", "hello"),
        (["latin1", "hex"], "café", "636166c3a9"),
        (["hex", "latin1"], "636166e9", "café"),
    ])
    def test_conversions(self, steps, text, expected):
        assert Pipeline(*steps).str_to_str(text) == expected

    def test_single_step_keeps_string_projection(self):
        # One step never round-trips through bytes: braces and case are
        # normalized by the UUID codec's own parse
        pipe = Pipeline("uuid")
        assert pipe.str_to_str("{3ECB2F46-0242-4642-BDEF-91D191650369}") == UUID_TEXT

    def test_single_step_latin1_normalizes(self):
        assert Pipeline("latin1").str_to_str("café") == "café"

    def test_empty_string(self):
        assert Pipeline("text", "b64").str_to_str("") == ""


class TestBinToBin:
    """Binary in, binary out."""

    @pytest.mark.parametrize("steps", [
        ["uuid"],
        ["hex"],
        ["ulid", "uuid"],
        ["hex", "b64"],
        ["ulid", "hex", "b64", "uuid"],
    ])
    def test_identity_chains(self, steps):
        assert Pipeline(*steps).bin_to_bin(SAMPLE_BYTES) == SAMPLE_BYTES

    def test_fixed_length_step_rejects_other_sizes(self):
        with pytest.raises(StepError) as exc_info:
            Pipeline("hex", "uuid").bin_to_bin(b"\x00" * 8)
        assert exc_info.value.index == 1


class TestBinToStr:
    """Binary in, the last step's string out."""

    @pytest.mark.parametrize("steps,expected", [
        (["uuid"], "54011b6f-eb92-84f6-0217-2da7bea9375a"),
        (["ulid"], "2M04DPZTWJGKV045SDMYZAJDTT"),
        (["hex", "b64raw"], "VAEbb+uShPYCFy2nvqk3Wg"),
        (["uuid", "hex"], "54011b6feb9284f602172da7bea9375a"),
        (["b64", "hex", "uuid"], "54011b6f-eb92-84f6-0217-2da7bea9375a"),
        (["b64url"], "VAEbb-uShPYCFy2nvqk3Wg=="),
    ])
    def test_conversions(self, steps, expected):
        assert Pipeline(*steps).bin_to_str(SAMPLE_BYTES) == expected

    def test_empty_input(self):
        assert Pipeline("hex").bin_to_str(b"") == ""


class TestStrToBin:
    """String in (parsed by the first step), bytes out."""

    @pytest.mark.parametrize("steps", [
        ["uuid"],
        ["uuid", "ulid"],
        ["uuid", "hex", "b64", "ulid"],
    ])
    def test_conversions(self, steps):
        pipe = Pipeline(*steps)
        assert pipe.str_to_bin("54011b6f-eb92-84f6-0217-2da7bea9375a") == SAMPLE_BYTES

    def test_text_to_bytes(self):
        assert Pipeline("utf-8").str_to_bin("héllo") == "héllo".encode("utf-8")


class TestConstruction:
    """Step resolution at construction time."""

    @pytest.mark.parametrize("method,arg", [
        ("bin_to_bin", b"\x00"),
        ("bin_to_str", b"\x00"),
        ("str_to_bin", "00"),
        ("str_to_str", "00"),
    ])
    def test_empty_pipeline(self, method, arg):
        pipe = Pipeline()
        assert len(pipe) == 0
        with pytest.raises(EmptyPipelineError, match="no transformation steps"):
            getattr(pipe, method)(arg)

    def test_unknown_step_name(self):
        with pytest.raises(UnknownCodecError, match='"unknowndecoder"'):
            Pipeline("hex", "UnknownDecoder")

    @pytest.mark.parametrize("step", [42, None, b"hex", Hex])
    def test_invalid_step_type(self, step):
        with pytest.raises(InvalidStepError):
            Pipeline("hex", step)

    def test_mixed_names_and_instances(self):
        pipe = Pipeline(UUID(), "hex", Base64(Base64Scheme.RAW_URL))
        assert len(pipe) == 3
        assert pipe.str_to_str(UUID_TEXT) == "PssvRgJCRkK975HRkWUDaQ"

    def test_case_insensitive_names(self):
        assert Pipeline(" UUID ", "HEX").str_to_str(UUID_TEXT) == "3ecb2f4602424642bdef91d191650369"

    def test_custom_registry(self):
        registry = CodecRegistry()
        registry.register("shout", lambda: Text(TextEncoding.ASCII))
        pipe = Pipeline("shout", registry=registry)
        assert pipe.str_to_str("hi") == "hi"
        with pytest.raises(UnknownCodecError):
            Pipeline("hex", registry=registry)

    def test_resolve_steps_returns_tuple(self):
        steps = resolve_steps(["hex", "uuid"])
        assert isinstance(steps, tuple)
        assert [type(s) for s in steps] == [Hex, UUID]

    def test_repr(self):
        assert repr(Pipeline("uuid", "hex")) == "Pipeline(UUID, Hexadecimal)"

    def test_pipelines_do_not_share_steps(self):
        first = Pipeline("hex")
        second = Pipeline("hex")
        assert first.steps[0] is not second.steps[0]

    def test_pipeline_is_reusable(self):
        pipe = Pipeline("hex", "b64")
        assert pipe.str_to_str("00") == "AA=="
        assert pipe.str_to_str("ff") == "/w=="
        assert not pipe.steps[0].populated


class TestStepErrors:
    """Failures carry the step index and chain the codec error."""

    def test_first_step_decode_error(self):
        with pytest.raises(StepError) as exc_info:
            Pipeline("hex", "b64").str_to_str("zz")
        err = exc_info.value
        assert err.index == 0
        assert isinstance(err.cause, DecodeError)
        assert err.__cause__ is err.cause
        assert str(err).startswith("step 0: ")

    def test_later_step_decode_error(self):
        with pytest.raises(StepError) as exc_info:
            Pipeline("hex", "b64", "uuid").str_to_str("00")
        assert exc_info.value.index == 2

    def test_last_step_encode_error(self):
        with pytest.raises(StepError) as exc_info:
            Pipeline("hex", Base64(scheme="Base85")).bin_to_str(b"\x00")
        assert exc_info.value.index == 1

    def test_excess_base64_padding(self):
        with pytest.raises(StepError) as exc_info:
            Pipeline("b64", "hex").str_to_str("QUJD==")
        assert exc_info.value.index == 0
        assert isinstance(exc_info.value.cause, DecodeError)

    def test_str_to_bin_error(self):
        with pytest.raises(StepError) as exc_info:
            Pipeline("ulid", "hex").str_to_bin("not-a-ulid")
        assert exc_info.value.index == 0
