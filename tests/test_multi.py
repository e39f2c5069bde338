"""Unit tests for MultiPipeline."""

import pytest

from binutil.core.multi import MultiPipeline
from binutil.core.pipeline import Pipeline
from binutil.errors import UnknownCodecError, UnknownPipelineError

# 16 bytes used across the conversion tables
SAMPLE_BYTES = bytes([84, 1, 27, 111, 235, 146, 132, 246, 2, 23, 45, 167, 190, 169, 55, 90])


class TestMultiPipeline:
    """Independent single-step pipelines addressed by name."""

    def test_renders_same_input_several_ways(self):
        multi = MultiPipeline("hex", "b64", "uuid")
        assert multi.bin_to_str("hex", SAMPLE_BYTES) == "54011b6feb9284f602172da7bea9375a"
        assert multi.bin_to_str("b64", SAMPLE_BYTES) == "VAEbb+uShPYCFy2nvqk3Wg=="
        assert multi.bin_to_str("uuid", SAMPLE_BYTES) == "54011b6f-eb92-84f6-0217-2da7bea9375a"

    def test_all_four_conversions(self):
        multi = MultiPipeline("hex", "uuid")
        assert multi.bin_to_bin("hex", b"\x01") == b"\x01"
        assert multi.str_to_bin("hex", "0102") == b"\x01\x02"
        assert multi.str_to_str("hex", "ABCD") == "abcd"
        assert multi.str_to_str("uuid", "{54011B6F-EB92-84F6-0217-2DA7BEA9375A}") == \
            "54011b6f-eb92-84f6-0217-2da7bea9375a"

    def test_names_preserve_order(self):
        assert MultiPipeline("uuid", "hex").names == ["uuid", "hex"]

    def test_unknown_pipeline(self):
        multi = MultiPipeline("hex")
        assert "b32" not in multi
        with pytest.raises(UnknownPipelineError) as exc_info:
            multi.bin_to_str("b32", b"\x00")
        assert str(exc_info.value) == 'no pipeline named "b32"'

    @pytest.mark.parametrize("method,arg", [
        ("bin_to_bin", b""),
        ("str_to_bin", ""),
        ("str_to_str", ""),
    ])
    def test_unknown_pipeline_every_operation(self, method, arg):
        with pytest.raises(UnknownPipelineError):
            getattr(MultiPipeline("hex"), method)("b64", arg)

    def test_lookup_uses_name_as_given(self):
        multi = MultiPipeline("HEX")
        assert multi.bin_to_str("HEX", b"\xff") == "ff"
        with pytest.raises(UnknownPipelineError):
            multi.bin_to_str("hex", b"\xff")

    def test_construction_fails_on_unknown_codec(self):
        with pytest.raises(UnknownCodecError):
            MultiPipeline("hex", "base32")

    def test_pipelines_are_independent(self):
        multi = MultiPipeline("hex", "b64")
        assert isinstance(multi.pipeline("hex"), Pipeline)
        assert multi.pipeline("hex") is not multi.pipeline("b64")
        assert len(multi.pipeline("b64")) == 1

    def test_must_bin_to_str_success(self):
        assert MultiPipeline("hex").must_bin_to_str("hex", b"\x0a") == "0a"

    def test_must_bin_to_str_is_fatal(self):
        multi = MultiPipeline("uuid")
        with pytest.raises(RuntimeError):
            multi.must_bin_to_str("uuid", b"\x00")
        with pytest.raises(RuntimeError):
            multi.must_bin_to_str("missing", SAMPLE_BYTES)
