"""Tests for the name, storage URI and memory rules."""

import pytest

from trainedmodel_webhook.models import ModelSpec
from trainedmodel_webhook.storage import get_all_protocols
from trainedmodel_webhook.validation import (
    is_prefix_supported,
    is_valid_name,
    memory_unchanged,
)


class TestIsValidName:
    @pytest.mark.parametrize("name", ["model1", "my-Name", "abc_123", "A", "-_-", "0"])
    def test_accepts_allowed_characters(self, name):
        assert is_valid_name(name) is True

    @pytest.mark.parametrize(
        "name",
        ["", " ", "model 1", "model.1", "model/1", "módel", "model1\n", "a:b", None],
    )
    def test_rejects_other_characters(self, name):
        assert is_valid_name(name) is False


class TestIsPrefixSupported:
    prefixes = ["s3://", "gs://"]

    def test_matching_prefix(self):
        assert is_prefix_supported("s3://bucket/model", self.prefixes) is True
        assert is_prefix_supported("gs://bucket/model", self.prefixes) is True

    def test_unknown_protocol(self):
        assert is_prefix_supported("ftp://x", self.prefixes) is False

    def test_case_sensitive(self):
        assert is_prefix_supported("S3://bucket/model", self.prefixes) is False

    def test_prefix_must_be_at_start(self):
        assert is_prefix_supported("http://proxy/s3://bucket", self.prefixes) is False

    def test_empty_prefixes(self):
        assert is_prefix_supported("s3://bucket/model", []) is False

    def test_empty_uri(self):
        assert is_prefix_supported("", self.prefixes) is False
        assert is_prefix_supported("", [""]) is True

    def test_default_registry(self):
        protocols = get_all_protocols()
        assert protocols == ["s3://", "gs://", "https://", "http://"]
        assert is_prefix_supported("https://example.com/model.tar.gz", protocols)
        assert not is_prefix_supported("pvc://claim/model", protocols)


class TestMemoryUnchanged:
    def test_same_text(self):
        assert memory_unchanged(ModelSpec(memory="2Gi"), ModelSpec(memory="2Gi"))

    def test_equivalent_quantities(self):
        assert memory_unchanged(ModelSpec(memory="2Gi"), ModelSpec(memory="2048Mi"))
        assert memory_unchanged(ModelSpec(memory="1G"), ModelSpec(memory="1000M"))

    def test_different_quantities(self):
        assert not memory_unchanged(ModelSpec(memory="2Gi"), ModelSpec(memory="4Gi"))
        assert not memory_unchanged(ModelSpec(memory="1G"), ModelSpec(memory="1Gi"))

    def test_both_absent(self):
        assert memory_unchanged(ModelSpec(), ModelSpec())

    def test_absent_equals_zero(self):
        assert memory_unchanged(ModelSpec(), ModelSpec(memory="0"))
        assert memory_unchanged(ModelSpec(memory="0Mi"), ModelSpec())

    def test_absent_vs_present(self):
        assert not memory_unchanged(ModelSpec(), ModelSpec(memory="1Gi"))
        assert not memory_unchanged(ModelSpec(memory="1Gi"), ModelSpec())

    def test_unparseable_falls_back_to_text(self):
        assert memory_unchanged(ModelSpec(memory="lots"), ModelSpec(memory="lots"))
        assert not memory_unchanged(ModelSpec(memory="lots"), ModelSpec(memory="1Gi"))
