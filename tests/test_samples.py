"""Tests for samples.py — bundled guides and writer."""
from __future__ import annotations

from guide_index.samples import SAMPLE_GUIDES, write_sample_guides


class TestWriteSampleGuides:
    def test_writes_one_file_per_guide(self, tmp_path):
        paths = write_sample_guides(output_dir=str(tmp_path / "guides"))
        assert sorted(p.name for p in paths) == ["c.md", "verilog.md"]
        for path in paths:
            assert path.read_text(encoding="utf-8") == SAMPLE_GUIDES[path.stem]

    def test_custom_suffix(self, tmp_path):
        paths = write_sample_guides(output_dir=str(tmp_path), suffix=".txt")
        assert all(p.suffix == ".txt" for p in paths)


class TestSampleContent:
    def test_overlapping_vocabulary(self, loaded_index):
        for symbol in ("&&", "case", "default", "?:"):
            guide_ids = {f.guide_id for f in loaded_index.cross_reference(symbol)}
            assert guide_ids == {"c", "verilog"}

    def test_categories_present(self, loaded_index):
        for category in ("operator", "keyword", "directive", "datatype"):
            assert loaded_index.find_facts("c", category, "?*")
            assert loaded_index.find_facts("verilog", category, "?*")
