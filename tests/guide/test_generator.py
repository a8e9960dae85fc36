"""Tests for src/guide/generator.py"""

import json

import pytest

from src.guide.generator import GuideContentGenerator


@pytest.fixture
def scraped_dir(tmp_path):
    path = tmp_path / "scraped"
    path.mkdir()
    return path


@pytest.fixture
def make_generator(scraped_dir, tmp_path, guide_settings):
    def _make():
        return GuideContentGenerator(
            scraped_dir=str(scraped_dir),
            includes_dir=str(tmp_path / "includes"),
            settings=guide_settings,
        )
    return _make


def write_section(scraped_dir, section, data):
    (scraped_dir / f"{section}.json").write_text(json.dumps(data), encoding="utf-8")


class TestGuideContentGenerator:
    def test_generates_sections_with_data(self, scraped_dir, make_generator, benefits_sources, tips_sources):
        write_section(scraped_dir, "benefits", benefits_sources)
        write_section(scraped_dir, "tips", tips_sources)

        generator = make_generator()
        report = generator.run()

        assert report == {
            "types": "skipped",
            "poses": "skipped",
            "benefits": "generated",
            "tips": "generated",
        }
        content = open(generator.include_path("benefits"), encoding="utf-8").read()
        assert '{% if target == "lifestyle" %}' in content

    def test_missing_section_writes_nothing(self, make_generator):
        generator = make_generator()
        generator.run()
        with pytest.raises(FileNotFoundError):
            open(generator.include_path("poses"), encoding="utf-8")

    def test_empty_section_skipped(self, scraped_dir, make_generator):
        write_section(scraped_dir, "poses", [])
        assert make_generator().generate_section("poses") == "skipped"

    def test_invalid_json_skipped(self, scraped_dir, make_generator, types_sources):
        (scraped_dir / "poses.json").write_text("{not json", encoding="utf-8")
        write_section(scraped_dir, "types", types_sources)

        report = make_generator().run()

        assert report["poses"] == "skipped"
        assert report["types"] == "generated"

    def test_unknown_section_fails_without_stopping_run(self, scraped_dir, guide_settings, tmp_path,
                                                         tips_sources):
        settings = dict(guide_settings)
        settings["sections"] = ["recipes", "tips"]
        write_section(scraped_dir, "recipes", [{"source": "S", "data": []}])
        write_section(scraped_dir, "tips", tips_sources)

        generator = GuideContentGenerator(str(scraped_dir), str(tmp_path / "includes"), settings)
        report = generator.run()

        assert report == {"recipes": "failed", "tips": "generated"}

    def test_malformed_entries_dropped_before_rendering(self, scraped_dir, make_generator, tips_sources):
        write_section(scraped_dir, "tips", ["stray", {"source": 42, "data": {}}, *tips_sources])

        generator = make_generator()
        assert generator.load_section_data("tips") == tips_sources
        assert generator.generate_section("tips") == "generated"
