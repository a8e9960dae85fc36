"""Tests for src/guide/merger.py"""

from src.guide.merger import RecordMerger, merge, merge_poses, merge_types
from src.models import SourceRecord


class TestMerge:
    def test_first_record_creates_aggregate(self, cobra_short):
        merged = merge(None, cobra_short)
        assert merged.name == "Cobra"
        assert merged.description == "Short one."
        assert merged.source == "Yoga Journal - Poses"

    def test_longer_description_wins(self, cobra_short, cobra_long):
        merged = merge(merge(None, cobra_short), cobra_long)
        assert merged.description == "A longer more descriptive sentence."

    def test_longer_description_wins_in_either_order(self, cobra_short, cobra_long):
        merged = merge(merge(None, cobra_long), cobra_short)
        assert merged.description == "A longer more descriptive sentence."

    def test_tie_keeps_first_description(self):
        first = SourceRecord(name="Yin", description="aaaaaaaaaa", source="A")
        second = SourceRecord(name="Yin", description="bbbbbbbbbb", source="B")
        assert merge(merge(None, first), second).description == "aaaaaaaaaa"

    def test_keeps_first_seen_name(self, cobra_short, cobra_long):
        merged = merge(merge(None, cobra_short), cobra_long)
        assert merged.name == "Cobra"

    def test_sets_are_unioned_without_duplicates(self, cobra_short, cobra_long):
        merged = merge(merge(None, cobra_short), cobra_long)
        assert sorted(merged.benefits) == ["Opens the chest.", "Strengthens the spine."]
        assert merged.suitable_for == ["Good for desk workers."]

    def test_set_union_is_commutative(self, cobra_short, cobra_long):
        ab = merge(merge(None, cobra_short), cobra_long)
        ba = merge(merge(None, cobra_long), cobra_short)
        assert set(ab.benefits) == set(ba.benefits)
        assert set(ab.suitable_for) == set(ba.suitable_for)

    def test_source_attribution_first_seen_order(self, cobra_short, cobra_long):
        merged = merge(merge(None, cobra_short), cobra_long)
        assert merged.source == "Yoga Journal - Poses, Yoga Alliance - Styles"

    def test_source_not_repeated(self, cobra_short):
        merged = merge(merge(None, cobra_short), cobra_short)
        assert merged.source == "Yoga Journal - Poses"

    def test_source_name_with_comma_merges_idempotently(self):
        record = SourceRecord(name="Hatha", description="Slow.", source="Yoga Journal, Styles")
        once = merge(None, record)
        twice = merge(once, record)
        assert twice == once
        assert twice.sources == ["Yoga Journal, Styles"]
        assert twice.source == "Yoga Journal, Styles"

    def test_image_url_filled_when_missing(self, cobra_short, cobra_long):
        merged = merge(merge(None, cobra_short), cobra_long)
        assert merged.image_url == "https://img.example.org/cobra.jpg"

    def test_existing_not_mutated(self, cobra_short, cobra_long):
        existing = merge(None, cobra_short)
        merge(existing, cobra_long)
        assert existing.description == "Short one."
        assert existing.benefits == ["Strengthens the spine."]


class TestRecordMerger:
    def test_idempotent(self, cobra_short, cobra_long):
        once = RecordMerger()
        once.add_all([cobra_short, cobra_long])

        twice = RecordMerger()
        twice.add_all([cobra_short, cobra_long, cobra_long])

        assert once.records() == twice.records()

    def test_one_record_per_name(self, cobra_short, cobra_long):
        merger = RecordMerger()
        merger.add_all([cobra_short, cobra_long, SourceRecord(name="Bridge")])
        assert len(merger) == 2
        assert "COBRA" in merger
        assert merger.get("bridge").name == "Bridge"

    def test_insertion_order(self):
        merger = RecordMerger()
        merger.add_all([SourceRecord(name=n) for n in ("Yin", "Hatha", "yin", "Power")])
        assert [r.name for r in merger] == ["Yin", "Hatha", "Power"]

    def test_get_missing(self):
        assert RecordMerger().get("Hatha") is None


class TestMergeTypes:
    def test_merges_across_sources(self, types_sources):
        merger = merge_types(types_sources)
        assert len(merger) == 2

        hatha = merger.get("hatha")
        assert hatha.description == "Hatha is a gentle, slower-paced practice of held postures."
        assert hatha.source == "Yoga Journal - Types of Yoga, Yoga Alliance - Styles"
        assert set(hatha.benefits) == {"It helps reduce stress.", "It improves balance."}

    def test_ignores_malformed_data(self):
        merger = merge_types([{"source": "S", "data": {"not": "a list"}}, {"source": "T"}])
        assert len(merger) == 0

    def test_custom_exclusion_drops_record(self, types_sources):
        merger = merge_types(types_sources, exclusions=("Vinyasa",))
        assert "vinyasa" not in merger
        assert "hatha" in merger


class TestMergePoses:
    def test_groups_by_category(self, poses_sources):
        by_category = merge_poses(poses_sources, ["standing", "seated", "backbends", "inversions"])

        standing = [r.name for r in by_category["standing"]]
        assert standing == ["Warrior II", "Tree Pose"]
        assert len(by_category["seated"]) == 0

    def test_other_category_dropped(self, poses_sources):
        by_category = merge_poses(poses_sources, ["standing", "seated", "backbends", "inversions"])
        names = [r.name for merger in by_category.values() for r in merger]
        assert "Corpse Pose" not in names

    def test_missing_category_classified_from_text(self, poses_sources):
        by_category = merge_poses(poses_sources, ["standing", "seated", "backbends", "inversions"])
        assert [r.name for r in by_category["backbends"]] == ["Camel Pose"]

    def test_duplicate_pose_merged(self, poses_sources):
        by_category = merge_poses(poses_sources, ["standing"])
        warrior = by_category["standing"].get("Warrior II")
        assert warrior.description == "A strong, grounded standing stance."
        assert warrior.image_url == "https://img.example.org/w2.jpg"
        assert warrior.source == "Yoga Journal - Poses, Pose Library"
