"""Tests for src/guide/categorizer.py"""

import pytest

from src.guide.categorizer import (
    categorize,
    categorize_pose,
    classify_benefit,
    classify_tip,
    relabel_partitions,
)
from src.models import MergedRecord, SourceRecord


class TestCategorizePose:
    @pytest.mark.parametrize("name, expected", [
        ("Warrior II", "standing"),
        ("Easy Seated Pose", "seated"),
        ("Cobra Pose", "backbends"),
        ("Headstand", "inversions"),
        ("Corpse Pose", "other"),
    ])
    def test_title_rules(self, name, expected):
        assert categorize_pose(name) == expected

    def test_description_rule(self):
        assert categorize_pose("Pose of the Day", "Flip upside down against a wall.") == "inversions"

    def test_first_match_wins(self):
        # "Chair" is a standing keyword, "wheel" a backbend keyword
        assert categorize_pose("Chair Wheel") == "standing"

    def test_title_rule_beats_later_description_rule(self):
        assert categorize_pose("Hero Pose", "An inversion for experts.") == "seated"

    def test_downward_dog_is_inversion(self):
        assert categorize_pose("Downward-Facing Dog") == "inversions"


class TestCategorize:
    def test_uses_record_category(self):
        record = SourceRecord(name="Mystery", category="seated")
        assert categorize(record) == "seated"

    def test_falls_back_to_rules(self):
        assert categorize(MergedRecord(name="Bridge Pose")) == "backbends"


class TestClassifyBenefit:
    def test_mental(self):
        assert classify_benefit("Yoga reduces stress.") == "mental"

    def test_physical(self):
        assert classify_benefit("Improves muscle tone.") == "physical"

    def test_general(self):
        assert classify_benefit("Better sleep habits.") == "general"

    def test_mental_checked_before_physical(self):
        assert classify_benefit("Relaxes the body and mind.") == "mental"


class TestClassifyTip:
    def test_beginners(self):
        assert classify_tip("Start with short sessions.") == "beginners"

    def test_props_before_practice(self):
        assert classify_tip("Use a block to support the pose.") == "props"

    def test_practice(self):
        assert classify_tip("Breathe deeply during each asana.") == "practice"

    def test_unrelated_dropped(self):
        assert classify_tip("Subscribe to our newsletter.") is None


class TestRelabelPartitions:
    def test_general_becomes_lifestyle(self, benefits_sources):
        buckets = relabel_partitions(
            benefits_sources, {"physical": "physical", "mental": "mental", "general": "lifestyle"},
        )
        assert list(buckets) == ["physical", "mental", "lifestyle"]
        assert buckets["lifestyle"] == ["Better sleep habits."]

    def test_practice_becomes_mindful(self, tips_sources):
        buckets = relabel_partitions(
            tips_sources, {"beginners": "beginners", "practice": "mindful", "props": "props"},
        )
        assert buckets["mindful"] == ["Focus on your breath."]
        assert buckets["props"] == []

    def test_deduplicates_across_sources(self, benefits_sources):
        buckets = relabel_partitions(benefits_sources, {"physical": "physical"})
        assert buckets["physical"] == ["Yoga improves flexibility.", "It increases muscle strength."]

    def test_ignores_unknown_keys_and_bad_data(self):
        buckets = relabel_partitions(
            [{"source": "S", "data": {"spiritual": ["x"]}}, {"source": "T", "data": ["bad"]}],
            {"general": "lifestyle"},
        )
        assert buckets == {"lifestyle": []}
