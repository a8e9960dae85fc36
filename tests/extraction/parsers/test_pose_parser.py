"""Tests for src/extraction/parsers/pose_parser.py"""

from bs4 import BeautifulSoup

from src.extraction.parsers.pose_parser import PoseCardParser

POSES_PAGE = """
<div class="category-poses">
  <article>
    <h3>Warrior II</h3>
    <img data-src="/img/warrior.jpg">
    <p>A strong standing pose.</p>
    <p class="pose-description">It helps build stamina.</p>
    <span class="level">Beginner</span>
    <span class="difficulty">Intermediate</span>
  </article>
  <div class="pose-card">
    <div class="pose-title">Camel Pose</div>
    <img src="/img/camel.jpg">
  </div>
  <div class="pose-block"><p>Card without a title.</p></div>
</div>
"""


def parse():
    element = BeautifulSoup(POSES_PAGE, "lxml").select_one(".category-poses")
    return PoseCardParser(element).parse()


class TestPoseCardParser:
    def test_skips_cards_without_title(self):
        assert [p["name"] for p in parse()] == ["Warrior II", "Camel Pose"]

    def test_description_and_benefits(self):
        warrior = parse()[0]
        assert warrior["description"] == "A strong standing pose. It helps build stamina."
        assert warrior["benefits"] == ["It helps build stamina."]

    def test_image_src_or_data_src(self):
        warrior, camel = parse()
        assert warrior["image_url"] == "/img/warrior.jpg"
        assert camel["image_url"] == "/img/camel.jpg"

    def test_last_difficulty_label_wins(self):
        assert parse()[0]["difficulty"] == "Intermediate"

    def test_category_assigned(self):
        warrior, camel = parse()
        assert warrior["category"] == "standing"
        assert camel["category"] == "backbends"
