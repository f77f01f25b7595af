"""Tests for the suggestion generator."""

from dataclasses import replace

import pytest

from insight_youtube_seo.analyzer.channel_insight import build_channel_insight
from insight_youtube_seo.analyzer.suggestions import (
    fit_words,
    generate_suggestions,
    subject_words,
    weighted_union,
)
from insight_youtube_seo.config import Settings
from insight_youtube_seo.models.video import TargetVideo

from conftest import make_snapshot


@pytest.fixture
def insights(gadget_snapshots):
    return [build_channel_insight(s) for s in gadget_snapshots.values()]


class TestHelpers:
    def test_weighted_union(self):
        merged = weighted_union([["a", "b", "c"], ["c", "B"]])
        # a=3, b=2+1, c=1+2
        assert merged == ["a", "b", "c"]

    def test_weighted_union_higher_rank_wins(self):
        assert weighted_union([["x", "y"], ["y", "z"], ["y"]]) == ["y", "x", "z"]

    def test_subject_words(self):
        assert subject_words("My Honest Phone Review!") == ["Honest", "Phone", "Review"]
        assert subject_words("How to fix it #shorts https://x.co") == ["fix"]

    def test_fit_words_never_cuts_words(self):
        assert fit_words(["alpha", "beta", "gamma"], 10) == "alpha beta"
        assert fit_words(["alpha", "|", "beta"], 8) == "alpha"
        assert fit_words(["toolongword"], 5) == ""


class TestTitles:
    def test_at_least_three_within_budget(self, insights, target_video):
        bundle = generate_suggestions(insights, target_video)
        assert len(bundle.optimized_titles) >= 3
        assert all(len(t) <= 100 for t in bundle.optimized_titles)

    def test_uses_top_opener_and_subject(self, insights, target_video):
        bundle = generate_suggestions(insights, target_video)
        assert bundle.optimized_titles[0] == "Top 5 Honest Phone Review"

    def test_long_title_respects_small_budget(self, insights, target_video):
        target = replace(target_video, title=" ".join(["Extraordinary"] * 30))
        settings = Settings(title_max_length=40)
        bundle = generate_suggestions(insights, target, settings)
        assert bundle.optimized_titles
        for title in bundle.optimized_titles:
            assert len(title) <= 40
            assert "Extraordinary" in title.split()
            assert title.split().count("Extraordinary") == 1

    def test_unique_titles(self, insights, target_video):
        titles = generate_suggestions(insights, target_video).optimized_titles
        assert len({t.lower() for t in titles}) == len(titles)


class TestDescription:
    def test_existing_cta_not_duplicated(self, insights, target_video):
        description = generate_suggestions(insights, target_video).optimized_description
        assert description.count("Subscribe for more!") == 1
        assert "Subscribe for more videos like this." not in description

    def test_adds_missing_common_cta(self, insights, target_video):
        description = generate_suggestions(insights, target_video).optimized_description
        assert "Let us know in the comments below." in description

    def test_structure(self, insights, target_video):
        description = generate_suggestions(insights, target_video).optimized_description
        blocks = description.split("\n\n")
        assert blocks[0] == "In this video: Honest Phone Review."
        assert blocks[1].splitlines() == [
            "Subscribe for more!",
            "Let us know in the comments below.",
        ]
        assert blocks[2].startswith("Keywords: phone review, smartphone")

    def test_idempotent(self, insights, target_video):
        first = generate_suggestions(insights, target_video).optimized_description
        rerun = replace(target_video, description=first)
        second = generate_suggestions(insights, rerun).optimized_description
        assert second == first
        assert second.lower().count("subscribe") == first.lower().count("subscribe")

    def test_closing_lines_free_of_cta(self, insights, target_video):
        description = generate_suggestions(insights, target_video).optimized_description
        closing = description.split("\n\n")[-1].lower()
        assert "subscribe" not in closing
        assert "comment" not in closing


class TestHashtagsAndTags:
    def test_relevant_hashtags_first(self, insights, target_video):
        hashtags = generate_suggestions(insights, target_video).recommended_hashtags
        assert hashtags[:2] == ["#phonereview", "#smartphone"]
        assert set(hashtags[2:]) == {"#tech", "#gadgets", "#apps"}

    def test_hashtag_limit_and_dedupe(self, insights):
        target = TargetVideo(
            title="Tech",
            description="",
            keywords=tuple(f"topic{i}" for i in range(30)) + ("TECH", "tech"),
        )
        hashtags = generate_suggestions(insights, target).recommended_hashtags
        assert len(hashtags) == 15
        assert len({h.lower() for h in hashtags}) == 15

    def test_tags_target_keywords_first(self, insights, target_video):
        tags = generate_suggestions(insights, target_video).recommended_tags
        assert tags == ["phone review", "smartphone", "tech review", "gadgets", "apps"]

    def test_tag_limit(self, insights):
        target = TargetVideo(title="x", description="", keywords=tuple(f"k{i}" for i in range(40)))
        assert len(generate_suggestions(insights, target).recommended_tags) == 20


class TestDeterminismAndEdges:
    def test_deterministic(self, insights, target_video):
        first = generate_suggestions(insights, target_video).to_dict()
        second = generate_suggestions(insights, target_video).to_dict()
        assert first == second

    def test_no_channel_data(self, target_video):
        empty = [build_channel_insight(make_snapshot("@Empty"))]
        bundle = generate_suggestions(empty, target_video)
        assert len(bundle.optimized_titles) >= 3
        assert bundle.recommended_tags == ["phone review", "smartphone"]
        assert bundle.optimized_description.count("Subscribe for more!") == 1


class TestSparseInput:
    @pytest.fixture
    def empty(self):
        return [build_channel_insight(make_snapshot("@Empty"))]

    def test_stopword_title_without_channel_vocabulary(self, empty):
        bundle = generate_suggestions(empty, TargetVideo(title="How to do it", description=""))
        assert len(bundle.optimized_titles) >= 3
        assert all("How to do it" in title for title in bundle.optimized_titles)

    def test_single_word_longer_than_subject_budget(self, empty):
        bundle = generate_suggestions(empty, TargetVideo(title="x" * 150, description=""))
        assert len(bundle.optimized_titles) >= 3
        assert all(len(title) <= 100 for title in bundle.optimized_titles)

    def test_overlong_word_skipped_not_whole_subject(self, empty):
        target = TargetVideo(title="Phone " + "y" * 80 + " Review", description="")
        titles = generate_suggestions(empty, target).optimized_titles
        assert "Phone Review Explained" in titles

    def test_empty_title_matches_description_hook(self, empty):
        bundle = generate_suggestions(empty, TargetVideo(title="", description=""))
        assert len(bundle.optimized_titles) >= 3
        assert "Our Latest Upload Explained" in bundle.optimized_titles
        assert bundle.optimized_description.startswith("In this video: Our Latest Upload.")
