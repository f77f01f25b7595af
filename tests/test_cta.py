"""Tests for call-to-action detection."""

import pytest

from insight_youtube_seo.analyzer.cta import (
    CALLS_TO_ACTION,
    common_calls_to_action,
    detect_calls_to_action,
    mentions_call_to_action,
    template_for,
)


class TestDetectCallsToAction:
    def test_case_insensitive(self):
        assert detect_calls_to_action("SUBSCRIBE for more!") == ["Subscribe"]

    def test_multiple_in_catalog_order(self):
        text = "Follow us on Instagram. Don't forget to like and subscribe!"
        assert detect_calls_to_action(text) == ["Subscribe", "Like the video", "Follow us"]

    def test_link_phrases(self):
        assert detect_calls_to_action("Link in bio!") == ["Link in bio"]
        assert detect_calls_to_action("Click here to download") == ["Click the link"]

    def test_no_match(self):
        assert detect_calls_to_action("Just a calm walk in the park.") == []
        assert not mentions_call_to_action("subscribers grew fast")

    @pytest.mark.parametrize("cta", CALLS_TO_ACTION, ids=lambda c: c.phrase)
    def test_template_detected_as_its_own_phrase(self, cta):
        assert detect_calls_to_action(template_for(cta.phrase)) == [cta.phrase]


class TestCommonCallsToAction:
    def test_ranked_by_video_count(self):
        descriptions = [
            "Follow us for updates.",
            "Subscribe now! Subscribe again!",
            "Please subscribe.",
        ]
        assert common_calls_to_action(descriptions) == ["Subscribe", "Follow us"]

    def test_ties_keep_first_seen(self):
        descriptions = ["Comment below!", "Shop now."]
        assert common_calls_to_action(descriptions) == ["Comment below", "Shop now"]

    def test_none_found(self):
        assert common_calls_to_action(["Plain text.", ""]) == []
        assert common_calls_to_action([]) == []
