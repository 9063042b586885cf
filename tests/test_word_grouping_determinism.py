from __future__ import annotations

import json
import unittest

from contracts.word_groups import DroppedGroup, WordGroup, WordGroupingResult
from word_grouping.artifacts import render_groups_text, serialize_word_grouping_result
from word_grouping.config import GroupingConfig, StrategyName
from word_grouping.module import run_word_grouping


class TestWordGroupingDeterminism(unittest.TestCase):
    def test_result_bytes_are_stable_and_meta_is_complete(self) -> None:
        source = "  арбуз   биржаа    болт  бокс биржа    яяя я  "
        cfg = GroupingConfig(strategy=StrategyName.LOOP)

        r1 = run_word_grouping(source, cfg)
        r2 = run_word_grouping(source, cfg)

        # Structural equality.
        self.assertEqual(r1.to_dict(), r2.to_dict())

        # Deterministic JSON bytes.
        self.assertEqual(serialize_word_grouping_result(r1), serialize_word_grouping_result(r2))

        meta = r1.meta
        self.assertEqual(meta["version"], "word_grouping_v1")
        self.assertEqual(meta["grouping_config"], {"strategy": "loop", "min_group_size": 2})
        self.assertEqual(
            meta["counts"],
            {
                "tokens_in": 7,
                "distinct_tokens": 7,
                "groups_total": 3,
                "groups_kept": 2,
                "groups_dropped": 1,
            },
        )
        self.assertEqual(
            meta["dropped_groups"],
            [{"key": "а", "tokens": ["арбуз"], "reason": "below_min_group_size:2"}],
        )

    def test_strategy_choice_only_changes_meta_strategy(self) -> None:
        source = "cat car cab dog dot d"
        a = run_word_grouping(source, GroupingConfig(strategy=StrategyName.LOOP)).to_dict()
        b = run_word_grouping(source, GroupingConfig(strategy=StrategyName.FUNCTIONAL)).to_dict()
        self.assertEqual(b["meta"]["grouping_config"]["strategy"], "functional")
        b["meta"]["grouping_config"]["strategy"] = "loop"
        self.assertEqual(a, b)

    def test_serialized_result_restores(self) -> None:
        result = run_word_grouping("сапог сарай спг яяя я")
        payload = json.loads(serialize_word_grouping_result(result))
        restored = WordGroupingResult.from_dict(payload)
        self.assertEqual(restored, result)
        self.assertEqual(restored.groups[0], WordGroup(key="с", tokens=["сапог", "сарай", "спг"]))
        # Non-ASCII text is written literally.
        self.assertIn("сапог", serialize_word_grouping_result(result))

    def test_dropped_groups_restore_as_contract_objects(self) -> None:
        result = run_word_grouping("cat car dog ant")
        restored = WordGroupingResult.from_dict(json.loads(serialize_word_grouping_result(result)))
        expected = [
            DroppedGroup(key="a", tokens=["ant"], reason="below_min_group_size:2"),
            DroppedGroup(key="d", tokens=["dog"], reason="below_min_group_size:2"),
        ]
        self.assertEqual(result.dropped_groups(), expected)
        self.assertEqual(restored.dropped_groups(), expected)

    def test_render_groups_text(self) -> None:
        self.assertEqual(
            render_groups_text({"б": ["биржаа", "биржа"], "я": ["яяя", "я"]}),
            "{б=[биржаа, биржа], я=[яяя, я]}",
        )
        self.assertEqual(render_groups_text({}), "{}")


if __name__ == "__main__":
    unittest.main()
