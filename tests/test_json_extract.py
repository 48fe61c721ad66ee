"""
JSON抽出のテスト
"""
import json

from stock_pulse.gemini_gateway import extract_json


class TestExtractJson:
    """extract_json関数のテスト"""

    def test_fenced_json_matches_unfenced(self, overview_payload):
        """```json フェンス付きでも素のJSONと同じ結果になる"""
        raw = json.dumps(overview_payload, indent=2)
        fenced = f"```json\n{raw}\n```"

        assert extract_json(fenced) == extract_json(raw) == overview_payload

    def test_untagged_fence(self):
        """言語タグなしのフェンスも解析できる"""
        assert extract_json('```\n{"a": 1}\n```') == {"a": 1}

    def test_fence_surrounded_by_prose(self):
        """フェンス前後の説明文は無視される"""
        text = 'Here is the data:\n```json\n{"sentiment": "calm"}\n```\nHope this helps.'
        assert extract_json(text) == {"sentiment": "calm"}

    def test_single_line_fence(self):
        assert extract_json('```json {"a": [1, 2]} ```') == {"a": [1, 2]}

    def test_invalid_text_returns_none(self):
        """JSONでもフェンスでもない場合はNone（例外にしない）"""
        assert extract_json("The market is up today.") is None

    def test_invalid_fenced_content_returns_none(self):
        assert extract_json("```json\n{not json}\n```") is None

    def test_empty_text_returns_none(self):
        assert extract_json("") is None
        assert extract_json(None) is None
